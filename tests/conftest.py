"""
Test configuration and fixtures for the URL shortener.
This centralizes all test setup, making individual tests clean.
"""

import os

import pytest
from fastapi.testclient import TestClient

from main import app
from shorturl_app.dependencies import get_registry, get_resolver
from shorturl_app.resolver.strategies import StaticResolver
from shorturl_app.services.url_service import URLService
from shorturl_app.services.validator import URLValidator
from shorturl_app.storage.registry import Registry

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Hosts that "resolve" in tests; anything else fails resolution
KNOWN_HOSTS = [
    "www.freecodecamp.org",
    "www.example.com",
    "example.com",
    "www.python.org",
    "localhost",
    "127.0.0.1",
    "::1",
]


@pytest.fixture(scope="function")
def registry():
    """A fresh, empty registry for each test"""
    return Registry()


@pytest.fixture(scope="function")
def resolver():
    """Resolver that knows only KNOWN_HOSTS (no network access)"""
    return StaticResolver(KNOWN_HOSTS)


@pytest.fixture(scope="function")
def url_service(registry, resolver):
    return URLService(registry=registry, validator=URLValidator(resolver))


@pytest.fixture(scope="function")
def client(registry, resolver, monkeypatch):
    """
    Create a test client with registry and resolver overridden.
    This is the main fixture that tests will use.
    """
    # Static assets and views are looked up relative to the working directory
    monkeypatch.chdir(PROJECT_ROOT)
    
    app.dependency_overrides[get_registry] = lambda: registry
    app.dependency_overrides[get_resolver] = lambda: resolver
    
    with TestClient(app) as test_client:
        yield test_client
    
    # Clean up overrides
    app.dependency_overrides.clear()
