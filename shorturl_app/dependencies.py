"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of the registry and resolver
that are injected into services and routes. Tests swap them out through
`app.dependency_overrides`.
"""

from functools import lru_cache

from fastapi import Depends

from shorturl_app.config import settings
from shorturl_app.resolver.factory import ResolverBackend, ResolverFactory
from shorturl_app.resolver.strategies import ResolverStrategy
from shorturl_app.services.url_service import URLService
from shorturl_app.services.validator import URLValidator
from shorturl_app.storage.registry import Registry


@lru_cache()
def get_registry() -> Registry:
    """
    Get the process-wide registry (singleton).
    
    @lru_cache ensures every request shares the same id counter.
    """
    return Registry()


@lru_cache()
def get_resolver() -> ResolverStrategy:
    """
    Get resolver instance (singleton).
    
    Factory gets config from settings internally.
    """
    backend = ResolverBackend(settings.resolver_backend)
    return ResolverFactory.create(backend)


def get_validator(resolver: ResolverStrategy = Depends(get_resolver)) -> URLValidator:
    return URLValidator(resolver)


def get_url_service(
    registry: Registry = Depends(get_registry),
    validator: URLValidator = Depends(get_validator)
) -> URLService:
    """Get URLService with all dependencies injected"""
    return URLService(registry=registry, validator=validator)
