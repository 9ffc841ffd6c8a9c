"""
Storage module for URL shortener.
Holds the in-memory id -> URL registry.
"""

from .registry import Registry

__all__ = ["Registry"]
