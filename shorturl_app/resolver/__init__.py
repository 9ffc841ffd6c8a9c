"""
Hostname resolution for URL validation.
Implements Strategy Pattern for swappable resolver backends.
"""

from .strategies import ResolverStrategy, SystemResolver, StaticResolver
from .factory import ResolverFactory, ResolverBackend

__all__ = [
    "ResolverStrategy",
    "SystemResolver",
    "StaticResolver",
    "ResolverFactory",
    "ResolverBackend",
]
