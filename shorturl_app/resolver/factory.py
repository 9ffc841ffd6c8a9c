"""
Factory for creating resolver instances.
Simple, clean factory with singleton caching.
"""

import logging
from enum import Enum
from typing import Optional

from .strategies import ResolverStrategy, SystemResolver, StaticResolver
from shorturl_app.config import settings

logger = logging.getLogger(__name__)


class ResolverBackend(Enum):
    """Available resolver backends"""
    SYSTEM = "system"
    STATIC = "static"


class ResolverFactory:
    """
    Simple factory for creating resolver instances.
    
    Uses Singleton Pattern - creates instance once, reuses it.
    Gets configuration from settings (not passed as parameters).
    """
    
    _instance: Optional[ResolverStrategy] = None
    
    @classmethod
    def create(cls, backend: ResolverBackend) -> ResolverStrategy:
        """
        Create or return cached resolver instance.
        
        Args:
            backend: Type of resolver backend (from enum)
            
        Returns:
            Singleton resolver instance
        """
        if cls._instance is not None:
            return cls._instance
        
        if backend == ResolverBackend.SYSTEM:
            cls._instance = SystemResolver(timeout=settings.resolver_timeout)
            logger.info(f"System resolver initialized (timeout={settings.resolver_timeout}s)")
            
        elif backend == ResolverBackend.STATIC:
            cls._instance = StaticResolver(settings.resolver_static_hosts)
            logger.info(f"Static resolver initialized with {len(settings.resolver_static_hosts)} host(s)")
            
        else:
            raise ValueError(f"Unknown resolver backend: {backend}")
        
        return cls._instance
    
    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
