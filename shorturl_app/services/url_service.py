from typing import Optional

from shorturl_app.models.url import URLRecord
from shorturl_app.services.validator import URLValidator
from shorturl_app.storage.registry import Registry


class URLService:
    """
    URL Service with dependency injection for the registry and validator.
    
    - Registry and validator are injected (not created internally)
    - Easy to test (inject a fresh registry and a static resolver)
    """
    
    def __init__(self, registry: Registry, validator: URLValidator):
        self.registry = registry
        self.validator = validator

    async def create_short_url(self, raw_url: Optional[str]) -> URLRecord:
        """Validate a URL and register it under the next id
        
        Validation (including the DNS lookup) finishes before the
        registry is touched, so slow lookups never hold up other
        creations.
        
        Raises:
            InvalidURLError: if the URL is rejected
        """
        validated = await self.validator.validate(raw_url)
        return self.registry.create(validated.original_url)

    async def get_original_url(self, short_url: str) -> Optional[str]:
        """Get the stored URL for a short_url path segment, or None"""
        return self.registry.lookup(short_url)
