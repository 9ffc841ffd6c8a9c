"""
URL validation: syntax, scheme, and hostname resolvability.

A URL is accepted when it parses as an absolute http(s) URL and its
hostname resolves. Resolution is a weak "points somewhere real" check;
the URL itself is never fetched, so any path or query on a resolving
host is accepted.
"""

import logging
from dataclasses import dataclass
from typing import Annotated, Optional

from pydantic import AnyUrl, TypeAdapter, UrlConstraints, ValidationError

from shorturl_app.exceptions import HostResolutionError, InvalidURLError
from shorturl_app.resolver.strategies import ResolverStrategy

logger = logging.getLogger(__name__)

# Like HttpUrl but without its 2083 character cap; long queries are fine
_http_url = TypeAdapter(
    Annotated[AnyUrl, UrlConstraints(allowed_schemes=["http", "https"], host_required=True)]
)

# Longest slice of a rejected url that goes into the log
LOGGED_URL_LENGTH = 200


@dataclass(frozen=True)
class ValidatedURL:
    hostname: str
    original_url: str  # exactly as submitted, this is what gets stored


def parse_hostname(raw: Optional[str]) -> str:
    """
    Parse `raw` as an absolute http/https URL and return its hostname.
    
    The port is dropped and IPv6 literals lose their brackets so the
    result can be handed straight to a resolver.
    
    Raises:
        InvalidURLError: missing input, bad syntax, relative URL, or a
            scheme other than http/https
    """
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidURLError(raw, "empty or missing url")
    
    try:
        url = _http_url.validate_python(raw)
    except ValidationError as e:
        raise InvalidURLError(raw, e.errors()[0]["msg"]) from e
    
    if not url.host:
        raise InvalidURLError(raw, "url has no host")
    
    return url.host.strip("[]")


def _for_log(raw: Optional[str]) -> str:
    if isinstance(raw, str) and len(raw) > LOGGED_URL_LENGTH:
        return repr(raw[:LOGGED_URL_LENGTH]) + f"... ({len(raw)} chars)"
    return repr(raw)


class URLValidator:
    """Validates submitted URLs against a resolver"""
    
    def __init__(self, resolver: ResolverStrategy):
        self.resolver = resolver
    
    async def validate(self, raw: Optional[str]) -> ValidatedURL:
        """
        Validate a submitted URL.
        
        Returns:
            ValidatedURL with the hostname and the unmodified input
            
        Raises:
            InvalidURLError: for every rejection cause, including
                resolution failure and resolution timeout
        """
        try:
            hostname = parse_hostname(raw)
            await self.resolver.resolve(hostname)
        except InvalidURLError as e:
            logger.info(f"Rejected url {_for_log(raw)}: {e.reason}")
            raise
        except HostResolutionError as e:
            logger.info(f"Rejected url {_for_log(raw)}: {e}")
            raise InvalidURLError(raw, str(e)) from e
        
        return ValidatedURL(hostname=hostname, original_url=raw)
