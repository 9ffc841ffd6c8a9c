"""
Domain errors for the URL shortener.

Every way a submitted URL can be rejected collapses into InvalidURLError,
so clients only ever see one message. The `reason` is kept for logs.
"""

from typing import Optional


class ShortURLError(Exception):
    """Base class for all URL shortener errors"""


class InvalidURLError(ShortURLError):
    """Submitted URL is malformed, uses a disallowed scheme, or its host does not resolve"""

    message = "invalid url"

    def __init__(self, raw: Optional[str], reason: str = ""):
        super().__init__(self.message)
        self.raw = raw
        self.reason = reason


class HostResolutionError(ShortURLError):
    """Hostname lookup failed, returned no address, or timed out"""

    def __init__(self, hostname: str, reason: str = ""):
        super().__init__(f"Could not resolve {hostname!r}: {reason}" if reason else f"Could not resolve {hostname!r}")
        self.hostname = hostname
        self.reason = reason
