"""HTTP middleware for the URL shortener."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
