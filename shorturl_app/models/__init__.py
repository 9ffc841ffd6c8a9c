"""
Data models for the URL shortener.

Records live only in process memory; there is no database model.
"""

from .url import URLRecord

__all__ = ["URLRecord"]
