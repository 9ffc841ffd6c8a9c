from dataclasses import dataclass


@dataclass(frozen=True)
class URLRecord:
    """
    One shortened URL.
    
    `id` is assigned by the Registry (1, 2, 3, ...) and `original_url`
    is kept exactly as it was submitted. Records are never mutated.
    """
    id: int
    original_url: str
