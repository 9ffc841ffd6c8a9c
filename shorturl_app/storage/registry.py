"""
In-memory registry of short URLs.

Process-wide state: starts empty, is only ever appended to, and is
discarded when the process exits.
"""

import logging
import threading
from typing import Dict, Optional, Union

from shorturl_app.models.url import URLRecord

logger = logging.getLogger(__name__)


class Registry:
    """
    Maps sequential integer ids to validated URLs.
    
    Ids start at 1 and are handed out in call order with no gaps or
    repeats. The counter and the map are only reachable through
    `create` and `lookup`.
    
    Records are keyed by the decimal string of their id, so lookups are
    exact string matches: "1" finds id 1, "01" and " 1" do not.
    """
    
    def __init__(self):
        self._records: Dict[str, URLRecord] = {}
        self._next_id = 1
        self._lock = threading.Lock()
    
    def create(self, original_url: str) -> URLRecord:
        """
        Store a URL under the next id.
        
        Assumes the URL was already validated; never fails.
        Counter read, insert and increment happen under one lock.
        """
        with self._lock:
            record = URLRecord(id=self._next_id, original_url=original_url)
            self._records[str(record.id)] = record
            self._next_id += 1
        
        logger.info(f"Registered short_url={record.id} -> {original_url}")
        return record
    
    def lookup(self, key: Union[str, int]) -> Optional[str]:
        """Return the original URL stored under `key`, or None"""
        record = self._records.get(str(key))
        if record is None:
            logger.debug(f"No record for short_url={key!r}")
            return None
        return record.original_url
    
    def __len__(self) -> int:
        return len(self._records)
