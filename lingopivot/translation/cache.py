"""TTL cache for translation results."""

import hashlib
import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from ..models.translation_result import TranslationResult

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, str, str]


@dataclass
class CacheEntry:
    result: TranslationResult
    timestamp: float


def cache_key(text: str, source: str, target: str) -> CacheKey:
    """Build the key for a text and normalized language pair."""
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
    return source, target, digest


class TranslationCache:
    """
    Bounded, time-limited store of translation results.

    Entries expire after ``ttl`` seconds. When full, the oldest inserted
    entry is evicted first. Thread-safe.
    """

    def __init__(
        self,
        max_size: int = 10000,
        ttl: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the cache.

        Args:
            max_size: Maximum number of entries
            ttl: Time to live in seconds
            clock: Time source, replaceable in tests
        """
        self.max_size = max(1, max_size)
        self.ttl = ttl
        self._clock = clock
        self._entries: "OrderedDict[CacheKey, CacheEntry]" = OrderedDict()
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, text: str, source: str, target: str) -> Optional[TranslationResult]:
        key = cache_key(text, source, target)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            if self._clock() - entry.timestamp > self.ttl:
                del self._entries[key]
                self._misses += 1
                return None
            self._hits += 1
            return entry.result

    def set(self, text: str, source: str, target: str, result: TranslationResult) -> None:
        key = cache_key(text, source, target)
        with self._lock:
            if key in self._entries:
                del self._entries[key]
            while len(self._entries) >= self.max_size:
                self._entries.popitem(last=False)
                self._evictions += 1
            self._entries[key] = CacheEntry(result=result, timestamp=self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            logger.debug("Translation cache cleared")

    def stats(self) -> Dict[str, float]:
        """Get size, capacity and hit/miss counters."""
        with self._lock:
            lookups = self._hits + self._misses
            return {
                "size": len(self._entries),
                "max_size": self.max_size,
                "ttl_seconds": self.ttl,
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "hit_rate": round(self._hits / lookups, 4) if lookups else 0.0,
            }
