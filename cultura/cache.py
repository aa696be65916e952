"""In-process translation cache with TTL expiry and bounded size"""

import logging
import time
from collections import OrderedDict
from typing import Callable, Dict, Optional, Tuple

from . import config

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, str, str]  # (source_lang, target_lang, text)


class CacheEntry:
    """Single cached translation"""

    __slots__ = ("translation", "created_at", "hit_count")

    def __init__(self, translation: str, created_at: float):
        self.translation = translation
        self.created_at = created_at
        self.hit_count = 0


class TranslationCache:
    """
    Translation cache keyed by (source_lang, target_lang, text).

    Entries older than ``ttl`` seconds are purged lazily on lookup. When
    ``max_size`` is reached the oldest-inserted entry is evicted.
    """

    def __init__(self, max_size: int = None, ttl: float = None,
                 clock: Callable[[], float] = time.monotonic):
        self.max_size = config.CACHE_MAX_SIZE if max_size is None else max_size
        self.ttl = config.CACHE_TTL if ttl is None else ttl
        if self.max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._clock = clock
        self._entries: "OrderedDict[CacheKey, CacheEntry]" = OrderedDict()

    @staticmethod
    def make_key(text: str, source_lang: str, target_lang: str) -> CacheKey:
        return (source_lang, target_lang, text)

    def _is_expired(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.created_at >= self.ttl

    def get(self, text: str, source_lang: str, target_lang: str) -> Optional[str]:
        """Cached translation, or None on a miss or expired entry"""
        key = self.make_key(text, source_lang, target_lang)
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._is_expired(entry):
            del self._entries[key]
            logger.debug(f"Cache entry expired: {source_lang}->{target_lang} {text[:40]!r}")
            return None
        entry.hit_count += 1
        return entry.translation

    def set(self, text: str, source_lang: str, target_lang: str, translation: str):
        key = self.make_key(text, source_lang, target_lang)
        if key in self._entries:
            # Replace in place, keeping its insertion slot
            self._entries[key] = CacheEntry(translation, self._clock())
            return
        while len(self._entries) >= self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Cache full, evicted {evicted[0]}->{evicted[1]} {evicted[2][:40]!r}")
        self._entries[key] = CacheEntry(translation, self._clock())

    def __contains__(self, key: CacheKey) -> bool:
        entry = self._entries.get(key)
        return entry is not None and not self._is_expired(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self):
        self._entries.clear()

    def get_stats(self) -> Dict:
        return {
            "size": len(self._entries),
            "max_size": self.max_size,
            "ttl": self.ttl,
            "hit_rate": self._hit_rate(),
        }

    def _hit_rate(self) -> float:
        """Percentage of lookups served from cache (one initial miss per entry)"""
        total_hits = sum(e.hit_count for e in self._entries.values())
        total_requests = total_hits + len(self._entries)
        return (total_hits / total_requests) * 100 if total_requests else 0.0
