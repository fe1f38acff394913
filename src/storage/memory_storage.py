"""In-memory Storage backend with expiration and FIFO size eviction.

Entries live in a dict keyed by URL; a CacheQueue keeps the same keys in
first-insertion order. Expiration is checked lazily on read and expired
entries stay stored until a size-triggered purge reaches them. When the
queue holds storage_size keys, the next append purges a chunk of the
oldest keys (storage_size / 10, rounded half-up, at least 1).
"""

from __future__ import annotations

import asyncio
import logging
import math
import time
from typing import Dict, Generic, Optional, TypeVar

from core.cache_queue import CacheQueue
from core.errors import DuplicateKeyError, ExpiredError, ValidationError
from core.interfaces import StorageCluster

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_STORAGE_SIZE = 100
DEFAULT_EXPIRATION_MS = 2000
PURGE_CHUNK_DIVISOR = 10


def _positive_int(name: str, value: Optional[int], default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{name} must be a positive integer, got {value!r}")
    return value


def _now_ms() -> float:
    # Monotonic so wall clock adjustments do not expire or revive entries
    return time.monotonic() * 1000.0


class MemoryStorage(Generic[T]):
    def __init__(
        self,
        *,
        storage_size: Optional[int] = None,
        expiration: Optional[int] = None,
        verbose: bool = False,
    ) -> None:
        self._max_size = _positive_int("storage_size", storage_size, DEFAULT_STORAGE_SIZE)
        self._expiration_ms = _positive_int("expiration", expiration, DEFAULT_EXPIRATION_MS)
        self._verbose = bool(verbose)

        self._map: Dict[str, StorageCluster[T]] = {}
        # Every appended key, oldest first
        self._queue: CacheQueue[str] = CacheQueue()

        # Serializes writers: append's full-check-then-write and the purge
        # loop must not interleave or the map/queue pairing breaks.
        self._lock = asyncio.Lock()

    @property
    def storage_size(self) -> int:
        return self._max_size

    @property
    def expiration(self) -> int:
        return self._expiration_ms

    @property
    def verbose(self) -> bool:
        return self._verbose

    async def has(self, url: str) -> bool:
        return url in self._map

    async def get(self, url: str) -> Optional[T]:
        if await self.is_outdated(url):
            raise ExpiredError(url)

        entry = self._map.get(url)
        return None if entry is None else entry.data

    async def append(self, url: str, data: T) -> None:
        async with self._lock:
            self._append_unlocked(url, data)

    async def set(self, url: str, data: T) -> None:
        async with self._lock:
            if url not in self._map:
                self._append_unlocked(url, data)
            # Refresh value and timestamp; queue position stays put
            self._write(url, data)

    async def is_outdated(self, url: str) -> bool:
        """Return True when the entry for url has reached its expiration age.

        Unknown keys are never outdated.
        """
        entry = self._map.get(url)
        if entry is None:
            return False
        return _now_ms() - (entry.received_at + self._expiration_ms) >= 0

    async def is_storage_full(self) -> bool:
        return self._is_full()

    def purge_chunk_size(self) -> int:
        # Half-up rounding; floored at 1 so a full tiny cache still frees a slot
        return max(1, math.floor(self._max_size / PURGE_CHUNK_DIVISOR + 0.5))

    async def purge_storage(self) -> None:
        async with self._lock:
            self._purge_unlocked()

    # --- internals (caller holds the lock) ---

    def _is_full(self) -> bool:
        return self._queue.size() >= self._max_size

    def _write(self, url: str, data: T) -> None:
        self._map[url] = StorageCluster(url=url, data=data, received_at=_now_ms())

    def _append_unlocked(self, url: str, data: T) -> None:
        if url in self._map:
            raise DuplicateKeyError(url)

        if self._is_full():
            self._purge_unlocked()

        self._write(url, data)
        self._queue.enqueue(url)

    def _purge_unlocked(self) -> None:
        chunk = self.purge_chunk_size()
        logger.debug("Purging up to %d entries (queued=%d)", chunk, self._queue.size())

        for _ in range(chunk):
            url = self._queue.dequeue()
            if self._verbose:
                logger.info("[MemoryStorage] Purge element with id: %s", url)
                logger.info("[MemoryStorage] %s", self._queue.snapshot())
            if url is None:
                break
            self._map.pop(url, None)
