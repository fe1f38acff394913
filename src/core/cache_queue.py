"""FIFO queue recording key insertion order for cache eviction.

The head is the oldest enqueued element. Head and tail cursors count
dequeued and enqueued elements so size() reflects live elements only.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class CacheQueue(Generic[T]):
    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._head = 0
        self._tail = 0

    def enqueue(self, item: T) -> T:
        self._items.append(item)
        self._tail += 1
        return item

    def dequeue(self) -> Optional[T]:
        # Empty queue yields None instead of raising
        if not self._items:
            return None
        self._head += 1
        return self._items.popleft()

    def peek(self) -> Optional[T]:
        if not self._items:
            return None
        return self._items[0]

    def size(self) -> int:
        return self._tail - self._head

    def __len__(self) -> int:
        return self.size()

    def snapshot(self) -> Dict[str, Any]:
        """JSON-friendly view of the queue, used for purge diagnostics."""
        return {
            "items": list(self._items),
            "head": self._head,
            "tail": self._tail,
            "length": self.size(),
        }
