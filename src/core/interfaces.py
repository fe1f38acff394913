"""Core protocol and interface definitions.

Defines the Storage protocol that cache backends implement so callers
can memoize fetched values without depending on a concrete backend, and
the StorageCluster entry stored by them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, Protocol, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class StorageCluster(Generic[T]):
    # Stored value + monotonic write time in milliseconds
    url: str
    data: T
    received_at: float


class Storage(Protocol[T]):
    """Contract for any cache storage (memory, etc.)."""

    async def get(self, url: str) -> Optional[T]:
        ...

    async def set(self, url: str, data: T) -> None:
        ...

    async def has(self, url: str) -> bool:
        ...

    async def append(self, url: str, data: T) -> None:
        ...

    async def is_outdated(self, url: str) -> bool:
        ...

    async def is_storage_full(self) -> bool:
        ...

    async def purge_storage(self) -> None:
        ...
