"""Factory for building the configured Storage implementation.

Exposes get_storage which returns a MemoryStorage, filling any argument
left unset from the environment-driven defaults in config.
"""

from __future__ import annotations

from typing import Any, Optional

from config import STORAGE_EXPIRATION_MS, STORAGE_SIZE, STORAGE_VERBOSE
from core.interfaces import Storage
from storage.memory_storage import MemoryStorage


def get_storage(
    *,
    storage_size: Optional[int] = None,
    expiration: Optional[int] = None,
    verbose: Optional[bool] = None,
) -> Storage[Any]:
    return MemoryStorage(
        storage_size=STORAGE_SIZE if storage_size is None else storage_size,
        expiration=STORAGE_EXPIRATION_MS if expiration is None else expiration,
        verbose=STORAGE_VERBOSE if verbose is None else verbose,
    )
