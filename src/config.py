"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (storage
size and expiration defaults, HTTP settings, log level).
"""

from __future__ import annotations

import logging
import os
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# Memory storage
STORAGE_SIZE = _env_int("STORAGE_SIZE", 100)
STORAGE_EXPIRATION_MS = _env_int("STORAGE_EXPIRATION_MS", 2000)
STORAGE_VERBOSE = _env_bool("STORAGE_VERBOSE", False)

# Network / HTTP
HTTP_VERIFY = _env_bool("HTTP_VERIFY", True)
FETCH_TIMEOUT = _env_float("FETCH_TIMEOUT", 20.0)

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    # basicConfig is a no-op once the root logger has handlers; the level is always applied
    name = (level or LOG_LEVEL).strip().upper()
    logging.basicConfig(format=_LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, name, logging.INFO))
