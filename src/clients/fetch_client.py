"""HTTP fetch client memoized through a Storage backend.

Responses are cached by URL. A fresh entry is served from storage; an
absent or expired one is downloaded again and written back with set(),
which keeps the key's eviction position and resets its expiration clock.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional
from urllib.parse import urlsplit

import httpx

from config import FETCH_TIMEOUT, HTTP_VERIFY
from core.errors import ExpiredError, ExternalServiceError, ValidationError
from core.interfaces import Storage
from storage.storage_factory import get_storage

logger = logging.getLogger(__name__)


def normalize_url(url: str) -> str:
    u = (url or "").strip()
    if not u:
        raise ValidationError("Missing url")

    parts = urlsplit(u)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValidationError(f"Unsupported url: {u}")
    return u


class CachedFetchClient:
    """Async GET client that reuses cached bodies until they expire.

    Concurrent fetches of the same URL are not coalesced; each miss
    downloads and the last write wins.
    """

    def __init__(
        self,
        *,
        storage: Optional[Storage[bytes]] = None,
        timeout: float = FETCH_TIMEOUT,
        verify: bool = HTTP_VERIFY,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._storage: Storage[bytes] = storage if storage is not None else get_storage()
        self._timeout = float(timeout)
        self._verify = bool(verify)
        self._headers = dict(headers or {})

    @property
    def storage(self) -> Storage[bytes]:
        return self._storage

    async def fetch(self, url: str) -> bytes:
        u = normalize_url(url)

        if await self._storage.has(u):
            try:
                cached = await self._storage.get(u)
            except ExpiredError:
                logger.debug("Cache expired: %s", u)
            else:
                if cached is not None:
                    logger.debug("Cache hit: %s", u)
                    return cached
        else:
            logger.debug("Cache miss: %s", u)

        content = await self._download(u)
        await self._storage.set(u, content)
        return content

    async def fetch_text(self, url: str, *, encoding: str = "utf-8") -> str:
        content = await self.fetch(url)
        return content.decode(encoding, errors="replace")

    async def _download(self, url: str) -> bytes:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                verify=self._verify,
                headers=self._headers,
                follow_redirects=True,
            ) as c:
                r = await c.get(url)
                r.raise_for_status()
                return r.content
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError(f"Fetch returned an error: {e}") from e
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Failed to fetch {url}: {e}") from e
