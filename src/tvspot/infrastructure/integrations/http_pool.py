"""Shared HTTP client pool for connection reuse.

Hey future me - this is the CENTRAL http client pool! Guide data CDNs serve
hundreds of program images per refresh run; creating a new httpx.AsyncClient
per image would throw away keep-alive every time. Services get the shared
client here instead.

Usage:
    from tvspot.infrastructure.integrations.http_pool import HttpClientPool

    client = await HttpClientPool.get_client(settings.http)
    response = await client.get("https://guide.example.com/img/123.jpg")

Don't forget HttpClientPool.close() at shutdown!
"""

from __future__ import annotations

import asyncio
import logging
from typing import ClassVar

import httpx

from tvspot.config import HttpSettings

logger = logging.getLogger(__name__)


class HttpClientPool:
    """Singleton HTTP client pool.

    Features:
    - Lazy initialization (created on first use)
    - Guarded by asyncio.Lock
    - Configured from HttpSettings on first call
    - Proper cleanup at shutdown
    """

    # Hey future me, these are CLASS VARIABLES (shared across all calls)!
    _client: ClassVar[httpx.AsyncClient | None] = None
    _lock: ClassVar[asyncio.Lock | None] = None

    @classmethod
    def _ensure_lock(cls) -> asyncio.Lock:
        """Create the lock lazily, inside a running event loop."""
        if cls._lock is None:
            cls._lock = asyncio.Lock()
        return cls._lock

    @classmethod
    async def get_client(cls, settings: HttpSettings | None = None) -> httpx.AsyncClient:
        """Get the shared HTTP client instance.

        Settings only apply on the FIRST call. Later calls return the same
        client regardless of what's passed.
        """
        async with cls._ensure_lock():
            if cls._client is None:
                settings = settings or HttpSettings()
                cls._client = httpx.AsyncClient(
                    timeout=httpx.Timeout(settings.timeout),
                    limits=httpx.Limits(
                        max_keepalive_connections=settings.max_keepalive,
                        max_connections=settings.max_connections,
                    ),
                    http2=settings.http2,
                    # CDNs love redirects
                    follow_redirects=True,
                    headers={"User-Agent": settings.user_agent},
                )
                logger.info(
                    "HTTP client pool initialized (timeout=%.1fs, keepalive=%d, max_conn=%d)",
                    settings.timeout,
                    settings.max_keepalive,
                    settings.max_connections,
                )
            return cls._client

    @classmethod
    async def close(cls) -> None:
        """Close the shared client. get_client() afterwards creates a new one."""
        async with cls._ensure_lock():
            if cls._client is not None:
                await cls._client.aclose()
                cls._client = None
                logger.info("HTTP client pool closed")

    @classmethod
    def is_initialized(cls) -> bool:
        """Check if the shared client exists."""
        return cls._client is not None


__all__ = ["HttpClientPool"]
