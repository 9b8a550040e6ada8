"""Lifespan middleware - opens the pool and policy HTTP client, closes them on shutdown."""

from typing import Any

import httpx
from psycopg_pool import AsyncConnectionPool


class PoolLifespanMiddleware:
    """Middleware that owns the connection pool and outbound HTTP client lifetimes."""

    def __init__(self, pool: AsyncConnectionPool, http_client: httpx.AsyncClient | None = None) -> None:
        self._pool = pool
        self._http_client = http_client

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool when ASGI server starts."""
        await self._pool.open()

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool and HTTP client when ASGI server shuts down."""
        if self._http_client is not None:
            await self._http_client.aclose()
        await self._pool.close()
