"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool


def create_pool(conninfo: str, min_size: int = 2, max_size: int = 10) -> AsyncConnectionPool:
    """Create async connection pool, named for server-side diagnostics.

    Pool is created with open=False; PoolLifespanMiddleware opens it on
    ASGI startup.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        name="accessledger",
        open=False,
    )


async def ping(pool: AsyncConnectionPool) -> bool:
    """Readiness probe: one round trip through a pooled connection."""
    async with pool.connection() as conn:
        cur = await conn.execute("SELECT 1")
        return (await cur.fetchone()) == (1,)
