"""User registry backed by the registered_user table."""

from psycopg_pool import AsyncConnectionPool


class PostgresUserRegistry:
    """Reads the user directory maintained by the account service."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def is_user(self, address: str) -> bool:
        async with self._pool.connection() as conn:
            cur = await conn.execute(
                "SELECT 1 FROM registered_user WHERE address = %s",
                (address.lower(),),
            )
            return await cur.fetchone() is not None
