"""PostgreSQL delegate repository implementation."""

from psycopg import AsyncConnection


class PostgresDelegateRepository:
    """Delegate registry. Rows are only ever inserted."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def is_delegate(self, owner: str, delegate: str) -> bool:
        """Check whether delegate may act for owner."""
        cur = await self._conn.execute(
            "SELECT 1 FROM delegate WHERE owner = %s AND delegate = %s",
            (owner, delegate),
        )
        return await cur.fetchone() is not None

    async def add(self, owner: str, delegate: str) -> None:
        """Authorize delegate for owner (idempotent)."""
        await self._conn.execute(
            "INSERT INTO delegate (owner, delegate, created_at) VALUES (%s, %s, now()) "
            "ON CONFLICT (owner, delegate) DO NOTHING",
            (owner, delegate),
        )
