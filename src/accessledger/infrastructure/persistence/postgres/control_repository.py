"""PostgreSQL ledger control repository implementation."""

from psycopg import AsyncConnection


class PostgresControlRepository:
    """Single-row ledger_control table holding the pause flag."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def is_paused(self) -> bool:
        cur = await self._conn.execute("SELECT paused FROM ledger_control WHERE id = 1")
        r = await cur.fetchone()
        return bool(r and r[0])

    async def set_paused(self, paused: bool) -> None:
        await self._conn.execute(
            "INSERT INTO ledger_control (id, paused, updated_at) VALUES (1, %s, now()) "
            "ON CONFLICT (id) DO UPDATE SET paused = EXCLUDED.paused, updated_at = EXCLUDED.updated_at",
            (paused,),
        )
