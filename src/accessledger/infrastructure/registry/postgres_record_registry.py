"""Record registry backed by the record table."""

from psycopg_pool import AsyncConnectionPool

from accessledger.domain.value_objects import ZERO_ADDRESS, RecordHash


class PostgresRecordRegistry:
    """Reads record ownership maintained by the record service. Never cached."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool

    async def record_owner_of(self, record_hash: RecordHash) -> str:
        async with self._pool.connection() as conn:
            cur = await conn.execute(
                "SELECT owner FROM record WHERE record_hash = %s",
                (record_hash.value,),
            )
            r = await cur.fetchone()
        return r[0] if r else ZERO_ADDRESS
