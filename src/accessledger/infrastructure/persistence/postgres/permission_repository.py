"""PostgreSQL permission repository implementation."""

from psycopg import AsyncConnection

from accessledger.domain.entities import Permission
from accessledger.domain.value_objects import RecordHash


class PostgresPermissionRepository:
    """Permission store; a missing row reads as the zero permission."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, record_hash: RecordHash, viewer: str) -> Permission:
        """Get permission for viewer on record."""
        cur = await self._conn.execute(
            "SELECT can_access, key_reference FROM permission "
            "WHERE record_hash = %s AND viewer = %s",
            (record_hash.value, viewer),
        )
        r = await cur.fetchone()
        if not r:
            return Permission.revoked()
        return Permission(can_access=r[0], key_reference=r[1])

    async def set(self, record_hash: RecordHash, viewer: str, permission: Permission) -> None:
        """Insert or overwrite permission for viewer on record."""
        await self._conn.execute(
            "INSERT INTO permission (record_hash, viewer, can_access, key_reference, updated_at) "
            "VALUES (%s, %s, %s, %s, now()) "
            "ON CONFLICT (record_hash, viewer) DO UPDATE SET "
            "can_access = EXCLUDED.can_access, key_reference = EXCLUDED.key_reference, "
            "updated_at = EXCLUDED.updated_at",
            (record_hash.value, viewer, permission.can_access, permission.key_reference),
        )
