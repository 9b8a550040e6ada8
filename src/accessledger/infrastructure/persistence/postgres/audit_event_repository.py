"""PostgreSQL audit event repository implementation."""

from dataclasses import replace

from psycopg import AsyncConnection

from accessledger.domain.entities import AuditEvent
from accessledger.domain.value_objects import AuditEventKind, RecordHash

_COLUMNS = (
    "sequence, kind, sender, created_at, record_hash, owner, viewer, "
    "delegate, key_reference, evaluator, result"
)


def _row_to_event(r: tuple) -> AuditEvent:
    return AuditEvent(
        sequence=r[0],
        kind=AuditEventKind(r[1]),
        sender=r[2],
        created_at=r[3],
        record_hash=RecordHash(bytes(r[4])) if r[4] is not None else None,
        owner=r[5],
        viewer=r[6],
        delegate=r[7],
        key_reference=r[8],
        evaluator=r[9],
        result=r[10],
    )


class PostgresAuditEventRepository:
    """Append-only audit log; sequence comes from a bigserial column."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def append(self, event: AuditEvent) -> AuditEvent:
        """Append event and return it with its assigned sequence."""
        cur = await self._conn.execute(
            "INSERT INTO audit_event (kind, sender, created_at, record_hash, owner, viewer, "
            "delegate, key_reference, evaluator, result) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s) RETURNING sequence",
            (
                event.kind.value,
                event.sender,
                event.created_at,
                event.record_hash.value if event.record_hash else None,
                event.owner,
                event.viewer,
                event.delegate,
                event.key_reference,
                event.evaluator,
                event.result,
            ),
        )
        r = await cur.fetchone()
        return replace(event, sequence=r[0])

    async def list(self, *, after: int | None = None, limit: int = 50) -> list[AuditEvent]:
        """List events in append order, starting after the given sequence."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM audit_event WHERE sequence > %s ORDER BY sequence LIMIT %s",
            (after or 0, limit),
        )
        rows = await cur.fetchall()
        return [_row_to_event(r) for r in rows]
