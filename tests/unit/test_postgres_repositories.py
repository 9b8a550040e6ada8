"""Unit tests for PostgreSQL repositories against a mocked connection."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from accessledger.domain.entities import AuditEvent, Permission
from accessledger.domain.value_objects import AuditEventKind
from accessledger.infrastructure.persistence.postgres.audit_event_repository import (
    PostgresAuditEventRepository,
)
from accessledger.infrastructure.persistence.postgres.delegate_repository import (
    PostgresDelegateRepository,
)
from accessledger.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from tests.conftest import OWNER, RECORD, VIEWER


def _conn(fetchone=None, fetchall=None) -> MagicMock:
    cursor = MagicMock()
    cursor.fetchone = AsyncMock(return_value=fetchone)
    cursor.fetchall = AsyncMock(return_value=fetchall or [])
    conn = MagicMock()
    conn.execute = AsyncMock(return_value=cursor)
    return conn


class TestPostgresPermissionRepository:
    """Permission store SQL mapping."""

    @pytest.mark.asyncio
    async def test_missing_row_is_zero_permission(self) -> None:
        repo = PostgresPermissionRepository(_conn(fetchone=None))
        assert await repo.get(RECORD, VIEWER) == Permission.revoked()

    @pytest.mark.asyncio
    async def test_row_maps_to_permission(self) -> None:
        conn = _conn(fetchone=(True, "ipfs://key1"))
        repo = PostgresPermissionRepository(conn)
        assert await repo.get(RECORD, VIEWER) == Permission.granted("ipfs://key1")
        assert conn.execute.await_args.args[1] == (RECORD.value, VIEWER)

    @pytest.mark.asyncio
    async def test_set_upserts(self) -> None:
        conn = _conn()
        repo = PostgresPermissionRepository(conn)
        await repo.set(RECORD, VIEWER, Permission.revoked())
        sql, params = conn.execute.await_args.args
        assert "ON CONFLICT (record_hash, viewer) DO UPDATE" in sql
        assert params == (RECORD.value, VIEWER, False, "")


class TestPostgresDelegateRepository:
    """Delegate registry SQL mapping."""

    @pytest.mark.asyncio
    async def test_is_delegate(self) -> None:
        assert await PostgresDelegateRepository(_conn(fetchone=(1,))).is_delegate(OWNER, VIEWER)
        assert not await PostgresDelegateRepository(_conn(fetchone=None)).is_delegate(OWNER, VIEWER)

    @pytest.mark.asyncio
    async def test_add_is_insert_only(self) -> None:
        conn = _conn()
        await PostgresDelegateRepository(conn).add(OWNER, VIEWER)
        sql = conn.execute.await_args.args[0]
        assert "DO NOTHING" in sql
        assert "DELETE" not in sql and "UPDATE" not in sql


class TestPostgresAuditEventRepository:
    """Audit log SQL mapping."""

    @pytest.mark.asyncio
    async def test_append_assigns_sequence(self) -> None:
        repo = PostgresAuditEventRepository(_conn(fetchone=(42,)))
        event = AuditEvent(
            kind=AuditEventKind.ACCESS_GRANTED,
            sender=OWNER,
            created_at=datetime.now(UTC),
            record_hash=RECORD,
            owner=OWNER,
            viewer=VIEWER,
        )
        stored = await repo.append(event)
        assert stored.sequence == 42
        assert stored.kind == event.kind
        assert event.sequence is None

    @pytest.mark.asyncio
    async def test_list_maps_rows(self) -> None:
        now = datetime.now(UTC)
        row = (7, "PolicyChecked", OWNER, now, RECORD.value, None, VIEWER, None, "k", "p1", False)
        conn = _conn(fetchall=[row])
        events = await PostgresAuditEventRepository(conn).list(after=3, limit=10)

        (event,) = events
        assert event.sequence == 7
        assert event.kind == AuditEventKind.POLICY_CHECKED
        assert event.record_hash == RECORD
        assert event.evaluator == "p1"
        assert event.result is False
        assert conn.execute.await_args.args[1] == (3, 10)
