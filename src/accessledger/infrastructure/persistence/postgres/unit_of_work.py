"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from accessledger.application.ports import UnitOfWorkFactory
from accessledger.infrastructure.persistence.postgres.audit_event_repository import (
    PostgresAuditEventRepository,
)
from accessledger.infrastructure.persistence.postgres.control_repository import (
    PostgresControlRepository,
)
from accessledger.infrastructure.persistence.postgres.delegate_repository import (
    PostgresDelegateRepository,
)
from accessledger.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)

# Advisory lock key shared by every mutating unit of work.
LEDGER_LOCK_KEY = 0x4C454447


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._permissions = PostgresPermissionRepository(self._conn)
        self._delegates = PostgresDelegateRepository(self._conn)
        self._audit_events = PostgresAuditEventRepository(self._conn)
        self._control = PostgresControlRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def delegates(self) -> PostgresDelegateRepository:
        return self._delegates

    @property
    def audit_events(self) -> PostgresAuditEventRepository:
        return self._audit_events

    @property
    def control(self) -> PostgresControlRepository:
        return self._control

    async def serialize(self) -> None:
        """Take the ledger-wide transaction lock; released on commit or rollback."""
        if self._conn:
            await self._conn.execute("SELECT pg_advisory_xact_lock(%s)", (LEDGER_LOCK_KEY,))

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> UnitOfWorkFactory:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
