"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from accessledger.application.ports.repositories.audit_event_repository import (
    AuditEventRepository,
)
from accessledger.application.ports.repositories.control_repository import (
    ControlRepository,
)
from accessledger.application.ports.repositories.delegate_repository import (
    DelegateRepository,
)
from accessledger.application.ports.repositories.permission_repository import (
    PermissionRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def delegates(self) -> DelegateRepository: ...

    @property
    def audit_events(self) -> AuditEventRepository: ...

    @property
    def control(self) -> ControlRepository: ...

    async def serialize(self) -> None:
        """Block until no other mutating unit of work holds the ledger."""
        ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Opens a UnitOfWork; commits on normal exit, rolls back on error."""

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...
