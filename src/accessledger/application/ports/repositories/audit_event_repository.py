"""Audit event repository port - append-only log."""

from typing import Protocol

from accessledger.domain.entities import AuditEvent


class AuditEventRepository(Protocol):
    """Port for audit log persistence."""

    async def append(self, event: AuditEvent) -> AuditEvent: ...

    async def list(
        self, *, after: int | None = None, limit: int = 50
    ) -> list[AuditEvent]: ...
