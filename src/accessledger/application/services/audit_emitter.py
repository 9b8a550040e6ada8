"""Audit emitter - builds and appends audit log entries."""

import logging
from datetime import UTC, datetime

from accessledger.application.ports import UnitOfWork
from accessledger.domain.entities import AuditEvent
from accessledger.domain.value_objects import AuditEventKind, RecordHash

logger = logging.getLogger(__name__)


class AuditEmitter:
    """Appends one immutable entry per state transition or policy evaluation.

    Entries go through the caller's unit of work, so they commit or roll back
    together with the state change they describe.
    """

    async def access_granted(
        self, uow: UnitOfWork, record_hash: RecordHash, owner: str, viewer: str, sender: str
    ) -> AuditEvent:
        return await self._append(
            uow,
            AuditEvent(
                kind=AuditEventKind.ACCESS_GRANTED,
                sender=sender,
                created_at=datetime.now(UTC),
                record_hash=record_hash,
                owner=owner,
                viewer=viewer,
            ),
        )

    async def access_revoked(
        self, uow: UnitOfWork, record_hash: RecordHash, owner: str, viewer: str, sender: str
    ) -> AuditEvent:
        return await self._append(
            uow,
            AuditEvent(
                kind=AuditEventKind.ACCESS_REVOKED,
                sender=sender,
                created_at=datetime.now(UTC),
                record_hash=record_hash,
                owner=owner,
                viewer=viewer,
            ),
        )

    async def delegate_added(self, uow: UnitOfWork, owner: str, delegate: str) -> AuditEvent:
        return await self._append(
            uow,
            AuditEvent(
                kind=AuditEventKind.DELEGATE_ADDED,
                sender=owner,
                created_at=datetime.now(UTC),
                owner=owner,
                delegate=delegate,
            ),
        )

    async def policy_checked(
        self,
        uow: UnitOfWork,
        record_hash: RecordHash,
        viewer: str,
        key_reference: str,
        evaluator: str,
        result: bool,
        sender: str,
    ) -> AuditEvent:
        return await self._append(
            uow,
            AuditEvent(
                kind=AuditEventKind.POLICY_CHECKED,
                sender=sender,
                created_at=datetime.now(UTC),
                record_hash=record_hash,
                viewer=viewer,
                key_reference=key_reference,
                evaluator=evaluator,
                result=result,
            ),
        )

    async def _append(self, uow: UnitOfWork, event: AuditEvent) -> AuditEvent:
        stored = await uow.audit_events.append(event)
        logger.debug("Audit %s #%s by %s", stored.kind, stored.sequence, stored.sender)
        return stored
