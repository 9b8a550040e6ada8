"""Grant/revoke state machine over the Permission Store."""

import logging

from accessledger.application.ports import UnitOfWork
from accessledger.application.services.audit_emitter import AuditEmitter
from accessledger.domain.entities import Permission
from accessledger.domain.exceptions import InvalidInput, InvalidStateTransition
from accessledger.domain.value_objects import RecordHash, is_zero_address

logger = logging.getLogger(__name__)


def require_record_hash(record_hash: RecordHash) -> None:
    if record_hash.is_zero:
        raise InvalidInput("Record hash must not be zero")


def require_identity(address: str, role: str) -> None:
    if is_zero_address(address):
        raise InvalidInput(f"{role} must not be the zero address")


def require_key_reference(key_reference: str) -> None:
    if not key_reference or not key_reference.strip():
        raise InvalidInput("Key reference must not be empty")


class AccessStateMachine:
    """Only path that mutates permissions.

    A pair is either Unset/Revoked (can_access=False) or Granted. Granting
    overwrites unconditionally, which is how key rotation works; revoking
    requires the pair to be Granted.
    """

    def __init__(self, audit_emitter: AuditEmitter) -> None:
        self._audit = audit_emitter

    @staticmethod
    def check_grant(
        record_hash: RecordHash, viewer: str, owner: str, key_reference: str
    ) -> None:
        """Input preconditions of a grant, before any standing check runs."""
        require_record_hash(record_hash)
        require_identity(owner, "Owner")
        require_identity(viewer, "Viewer")
        require_key_reference(key_reference)

    @staticmethod
    def check_revoke(record_hash: RecordHash, viewer: str, owner: str) -> None:
        """Input preconditions of a revoke, before any standing check runs."""
        require_record_hash(record_hash)
        require_identity(owner, "Owner")
        require_identity(viewer, "Viewer")

    async def grant(
        self,
        uow: UnitOfWork,
        record_hash: RecordHash,
        viewer: str,
        owner: str,
        key_reference: str,
        sender: str,
    ) -> Permission:
        self.check_grant(record_hash, viewer, owner, key_reference)
        permission = Permission.granted(key_reference)
        await uow.permissions.set(record_hash, viewer, permission)
        await self._audit.access_granted(uow, record_hash, owner, viewer, sender)
        logger.info("Granted %s access to %s (owner %s, by %s)", viewer, record_hash, owner, sender)
        return permission

    async def revoke(
        self,
        uow: UnitOfWork,
        record_hash: RecordHash,
        viewer: str,
        owner: str,
        sender: str,
    ) -> Permission:
        self.check_revoke(record_hash, viewer, owner)
        current = await uow.permissions.get(record_hash, viewer)
        if not current.can_access:
            raise InvalidStateTransition(
                f"{viewer} has no granted access to record {record_hash}"
            )
        permission = Permission.revoked()
        await uow.permissions.set(record_hash, viewer, permission)
        await self._audit.access_revoked(uow, record_hash, owner, viewer, sender)
        logger.info("Revoked %s access to %s (owner %s, by %s)", viewer, record_hash, owner, sender)
        return permission
