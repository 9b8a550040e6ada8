"""Revoke access use case - owner revokes directly."""

from accessledger.application.ports import UnitOfWorkFactory
from accessledger.application.services import AccessStateMachine, AuthorizationGuard
from accessledger.domain.value_objects import RecordHash, normalize_address


class RevokeAccessUseCase:
    """Owner revokes viewer access to record.

    Revocation only changes the ledger. Key material already handed to the
    viewer is not recalled; rotate the record key and re-grant to the
    remaining viewers if that matters.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        authorization_guard: AuthorizationGuard,
        state_machine: AccessStateMachine,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = authorization_guard
        self._state_machine = state_machine

    async def execute(self, caller: str, record_hash: RecordHash, viewer: str) -> bool:
        """Caller must be a registered user and the record owner; pair must be granted."""
        caller = normalize_address(caller)
        viewer = normalize_address(viewer)

        await self._guard.ensure_not_paused()
        self._state_machine.check_revoke(record_hash, viewer, caller)
        await self._guard.ensure_direct_standing(record_hash, caller)

        async with self._uow_factory() as uow:
            await uow.serialize()
            await self._guard.ensure_not_paused(uow)
            await self._state_machine.revoke(uow, record_hash, viewer, caller, sender=caller)
        return True
