"""Revoke access by delegate use case."""

from accessledger.application.ports import UnitOfWorkFactory
from accessledger.application.services import AccessStateMachine, AuthorizationGuard
from accessledger.domain.value_objects import RecordHash, normalize_address


class RevokeAccessByDelegateUseCase:
    """Delegate revokes viewer access on behalf of the record owner."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        authorization_guard: AuthorizationGuard,
        state_machine: AccessStateMachine,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = authorization_guard
        self._state_machine = state_machine

    async def execute(
        self, caller: str, record_hash: RecordHash, viewer: str, owner: str
    ) -> bool:
        caller = normalize_address(caller)
        viewer = normalize_address(viewer)
        owner = normalize_address(owner)

        await self._guard.ensure_not_paused()
        self._state_machine.check_revoke(record_hash, viewer, owner)
        await self._guard.ensure_delegate_standing(record_hash, owner, caller)

        async with self._uow_factory() as uow:
            await uow.serialize()
            await self._guard.ensure_not_paused(uow)
            await self._state_machine.revoke(uow, record_hash, viewer, owner, sender=caller)
        return True
