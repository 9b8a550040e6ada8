"""Grant access by delegate use case."""

from accessledger.application.ports import UnitOfWorkFactory
from accessledger.application.services import AccessStateMachine, AuthorizationGuard
from accessledger.domain.value_objects import RecordHash, normalize_address


class GrantAccessByDelegateUseCase:
    """Delegate grants viewer access on behalf of the record owner."""

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
        self,
        caller: str,
        record_hash: RecordHash,
        viewer: str,
        owner: str,
        key_reference: str,
    ) -> bool:
        """Caller must be a delegate of owner, and owner the recorded owner."""
        caller = normalize_address(caller)
        viewer = normalize_address(viewer)
        owner = normalize_address(owner)

        await self._guard.ensure_not_paused()
        self._state_machine.check_grant(record_hash, viewer, owner, key_reference)
        await self._guard.ensure_delegate_standing(record_hash, owner, caller)

        async with self._uow_factory() as uow:
            await uow.serialize()
            await self._guard.ensure_not_paused(uow)
            await self._state_machine.grant(
                uow, record_hash, viewer, owner, key_reference, sender=caller
            )
        return True
