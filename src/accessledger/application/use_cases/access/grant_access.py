"""Grant access use case - owner grants directly."""

from accessledger.application.ports import UnitOfWorkFactory
from accessledger.application.services import AccessStateMachine, AuthorizationGuard
from accessledger.domain.value_objects import RecordHash, normalize_address


class GrantAccessUseCase:
    """Owner grants viewer access to record under a key reference."""

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
        key_reference: str,
    ) -> bool:
        """Caller must be a registered user and the record owner.

        Re-granting replaces the key reference.
        """
        caller = normalize_address(caller)
        viewer = normalize_address(viewer)

        await self._guard.ensure_not_paused()
        self._state_machine.check_grant(record_hash, viewer, caller, key_reference)
        await self._guard.ensure_direct_standing(record_hash, caller)

        async with self._uow_factory() as uow:
            await uow.serialize()
            await self._guard.ensure_not_paused(uow)
            await self._state_machine.grant(
                uow, record_hash, viewer, caller, key_reference, sender=caller
            )
        return True
