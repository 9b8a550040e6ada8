"""Add delegate use case."""

import logging

from accessledger.application.ports import UnitOfWorkFactory
from accessledger.application.services import AuditEmitter, AuthorizationGuard
from accessledger.domain.exceptions import InvalidInput
from accessledger.domain.value_objects import is_zero_address, normalize_address

logger = logging.getLogger(__name__)


class AddDelegateUseCase:
    """Owner authorizes a delegate to manage permissions on their behalf.

    Authorizations are add-only: there is no operation to remove a delegate.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        authorization_guard: AuthorizationGuard,
        audit_emitter: AuditEmitter,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = authorization_guard
        self._audit = audit_emitter

    async def execute(self, caller: str, delegate: str) -> bool:
        """Register delegate for caller. Re-registering succeeds and is audited again."""
        caller = normalize_address(caller)
        delegate = normalize_address(delegate)

        await self._guard.ensure_not_paused()
        if is_zero_address(delegate):
            raise InvalidInput("Delegate must not be the zero address")
        if delegate == caller:
            raise InvalidInput("Cannot delegate to self")
        await self._guard.ensure_user(caller)

        async with self._uow_factory() as uow:
            await uow.serialize()
            await self._guard.ensure_not_paused(uow)
            await uow.delegates.add(caller, delegate)
            await self._audit.delegate_added(uow, caller, delegate)
        logger.info("Registered delegate %s for %s", delegate, caller)
        return True
