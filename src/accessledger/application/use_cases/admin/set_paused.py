"""Set paused use case - administrative pause switch."""

import logging
from collections.abc import Iterable

from accessledger.application.ports import UnitOfWorkFactory
from accessledger.domain.exceptions import Unauthorized
from accessledger.domain.value_objects import normalize_address

logger = logging.getLogger(__name__)


class SetPausedUseCase:
    """Pause or unpause all mutating ledger operations."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory, admin_subjects: Iterable[str]) -> None:
        self._uow_factory = unit_of_work_factory
        self._admins = {normalize_address(s) for s in admin_subjects if s.strip()}

    async def execute(self, actor: str, paused: bool) -> bool:
        """Actor must be a configured administrator. Returns the new flag."""
        if normalize_address(actor) not in self._admins:
            raise Unauthorized(f"{actor} is not an administrator")
        async with self._uow_factory() as uow:
            await uow.serialize()
            await uow.control.set_paused(paused)
        logger.info("Ledger %s by %s", "paused" if paused else "unpaused", actor)
        return paused
