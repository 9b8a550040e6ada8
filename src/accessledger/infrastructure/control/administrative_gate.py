"""Administrative gate reading the persisted pause flag."""

from accessledger.application.ports import UnitOfWorkFactory


class LedgerAdministrativeGate:
    """Answers paused() from ledger_control through a fresh unit of work."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def paused(self) -> bool:
        async with self._uow_factory() as uow:
            return await uow.control.is_paused()
