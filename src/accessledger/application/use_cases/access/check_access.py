"""Check access use case."""

from accessledger.application.ports import UnitOfWorkFactory
from accessledger.domain.value_objects import RecordHash, normalize_address


class CheckAccessUseCase:
    """Whether viewer currently holds access to record. Works while paused."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, record_hash: RecordHash, viewer: str) -> bool:
        async with self._uow_factory() as uow:
            permission = await uow.permissions.get(record_hash, normalize_address(viewer))
        return permission.can_access
