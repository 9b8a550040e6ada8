"""Get permission use case."""

from accessledger.application.ports import UnitOfWorkFactory
from accessledger.domain.entities import Permission
from accessledger.domain.value_objects import RecordHash, normalize_address


class GetPermissionUseCase:
    """Read the permission entry, including the key reference, for a pair."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, record_hash: RecordHash, viewer: str) -> Permission:
        """Zero permission (no access, empty key reference) when never granted."""
        async with self._uow_factory() as uow:
            return await uow.permissions.get(record_hash, normalize_address(viewer))
