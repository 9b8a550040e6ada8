"""Check delegate use case."""

from accessledger.application.ports import UnitOfWorkFactory
from accessledger.domain.value_objects import normalize_address


class CheckDelegateUseCase:
    """Whether delegate is authorized to act for owner."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, owner: str, delegate: str) -> bool:
        async with self._uow_factory() as uow:
            return await uow.delegates.is_delegate(
                normalize_address(owner), normalize_address(delegate)
            )
