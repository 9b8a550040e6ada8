"""Authorization guard - caller standing checks."""

from accessledger.application.ports import (
    AdministrativeGate,
    RecordRegistry,
    UnitOfWork,
    UnitOfWorkFactory,
    UserRegistry,
)
from accessledger.domain.exceptions import SystemPaused, Unauthorized
from accessledger.domain.value_objects import (
    RecordHash,
    is_zero_address,
    normalize_address,
)


class AuthorizationGuard:
    """Evaluates whether a caller may act as, or on behalf of, a record owner.

    Every check raises on failure, so an operation composes them as an
    ordered list of awaits at its start. Ownership is resolved from the record
    registry on every call and never cached.

    Standing checks hold at most one pooled connection at a time and run
    before an operation takes the ledger lock. Only the pause re-check reads
    through the locked unit of work.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        user_registry: UserRegistry,
        record_registry: RecordRegistry,
        administrative_gate: AdministrativeGate,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._users = user_registry
        self._records = record_registry
        self._gate = administrative_gate

    async def ensure_not_paused(self, uow: UnitOfWork | None = None) -> None:
        """Raise SystemPaused; with uow, read the flag on that unit of work."""
        paused = await uow.control.is_paused() if uow is not None else await self._gate.paused()
        if paused:
            raise SystemPaused("Ledger is paused")

    async def is_user(self, address: str) -> bool:
        return await self._users.is_user(address)

    async def is_owner_of(self, record_hash: RecordHash, address: str) -> bool:
        owner = normalize_address(await self._records.record_owner_of(record_hash))
        if is_zero_address(owner):
            return False
        return owner == normalize_address(address)

    async def is_delegate_of(self, owner: str, caller: str) -> bool:
        # Delegations are add-only, so a positive answer cannot go stale.
        async with self._uow_factory() as uow:
            return await uow.delegates.is_delegate(owner, caller)

    async def ensure_user(self, address: str) -> None:
        if not await self.is_user(address):
            raise Unauthorized(f"{address} is not a registered user")

    async def ensure_owner(self, record_hash: RecordHash, address: str) -> None:
        if not await self.is_owner_of(record_hash, address):
            raise Unauthorized(f"{address} is not the owner of record {record_hash}")

    async def ensure_delegate(self, owner: str, caller: str) -> None:
        if not await self.is_delegate_of(owner, caller):
            raise Unauthorized(f"{caller} is not a delegate of {owner}")

    async def ensure_direct_standing(self, record_hash: RecordHash, caller: str) -> None:
        """Caller acts as owner: registered user AND recorded owner."""
        await self.ensure_user(caller)
        await self.ensure_owner(record_hash, caller)

    async def ensure_delegate_standing(
        self, record_hash: RecordHash, owner: str, caller: str
    ) -> None:
        """Caller acts for owner: delegate of owner AND owner is recorded owner."""
        await self.ensure_delegate(owner, caller)
        await self.ensure_owner(record_hash, owner)
