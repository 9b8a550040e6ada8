"""Pytest fixtures for AccessLedger tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, replace

import pytest

from accessledger.application.services import (
    AccessStateMachine,
    AuditEmitter,
    AuthorizationGuard,
    PolicyGateway,
)
from accessledger.application.use_cases.access.check_access import CheckAccessUseCase
from accessledger.application.use_cases.access.get_permission import GetPermissionUseCase
from accessledger.application.use_cases.access.grant_access import GrantAccessUseCase
from accessledger.application.use_cases.access.grant_access_by_delegate import (
    GrantAccessByDelegateUseCase,
)
from accessledger.application.use_cases.access.grant_policy_based_access import (
    GrantPolicyBasedAccessUseCase,
)
from accessledger.application.use_cases.access.revoke_access import RevokeAccessUseCase
from accessledger.application.use_cases.access.revoke_access_by_delegate import (
    RevokeAccessByDelegateUseCase,
)
from accessledger.application.use_cases.admin.set_paused import SetPausedUseCase
from accessledger.application.use_cases.audit.list_audit_events import ListAuditEventsUseCase
from accessledger.application.use_cases.delegate.add_delegate import AddDelegateUseCase
from accessledger.application.use_cases.delegate.check_delegate import CheckDelegateUseCase
from accessledger.domain.entities import AuditEvent, Permission
from accessledger.domain.exceptions import InvalidInput
from accessledger.domain.value_objects import ZERO_ADDRESS, RecordHash
from accessledger.infrastructure.control.administrative_gate import LedgerAdministrativeGate

OWNER = "0x" + "a" * 40
DELEGATE = "0x" + "d" * 40
VIEWER = "0x" + "b" * 40
OTHER_OWNER = "0x" + "c" * 40
STRANGER = "0x" + "e" * 40
ADMIN = "0x" + "f" * 40

RECORD = RecordHash(b"\x01" * 32)
OTHER_RECORD = RecordHash(b"\x02" * 32)


# --- Fake repositories ---


class FakePermissionRepository:
    """In-memory permission store."""

    def __init__(self) -> None:
        self._store: dict[tuple[bytes, str], Permission] = {}

    async def get(self, record_hash: RecordHash, viewer: str) -> Permission:
        return self._store.get((record_hash.value, viewer), Permission.revoked())

    async def set(self, record_hash: RecordHash, viewer: str, permission: Permission) -> None:
        self._store[(record_hash.value, viewer)] = permission


class FakeDelegateRepository:
    """In-memory delegate registry."""

    def __init__(self) -> None:
        self._pairs: set[tuple[str, str]] = set()

    async def is_delegate(self, owner: str, delegate: str) -> bool:
        return (owner, delegate) in self._pairs

    async def add(self, owner: str, delegate: str) -> None:
        self._pairs.add((owner, delegate))


class FakeAuditEventRepository:
    """In-memory append-only audit log."""

    def __init__(self) -> None:
        self.events: list[AuditEvent] = []

    async def append(self, event: AuditEvent) -> AuditEvent:
        stored = replace(event, sequence=len(self.events) + 1)
        self.events.append(stored)
        return stored

    async def list(self, *, after: int | None = None, limit: int = 50) -> list[AuditEvent]:
        after = after or 0
        return [e for e in self.events if e.sequence > after][:limit]


class FakeControlRepository:
    """In-memory pause flag."""

    def __init__(self) -> None:
        self.paused = False

    async def is_paused(self) -> bool:
        return self.paused

    async def set_paused(self, paused: bool) -> None:
        self.paused = paused


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.permissions = FakePermissionRepository()
        self.delegates = FakeDelegateRepository()
        self.audit_events = FakeAuditEventRepository()
        self.control = FakeControlRepository()
        self.serialize_calls = 0
        self.commits = 0
        self.rollbacks = 0

    async def serialize(self) -> None:
        self.serialize_calls += 1

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1

    def snapshot(self) -> tuple:
        return (
            dict(self.permissions._store),
            set(self.delegates._pairs),
            list(self.audit_events.events),
            self.control.paused,
        )

    def restore(self, snapshot: tuple) -> None:
        store, pairs, events, paused = snapshot
        self.permissions._store = store
        self.delegates._pairs = pairs
        self.audit_events.events[:] = events
        self.control.paused = paused


def shared_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same UoW on every call, so state persists across operations.

    Like the Postgres factory it commits on normal exit; on an exception every
    write made inside the block is discarded before re-raising.
    """

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        snapshot = uow.snapshot()
        try:
            yield uow
        except BaseException:
            uow.restore(snapshot)
            await uow.rollback()
            raise
        await uow.commit()

    return _factory


# --- Fake collaborators ---


class FakeUserRegistry:
    """User registry with an explicit set of registered addresses."""

    def __init__(self, users: set[str] | None = None) -> None:
        self.users = set(users or ())

    async def is_user(self, address: str) -> bool:
        return address in self.users


class FakeRecordRegistry:
    """Record registry mapping record hash bytes to owner address."""

    def __init__(self) -> None:
        self.owners: dict[bytes, str] = {}
        self.calls = 0

    async def record_owner_of(self, record_hash: RecordHash) -> str:
        self.calls += 1
        return self.owners.get(record_hash.value, ZERO_ADDRESS)


class FakePolicyEvaluator:
    """Policy returning a fixed answer (or raising), recording its invocations."""

    def __init__(self, identity: str, answer: bool = True, error: Exception | None = None) -> None:
        self._identity = identity
        self._answer = answer
        self._error = error
        self.calls: list[tuple[RecordHash, str, str]] = []

    @property
    def identity(self) -> str:
        return self._identity

    async def check_policy(self, record_hash: RecordHash, viewer: str, key_reference: str) -> bool:
        self.calls.append((record_hash, viewer, key_reference))
        if self._error is not None:
            raise self._error
        return self._answer


class FakePolicyResolver:
    """Resolves identities registered with add(); unknown ones are invalid input."""

    def __init__(self) -> None:
        self.evaluators: dict[str, FakePolicyEvaluator] = {}

    def add(self, evaluator: FakePolicyEvaluator) -> FakePolicyEvaluator:
        self.evaluators[evaluator.identity] = evaluator
        return evaluator

    def resolve(self, identity: str) -> FakePolicyEvaluator:
        try:
            return self.evaluators[identity]
        except KeyError:
            raise InvalidInput(f"Unknown policy {identity}") from None


# --- Wired ledger ---


@dataclass
class Ledger:
    """All use cases wired over one in-memory UoW and fake collaborators."""

    uow: FakeUnitOfWork
    users: FakeUserRegistry
    records: FakeRecordRegistry
    policies: FakePolicyResolver
    guard: AuthorizationGuard
    gate: LedgerAdministrativeGate
    check_access: CheckAccessUseCase
    get_permission: GetPermissionUseCase
    grant_access: GrantAccessUseCase
    grant_access_by_delegate: GrantAccessByDelegateUseCase
    grant_policy_based_access: GrantPolicyBasedAccessUseCase
    revoke_access: RevokeAccessUseCase
    revoke_access_by_delegate: RevokeAccessByDelegateUseCase
    add_delegate: AddDelegateUseCase
    check_delegate: CheckDelegateUseCase
    list_audit_events: ListAuditEventsUseCase
    set_paused: SetPausedUseCase

    @property
    def events(self) -> list[AuditEvent]:
        return self.uow.audit_events.events


def build_ledger() -> Ledger:
    """Ledger where OWNER owns RECORD, OTHER_OWNER owns OTHER_RECORD."""
    uow = FakeUnitOfWork()
    factory = shared_uow_factory(uow)
    users = FakeUserRegistry({OWNER, OTHER_OWNER, DELEGATE, VIEWER, STRANGER})
    records = FakeRecordRegistry()
    records.owners[RECORD.value] = OWNER
    records.owners[OTHER_RECORD.value] = OTHER_OWNER
    policies = FakePolicyResolver()

    gate = LedgerAdministrativeGate(factory)
    guard = AuthorizationGuard(factory, users, records, gate)
    audit = AuditEmitter()
    state_machine = AccessStateMachine(audit)
    gateway = PolicyGateway(factory, audit)

    return Ledger(
        uow=uow,
        users=users,
        records=records,
        policies=policies,
        guard=guard,
        gate=gate,
        check_access=CheckAccessUseCase(factory),
        get_permission=GetPermissionUseCase(factory),
        grant_access=GrantAccessUseCase(factory, guard, state_machine),
        grant_access_by_delegate=GrantAccessByDelegateUseCase(factory, guard, state_machine),
        grant_policy_based_access=GrantPolicyBasedAccessUseCase(
            factory, guard, state_machine, gateway, policies
        ),
        revoke_access=RevokeAccessUseCase(factory, guard, state_machine),
        revoke_access_by_delegate=RevokeAccessByDelegateUseCase(factory, guard, state_machine),
        add_delegate=AddDelegateUseCase(factory, guard, audit),
        check_delegate=CheckDelegateUseCase(factory),
        list_audit_events=ListAuditEventsUseCase(factory),
        set_paused=SetPausedUseCase(factory, [ADMIN]),
    )


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow):
    """Factory returning async context manager yielding fake_uow."""
    return shared_uow_factory(fake_uow)


@pytest.fixture
def ledger() -> Ledger:
    """Fully wired in-memory ledger."""
    return build_ledger()
