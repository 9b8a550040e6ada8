"""Grant policy-based access use case."""

from collections.abc import Sequence

from accessledger.application.ports import PolicyEvaluatorResolver, UnitOfWorkFactory
from accessledger.application.services import (
    AccessStateMachine,
    AuthorizationGuard,
    PolicyGateway,
)
from accessledger.domain.value_objects import RecordHash, normalize_address


class GrantPolicyBasedAccessUseCase:
    """Owner grants access only if every supplied policy approves."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        authorization_guard: AuthorizationGuard,
        state_machine: AccessStateMachine,
        policy_gateway: PolicyGateway,
        policy_resolver: PolicyEvaluatorResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = authorization_guard
        self._state_machine = state_machine
        self._gateway = policy_gateway
        self._resolver = policy_resolver

    async def execute(
        self,
        caller: str,
        record_hash: RecordHash,
        viewer: str,
        key_reference: str,
        policies: Sequence[str],
    ) -> bool:
        """Evaluate policies in order, then grant with caller as owner.

        The first rejecting policy aborts the grant (PolicyRejected); later
        policies are not consulted. An empty policy list behaves like a
        direct grant. Policies are evaluated before the ledger lock is taken,
        so a slow evaluator never blocks other mutations.
        """
        caller = normalize_address(caller)
        viewer = normalize_address(viewer)

        await self._guard.ensure_not_paused()
        self._state_machine.check_grant(record_hash, viewer, caller, key_reference)
        evaluators = [self._resolver.resolve(identity) for identity in policies]
        await self._guard.ensure_direct_standing(record_hash, caller)
        await self._gateway.evaluate(record_hash, viewer, key_reference, evaluators, sender=caller)

        async with self._uow_factory() as uow:
            await uow.serialize()
            await self._guard.ensure_not_paused(uow)
            await self._state_machine.grant(
                uow, record_hash, viewer, caller, key_reference, sender=caller
            )
        return True
