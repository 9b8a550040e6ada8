"""Policy gateway - ordered, fail-closed evaluation of external policies."""

import logging
from collections.abc import Sequence

from accessledger.application.ports import PolicyEvaluator, UnitOfWorkFactory
from accessledger.application.services.audit_emitter import AuditEmitter
from accessledger.domain.exceptions import PolicyRejected
from accessledger.domain.value_objects import RecordHash

logger = logging.getLogger(__name__)


class PolicyGateway:
    """Invokes evaluators in order and stops at the first rejection.

    Each evaluation is recorded in its own unit of work and committed at
    once, so the PolicyChecked trail survives a rejected grant. An evaluator
    that raises counts as a rejection; only a literal True approves.
    """

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory, audit_emitter: AuditEmitter) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_emitter

    async def evaluate(
        self,
        record_hash: RecordHash,
        viewer: str,
        key_reference: str,
        policies: Sequence[PolicyEvaluator],
        sender: str,
    ) -> None:
        """Raise PolicyRejected on the first evaluator that does not approve."""
        for evaluator in policies:
            approved = await self._check(evaluator, record_hash, viewer, key_reference)
            async with self._uow_factory() as uow:
                await self._audit.policy_checked(
                    uow,
                    record_hash,
                    viewer,
                    key_reference,
                    evaluator.identity,
                    approved,
                    sender,
                )
            if not approved:
                logger.info(
                    "Policy %s rejected access of %s to %s", evaluator.identity, viewer, record_hash
                )
                raise PolicyRejected(evaluator.identity)

    async def _check(
        self,
        evaluator: PolicyEvaluator,
        record_hash: RecordHash,
        viewer: str,
        key_reference: str,
    ) -> bool:
        try:
            result = await evaluator.check_policy(record_hash, viewer, key_reference)
        except Exception:
            logger.warning("Policy %s failed; treating as rejection", evaluator.identity, exc_info=True)
            return False
        return result is True
