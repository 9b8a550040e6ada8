"""Policy evaluator port - external predicate consulted during gated grants."""

from typing import Protocol

from accessledger.domain.value_objects import RecordHash


class PolicyEvaluator(Protocol):
    """One externally owned policy. identity names it in audit entries."""

    @property
    def identity(self) -> str: ...

    async def check_policy(
        self, record_hash: RecordHash, viewer: str, key_reference: str
    ) -> bool: ...


class PolicyEvaluatorResolver(Protocol):
    """Turns per-call policy identities into evaluators."""

    def resolve(self, identity: str) -> PolicyEvaluator: ...
