"""Application ports - interfaces for external adapters."""

from accessledger.application.ports.administrative_gate import AdministrativeGate
from accessledger.application.ports.policy_evaluator import (
    PolicyEvaluator,
    PolicyEvaluatorResolver,
)
from accessledger.application.ports.record_registry import RecordRegistry
from accessledger.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory
from accessledger.application.ports.user_registry import UserRegistry

__all__ = [
    "AdministrativeGate",
    "PolicyEvaluator",
    "PolicyEvaluatorResolver",
    "RecordRegistry",
    "UnitOfWork",
    "UnitOfWorkFactory",
    "UserRegistry",
]
