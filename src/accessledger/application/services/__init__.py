"""Application services shared by use cases."""

from accessledger.application.services.access_state_machine import AccessStateMachine
from accessledger.application.services.audit_emitter import AuditEmitter
from accessledger.application.services.authorization_guard import AuthorizationGuard
from accessledger.application.services.policy_gateway import PolicyGateway

__all__ = [
    "AccessStateMachine",
    "AuditEmitter",
    "AuthorizationGuard",
    "PolicyGateway",
]
