"""Domain entities."""

from accessledger.domain.entities.audit_event import AuditEvent
from accessledger.domain.entities.permission import Permission

__all__ = [
    "AuditEvent",
    "Permission",
]
