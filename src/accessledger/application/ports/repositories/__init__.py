"""Repository ports."""

from accessledger.application.ports.repositories.audit_event_repository import (
    AuditEventRepository,
)
from accessledger.application.ports.repositories.control_repository import (
    ControlRepository,
)
from accessledger.application.ports.repositories.delegate_repository import (
    DelegateRepository,
)
from accessledger.application.ports.repositories.permission_repository import (
    PermissionRepository,
)

__all__ = [
    "AuditEventRepository",
    "ControlRepository",
    "DelegateRepository",
    "PermissionRepository",
]
