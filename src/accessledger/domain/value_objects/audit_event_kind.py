"""Audit event kinds."""

from enum import StrEnum


class AuditEventKind(StrEnum):
    """Kinds of entries in the audit log."""

    ACCESS_GRANTED = "AccessGranted"
    ACCESS_REVOKED = "AccessRevoked"
    DELEGATE_ADDED = "DelegateAdded"
    POLICY_CHECKED = "PolicyChecked"
