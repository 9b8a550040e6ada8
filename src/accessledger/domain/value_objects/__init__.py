"""Domain value objects."""

from accessledger.domain.value_objects.audit_event_kind import AuditEventKind
from accessledger.domain.value_objects.identity import (
    ZERO_ADDRESS,
    is_zero_address,
    normalize_address,
)
from accessledger.domain.value_objects.record_hash import RecordHash

__all__ = [
    "AuditEventKind",
    "RecordHash",
    "ZERO_ADDRESS",
    "is_zero_address",
    "normalize_address",
]
