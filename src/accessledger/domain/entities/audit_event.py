"""Audit event entity - one immutable entry of the append-only audit log."""

from dataclasses import dataclass
from datetime import datetime

from accessledger.domain.value_objects import AuditEventKind, RecordHash


@dataclass(frozen=True)
class AuditEvent:
    """Who acted (sender), on whose behalf (owner), and the effect.

    sequence is assigned by the audit repository on append and orders the log.
    Fields that do not apply to a kind are None (e.g. delegate for grants).
    """

    kind: AuditEventKind
    sender: str
    created_at: datetime
    record_hash: RecordHash | None = None
    owner: str | None = None
    viewer: str | None = None
    delegate: str | None = None
    key_reference: str | None = None
    evaluator: str | None = None
    result: bool | None = None
    sequence: int | None = None
