"""Domain exceptions."""


class AccessLedgerError(Exception):
    """Base exception for AccessLedger."""

    pass


class Unauthorized(AccessLedgerError):
    """Caller failed a standing check (not a user, owner or delegate)."""

    pass


class InvalidInput(AccessLedgerError):
    """Zero or empty identifier, empty key reference, self-delegation."""

    pass


class InvalidStateTransition(AccessLedgerError):
    """Requested transition is not allowed from the current permission state."""

    pass


class PolicyRejected(AccessLedgerError):
    """A policy evaluator rejected a gated grant."""

    def __init__(self, evaluator: str) -> None:
        super().__init__(f"Policy {evaluator} rejected the grant")
        self.evaluator = evaluator


class SystemPaused(AccessLedgerError):
    """Ledger is administratively paused."""

    pass
