"""List audit events use case."""

from accessledger.application.ports import UnitOfWorkFactory
from accessledger.domain.entities import AuditEvent


class ListAuditEventsUseCase:
    """Page through the audit log in append order."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self, after: int | None = None, limit: int = 50
    ) -> tuple[list[AuditEvent], int | None]:
        """Return events with sequence > after, and the cursor for the next page."""
        limit = min(max(limit, 1), 500)
        async with self._uow_factory() as uow:
            events = await uow.audit_events.list(after=after, limit=limit + 1)
        has_more = len(events) > limit
        events = events[:limit]
        next_cursor = events[-1].sequence if has_more and events else None
        return events, next_cursor
