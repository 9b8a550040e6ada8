"""Audit log API resource."""

import falcon
import falcon.asgi

from accessledger.application.use_cases.audit.list_audit_events import ListAuditEventsUseCase
from accessledger.domain.entities import AuditEvent
from accessledger.interfaces.api.resources.errors import require_user


def _event_to_dict(event: AuditEvent) -> dict:
    return {
        "sequence": event.sequence,
        "kind": event.kind.value,
        "sender": event.sender,
        "created_at": event.created_at.isoformat(),
        "record_hash": event.record_hash.hex() if event.record_hash else None,
        "owner": event.owner,
        "viewer": event.viewer,
        "delegate": event.delegate,
        "key_reference": event.key_reference,
        "evaluator": event.evaluator,
        "result": event.result,
    }


class AuditEventsResource:
    """GET /v1/audit-events?cursor=&limit= - audit log in append order."""

    def __init__(self, list_audit_events: ListAuditEventsUseCase) -> None:
        self._list = list_audit_events

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        if not require_user(req, resp):
            return
        cursor = req.get_param_as_int("cursor", min_value=0)
        limit = req.get_param_as_int("limit") or 50

        events, next_cursor = await self._list.execute(after=cursor, limit=limit)
        resp.media = {
            "items": [_event_to_dict(e) for e in events],
            "next_cursor": next_cursor,
        }
        resp.status = falcon.HTTP_200
