"""Administrative API resource."""

import falcon
import falcon.asgi

from accessledger.application.ports import AdministrativeGate
from accessledger.application.use_cases.admin.set_paused import SetPausedUseCase
from accessledger.domain.exceptions import AccessLedgerError
from accessledger.interfaces.api.resources.errors import require_user, respond_error


class PauseResource:
    """GET/PUT /v1/admin/pause - read or toggle the ledger pause flag."""

    def __init__(self, set_paused: SetPausedUseCase, gate: AdministrativeGate) -> None:
        self._set_paused = set_paused
        self._gate = gate

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        if not require_user(req, resp):
            return
        resp.media = {"paused": await self._gate.paused()}
        resp.status = falcon.HTTP_200

    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = require_user(req, resp)
        if not user:
            return

        body = await req.get_media()
        paused = body.get("paused") if isinstance(body, dict) else None
        if not isinstance(paused, bool):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "paused must be a boolean"}
            return

        try:
            result = await self._set_paused.execute(user.user_id, paused)
        except AccessLedgerError as e:
            respond_error(resp, e)
            return
        resp.media = {"paused": result}
        resp.status = falcon.HTTP_200
