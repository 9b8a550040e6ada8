"""Delegate API resources."""

import falcon
import falcon.asgi

from accessledger.application.use_cases.delegate.add_delegate import AddDelegateUseCase
from accessledger.application.use_cases.delegate.check_delegate import CheckDelegateUseCase
from accessledger.domain.exceptions import AccessLedgerError
from accessledger.domain.value_objects import normalize_address
from accessledger.interfaces.api.resources.errors import require_user, respond_error


class DelegatesResource:
    """POST /v1/delegates - caller authorizes a delegate."""

    def __init__(self, add_delegate: AddDelegateUseCase) -> None:
        self._add = add_delegate

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = require_user(req, resp)
        if not user:
            return

        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Body must be a JSON object"}
            return
        try:
            delegate = body["delegate"]
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        if not isinstance(delegate, str):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "delegate must be a string"}
            return

        try:
            await self._add.execute(user.user_id, delegate)
        except AccessLedgerError as e:
            respond_error(resp, e)
            return
        resp.media = {
            "owner": normalize_address(user.user_id),
            "delegate": normalize_address(delegate),
        }
        resp.status = falcon.HTTP_201


class DelegateResource:
    """GET /v1/delegates/{owner}/{delegate} - is delegate authorized for owner."""

    def __init__(self, check_delegate: CheckDelegateUseCase) -> None:
        self._check = check_delegate

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        owner: str,
        delegate: str,
    ) -> None:
        if not require_user(req, resp):
            return
        resp.media = {
            "owner": normalize_address(owner),
            "delegate": normalize_address(delegate),
            "authorized": await self._check.execute(owner, delegate),
        }
        resp.status = falcon.HTTP_200
