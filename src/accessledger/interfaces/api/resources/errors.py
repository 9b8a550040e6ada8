"""Domain error to HTTP response mapping shared by ledger resources."""

import falcon
import falcon.asgi

from accessledger.domain.exceptions import (
    AccessLedgerError,
    InvalidInput,
    InvalidStateTransition,
    PolicyRejected,
    SystemPaused,
    Unauthorized,
)

_STATUS = {
    Unauthorized: falcon.HTTP_403,
    InvalidInput: falcon.HTTP_400,
    InvalidStateTransition: falcon.HTTP_409,
    PolicyRejected: falcon.HTTP_403,
    SystemPaused: falcon.HTTP_503,
}


def respond_error(resp: falcon.asgi.Response, ex: AccessLedgerError) -> None:
    """Set status and {"error": ...} body for a rejected ledger operation."""
    resp.status = _STATUS.get(type(ex), falcon.HTTP_400)
    resp.media = {"error": str(ex), "kind": type(ex).__name__}
    if isinstance(ex, PolicyRejected):
        resp.media["policy"] = ex.evaluator


def require_user(req: falcon.asgi.Request, resp: falcon.asgi.Response):
    """Return the authenticated caller, or answer 401 and return None."""
    user = getattr(req.context, "user", None)
    if not user:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
    return user
