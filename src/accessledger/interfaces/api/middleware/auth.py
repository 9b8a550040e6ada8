"""Auth middleware - resolves the caller's ledger address from a bearer token."""

from dataclasses import dataclass

import falcon.asgi


@dataclass
class RequestUser:
    """Caller from request context; user_id is the ledger address."""

    user_id: str
    username: str | None = None


class AuthMiddleware:
    """Middleware that validates JWT and sets req.context.user.

    Missing or invalid tokens leave req.context.user as None; resources
    answer 401 for any ledger operation in that case.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract caller from Authorization header."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer ") or not self._keycloak:
            return
        caller = self._keycloak.decode_token(auth[7:])
        if caller:
            req.context.user = RequestUser(user_id=caller.address, username=caller.username)
