"""Keycloak OIDC provider for JWT validation."""

import logging
from dataclasses import dataclass

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class OIDCCaller:
    """Authenticated caller; address is the ledger identity it acts as."""

    address: str
    subject: str
    username: str | None


class KeycloakProvider:
    """Keycloak OIDC - introspects tokens and maps them to ledger addresses.

    The address comes from address_claim when present (e.g. a wallet
    attribute mapped into the token), else from the token subject.
    """

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
        address_claim: str = "address",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )
        self._address_claim = address_claim

    def decode_token(self, token: str) -> OIDCCaller | None:
        """Introspect token; None when inactive or introspection fails."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError:
            logger.warning("Token introspection failed", exc_info=True)
            return None
        if not token_info.get("active"):
            return None
        subject = token_info.get("sub", "")
        return OIDCCaller(
            address=token_info.get(self._address_claim) or subject,
            subject=subject,
            username=token_info.get("preferred_username"),
        )
