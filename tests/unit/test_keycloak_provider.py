"""Unit tests for KeycloakProvider token mapping."""

from unittest.mock import patch

from keycloak.exceptions import KeycloakError

from accessledger.infrastructure.auth.keycloak_provider import KeycloakProvider


def _provider(introspect_result=None, error=None) -> KeycloakProvider:
    with patch("accessledger.infrastructure.auth.keycloak_provider.KeycloakOpenID") as cls:
        provider = KeycloakProvider("http://kc", "realm", "client", "secret")
    if error is not None:
        cls.return_value.introspect.side_effect = error
    else:
        cls.return_value.introspect.return_value = introspect_result
    return provider


def test_address_claim_preferred() -> None:
    """Address claim wins over subject."""
    caller = _provider({"active": True, "sub": "abc", "address": "0xfeed"}).decode_token("t")
    assert caller.address == "0xfeed"
    assert caller.subject == "abc"


def test_subject_fallback() -> None:
    """Without address claim the subject is the address."""
    caller = _provider({"active": True, "sub": "0xbeef", "preferred_username": "u"}).decode_token("t")
    assert caller.address == "0xbeef"
    assert caller.username == "u"


def test_inactive_token_rejected() -> None:
    """Inactive tokens yield no caller."""
    assert _provider({"active": False}).decode_token("t") is None


def test_introspection_failure_rejected() -> None:
    """Keycloak errors yield no caller."""
    assert _provider(error=KeycloakError("down")).decode_token("t") is None
