"""Unit tests for the Permission entity."""

import pytest

from accessledger.domain.entities import Permission


def test_default_permission_is_revoked() -> None:
    """Zero value has no access and an empty key reference."""
    p = Permission()
    assert p.can_access is False
    assert p.key_reference == ""
    assert p == Permission.revoked()


def test_granted_carries_key_reference() -> None:
    """Granted permission keeps the key reference."""
    p = Permission.granted("ipfs://key1")
    assert p.can_access is True
    assert p.key_reference == "ipfs://key1"


def test_access_without_key_reference_rejected() -> None:
    """can_access=True requires a key reference."""
    with pytest.raises(ValueError):
        Permission(can_access=True, key_reference="")


def test_key_reference_without_access_rejected() -> None:
    """can_access=False forbids a key reference."""
    with pytest.raises(ValueError):
        Permission(can_access=False, key_reference="ipfs://stale")
