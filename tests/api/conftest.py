"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from accessledger.interfaces.api.app import create_app
from accessledger.interfaces.api.resources.access import (
    AccessGrantsResource,
    ViewerAccessResource,
)
from accessledger.interfaces.api.resources.admin import PauseResource
from accessledger.interfaces.api.resources.audit_events import AuditEventsResource
from accessledger.interfaces.api.resources.delegates import DelegateResource, DelegatesResource
from accessledger.interfaces.api.resources.health import HealthResource
from tests.conftest import build_ledger


class _TestUser:
    def __init__(self, user_id: str) -> None:
        self.user_id = user_id


class HeaderUserMiddleware:
    """Middleware that takes the caller address from X-Test-User, for testing."""

    async def process_request(self, req, resp):
        user_id = req.get_header("X-Test-User")
        req.context.user = _TestUser(user_id) if user_id else None


@pytest.fixture
def ledger():
    """Shared in-memory ledger behind the API."""
    return build_ledger()


@pytest.fixture
def app(ledger):
    """Falcon ASGI app with ledger resources for testing."""
    return create_app(
        access_grants_resource=AccessGrantsResource(
            ledger.grant_access,
            ledger.grant_access_by_delegate,
            ledger.grant_policy_based_access,
        ),
        viewer_access_resource=ViewerAccessResource(
            ledger.check_access,
            ledger.get_permission,
            ledger.revoke_access,
            ledger.revoke_access_by_delegate,
        ),
        delegates_resource=DelegatesResource(ledger.add_delegate),
        delegate_resource=DelegateResource(ledger.check_delegate),
        audit_events_resource=AuditEventsResource(ledger.list_audit_events),
        pause_resource=PauseResource(ledger.set_paused, ledger.gate),
        health_resource=HealthResource(),
        middleware=[HeaderUserMiddleware()],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
