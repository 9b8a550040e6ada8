"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from accessledger.interfaces.api.resources.access import (
    AccessGrantsResource,
    ViewerAccessResource,
)
from accessledger.interfaces.api.resources.admin import PauseResource
from accessledger.interfaces.api.resources.audit_events import AuditEventsResource
from accessledger.interfaces.api.resources.delegates import DelegateResource, DelegatesResource
from accessledger.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


async def _log_exception(req, resp, ex, params) -> None:
    """Catch-all: log with traceback, answer 500. HTTPError keeps its own handler."""
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    access_grants_resource: AccessGrantsResource,
    viewer_access_resource: ViewerAccessResource,
    delegates_resource: DelegatesResource,
    delegate_resource: DelegateResource,
    audit_events_resource: AuditEventsResource,
    pause_resource: PauseResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.req_options.keep_blank_qs_values = True
    app.add_error_handler(Exception, _log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/records/{record_hash}/access", access_grants_resource)
    app.add_route("/v1/records/{record_hash}/access/{viewer}", viewer_access_resource)
    app.add_route("/v1/delegates", delegates_resource)
    app.add_route("/v1/delegates/{owner}/{delegate}", delegate_resource)
    app.add_route("/v1/audit-events", audit_events_resource)
    app.add_route("/v1/admin/pause", pause_resource)
    return app
