"""Application entry point and composition root."""

import logging

import httpx

from accessledger import __version__
from accessledger.application.services import (
    AccessStateMachine,
    AuditEmitter,
    AuthorizationGuard,
    PolicyGateway,
)
from accessledger.application.use_cases.access.check_access import CheckAccessUseCase
from accessledger.application.use_cases.access.get_permission import GetPermissionUseCase
from accessledger.application.use_cases.access.grant_access import GrantAccessUseCase
from accessledger.application.use_cases.access.grant_access_by_delegate import (
    GrantAccessByDelegateUseCase,
)
from accessledger.application.use_cases.access.grant_policy_based_access import (
    GrantPolicyBasedAccessUseCase,
)
from accessledger.application.use_cases.access.revoke_access import RevokeAccessUseCase
from accessledger.application.use_cases.access.revoke_access_by_delegate import (
    RevokeAccessByDelegateUseCase,
)
from accessledger.application.use_cases.admin.set_paused import SetPausedUseCase
from accessledger.application.use_cases.audit.list_audit_events import ListAuditEventsUseCase
from accessledger.application.use_cases.delegate.add_delegate import AddDelegateUseCase
from accessledger.application.use_cases.delegate.check_delegate import CheckDelegateUseCase
from accessledger.config import Settings, get_settings, split_csv
from accessledger.infrastructure.auth.keycloak_provider import KeycloakProvider
from accessledger.infrastructure.control.administrative_gate import LedgerAdministrativeGate
from accessledger.infrastructure.persistence.postgres.connection import create_pool, ping
from accessledger.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from accessledger.infrastructure.policy.http_policy_evaluator import (
    HttpPolicyEvaluatorResolver,
)
from accessledger.infrastructure.registry.postgres_record_registry import (
    PostgresRecordRegistry,
)
from accessledger.infrastructure.registry.postgres_user_registry import (
    PostgresUserRegistry,
)
from accessledger.interfaces.api.app import create_app
from accessledger.interfaces.api.middleware.auth import AuthMiddleware
from accessledger.interfaces.api.middleware.cors import CORSMiddleware
from accessledger.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from accessledger.interfaces.api.resources.access import (
    AccessGrantsResource,
    ViewerAccessResource,
)
from accessledger.interfaces.api.resources.admin import PauseResource
from accessledger.interfaces.api.resources.audit_events import AuditEventsResource
from accessledger.interfaces.api.resources.delegates import DelegateResource, DelegatesResource
from accessledger.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Root logging from settings; DEBUG when debug mode is on."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """CLI entry point."""
    print(f"AccessLedger v{__version__}")


def create_accessledger_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)
    http_client = httpx.AsyncClient(timeout=settings.policy_timeout_seconds)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
            address_claim=settings.keycloak_address_claim,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("KEYCLOAK_CLIENT_SECRET not set; all ledger requests will be rejected")

    gate = LedgerAdministrativeGate(uow_factory)
    guard = AuthorizationGuard(
        unit_of_work_factory=uow_factory,
        user_registry=PostgresUserRegistry(pool),
        record_registry=PostgresRecordRegistry(pool),
        administrative_gate=gate,
    )
    audit_emitter = AuditEmitter()
    state_machine = AccessStateMachine(audit_emitter)
    policy_gateway = PolicyGateway(uow_factory, audit_emitter)
    policy_resolver = HttpPolicyEvaluatorResolver(
        http_client, split_csv(settings.policy_allowed_prefixes)
    )

    grant_access = GrantAccessUseCase(uow_factory, guard, state_machine)
    grant_by_delegate = GrantAccessByDelegateUseCase(uow_factory, guard, state_machine)
    grant_policy_based = GrantPolicyBasedAccessUseCase(
        uow_factory, guard, state_machine, policy_gateway, policy_resolver
    )
    revoke_access = RevokeAccessUseCase(uow_factory, guard, state_machine)
    revoke_by_delegate = RevokeAccessByDelegateUseCase(uow_factory, guard, state_machine)
    check_access = CheckAccessUseCase(uow_factory)
    get_permission = GetPermissionUseCase(uow_factory)
    add_delegate = AddDelegateUseCase(uow_factory, guard, audit_emitter)
    check_delegate = CheckDelegateUseCase(uow_factory)
    list_audit_events = ListAuditEventsUseCase(uow_factory)
    set_paused = SetPausedUseCase(uow_factory, split_csv(settings.admin_subjects))

    async def readiness_probe() -> bool:
        return await ping(pool)

    return create_app(
        access_grants_resource=AccessGrantsResource(
            grant_access, grant_by_delegate, grant_policy_based
        ),
        viewer_access_resource=ViewerAccessResource(
            check_access, get_permission, revoke_access, revoke_by_delegate
        ),
        delegates_resource=DelegatesResource(add_delegate),
        delegate_resource=DelegateResource(check_delegate),
        audit_events_resource=AuditEventsResource(list_audit_events),
        pause_resource=PauseResource(set_paused, gate),
        health_resource=HealthResource(readiness_probe),
        middleware=[
            CORSMiddleware(split_csv(settings.cors_origins)),
            PoolLifespanMiddleware(pool, http_client),
            AuthMiddleware(keycloak),
        ],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_accessledger_app()
    uvicorn.run(app, host="0.0.0.0", port=8000)
