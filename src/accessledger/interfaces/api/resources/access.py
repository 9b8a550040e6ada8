"""Record access API resources."""

import falcon
import falcon.asgi

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
from accessledger.domain.exceptions import AccessLedgerError
from accessledger.domain.value_objects import RecordHash, normalize_address
from accessledger.interfaces.api.resources.errors import require_user, respond_error


class AccessGrantsResource:
    """POST /v1/records/{record_hash}/access - grant viewer access.

    Body: {"viewer", "key_reference"} plus either "owner" (grant as that
    owner's delegate) or "policies" (ordered policy identities to consult).
    """

    def __init__(
        self,
        grant_access: GrantAccessUseCase,
        grant_by_delegate: GrantAccessByDelegateUseCase,
        grant_policy_based: GrantPolicyBasedAccessUseCase,
    ) -> None:
        self._grant = grant_access
        self._grant_by_delegate = grant_by_delegate
        self._grant_policy_based = grant_policy_based

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        record_hash: str,
    ) -> None:
        """Grant access; 201 on success."""
        user = require_user(req, resp)
        if not user:
            return

        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Body must be a JSON object"}
            return
        try:
            viewer = body["viewer"]
            key_reference = body["key_reference"]
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        owner = body.get("owner")
        policies = body.get("policies")
        if not all(isinstance(v, str) for v in (viewer, key_reference, owner or "")):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "viewer, key_reference and owner must be strings"}
            return
        if owner is not None and policies is not None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "owner and policies cannot be combined"}
            return
        if policies is not None and (
            not isinstance(policies, list) or not all(isinstance(p, str) for p in policies)
        ):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "policies must be a list of strings"}
            return

        try:
            rh = RecordHash.from_hex(record_hash)
            if owner is not None:
                await self._grant_by_delegate.execute(
                    user.user_id, rh, viewer, owner, key_reference
                )
            elif policies is not None:
                await self._grant_policy_based.execute(
                    user.user_id, rh, viewer, key_reference, policies
                )
            else:
                await self._grant.execute(user.user_id, rh, viewer, key_reference)
        except AccessLedgerError as e:
            respond_error(resp, e)
            return

        resp.media = {
            "record_hash": rh.hex(),
            "viewer": normalize_address(viewer),
            "can_access": True,
        }
        resp.status = falcon.HTTP_201


class ViewerAccessResource:
    """GET/DELETE /v1/records/{record_hash}/access/{viewer}."""

    def __init__(
        self,
        check_access: CheckAccessUseCase,
        get_permission: GetPermissionUseCase,
        revoke_access: RevokeAccessUseCase,
        revoke_by_delegate: RevokeAccessByDelegateUseCase,
    ) -> None:
        self._check = check_access
        self._get_permission = get_permission
        self._revoke = revoke_access
        self._revoke_by_delegate = revoke_by_delegate

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        record_hash: str,
        viewer: str,
    ) -> None:
        """Current permission for viewer; never-granted pairs read as no access."""
        if not require_user(req, resp):
            return
        try:
            rh = RecordHash.from_hex(record_hash)
        except AccessLedgerError as e:
            respond_error(resp, e)
            return

        if req.get_param_as_bool("key_reference", default=True):
            permission = await self._get_permission.execute(rh, viewer)
            resp.media = {
                "record_hash": rh.hex(),
                "viewer": normalize_address(viewer),
                "can_access": permission.can_access,
                "key_reference": permission.key_reference,
            }
        else:
            resp.media = {
                "record_hash": rh.hex(),
                "viewer": normalize_address(viewer),
                "can_access": await self._check.execute(rh, viewer),
            }
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        record_hash: str,
        viewer: str,
    ) -> None:
        """Revoke access; ?owner= revokes as that owner's delegate.

        Key material the viewer already fetched is not recalled.
        """
        user = require_user(req, resp)
        if not user:
            return

        owner = req.get_param("owner")
        try:
            rh = RecordHash.from_hex(record_hash)
            if owner is not None:
                await self._revoke_by_delegate.execute(user.user_id, rh, viewer, owner)
            else:
                await self._revoke.execute(user.user_id, rh, viewer)
        except AccessLedgerError as e:
            respond_error(resp, e)
            return
        resp.status = falcon.HTTP_204
