"""HTTP policy evaluators - policies addressed by URL."""

from collections.abc import Sequence

import httpx

from accessledger.domain.exceptions import InvalidInput
from accessledger.domain.value_objects import RecordHash


class HttpPolicyEvaluator:
    """POSTs the (record, viewer, key reference) triple to a policy endpoint.

    The endpoint answers {"approved": true|false}. Transport errors, non-2xx
    statuses and malformed bodies raise; the policy gateway counts that as a
    rejection.
    """

    def __init__(self, url: str, client: httpx.AsyncClient) -> None:
        self._url = url
        self._client = client

    @property
    def identity(self) -> str:
        return self._url

    async def check_policy(
        self, record_hash: RecordHash, viewer: str, key_reference: str
    ) -> bool:
        response = await self._client.post(
            self._url,
            json={
                "record_hash": record_hash.hex(),
                "viewer": viewer,
                "key_reference": key_reference,
            },
        )
        response.raise_for_status()
        body = response.json()
        approved = body.get("approved") if isinstance(body, dict) else None
        if not isinstance(approved, bool):
            raise ValueError(f"Policy {self._url} returned no boolean 'approved'")
        return approved


class HttpPolicyEvaluatorResolver:
    """Resolves policy URLs, restricted to configured prefixes."""

    def __init__(self, client: httpx.AsyncClient, allowed_prefixes: Sequence[str]) -> None:
        self._client = client
        self._allowed = [p for p in allowed_prefixes if p]

    def resolve(self, identity: str) -> HttpPolicyEvaluator:
        if not any(identity.startswith(prefix) for prefix in self._allowed):
            raise InvalidInput(f"Policy {identity!r} is not an allowed policy endpoint")
        return HttpPolicyEvaluator(identity, self._client)
