"""Permission repository port - the Permission Store."""

from typing import Protocol

from accessledger.domain.entities import Permission
from accessledger.domain.value_objects import RecordHash


class PermissionRepository(Protocol):
    """Port for permission persistence keyed by (record hash, viewer)."""

    async def get(self, record_hash: RecordHash, viewer: str) -> Permission: ...

    async def set(self, record_hash: RecordHash, viewer: str, permission: Permission) -> None: ...
