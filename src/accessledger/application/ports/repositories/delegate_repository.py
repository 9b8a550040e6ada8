"""Delegate repository port - the Delegate Registry."""

from typing import Protocol


class DelegateRepository(Protocol):
    """Port for (owner, delegate) authorizations. Add-only."""

    async def is_delegate(self, owner: str, delegate: str) -> bool: ...

    async def add(self, owner: str, delegate: str) -> None: ...
