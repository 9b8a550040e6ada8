"""User registry port - who is a registered user."""

from typing import Protocol


class UserRegistry(Protocol):
    """Port for the external user registry."""

    async def is_user(self, address: str) -> bool: ...
