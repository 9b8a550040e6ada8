"""Administrative gate port - global pause flag."""

from typing import Protocol


class AdministrativeGate(Protocol):
    """Port for the pause switch; mutating operations are disabled while paused."""

    async def paused(self) -> bool: ...
