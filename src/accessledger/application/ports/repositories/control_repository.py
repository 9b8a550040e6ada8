"""Ledger control repository port - persisted pause flag."""

from typing import Protocol


class ControlRepository(Protocol):
    """Port for ledger-wide administrative state."""

    async def is_paused(self) -> bool: ...

    async def set_paused(self, paused: bool) -> None: ...
