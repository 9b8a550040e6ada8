"""Record registry port - recorded owner of a record."""

from typing import Protocol

from accessledger.domain.value_objects import RecordHash


class RecordRegistry(Protocol):
    """Port for the external record registry.

    Returns the zero address for unknown records.
    """

    async def record_owner_of(self, record_hash: RecordHash) -> str: ...
