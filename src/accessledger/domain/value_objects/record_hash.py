"""Record hash - content identifier of an externally stored record."""

import string
from dataclasses import dataclass

from accessledger.domain.exceptions import InvalidInput

_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class RecordHash:
    """32-byte record identifier."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != 32:
            raise InvalidInput("Record hash must be 32 bytes")

    @classmethod
    def from_hex(cls, text: str) -> "RecordHash":
        """Parse a 0x-prefixed 64 hex digit string."""
        raw = text[2:]
        if text[:2].lower() != "0x" or len(raw) != 64 or not _HEX_DIGITS.issuperset(raw):
            raise InvalidInput(f"Invalid record hash: {text!r}")
        return cls(bytes.fromhex(raw))

    @property
    def is_zero(self) -> bool:
        return not any(self.value)

    def hex(self) -> str:
        return "0x" + self.value.hex()

    def __str__(self) -> str:
        return self.hex()
