"""Party identities (addresses)."""

ZERO_ADDRESS = "0x" + "0" * 40


def normalize_address(address: str | None) -> str:
    """Addresses compare case-insensitively; surrounding whitespace is dropped."""
    return (address or "").strip().lower()


def is_zero_address(address: str | None) -> bool:
    """Empty string and the all-zero address both denote the zero identity."""
    normalized = normalize_address(address)
    return normalized in ("", ZERO_ADDRESS)
