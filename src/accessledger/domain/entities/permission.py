"""Permission entity - viewer access to a record's key reference."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Permission:
    """Access flag and key reference for one (record, viewer) pair.

    A revoked or never-granted pair has can_access=False and an empty key
    reference; a granted pair always carries a non-empty key reference.
    """

    can_access: bool = False
    key_reference: str = ""

    def __post_init__(self) -> None:
        if self.can_access != bool(self.key_reference):
            raise ValueError("can_access must be set exactly when key_reference is non-empty")

    @classmethod
    def granted(cls, key_reference: str) -> "Permission":
        return cls(can_access=True, key_reference=key_reference)

    @classmethod
    def revoked(cls) -> "Permission":
        return cls()
