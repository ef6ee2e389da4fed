"""
Key format configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AttributeOrder(Enum):
    """Order in which qualifier attributes are written into a key."""

    SORTED = "sorted"
    DECLARED = "declared"


@dataclass(frozen=True)
class KeyFormat:
    """
    Settings shared by the canonicalizer and the expression emitter.

    Both paths must be built from the same KeyFormat, otherwise their keys
    will not match.
    """

    nesting_delimiter: str = "$"
    set_type_name: str = "Set"
    members_prefix: str = "members/"
    attribute_order: AttributeOrder = AttributeOrder.SORTED

    def __post_init__(self) -> None:
        if not self.nesting_delimiter:
            raise ValueError("Nesting delimiter must not be empty")
        if self.nesting_delimiter == ".":
            raise ValueError("Nesting delimiter '.' would collide with package separators")
        if not self.set_type_name:
            raise ValueError("Set type name must not be empty")
        if not self.members_prefix:
            raise ValueError("Members prefix must not be empty")

    @classmethod
    def legacy(cls) -> KeyFormat:
        """Format producing keys compatible with existing declaration-ordered indexes."""
        return cls(set_type_name="java.util.Set", attribute_order=AttributeOrder.DECLARED)
