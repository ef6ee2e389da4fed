"""
Structured binding keys.

A BindingKey is the tagged form of a key. Its string rendering is produced by
the canonicalizer and is the form the binding index compares.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .annotations import Qualifier
from .types import TypeRef


class KeyKind(Enum):
    """Shapes of binding keys."""

    PROVIDER = "provider"
    ELEMENT = "element"
    MEMBERS = "members"


@dataclass(frozen=True)
class BindingKey:
    """A key identifying which binding satisfies a dependency site."""

    kind: KeyKind
    type_ref: TypeRef
    qualifier: Qualifier | None = None

    def __post_init__(self) -> None:
        if self.kind is KeyKind.MEMBERS:
            if self.qualifier is not None:
                raise ValueError("Members-injection keys cannot be qualified")
            object.__setattr__(self, "type_ref", self.type_ref.erasure())

    @classmethod
    def provider(cls, type_ref: TypeRef, qualifier: Qualifier | None = None) -> BindingKey:
        return cls(KeyKind.PROVIDER, type_ref, qualifier)

    @classmethod
    def element(cls, type_ref: TypeRef, qualifier: Qualifier | None = None) -> BindingKey:
        return cls(KeyKind.ELEMENT, type_ref, qualifier)

    @classmethod
    def members(cls, type_ref: TypeRef) -> BindingKey:
        return cls(KeyKind.MEMBERS, type_ref)

    def __str__(self) -> str:
        qualifier = f"{self.qualifier} " if self.qualifier is not None else ""
        return f"{qualifier}{self.kind.value} {self.type_ref}"
