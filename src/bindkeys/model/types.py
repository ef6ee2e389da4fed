"""
Type references used as the input of key canonicalization.

These replace live reflection objects with plain immutable values that an
upstream stage builds once and hands over by value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TypeKind(Enum):
    """Kinds of type references."""

    PRIMITIVE = "primitive"
    DECLARED = "declared"
    ARRAY = "array"


@dataclass(frozen=True)
class PrimitiveType:
    """A primitive type such as ``int`` or ``boolean``."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Primitive type name must not be empty")

    @property
    def kind(self) -> TypeKind:
        return TypeKind.PRIMITIVE

    def erasure(self) -> PrimitiveType:
        return self

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class DeclaredType:
    """
    A declared (class-like) type, optionally parameterized.

    ``names`` holds the chain of simple names from the outermost enclosing
    class down to this one, so ``pkg.Outer.Inner`` is
    ``DeclaredType("pkg", ("Outer", "Inner"))``. A declared type without
    arguments is its own raw form.
    """

    package: str
    names: tuple[str, ...]
    arguments: tuple[TypeRef, ...] = ()

    def __post_init__(self) -> None:
        if not self.names:
            raise ValueError("Declared type needs at least one simple name")
        if any(not name for name in self.names):
            raise ValueError(f"Empty simple name in declared type {self.names!r}")

    @classmethod
    def of(cls, canonical_name: str, *arguments: TypeRef, delimiter: str = "$") -> DeclaredType:
        """
        Build a declared type from a flat canonical name.

        The last dotted segment is split on ``delimiter`` into nested names:
        ``DeclaredType.of("java.util.Map$Entry")`` is ``Entry`` nested in ``Map``.
        """
        package, _, simple = canonical_name.rpartition(".")
        return cls(package, tuple(simple.split(delimiter)), tuple(arguments))

    @property
    def kind(self) -> TypeKind:
        return TypeKind.DECLARED

    @property
    def simple_name(self) -> str:
        return self.names[-1]

    @property
    def is_raw(self) -> bool:
        return not self.arguments

    def erasure(self) -> DeclaredType:
        if self.is_raw:
            return self
        return DeclaredType(self.package, self.names)

    def parameterized(self, *arguments: TypeRef) -> DeclaredType:
        """Return this type with the given generic arguments."""
        return DeclaredType(self.package, self.names, tuple(arguments))

    def __str__(self) -> str:
        prefix = f"{self.package}." if self.package else ""
        args = f"<{', '.join(str(arg) for arg in self.arguments)}>" if self.arguments else ""
        return f"{prefix}{'.'.join(self.names)}{args}"


@dataclass(frozen=True)
class ArrayType:
    """An array of some component type."""

    component: TypeRef

    @property
    def kind(self) -> TypeKind:
        return TypeKind.ARRAY

    def erasure(self) -> ArrayType:
        return ArrayType(self.component.erasure())

    def __str__(self) -> str:
        return f"{self.component}[]"


TypeRef = PrimitiveType | DeclaredType | ArrayType
