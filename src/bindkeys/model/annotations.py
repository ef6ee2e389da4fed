"""
Annotations attached to dependency sites and the qualifier selected from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .types import DeclaredType

Attributes = tuple[tuple[str, Any], ...]


def _freeze(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _normalize(attributes: Any) -> Attributes:
    normalized = tuple((name, _freeze(value)) for name, value in attributes)
    seen: set[str] = set()
    for name, _ in normalized:
        # name=value pairs are written back to back, so names carry the parse
        if not name:
            raise ValueError("Annotation attribute names must not be empty")
        if name in seen:
            raise ValueError(f"Duplicate annotation attribute {name!r}")
        seen.add(name)
    return normalized


@dataclass(frozen=True)
class AnnotationRef:
    """
    One annotation on a dependency site.

    ``attributes`` keeps the order in which the annotation type declares its
    elements. ``qualifying`` tells whether the annotation type is itself marked
    as a qualifier kind.
    """

    annotation_type: DeclaredType
    attributes: Attributes = ()
    qualifying: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _normalize(self.attributes))

    def to_qualifier(self) -> Qualifier:
        return Qualifier(self.annotation_type, self.attributes)

    def __str__(self) -> str:
        attrs = ", ".join(f"{name}={value!r}" for name, value in self.attributes)
        return f"@{self.annotation_type}({attrs})"


@dataclass(frozen=True)
class Qualifier:
    """The single qualifying annotation of a site: a type plus ordered attributes."""

    annotation_type: DeclaredType
    attributes: Attributes = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _normalize(self.attributes))

    @classmethod
    def of(cls, annotation_type: DeclaredType, **attributes: Any) -> Qualifier:
        """Create a qualifier; keyword order is the declared attribute order."""
        return cls(annotation_type, tuple(attributes.items()))

    def __str__(self) -> str:
        attrs = ", ".join(f"{name}={value!r}" for name, value in self.attributes)
        return f"@{self.annotation_type}({attrs})"
