"""
Dependency sites: the points in a program that request an instance.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .annotations import AnnotationRef
from .types import DeclaredType, TypeRef


class SiteKind(Enum):
    """Shapes of dependency sites."""

    TYPE = "type"
    METHOD = "method"
    FIELD = "field"
    PARAMETER = "parameter"


@dataclass(frozen=True)
class DependencySite:
    """
    A declared type plus the annotations attached to it.

    For a provider method the declared type is its return type; for fields and
    parameters it is the variable type. ``name`` and ``owner`` only feed
    diagnostics and never reach a key.
    """

    declared_type: TypeRef
    annotations: tuple[AnnotationRef, ...] = ()
    kind: SiteKind = SiteKind.TYPE
    name: str | None = None
    owner: DeclaredType | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "annotations", tuple(self.annotations))

    @classmethod
    def of_type(cls, declared_type: TypeRef) -> DependencySite:
        return cls(declared_type)

    @classmethod
    def method(
        cls,
        name: str,
        return_type: TypeRef,
        annotations: Iterable[AnnotationRef] = (),
        owner: DeclaredType | None = None,
    ) -> DependencySite:
        return cls(return_type, tuple(annotations), SiteKind.METHOD, name, owner)

    @classmethod
    def field(
        cls,
        name: str,
        field_type: TypeRef,
        annotations: Iterable[AnnotationRef] = (),
        owner: DeclaredType | None = None,
    ) -> DependencySite:
        return cls(field_type, tuple(annotations), SiteKind.FIELD, name, owner)

    @classmethod
    def parameter(
        cls,
        name: str,
        parameter_type: TypeRef,
        annotations: Iterable[AnnotationRef] = (),
        owner: DeclaredType | None = None,
    ) -> DependencySite:
        return cls(parameter_type, tuple(annotations), SiteKind.PARAMETER, name, owner)

    def __str__(self) -> str:
        owner = f"{self.owner}." if self.owner is not None else ""
        match self.kind:
            case SiteKind.METHOD:
                return f"{owner}{self.name}() -> {self.declared_type}"
            case SiteKind.FIELD | SiteKind.PARAMETER:
                return f"{self.kind.value} {owner}{self.name}: {self.declared_type}"
            case _:
                return str(self.declared_type)
