"""
Qualifier annotations and the resolver that picks a site's qualifier.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from .model import AnnotationRef, DeclaredType, DependencySite, Qualifier
from .runtime import class_path

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type[Any])

_QUALIFIER_MARKER = "__bindkeys_qualifier__"


def qualifier(cls: C) -> C:
    """
    Mark a class as a qualifier annotation kind.

    Instances of marked classes placed in ``Annotated`` metadata select
    between bindings of the same type::

        @qualifier
        @dataclass(frozen=True)
        class Region:
            name: str
            zone: int = 0
    """
    setattr(cls, _QUALIFIER_MARKER, True)
    return cls


def is_qualifier(cls: Any) -> bool:
    """Check whether ``cls`` itself (not a base class) is marked as a qualifier."""
    return isinstance(cls, type) and bool(cls.__dict__.get(_QUALIFIER_MARKER, False))


@qualifier
@dataclass(frozen=True)
class Named:
    """The standard qualifier: selects a binding by name."""

    value: str


class AmbiguousQualifierError(ValueError):
    """Raised when a dependency site carries more than one qualifier."""

    def __init__(self, site: DependencySite | None, qualifiers: list[AnnotationRef]):
        self.site = site
        self.qualifiers = qualifiers
        found = ", ".join(str(annotation) for annotation in qualifiers)
        where = f" on {site}" if site is not None else ""
        super().__init__(f"Too many qualifier annotations{where}: {found}")


def find_qualifier(
    annotations: Iterable[AnnotationRef], site: DependencySite | None = None
) -> Qualifier | None:
    """
    Return the single qualifying annotation, or None if there is none.

    Raises:
        AmbiguousQualifierError: if two or more annotations qualify
    """
    found = [annotation for annotation in annotations if annotation.qualifying]
    if len(found) > 1:
        logger.debug("Rejecting %d qualifiers on %s", len(found), site)
        raise AmbiguousQualifierError(site, found)
    return found[0].to_qualifier() if found else None


def site_qualifier(site: DependencySite) -> Qualifier | None:
    """Resolve the qualifier of a site."""
    return find_qualifier(site.annotations, site)


def named(value: str) -> AnnotationRef:
    """Annotation reference for ``Named(value)``."""
    package, names = class_path(Named)
    return AnnotationRef(DeclaredType(package, names), (("value", value),), qualifying=True)
