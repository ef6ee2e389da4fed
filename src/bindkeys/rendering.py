"""
Type rendering.

A type reference is first broken into fragments: literal text, and references
to declared classes whose names are filled in later. Rendering the fragments
with literal names gives the canonical type string; rendering them with
accessor expressions gives code that computes the same string at runtime.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .model import ArrayType, DeclaredType, PrimitiveType, TypeRef


@dataclass(frozen=True)
class Text:
    """A literal piece of a key."""

    value: str


@dataclass(frozen=True)
class ClassName:
    """A reference to a declared class whose canonical name is resolved later."""

    type_ref: DeclaredType


Fragment = Text | ClassName


def type_fragments(type_ref: TypeRef, raw: bool = False) -> list[Fragment]:
    """Break a type reference into fragments, dropping generic arguments when ``raw``."""
    fragments: list[Fragment] = []
    _append_type(type_ref, fragments, raw)
    return fragments


def _append_type(type_ref: TypeRef, fragments: list[Fragment], raw: bool) -> None:
    match type_ref:
        case PrimitiveType(name=name):
            fragments.append(Text(name))
        case ArrayType(component=component):
            _append_type(component, fragments, raw)
            fragments.append(Text("[]"))
        case DeclaredType():
            fragments.append(ClassName(type_ref.erasure()))
            if type_ref.arguments and not raw:
                fragments.append(Text("<"))
                for index, argument in enumerate(type_ref.arguments):
                    if index:
                        fragments.append(Text(", "))
                    _append_type(argument, fragments, raw)
                fragments.append(Text(">"))
        case _:
            raise TypeError(f"Not a type reference: {type_ref!r}")


def merge_text(fragments: Iterable[Fragment]) -> list[Fragment]:
    """Coalesce runs of adjacent Text fragments and drop empty ones."""
    merged: list[Fragment] = []
    for fragment in fragments:
        if isinstance(fragment, Text):
            if not fragment.value:
                continue
            if merged and isinstance(merged[-1], Text):
                merged[-1] = Text(merged[-1].value + fragment.value)
                continue
        merged.append(fragment)
    return merged


def class_name(type_ref: DeclaredType, nesting_delimiter: str = "$") -> str:
    """Canonical name of a raw declared type, inner names joined by ``nesting_delimiter``."""
    prefix = f"{type_ref.package}." if type_ref.package else ""
    return prefix + nesting_delimiter.join(type_ref.names)


def render_fragments(fragments: Iterable[Fragment], nesting_delimiter: str = "$") -> str:
    parts: list[str] = []
    for fragment in fragments:
        if isinstance(fragment, Text):
            parts.append(fragment.value)
        else:
            parts.append(class_name(fragment.type_ref, nesting_delimiter))
    return "".join(parts)


def render_type(type_ref: TypeRef, nesting_delimiter: str = "$") -> str:
    """
    Render the canonical, fully-qualified form of a type.

    ``java.util.Map<java.lang.String, pkg.Outer$Inner>`` with the default
    delimiter; arrays append ``[]``, primitives render as their name.
    """
    return render_fragments(type_fragments(type_ref), nesting_delimiter)


def render_raw_type(type_ref: TypeRef, nesting_delimiter: str = "$") -> str:
    """Render the erased form of a type, as used by members-injection keys."""
    return render_fragments(type_fragments(type_ref, raw=True), nesting_delimiter)
