"""
Building dependency sites from Python callables and classes.

This is the resolution stage in front of key generation: type hints become
TypeRefs, ``Annotated`` metadata becomes AnnotationRefs, and the result is
passed by value to the canonicalizer.
"""

from __future__ import annotations

import dataclasses
import inspect
import types
from collections.abc import Callable
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin, get_type_hints

from .model import AnnotationRef, DeclaredType, DependencySite, TypeRef
from .qualifiers import is_qualifier
from .runtime import class_path


def type_ref(hint: Any) -> TypeRef:
    """
    Convert a type hint to a TypeRef.

    Classes become raw declared types, parameterized generics such as
    ``dict[str, Foo]`` or ``typing.List[int]`` keep their arguments, and
    ``Annotated`` metadata is dropped.

    Raises:
        TypeError: for hints that do not name a class (unions, literals, ...)
    """
    if hint is None:
        hint = type(None)

    origin = get_origin(hint)
    if origin is Annotated:
        return type_ref(get_args(hint)[0])
    if origin is not None:
        if origin is Union or origin is types.UnionType or not isinstance(origin, type):
            raise TypeError(f"Unsupported type hint: {hint!r}")
        return DeclaredType(*class_path(origin), tuple(type_ref(arg) for arg in get_args(hint)))
    if isinstance(hint, type):
        return DeclaredType(*class_path(hint))

    raise TypeError(f"Unsupported type hint: {hint!r}")


def annotation_ref(annotation: Any) -> AnnotationRef:
    """
    Convert an ``Annotated`` metadata object to an AnnotationRef.

    Dataclass fields are taken in declaration order; other objects contribute
    their instance attributes in insertion order.
    """
    cls = type(annotation)
    if dataclasses.is_dataclass(annotation):
        attributes = tuple(
            (field.name, getattr(annotation, field.name)) for field in dataclasses.fields(annotation)
        )
    elif hasattr(annotation, "__dict__"):
        attributes = tuple(vars(annotation).items())
    else:
        attributes = ()
    return AnnotationRef(DeclaredType(*class_path(cls)), attributes, is_qualifier(cls))


def _split_hint(hint: Any) -> tuple[TypeRef, tuple[AnnotationRef, ...]]:
    if get_origin(hint) is Annotated:
        base, *metadata = get_args(hint)
        return type_ref(base), tuple(annotation_ref(item) for item in metadata)
    return type_ref(hint), ()


def _owner_of(target: Any) -> DeclaredType | None:
    return DeclaredType(*class_path(target)) if isinstance(target, type) else None


def parameter_sites(target: Callable[..., Any]) -> list[DependencySite]:
    """
    One site per parameter of a function, or of a class constructor.

    ``*args`` and ``**kwargs`` are skipped; parameters without a type hint
    raise TypeError.
    """
    function = target.__init__ if isinstance(target, type) else target
    hints = get_type_hints(function, include_extras=True)
    owner = _owner_of(target)

    sites: list[DependencySite] = []
    for name, param in inspect.signature(target).parameters.items():
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        if name not in hints:
            raise TypeError(f"Parameter {name!r} of {target!r} has no type hint")
        declared, annotations = _split_hint(hints[name])
        sites.append(DependencySite.parameter(name, declared, annotations, owner))
    return sites


def return_site(function: Callable[..., Any]) -> DependencySite:
    """The site of a provider function: its return type and annotations."""
    hints = get_type_hints(function, include_extras=True)
    if "return" not in hints:
        raise TypeError(f"{function!r} has no return type hint")
    declared, annotations = _split_hint(hints["return"])
    return DependencySite.method(function.__name__, declared, annotations)


def field_sites(cls: type[Any]) -> list[DependencySite]:
    """One site per annotated field of a class; ``ClassVar`` fields are skipped."""
    owner = _owner_of(cls)
    sites: list[DependencySite] = []
    for name, hint in get_type_hints(cls, include_extras=True).items():
        if hint is ClassVar or get_origin(hint) is ClassVar:
            continue
        declared, annotations = _split_hint(hint)
        sites.append(DependencySite.field(name, declared, annotations, owner))
    return sites
