"""
Model subpackage containing the value types keys are computed from.

Kept free of rendering logic so the rendering modules can depend on it
without cycles.
"""

from .annotations import AnnotationRef, Qualifier
from .keys import BindingKey, KeyKind
from .sites import DependencySite, SiteKind
from .types import ArrayType, DeclaredType, PrimitiveType, TypeKind, TypeRef

__all__ = [
    "AnnotationRef",
    "ArrayType",
    "BindingKey",
    "DeclaredType",
    "DependencySite",
    "KeyKind",
    "PrimitiveType",
    "Qualifier",
    "SiteKind",
    "TypeKind",
    "TypeRef",
]
