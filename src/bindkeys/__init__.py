"""
bindkeys - canonical binding keys for dependency injection.

Provides:
- An explicit type/annotation model for dependency sites
- Canonical string keys for provider, set-element and members-injection bindings
- Emission of code expressions that recompute the same keys at runtime
- Introspection of Python callables and classes into dependency sites
"""

from .canonicalizer import KeyCanonicalizer
from .config import AttributeOrder, KeyFormat
from .emitter import KeyExpressionEmitter
from .introspection import annotation_ref, field_sites, parameter_sites, return_site, type_ref
from .model import (
    AnnotationRef,
    ArrayType,
    BindingKey,
    DeclaredType,
    DependencySite,
    KeyKind,
    PrimitiveType,
    Qualifier,
    SiteKind,
    TypeKind,
    TypeRef,
)
from .naming import ExpressionDialect, JavaDialect, PythonDialect
from .qualifiers import AmbiguousQualifierError, Named, find_qualifier, is_qualifier, named, qualifier
from .rendering import render_raw_type, render_type
from .runtime import canonical_name

__all__ = [
    "AmbiguousQualifierError",
    "AnnotationRef",
    "ArrayType",
    "AttributeOrder",
    "BindingKey",
    "DeclaredType",
    "DependencySite",
    "ExpressionDialect",
    "JavaDialect",
    "KeyCanonicalizer",
    "KeyExpressionEmitter",
    "KeyFormat",
    "KeyKind",
    "Named",
    "PrimitiveType",
    "PythonDialect",
    "Qualifier",
    "SiteKind",
    "TypeKind",
    "TypeRef",
    "annotation_ref",
    "canonical_name",
    "field_sites",
    "find_qualifier",
    "is_qualifier",
    "named",
    "parameter_sites",
    "qualifier",
    "render_raw_type",
    "render_type",
    "return_site",
    "type_ref",
]
