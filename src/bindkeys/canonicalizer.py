"""
Key canonicalization.

``key_fragments`` is the one algorithm laying out a binding key. The
canonicalizer renders its fragments with literal names; the expression
emitter renders the very same fragments as deferred name lookups, so the two
outputs always agree once evaluated.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, get_origin

from .config import AttributeOrder, KeyFormat
from .introspection import type_ref as python_type_ref
from .model import (
    ArrayType,
    BindingKey,
    DeclaredType,
    DependencySite,
    KeyKind,
    PrimitiveType,
    Qualifier,
    TypeRef,
)
from .naming import LiteralNames, NameStrategy
from .qualifiers import site_qualifier
from .rendering import Fragment, Text, type_fragments

logger = logging.getLogger(__name__)


def provider_binding_key(target: TypeRef | DependencySite) -> BindingKey:
    """Structured provider key for a bare type or a site."""
    if isinstance(target, DependencySite):
        return BindingKey.provider(target.declared_type, site_qualifier(target))
    return BindingKey.provider(target)


def element_binding_key(site: DependencySite) -> BindingKey:
    """Structured key of a site's contribution to a set multibinding."""
    return BindingKey.element(site.declared_type, site_qualifier(site))


def members_binding_key(target: TypeRef | DependencySite) -> BindingKey:
    """
    Structured members-injection key of the raw type.

    Qualifiers never take part in members keys, but a site is still checked
    for ambiguous qualifiers.
    """
    if isinstance(target, DependencySite):
        site_qualifier(target)
        return BindingKey.members(target.declared_type)
    return BindingKey.members(target)


def key_fragments(key: BindingKey, key_format: KeyFormat) -> list[Fragment]:
    """Lay out ``key`` as fragments."""
    if key.kind is KeyKind.MEMBERS:
        return [Text(key_format.members_prefix), *type_fragments(key.type_ref, raw=True)]

    fragments: list[Fragment] = []
    if key.qualifier is not None:
        fragments.extend(qualifier_fragments(key.qualifier, key_format.attribute_order))
    if key.kind is KeyKind.ELEMENT:
        fragments.append(Text(f"{key_format.set_type_name}<"))
        fragments.extend(type_fragments(key.type_ref))
        fragments.append(Text(">"))
    else:
        fragments.extend(type_fragments(key.type_ref))
    return fragments


def qualifier_fragments(qualifier: Qualifier, order: AttributeOrder) -> list[Fragment]:
    """
    Lay out the ``@Type(name=value...)/`` prefix of a qualified key.

    Attributes are written back to back without a separator.
    """
    attributes = qualifier.attributes
    if order is AttributeOrder.SORTED:
        attributes = tuple(sorted(attributes, key=lambda item: item[0]))

    fragments: list[Fragment] = [Text("@"), *type_fragments(qualifier.annotation_type, raw=True)]
    fragments.append(Text("("))
    for name, value in attributes:
        fragments.append(Text(f"{name}="))
        fragments.extend(value_fragments(value))
    fragments.append(Text(")/"))
    return fragments


def value_fragments(value: Any) -> list[Fragment]:
    """Lay out one qualifier attribute value."""
    if isinstance(value, bool):
        return [Text("true" if value else "false")]
    if isinstance(value, Enum):
        return [Text(value.name)]
    if isinstance(value, str):
        return [Text(value)]
    if isinstance(value, PrimitiveType | DeclaredType | ArrayType):
        return type_fragments(value)
    if isinstance(value, type) or get_origin(value) is not None:
        try:
            return type_fragments(python_type_ref(value))
        except TypeError:
            # unions, literals and callables do not name a class
            return [Text(str(value))]
    if isinstance(value, tuple | list):
        fragments: list[Fragment] = [Text("[")]
        for index, item in enumerate(value):
            if index:
                fragments.append(Text(", "))
            fragments.extend(value_fragments(item))
        fragments.append(Text("]"))
        return fragments
    return [Text(str(value))]


class KeyCanonicalizer:
    """
    Builds the string keys the binding index is looked up by.

    Example:
        ```python
        keys = KeyCanonicalizer()
        site = DependencySite.field("name", DeclaredType.of("Foo"), [named("bar")])
        keys.provider_key(site)  # "@bindkeys.qualifiers.Named(value=bar)/Foo"
        ```
    """

    def __init__(self, key_format: KeyFormat | None = None):
        self._format = key_format if key_format is not None else KeyFormat()
        self._names: NameStrategy = LiteralNames(self._format.nesting_delimiter)

    @property
    def key_format(self) -> KeyFormat:
        return self._format

    def raw_members_key(self, target: TypeRef | DependencySite) -> str:
        """Members-injection key for the raw type of ``target``."""
        return self.render(members_binding_key(target))

    def provider_key(self, target: TypeRef | DependencySite) -> str:
        """Provider key for a bare type, or for a site including its qualifier."""
        return self.render(provider_binding_key(target))

    def element_key(self, site: DependencySite) -> str:
        """Provider key for ``site`` wrapped in the set multibinding type."""
        return self.render(element_binding_key(site))

    def qualifier_prefix(self, qualifier: Qualifier) -> str:
        return self._names.render(qualifier_fragments(qualifier, self._format.attribute_order))

    def render(self, key: BindingKey) -> str:
        """Render a structured key to its string form."""
        text = self._names.render(key_fragments(key, self._format))
        logger.debug("Key for %s: %s", key, text)
        return text
