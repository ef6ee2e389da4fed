"""
Key-expression emission.

Emits source text that recomputes a binding key at a later stage, when class
names are looked up on the runtime class objects instead of being written
in as literals.
"""

from __future__ import annotations

import logging

from .canonicalizer import (
    element_binding_key,
    key_fragments,
    members_binding_key,
    provider_binding_key,
)
from .config import KeyFormat
from .model import BindingKey, DependencySite, TypeRef
from .naming import ExpressionDialect, ExpressionNames, NameStrategy, PythonDialect

logger = logging.getLogger(__name__)


class KeyExpressionEmitter:
    """
    Builds expressions that evaluate to the keys KeyCanonicalizer produces.

    The emitter and the canonicalizer it has to agree with must share a
    KeyFormat. The emitted text is not evaluated here; it is meant to be
    embedded verbatim by a code generator.
    """

    def __init__(self, dialect: ExpressionDialect | None = None, key_format: KeyFormat | None = None):
        self._dialect = dialect if dialect is not None else PythonDialect()
        self._format = key_format if key_format is not None else KeyFormat()
        self._names: NameStrategy = ExpressionNames(self._dialect, self._format.nesting_delimiter)

    @property
    def dialect(self) -> ExpressionDialect:
        return self._dialect

    @property
    def key_format(self) -> KeyFormat:
        return self._format

    def members_key_expression(self, target: TypeRef | DependencySite) -> str:
        """Expression for the members-injection key of the raw type of ``target``."""
        return self.expression(members_binding_key(target))

    def provider_key_expression(self, target: TypeRef | DependencySite) -> str:
        """Expression for the provider key of a bare type or a site."""
        return self.expression(provider_binding_key(target))

    def element_key_expression(self, site: DependencySite) -> str:
        """Expression for the set-element key of ``site``."""
        return self.expression(element_binding_key(site))

    def expression(self, key: BindingKey) -> str:
        text = self._names.render(key_fragments(key, self._format))
        logger.debug("Key expression for %s: %s", key, text)
        return text
