"""
Naming strategies turning fragments into output text.

LiteralNames writes class names immediately. ExpressionNames writes source
code that asks the runtime class object for its name, in a target dialect.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Protocol

from .model import DeclaredType
from .rendering import Fragment, Text, class_name, merge_text, render_fragments

_JAVA_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}


class NameStrategy(Protocol):
    """Renders a fragment sequence to its final text."""

    def render(self, fragments: Sequence[Fragment]) -> str: ...


class LiteralNames:
    """Resolve class names now, producing the key itself."""

    def __init__(self, nesting_delimiter: str = "$"):
        self._nesting_delimiter = nesting_delimiter

    def render(self, fragments: Sequence[Fragment]) -> str:
        return render_fragments(fragments, self._nesting_delimiter)


class ExpressionDialect(ABC):
    """Target language of emitted key expressions."""

    concat_operator: str = " + "

    @abstractmethod
    def string_literal(self, text: str) -> str:
        """Quote ``text`` as a string literal."""

    @abstractmethod
    def class_name_accessor(self, type_ref: DeclaredType, nesting_delimiter: str) -> str:
        """Expression evaluating to the canonical name of ``type_ref``."""


class PythonDialect(ExpressionDialect):
    """
    Python expressions calling a canonical-name helper on class objects.

    The emitted code expects ``accessor`` to be bound to
    :func:`bindkeys.runtime.canonical_name` and every referenced class to be
    reachable by its dotted path. Classes defined inside functions are not
    reachable that way and are rejected with TypeError.
    """

    def __init__(self, accessor: str = "canonical_name"):
        self._accessor = accessor

    def string_literal(self, text: str) -> str:
        return repr(text)

    def class_name_accessor(self, type_ref: DeclaredType, nesting_delimiter: str) -> str:
        source = class_name(type_ref, ".")
        if not all(part.isidentifier() for part in source.split(".")):
            raise TypeError(f"{source} cannot be referenced from Python source")
        if nesting_delimiter == "$":
            return f"{self._accessor}({source})"
        return f"{self._accessor}({source}, {nesting_delimiter!r})"


class JavaDialect(ExpressionDialect):
    """
    Java expressions reading the binary name of class literals.

    ``Class.getName()`` joins nested classes with ``$``, which matches the
    default delimiter; other delimiters are substituted in.
    """

    def string_literal(self, text: str) -> str:
        return '"' + "".join(_JAVA_ESCAPES.get(char, char) for char in text) + '"'

    def class_name_accessor(self, type_ref: DeclaredType, nesting_delimiter: str) -> str:
        accessor = f"{class_name(type_ref, '.')}.class.getName()"
        if nesting_delimiter == "$":
            return accessor
        return f'{accessor}.replace("$", {self.string_literal(nesting_delimiter)})'


class ExpressionNames:
    """Defer class names to runtime, producing source for the key."""

    def __init__(self, dialect: ExpressionDialect, nesting_delimiter: str = "$"):
        self._dialect = dialect
        self._nesting_delimiter = nesting_delimiter

    def render(self, fragments: Sequence[Fragment]) -> str:
        parts: list[str] = []
        for fragment in merge_text(fragments):
            if isinstance(fragment, Text):
                parts.append(self._dialect.string_literal(fragment.value))
            else:
                parts.append(
                    self._dialect.class_name_accessor(fragment.type_ref, self._nesting_delimiter)
                )
        if not parts:
            return self._dialect.string_literal("")
        return self._dialect.concat_operator.join(parts)
