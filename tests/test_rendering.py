#!/usr/bin/env python3
"""
Unit tests for type references and type rendering.
"""

import unittest

from bindkeys import ArrayType, DeclaredType, PrimitiveType, TypeKind, render_raw_type, render_type
from bindkeys.rendering import ClassName, Text, merge_text, type_fragments

STRING = DeclaredType.of("java.lang.String")
INTEGER = DeclaredType.of("java.lang.Integer")
LIST = DeclaredType.of("java.util.List")
ENTRY = DeclaredType.of("java.util.Map$Entry")


class TestTypeRefs(unittest.TestCase):
    """Test the type reference model."""

    def test_declared_type_from_canonical_name(self):
        """Test parsing a flat canonical name into package and nested names."""
        self.assertEqual(ENTRY.package, "java.util")
        self.assertEqual(ENTRY.names, ("Map", "Entry"))
        self.assertEqual(ENTRY.simple_name, "Entry")
        self.assertEqual(DeclaredType.of("Foo"), DeclaredType("", ("Foo",)))

    def test_kinds(self):
        """Test that each type reference reports its kind."""
        self.assertEqual(PrimitiveType("int").kind, TypeKind.PRIMITIVE)
        self.assertEqual(STRING.kind, TypeKind.DECLARED)
        self.assertEqual(ArrayType(STRING).kind, TypeKind.ARRAY)

    def test_erasure(self):
        """Test that erasure drops generic arguments at every level."""
        list_of_strings = LIST.parameterized(STRING)
        self.assertFalse(list_of_strings.is_raw)
        self.assertEqual(list_of_strings.erasure(), LIST)
        self.assertEqual(ArrayType(list_of_strings).erasure(), ArrayType(LIST))
        self.assertEqual(PrimitiveType("int").erasure(), PrimitiveType("int"))

    def test_invalid_declared_types(self):
        """Test that empty names are rejected."""
        with self.assertRaises(ValueError):
            DeclaredType("pkg", ())
        with self.assertRaises(ValueError):
            DeclaredType("pkg", ("Outer", ""))
        with self.assertRaises(ValueError):
            PrimitiveType("")

    def test_type_refs_are_hashable_values(self):
        """Test equality and hashing of structurally equal references."""
        first = LIST.parameterized(STRING)
        second = DeclaredType("java.util", ("List",), (DeclaredType("java.lang", ("String",)),))
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))


class TestRenderType(unittest.TestCase):
    """Test canonical rendering of type references."""

    def test_simple_and_unpackaged_types(self):
        """Test rendering of plain declared types."""
        self.assertEqual(render_type(STRING), "java.lang.String")
        self.assertEqual(render_type(DeclaredType.of("Foo")), "Foo")

    def test_generic_types(self):
        """Test that generic arguments are rendered with a fixed separator."""
        map_type = DeclaredType.of("java.util.Map", STRING, LIST.parameterized(INTEGER))
        self.assertEqual(
            render_type(map_type),
            "java.util.Map<java.lang.String, java.util.List<java.lang.Integer>>",
        )

    def test_nested_types_use_delimiter(self):
        """Test that inner class names are joined with the nesting delimiter."""
        entry = ENTRY.parameterized(STRING, INTEGER)
        self.assertEqual(render_type(entry), "java.util.Map$Entry<java.lang.String, java.lang.Integer>")
        self.assertEqual(render_type(entry, "#"), "java.util.Map#Entry<java.lang.String, java.lang.Integer>")

    def test_primitives_and_arrays(self):
        """Test rendering of primitives and arrays."""
        self.assertEqual(render_type(PrimitiveType("int")), "int")
        self.assertEqual(render_type(ArrayType(ArrayType(PrimitiveType("byte")))), "byte[][]")
        self.assertEqual(
            render_type(ArrayType(LIST.parameterized(STRING))), "java.util.List<java.lang.String>[]"
        )

    def test_raw_rendering(self):
        """Test that raw rendering erases generic arguments."""
        self.assertEqual(render_raw_type(LIST.parameterized(STRING)), "java.util.List")
        self.assertEqual(render_raw_type(ArrayType(LIST.parameterized(STRING))), "java.util.List[]")
        self.assertEqual(render_raw_type(ENTRY.parameterized(STRING, INTEGER)), "java.util.Map$Entry")


class TestFragments(unittest.TestCase):
    """Test the fragment form shared by keys and key expressions."""

    def test_generic_type_fragments(self):
        """Test that class names are kept apart from literal text."""
        fragments = type_fragments(LIST.parameterized(STRING, INTEGER))
        self.assertEqual(
            fragments,
            [
                ClassName(LIST),
                Text("<"),
                ClassName(STRING),
                Text(", "),
                ClassName(INTEGER),
                Text(">"),
            ],
        )

    def test_merge_text(self):
        """Test that adjacent text fragments are merged and empty ones dropped."""
        merged = merge_text([Text("a"), Text(""), Text("b"), ClassName(STRING), Text("c")])
        self.assertEqual(merged, [Text("ab"), ClassName(STRING), Text("c")])

    def test_unknown_type_reference(self):
        """Test that non type references are rejected."""
        with self.assertRaises(TypeError):
            type_fragments("java.lang.String")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
