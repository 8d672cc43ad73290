"""Tests for name and path helpers."""

from apidoc_md.class_kind import ClassKind
from apidoc_md.document_path import document_path
from apidoc_md.namespaces import (
    class_file_name,
    dash_name,
    split_qualified_name,
    strip_namespace_prefix,
)


def test_strip_namespace_prefix() -> None:
    """Verify only leading separators are removed."""
    assert strip_namespace_prefix("\\\\Foo\\Bar") == "Foo\\Bar"
    assert strip_namespace_prefix("Foo") == "Foo"


def test_dash_name_and_file_name() -> None:
    """Verify namespace separators become dashes."""
    assert dash_name("\\Foo\\Bar\\Baz") == "Foo-Bar-Baz"
    assert class_file_name("Foo\\Bar") == "Foo-Bar.md"


def test_split_qualified_name() -> None:
    """Verify namespace and short name are split on the last separator."""
    assert split_qualified_name("\\Foo\\Bar\\Baz") == ("Foo\\Bar", "Baz")
    assert split_qualified_name("Global") == ("", "Global")


def test_document_path() -> None:
    """Verify link targets map to relative markdown files."""
    assert document_path("Foo-Bar.md") == "Foo-Bar.md"
    assert document_path("/api/Foo-Bar") == "api/Foo-Bar.md"
    assert document_path("Foo.md#anchor") == "Foo.md"


def test_class_kind_from_record() -> None:
    """Verify interface wins over the abstract flag."""
    assert ClassKind.from_record("Interface", abstract=True) is ClassKind.INTERFACE
    assert ClassKind.from_record("class", abstract=True) is ClassKind.ABSTRACT_CLASS
    assert ClassKind.from_record("class") is ClassKind.CONCRETE_CLASS
