"""Helpers for namespace-qualified type names."""

NAMESPACE_SEPARATOR = "\\"


def strip_namespace_prefix(name: str) -> str:
    """Remove leading namespace separators: ``\\Foo\\Bar`` -> ``Foo\\Bar``."""
    return name.lstrip(NAMESPACE_SEPARATOR)


def dash_name(name: str) -> str:
    """Make a filename-safe token: ``Foo\\Bar`` -> ``Foo-Bar``."""
    return strip_namespace_prefix(name).replace(NAMESPACE_SEPARATOR, "-")


def class_file_name(name: str) -> str:
    """Derive the output filename of a class document."""
    return dash_name(name) + ".md"


def split_qualified_name(name: str) -> tuple[str, str]:
    """Split ``Foo\\Bar\\Baz`` into (``Foo\\Bar``, ``Baz``)."""
    namespace, _, short = strip_namespace_prefix(name).rpartition(NAMESPACE_SEPARATOR)
    return namespace, short
