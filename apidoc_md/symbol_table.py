"""Lookup table of class and interface definitions in source order."""

from collections.abc import Iterable, Iterator

from apidoc_md.class_definition import ClassDefinition
from apidoc_md.namespaces import strip_namespace_prefix


class SymbolTable:
    """Maps fully-qualified names to ClassDefinitions, preserving source order."""

    def __init__(self, definitions: Iterable[ClassDefinition] = ()) -> None:
        self._classes: dict[str, ClassDefinition] = {}
        for definition in definitions:
            self._classes[definition.name] = definition

    def get(self, name: str) -> ClassDefinition | None:
        """Return the definition for ``name``, or None when it is not analyzed."""
        return self._classes.get(strip_namespace_prefix(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and strip_namespace_prefix(name) in self._classes

    def __iter__(self) -> Iterator[ClassDefinition]:
        return iter(self._classes.values())

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return f"SymbolTable({len(self)} classes)"
