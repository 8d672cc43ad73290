"""Data model for a documented class or interface."""

from dataclasses import dataclass, field

from apidoc_md.class_kind import ClassKind
from apidoc_md.member_definitions import (
    ConstantDefinition,
    MethodDefinition,
    PropertyDefinition,
)
from apidoc_md.see_also import SeeAlso


@dataclass(frozen=True)
class ClassDefinition:
    """Represents a class or interface keyed by its fully-qualified name."""

    name: str  # fully-qualified, e.g. Acme\Shapes\Square
    short_name: str
    namespace: str
    kind: ClassKind
    file_name: str  # Acme-Shapes-Square.md
    deprecated: bool = False
    description: str = ""
    long_description: str = ""
    extends: list[str] = field(default_factory=list)
    implements: list[str] = field(default_factory=list)
    methods: dict[str, MethodDefinition] = field(default_factory=dict)
    properties: dict[str, PropertyDefinition] = field(default_factory=dict)
    constants: dict[str, ConstantDefinition] = field(default_factory=dict)
    see_also: list[SeeAlso] = field(default_factory=list)

    @property
    def ancestors(self) -> list[str]:
        """Extended classes first, then implemented interfaces."""
        return [*self.extends, *self.implements]
