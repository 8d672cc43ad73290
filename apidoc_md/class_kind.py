"""Tagged variant describing what kind of type a definition is."""

from enum import Enum


class ClassKind(Enum):
    """Concrete class, abstract class or interface."""

    CONCRETE_CLASS = "class"
    ABSTRACT_CLASS = "abstract class"
    INTERFACE = "interface"

    @classmethod
    def from_record(cls, kind: str, *, abstract: bool = False) -> "ClassKind":
        """Map a loader record's ``kind``/``abstract`` pair to a variant."""
        if kind.lower() == "interface":
            return cls.INTERFACE
        if abstract:
            return cls.ABSTRACT_CLASS
        return cls.CONCRETE_CLASS

    @property
    def is_interface(self) -> bool:
        return self is ClassKind.INTERFACE

    @property
    def is_abstract(self) -> bool:
        return self is ClassKind.ABSTRACT_CLASS

    @property
    def is_emitted(self) -> bool:
        """Only concrete classes get their own document and index entry."""
        return self is ClassKind.CONCRETE_CLASS
