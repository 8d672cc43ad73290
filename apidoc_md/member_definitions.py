"""Data models for the members of a class or interface."""

from dataclasses import dataclass, field

from apidoc_md.see_also import SeeAlso


@dataclass(frozen=True)
class Argument:
    """A single method argument."""

    type: str
    name: str
    description: str = ""


@dataclass(frozen=True)
class MethodDefinition:
    """A method as declared on a class, or inherited into one."""

    name: str
    visibility: str
    signature: str
    defined_by: str  # class that declared it, never the inheriting class
    return_type: str = ""  # may be a union, e.g. "Foo|null"
    return_description: str = ""
    arguments: list[Argument] = field(default_factory=list)
    abstract: bool = False
    static: bool = False
    deprecated: bool = False
    description: str = ""
    long_description: str = ""
    see_also: list[SeeAlso] = field(default_factory=list)


@dataclass(frozen=True)
class PropertyDefinition:
    """A property as declared on a class, or inherited into one."""

    name: str
    type: str
    visibility: str
    signature: str
    defined_by: str
    default: str = ""
    static: bool = False
    deprecated: bool = False
    description: str = ""
    long_description: str = ""


@dataclass(frozen=True)
class ConstantDefinition:
    """A class constant. Constants are never inherited."""

    name: str
    value: str
    signature: str
    defined_by: str
    deprecated: bool = False
    description: str = ""
    long_description: str = ""
