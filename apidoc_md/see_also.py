"""Data model for see-also references."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SeeAlso:
    """A ``@see`` or ``@link`` reference attached to a class or method."""

    link: str
    description: str = ""
