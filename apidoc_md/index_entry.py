"""Data model for entries of the documentation index."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IndexEntry:
    """One line of the index: a class (depth 0) or one of its methods (depth 1)."""

    label: str
    depth: int
    class_name: str
    target: str  # File.md#anchor, or #anchor in single-document mode

    def render(self) -> str:
        return f"{'    ' * self.depth}* [{self.label}]({self.target})\n"
