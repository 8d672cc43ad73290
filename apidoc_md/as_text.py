"""Utility for reading scalar fields of metadata records as text."""

TRUE_WORDS = {"true", "1", "yes"}


def as_text(value: object) -> str:
    """Render a record field the way it reads in the analyzed source.

    YAML hands booleans and numbers over as Python objects, so a property
    default of ``false`` arrives as ``False``; it is rendered back as
    ``false``. Lists (multi-line docblocks) are joined with newlines, empty
    entries dropped.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "\n".join(text for text in map(as_text, value) if text)
    return str(value).strip()


def as_flag(value: object) -> bool:
    """Read a boolean flag that may be stored as ``true``/``"true"``/``1``."""
    return as_text(value).lower() in TRUE_WORDS
