"""Utility for turning a link target into a relative output file path."""

from pathlib import PurePosixPath


def document_path(target: str) -> str:
    """Determine the relative output file for a link target.

    ``/api/Foo-Bar`` -> ``api/Foo-Bar.md``; targets that already carry a
    suffix are kept as they are.
    """
    rel = target.split("#", 1)[0].lstrip("/")
    if not PurePosixPath(rel).suffix:
        rel += ".md"
    return rel
