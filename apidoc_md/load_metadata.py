"""Logic for loading normalized class records from a metadata dump."""

from pathlib import Path
from typing import Any

import yaml

from apidoc_md.errors import MetadataError


def load_metadata(path: Path) -> list[dict[str, Any]]:
    """Load the class records of a YAML or JSON metadata file, in source order.

    The document is either a list of records or a mapping with a ``classes``
    list.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Cannot read metadata file {path}: {e}"
        raise MetadataError(msg) from e

    try:
        doc = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        msg = f"Malformed metadata in {path}: {e}"
        raise MetadataError(msg) from e

    return extract_class_records(doc, path)


def extract_class_records(
    doc: object, source: Path | str = "<metadata>"
) -> list[dict[str, Any]]:
    """Extract the list of class records from a parsed metadata document."""
    records = doc.get("classes") if isinstance(doc, dict) else doc
    if not isinstance(records, list):
        msg = f"{source}: expected a list of class records"
        raise MetadataError(msg)
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            msg = f"{source}: record #{i} is not a mapping"
            raise MetadataError(msg)
    return records
