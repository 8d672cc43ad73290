"""Logic for writing rendered documents to disk."""

from pathlib import Path


def write_documents(documents: dict[str, str], out_root: Path) -> int:
    """Write every document below ``out_root`` and return how many were written."""
    total = len(documents)
    print(f"Writing {total} documents...")
    out_root.mkdir(parents=True, exist_ok=True)
    written = 0
    for rel, content in documents.items():
        out_file = out_root / rel
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(content, encoding="utf-8")
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total} documents")
    return written
