"""Orchestration logic for converting API metadata to Markdown documents."""

import logging
from pathlib import Path
from typing import Any

from apidoc_md.build_symbol_table import build_symbol_table
from apidoc_md.document_renderer import DocumentRenderer
from apidoc_md.errors import ConfigError
from apidoc_md.inheritance_resolver import resolve_inheritance
from apidoc_md.link_resolver import LinkResolver
from apidoc_md.load_metadata import load_metadata
from apidoc_md.render_documents import render_documents
from apidoc_md.write_documents import write_documents

logger = logging.getLogger(__name__)


def run_generation(metadata_path: Path, config: dict[str, Any]) -> int:
    """Execute the full pipeline: load, resolve, render, then write.

    Nothing is written unless every document rendered.
    """
    if not config.get("output_dir"):
        msg = "No output directory configured"
        raise ConfigError(msg)

    table = build_symbol_table(load_metadata(metadata_path))
    logger.info("Loaded %d classes from %s", len(table), metadata_path)
    resolved = resolve_inheritance(table)

    link_resolver = LinkResolver(
        resolved,
        config["link_template"],
        single_file=config["single_file"],
    )
    renderer = DocumentRenderer(
        Path(config["template_dir"]),
        link_resolver,
        class_template=config["templates"]["class"],
        index_template=config["templates"]["index"],
    )
    documents = render_documents(resolved, link_resolver, renderer, config)

    out_root = Path(config["output_dir"]).resolve()
    written = write_documents(documents, out_root)
    print(f"Generated {written} Markdown documents into: {out_root}")
    return 0
