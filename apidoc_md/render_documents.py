"""Logic for rendering every output document in memory."""

from typing import Any

from apidoc_md.class_definition import ClassDefinition
from apidoc_md.document_path import document_path
from apidoc_md.document_renderer import DocumentRenderer
from apidoc_md.errors import ConfigError
from apidoc_md.link_resolver import DEFAULT_LINK_TEMPLATE, LinkResolver
from apidoc_md.symbol_table import SymbolTable


def render_documents(
    table: SymbolTable,
    link_resolver: LinkResolver,
    renderer: DocumentRenderer,
    config: dict[str, Any],
) -> dict[str, str]:
    """Render all documents, keyed by their path relative to the output dir.

    Only concrete classes are rendered. In single-document mode their
    sections follow the index in one document; otherwise each class gets its
    own document and the index document only holds the index.
    """
    # The index numbers the anchors that type links inside sections point at.
    index = renderer.render_index(config["title"], link_resolver.render_index())

    emitted = [cls for cls in table if cls.kind.is_emitted]
    sections = [(cls, renderer.render_class(cls)) for cls in emitted]

    index_file = config["index_file"]
    if config["single_file"]:
        return {index_file: index + "".join(s for _, s in sections)}

    documents: dict[str, str] = {}
    owners: dict[str, str] = {}
    for cls, section in sections:
        path = _class_document(cls, link_resolver)
        if path == index_file:
            msg = f"Document of {cls.name} would overwrite the index {index_file}"
            raise ConfigError(msg)
        if path in owners:
            msg = f"{cls.name} and {owners[path]} both map to {path}"
            raise ConfigError(msg)
        owners[path] = cls.name
        documents[path] = section
    documents[index_file] = index
    return documents


def _class_document(cls: ClassDefinition, link_resolver: LinkResolver) -> str:
    if link_resolver.link_template == DEFAULT_LINK_TEMPLATE:
        return cls.file_name
    return document_path(link_resolver.class_target(cls.name))
