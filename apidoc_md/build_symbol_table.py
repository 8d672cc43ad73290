"""Logic for building the symbol table from loader records."""

import logging
from collections.abc import Iterable
from typing import Any

from apidoc_md.build_class_definition import build_class_definition
from apidoc_md.class_definition import ClassDefinition
from apidoc_md.symbol_table import SymbolTable

logger = logging.getLogger(__name__)


def build_symbol_table(records: Iterable[dict[str, Any]]) -> SymbolTable:
    """Build the table of own definitions, keyed by fully-qualified name.

    A repeated name replaces the earlier record but keeps its position.
    """
    definitions: dict[str, ClassDefinition] = {}
    for record in records:
        definition = build_class_definition(record)
        if definition.name in definitions:
            logger.warning(
                "Duplicate definition of %s; the later record wins", definition.name
            )
        definitions[definition.name] = definition
    return SymbolTable(definitions.values())
