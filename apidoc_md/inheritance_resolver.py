"""Logic for merging inherited methods and properties into each class.

The resolver never mutates the table it is given. Every class's resolved
member set is computed from the pristine "own" definitions, flattened through
its ancestors, and the result is returned as a new SymbolTable. Resolving an
already resolved table yields the same table.
"""

import logging
from dataclasses import replace

from apidoc_md.class_definition import ClassDefinition
from apidoc_md.member_definitions import MethodDefinition, PropertyDefinition
from apidoc_md.signatures import method_signature
from apidoc_md.symbol_table import SymbolTable

logger = logging.getLogger(__name__)


class InheritanceResolver:
    """Computes the members visible on every class of a symbol table.

    Ancestors are visited ``extends`` first, then ``implements``, each in
    declaration order. Own members always win; among ancestors the first one
    to contribute a name wins. Names that are not in the table contribute
    nothing. An inheritance edge that closes a cycle back to the class
    (A extends B, B extends A) contributes nothing either, so every class in
    a cycle keeps exactly its own members.
    """

    def __init__(self, table: SymbolTable) -> None:
        self.table = table
        self._ancestors: dict[str, list[ClassDefinition]] = {}
        self._reachable: dict[str, frozenset[str]] = {}
        self._methods: dict[str, dict[str, MethodDefinition]] = {}
        self._properties: dict[str, dict[str, PropertyDefinition]] = {}

    def resolve(self) -> SymbolTable:
        """Return a new table whose classes carry their resolved members."""
        return SymbolTable(
            replace(
                cls,
                methods=self.methods_of(cls.name),
                properties=self.properties_of(cls.name),
            )
            for cls in self.table
        )

    def methods_of(self, name: str) -> dict[str, MethodDefinition]:
        """Own methods followed by non-overridden inherited ones."""
        return dict(self._visible_methods(self._require(name), frozenset()))

    def properties_of(self, name: str) -> dict[str, PropertyDefinition]:
        """Own properties followed by inherited, non-private ones."""
        return dict(self._visible_properties(self._require(name), frozenset()))

    def _require(self, name: str) -> ClassDefinition:
        cls = self.table.get(name)
        if cls is None:
            msg = f"Unknown class: {name}"
            raise KeyError(msg)
        return cls

    def _visible_methods(
        self, cls: ClassDefinition, path: frozenset[str]
    ) -> dict[str, MethodDefinition]:
        if cls.name in self._methods:
            return self._methods[cls.name]

        merged = dict(cls.methods)
        path = path | {cls.name}
        for ancestor in self._ancestors_of(cls):
            if ancestor.name in path:
                continue
            for method_name, method in self._visible_methods(ancestor, path).items():
                if method_name not in merged:
                    merged[method_name] = _inherit_method(method, ancestor, cls)

        self._methods[cls.name] = merged
        return merged

    def _visible_properties(
        self, cls: ClassDefinition, path: frozenset[str]
    ) -> dict[str, PropertyDefinition]:
        if cls.name in self._properties:
            return self._properties[cls.name]

        merged = dict(cls.properties)
        path = path | {cls.name}
        for ancestor in self._ancestors_of(cls):
            if ancestor.name in path:
                continue
            for prop_name, prop in self._visible_properties(ancestor, path).items():
                if prop.visibility == "private" or prop_name in merged:
                    continue
                merged[prop_name] = prop

        self._properties[cls.name] = merged
        return merged

    def _ancestors_of(self, cls: ClassDefinition) -> list[ClassDefinition]:
        """Known, non-cyclic ancestors of ``cls`` in traversal order."""
        if cls.name in self._ancestors:
            return self._ancestors[cls.name]

        ancestors = []
        for name in cls.ancestors:
            ancestor = self.table.get(name)
            if ancestor is None:
                logger.debug("%s: ancestor %s is not analyzed, skipping", cls.name, name)
                continue
            if cls.name in self._reachable_from(ancestor):
                logger.warning(
                    "%s: inheritance from %s forms a cycle, ignoring it",
                    cls.name,
                    ancestor.name,
                )
                continue
            ancestors.append(ancestor)

        self._ancestors[cls.name] = ancestors
        return ancestors

    def _reachable_from(self, cls: ClassDefinition) -> frozenset[str]:
        """Names of every known class reachable through ancestor edges."""
        if cls.name in self._reachable:
            return self._reachable[cls.name]

        seen: set[str] = set()
        stack = list(cls.ancestors)
        while stack:
            ancestor = self.table.get(stack.pop())
            if ancestor is None or ancestor.name in seen:
                continue
            seen.add(ancestor.name)
            stack.extend(ancestor.ancestors)

        reachable = frozenset(seen)
        self._reachable[cls.name] = reachable
        return reachable


def _inherit_method(
    method: MethodDefinition,
    ancestor: ClassDefinition,
    subject: ClassDefinition,
) -> MethodDefinition:
    """Copy an ancestor's method onto ``subject``.

    A method returning the ancestor itself now returns ``subject``; the
    signature is regenerated for ``subject`` and ``defined_by`` is kept.
    """
    return_type = method.return_type
    if return_type == ancestor.short_name:
        return_type = subject.short_name
    return replace(
        method,
        return_type=return_type,
        signature=method_signature(
            subject.short_name, method.name, method.arguments, return_type
        ),
    )


def resolve_inheritance(table: SymbolTable) -> SymbolTable:
    """Resolve inherited members for every class in ``table``."""
    return InheritanceResolver(table).resolve()
