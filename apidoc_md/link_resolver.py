"""Logic for building the navigation index and cross-reference links."""

from apidoc_md.anchor_registry import AnchorRegistry
from apidoc_md.class_definition import ClassDefinition
from apidoc_md.index_entry import IndexEntry
from apidoc_md.namespaces import NAMESPACE_SEPARATOR, dash_name
from apidoc_md.symbol_table import SymbolTable

CLASS_PLACEHOLDER = "%c"
DEFAULT_LINK_TEMPLATE = "%c.md"


class LinkResolver:
    """Turns class names and type expressions into markdown links.

    In multi-document mode each class lives in its own file, named by
    ``link_template`` with ``%c`` replaced by the dash-joined class name. In
    single-document mode everything lives in one document and links are
    in-document anchors.
    """

    def __init__(
        self,
        table: SymbolTable,
        link_template: str = DEFAULT_LINK_TEMPLATE,
        *,
        single_file: bool = True,
    ) -> None:
        self.table = table
        self.link_template = link_template
        self.single_file = single_file
        self.class_anchors: dict[str, str] | None = None

    def class_target(self, name: str) -> str:
        """Relative file name of a class document: ``Foo\\Bar`` -> ``Foo-Bar.md``."""
        return self.link_template.replace(CLASS_PLACEHOLDER, dash_name(name))

    def build_index(self) -> list[IndexEntry]:
        """List every concrete class followed by its public methods.

        Interfaces and abstract classes get no entry of their own, but their
        public methods show up under the concrete classes inheriting them.
        The anchor each class receives is remembered for type links.
        """
        registry = AnchorRegistry()
        entries: list[IndexEntry] = []
        for cls in self.table:
            if not cls.kind.is_emitted:
                continue
            entries.append(self._index_entry(cls, cls.short_name, 0, registry))
            entries.extend(
                self._index_entry(cls, method.name, 1, registry)
                for method in cls.methods.values()
                if method.visibility == "public"
            )
        if self.single_file:
            self.class_anchors = {
                e.class_name: e.target.removeprefix("#")
                for e in entries
                if e.depth == 0
            }
        return entries

    def render_index(self, entries: list[IndexEntry] | None = None) -> str:
        if entries is None:
            entries = self.build_index()
        return "".join(entry.render() for entry in entries)

    def _index_entry(
        self,
        cls: ClassDefinition,
        label: str,
        depth: int,
        registry: AnchorRegistry,
    ) -> IndexEntry:
        anchor = label.lower()
        if self.single_file:
            target = "#" + registry.register(anchor)
        else:
            target = f"{self.class_target(cls.name)}#{anchor}"
        return IndexEntry(label=label, depth=depth, class_name=cls.name, target=target)

    def resolve_type_link(
        self,
        type_expression: str | None,
        label: str | None = None,
        anchor: str | None = None,
    ) -> str:
        """Link every known class of a (possibly union) type expression.

        ``Foo|Bar`` with only ``Foo`` analyzed gives ``[Foo](Foo.md)|Bar``.
        Unknown names are passed through as plain text.
        """
        if not type_expression:
            return ""

        resolved = []
        for segment in type_expression.split("|"):
            name = segment.strip().strip(NAMESPACE_SEPARATOR).strip()
            cls = self.table.get(name)
            if cls is None:
                resolved.append(name)
                continue
            resolved.append(f"[{label or name}]({self._type_target(cls, anchor)})")
        return "|".join(resolved)

    def _type_target(self, cls: ClassDefinition, anchor: str | None) -> str:
        if self.single_file:
            return "#" + (anchor or self._class_anchor(cls))
        target = self.class_target(cls.name)
        if anchor:
            target += f"#{anchor}"
        return target

    def _class_anchor(self, cls: ClassDefinition) -> str:
        """Anchor of a class section, numbered as in the index."""
        if self.class_anchors is None:
            self.build_index()
        anchors = self.class_anchors or {}
        # Interfaces and abstract classes have no section of their own.
        return anchors.get(cls.name, cls.short_name.lower())
