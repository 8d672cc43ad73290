"""Tests for inheritance expansion."""

from typing import Any

import pytest

from apidoc_md.build_symbol_table import build_symbol_table
from apidoc_md.class_definition import ClassDefinition
from apidoc_md.inheritance_resolver import InheritanceResolver, resolve_inheritance
from apidoc_md.symbol_table import SymbolTable


def method(name: str, **kwargs: Any) -> dict[str, Any]:
    """Create a method record."""
    return {"name": name, **kwargs}


def lookup(table: SymbolTable, name: str) -> ClassDefinition:
    """Fetch a class that must exist."""
    cls = table.get(name)
    assert cls is not None
    return cls


def test_inherits_non_overridden_methods() -> None:
    """Verify own methods come first and inherited ones are appended."""
    table = build_symbol_table(
        [
            {"name": "Base", "methods": [method("a"), method("b")]},
            {"name": "Child", "extends": ["Base"], "methods": [method("b")]},
        ]
    )
    resolved = resolve_inheritance(table)
    child = lookup(resolved, "Child")
    assert list(child.methods) == ["b", "a"]
    assert child.methods["a"].defined_by == "Base"
    assert child.methods["b"].defined_by == "Child"


def test_own_method_is_untouched() -> None:
    """Verify an own method is identical to the declared one."""
    table = build_symbol_table(
        [
            {"name": "Base", "methods": [method("run", **{"return": {"type": "Base"}})]},
            {
                "name": "Child",
                "extends": ["Base"],
                "methods": [method("run", **{"return": {"type": "int"}})],
            },
        ]
    )
    resolved = resolve_inheritance(table)
    own = lookup(table, "Child").methods["run"]
    assert lookup(resolved, "Child").methods["run"] is own


def test_input_table_is_not_mutated() -> None:
    """Verify resolution produces a new table and leaves the own table alone."""
    table = build_symbol_table(
        [
            {"name": "Base", "methods": [method("a")]},
            {"name": "Child", "extends": ["Base"]},
        ]
    )
    resolved = resolve_inheritance(table)
    assert lookup(table, "Child").methods == {}
    assert list(lookup(resolved, "Child").methods) == ["a"]


def test_transitive_inheritance() -> None:
    """Verify members of grand-ancestors are flattened into descendants."""
    table = build_symbol_table(
        [
            {"name": "Leaf", "extends": ["Mid"], "methods": [method("leaf")]},
            {"name": "Mid", "extends": ["Root"], "methods": [method("mid")]},
            {"name": "Root", "methods": [method("root")]},
        ]
    )
    resolved = resolve_inheritance(table)
    assert list(lookup(resolved, "Leaf").methods) == ["leaf", "mid", "root"]
    assert lookup(resolved, "Leaf").methods["root"].defined_by == "Root"


def test_covariant_self_return() -> None:
    """Verify self-returning methods return the descendant, with a new signature."""
    table = build_symbol_table(
        [
            {
                "name": "\\Acme\\Builder",
                "methods": [
                    method(
                        "with",
                        arguments=[{"type": "string", "name": "$v"}],
                        **{"return": {"type": "\\Acme\\Builder"}},
                    ),
                    method("build", **{"return": {"type": "string"}}),
                ],
            },
            {"name": "\\Acme\\HtmlBuilder", "extends": ["\\Acme\\Builder"]},
            {"name": "\\Acme\\FancyBuilder", "extends": ["Acme\\HtmlBuilder"]},
        ]
    )
    resolved = resolve_inheritance(table)
    html = lookup(resolved, "Acme\\HtmlBuilder").methods
    assert html["with"].return_type == "HtmlBuilder"
    assert html["with"].signature == "HtmlBuilder::with( string $v ): HtmlBuilder"
    assert html["with"].defined_by == "Acme\\Builder"
    assert html["build"].signature == "HtmlBuilder::build(  ): string"

    fancy = lookup(resolved, "Acme\\FancyBuilder").methods
    assert fancy["with"].return_type == "FancyBuilder"
    assert fancy["with"].signature == "FancyBuilder::with( string $v ): FancyBuilder"


def test_private_properties_do_not_propagate() -> None:
    """Verify private ancestor properties are filtered, others inherited."""
    table = build_symbol_table(
        [
            {
                "name": "Root",
                "properties": [
                    {"name": "$secret", "visibility": "private"},
                    {"name": "$shared", "visibility": "protected"},
                ],
            },
            {
                "name": "Mid",
                "extends": ["Root"],
                "properties": [{"name": "$hidden", "visibility": "private"}],
            },
            {"name": "Leaf", "extends": ["Mid"]},
        ]
    )
    resolved = resolve_inheritance(table)
    assert list(lookup(resolved, "Mid").properties) == ["$hidden", "$shared"]
    assert list(lookup(resolved, "Leaf").properties) == ["$shared"]
    for cls in resolved:
        for prop in cls.properties.values():
            if prop.defined_by != cls.name:
                assert prop.visibility != "private"


def test_own_property_wins() -> None:
    """Verify an own property is never replaced by an inherited one."""
    table = build_symbol_table(
        [
            {"name": "Base", "properties": [{"name": "$x", "type": "int"}]},
            {
                "name": "Child",
                "extends": ["Base"],
                "properties": [{"name": "$x", "type": "string"}],
            },
        ]
    )
    resolved = resolve_inheritance(table)
    assert lookup(resolved, "Child").properties["$x"].type == "string"


def test_private_methods_still_propagate() -> None:
    """Verify methods propagate regardless of visibility."""
    table = build_symbol_table(
        [
            {"name": "Base", "methods": [method("helper", visibility="private")]},
            {"name": "Child", "extends": ["Base"]},
        ]
    )
    resolved = resolve_inheritance(table)
    assert "helper" in lookup(resolved, "Child").methods


def test_constants_are_not_inherited() -> None:
    """Verify constants stay on the declaring class."""
    table = build_symbol_table(
        [
            {"name": "Base", "constants": [{"name": "MAX", "value": "1"}]},
            {"name": "Child", "extends": ["Base"]},
        ]
    )
    resolved = resolve_inheritance(table)
    assert lookup(resolved, "Child").constants == {}


def test_unknown_ancestors_are_skipped() -> None:
    """Verify unanalyzed ancestors contribute nothing and raise nothing."""
    table = build_symbol_table(
        [
            {
                "name": "Child",
                "extends": ["\\Vendor\\Missing"],
                "implements": ["\\Countable"],
                "methods": [method("own")],
            }
        ]
    )
    resolved = resolve_inheritance(table)
    assert list(lookup(resolved, "Child").methods) == ["own"]


def test_diamond_first_ancestor_wins() -> None:
    """Verify the first-listed ancestor wins a name both ancestors contribute."""
    table = build_symbol_table(
        [
            {
                "name": "A",
                "kind": "interface",
                "methods": [method("x", **{"return": {"type": "int"}})],
            },
            {
                "name": "B",
                "kind": "interface",
                "methods": [method("x", **{"return": {"type": "string"}})],
            },
            {"name": "D", "implements": ["A", "B"]},
        ]
    )
    resolved = resolve_inheritance(table)
    x = lookup(resolved, "D").methods["x"]
    assert x.defined_by == "A"
    assert x.return_type == "int"


def test_extends_before_implements() -> None:
    """Verify extended classes are searched before implemented interfaces."""
    table = build_symbol_table(
        [
            {"name": "I", "kind": "interface", "methods": [method("x")]},
            {"name": "P", "methods": [method("x")]},
            {"name": "C", "implements": ["I"], "extends": ["P"]},
        ]
    )
    resolved = resolve_inheritance(table)
    assert lookup(resolved, "C").methods["x"].defined_by == "P"


def test_shared_ancestor_has_no_duplicates() -> None:
    """Verify a diamond over a shared root yields each member once."""
    table = build_symbol_table(
        [
            {"name": "Root", "methods": [method("r")], "properties": [{"name": "$p"}]},
            {"name": "Left", "kind": "interface", "extends": ["Root"]},
            {"name": "Right", "kind": "interface", "extends": ["Root"]},
            {"name": "D", "implements": ["Left", "Right"]},
        ]
    )
    resolved = resolve_inheritance(table)
    d = lookup(resolved, "D")
    assert list(d.methods) == ["r"]
    assert list(d.properties) == ["$p"]


def test_mutual_cycle_terminates_with_own_members() -> None:
    """Verify A extends B, B extends A resolves each class to its own members."""
    table = build_symbol_table(
        [
            {"name": "A", "extends": ["B"], "methods": [method("a")]},
            {"name": "B", "extends": ["A"], "methods": [method("b")]},
        ]
    )
    resolved = resolve_inheritance(table)
    assert list(lookup(resolved, "A").methods) == ["a"]
    assert list(lookup(resolved, "B").methods) == ["b"]


def test_self_cycle_terminates() -> None:
    """Verify a class extending itself keeps its own members once."""
    table = build_symbol_table(
        [{"name": "Loop", "extends": ["Loop"], "properties": [{"name": "$p"}]}]
    )
    resolved = resolve_inheritance(table)
    assert list(lookup(resolved, "Loop").properties) == ["$p"]


def test_class_below_cycle_inherits_from_it() -> None:
    """Verify a class outside a cycle still inherits from the cycle's members."""
    table = build_symbol_table(
        [
            {"name": "A", "extends": ["B"], "methods": [method("a")]},
            {"name": "B", "extends": ["A"], "methods": [method("b")]},
            {"name": "C", "extends": ["A"], "methods": [method("c")]},
        ]
    )
    resolved = resolve_inheritance(table)
    assert list(lookup(resolved, "C").methods) == ["c", "a"]


def test_resolution_is_idempotent() -> None:
    """Verify resolving an already resolved table changes nothing."""
    table = build_symbol_table(
        [
            {"name": "Root", "methods": [method("r", **{"return": {"type": "Root"}})]},
            {"name": "Left", "extends": ["Root"], "methods": [method("l")]},
            {"name": "Right", "kind": "interface", "extends": ["Root"]},
            {"name": "D", "extends": ["Left"], "implements": ["Right"]},
        ]
    )
    once = resolve_inheritance(table)
    twice = resolve_inheritance(once)
    assert list(once) == list(twice)


def test_methods_of_unknown_class() -> None:
    """Verify asking for an unknown class is an error."""
    resolver = InheritanceResolver(build_symbol_table([]))
    with pytest.raises(KeyError):
        resolver.methods_of("Nope")
