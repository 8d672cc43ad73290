"""Logic for turning a normalized loader record into a ClassDefinition."""

from typing import Any

from apidoc_md.as_text import as_flag, as_text
from apidoc_md.class_definition import ClassDefinition
from apidoc_md.class_kind import ClassKind
from apidoc_md.errors import MetadataError
from apidoc_md.member_definitions import (
    Argument,
    ConstantDefinition,
    MethodDefinition,
    PropertyDefinition,
)
from apidoc_md.namespaces import (
    class_file_name,
    split_qualified_name,
    strip_namespace_prefix,
)
from apidoc_md.parse_see_also import parse_see_also
from apidoc_md.signatures import (
    constant_signature,
    method_signature,
    property_signature,
)

VALID_KINDS = {"class", "interface"}
VALID_VISIBILITIES = {"public", "protected", "private"}


def build_class_definition(record: dict[str, Any]) -> ClassDefinition:
    """Build the "own" definition of one class or interface record."""
    if not isinstance(record, dict):
        msg = f"Expected a mapping for a class record, got {type(record).__name__}"
        raise MetadataError(msg)

    name = strip_namespace_prefix(as_text(record.get("name")))
    if not name:
        msg = "Class record is missing a name"
        raise MetadataError(msg)

    kind = as_text(record.get("kind")).lower() or "class"
    if kind not in VALID_KINDS:
        msg = f"{name}: unknown kind {kind!r}"
        raise MetadataError(msg)

    namespace, short_name = split_qualified_name(name)
    short_name = as_text(record.get("shortName")) or short_name
    if "namespace" in record:
        namespace = strip_namespace_prefix(as_text(record.get("namespace")))

    tags = _tags(record, name)

    return ClassDefinition(
        name=name,
        short_name=short_name,
        namespace=namespace,
        kind=ClassKind.from_record(kind, abstract=as_flag(record.get("abstract"))),
        file_name=class_file_name(name),
        deprecated=_is_deprecated(record, tags),
        description=as_text(record.get("description")),
        long_description=as_text(record.get("longDescription")),
        extends=_names(record.get("extends"), name, "extends"),
        implements=_names(record.get("implements"), name, "implements"),
        methods=_parse_methods(record, name, short_name),
        properties=_parse_properties(record, name),
        constants=_parse_constants(record, name),
        see_also=parse_see_also(tags),
    )


def _parse_methods(
    record: dict[str, Any], class_name: str, short_name: str
) -> dict[str, MethodDefinition]:
    methods: dict[str, MethodDefinition] = {}
    for m in _entries(record, "methods", class_name):
        method_name = _member_name(m, class_name, "method")
        context = f"{class_name}::{method_name}"
        tags = _tags(m, context)

        ret = m.get("return") or {}
        if not isinstance(ret, dict):
            ret = {"type": ret}
        return_type = strip_namespace_prefix(as_text(ret.get("type")))
        # A method returning its own class is documented with the short name.
        if return_type == class_name:
            return_type = short_name

        arguments = _parse_arguments(m, tags, context)
        methods[method_name] = MethodDefinition(
            name=method_name,
            visibility=_visibility(m, context),
            signature=method_signature(short_name, method_name, arguments, return_type),
            defined_by=class_name,
            return_type=return_type,
            return_description=as_text(ret.get("description")),
            arguments=arguments,
            abstract=as_flag(m.get("abstract")),
            static=as_flag(m.get("static")),
            deprecated=_is_deprecated(m, tags),
            description=as_text(m.get("description")),
            long_description=as_text(m.get("longDescription")),
            see_also=parse_see_also(tags),
        )
    return methods


def _parse_arguments(
    method: dict[str, Any], tags: list[dict[str, Any]], context: str
) -> list[Argument]:
    """Read arguments, letting matching ``param`` tags refine them."""
    param_tags = {
        as_text(t.get("variable")): t for t in tags if t.get("name") == "param"
    }
    arguments = []
    for a in method.get("arguments") or []:
        if not isinstance(a, dict) or not as_text(a.get("name")):
            msg = f"{context}: every argument needs a name"
            raise MetadataError(msg)
        arg_name = as_text(a.get("name"))
        arg_type = as_text(a.get("type"))
        description = as_text(a.get("description"))
        tag = param_tags.get(arg_name)
        if tag:
            arg_type = as_text(tag.get("type")) or arg_type
            description = as_text(tag.get("description")) or description
        arguments.append(Argument(type=arg_type, name=arg_name, description=description))
    return arguments


def _parse_properties(
    record: dict[str, Any], class_name: str
) -> dict[str, PropertyDefinition]:
    properties: dict[str, PropertyDefinition] = {}
    for p in _entries(record, "properties", class_name):
        prop_name = _member_name(p, class_name, "property")
        context = f"{class_name}::{prop_name}"
        visibility = _visibility(p, context)
        prop_type = as_text(p.get("type")) or "mixed"
        default = as_text(p.get("default"))
        properties[prop_name] = PropertyDefinition(
            name=prop_name,
            type=prop_type,
            visibility=visibility,
            signature=property_signature(visibility, prop_type, prop_name, default),
            defined_by=class_name,
            default=default,
            static=as_flag(p.get("static")),
            deprecated=_is_deprecated(p, _tags(p, context)),
            description=as_text(p.get("description")),
            long_description=as_text(p.get("longDescription")),
        )
    return properties


def _parse_constants(
    record: dict[str, Any], class_name: str
) -> dict[str, ConstantDefinition]:
    constants: dict[str, ConstantDefinition] = {}
    for c in _entries(record, "constants", class_name):
        const_name = _member_name(c, class_name, "constant")
        value = as_text(c.get("value"))
        constants[const_name] = ConstantDefinition(
            name=const_name,
            value=value,
            signature=constant_signature(const_name, value),
            defined_by=class_name,
            deprecated=_is_deprecated(c, _tags(c, f"{class_name}::{const_name}")),
            description=as_text(c.get("description")),
            long_description=as_text(c.get("longDescription")),
        )
    return constants


def _entries(record: dict[str, Any], key: str, context: str) -> list[dict[str, Any]]:
    entries = record.get(key) or []
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        msg = f"{context}: '{key}' must be a list of mappings"
        raise MetadataError(msg)
    return entries


def _member_name(entry: dict[str, Any], class_name: str, what: str) -> str:
    name = as_text(entry.get("name"))
    if not name:
        msg = f"{class_name}: {what} without a name"
        raise MetadataError(msg)
    return name


def _names(value: object, context: str, key: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        msg = f"{context}: '{key}' must be a list of type names"
        raise MetadataError(msg)
    return [strip_namespace_prefix(as_text(v)) for v in value if as_text(v)]


def _tags(entry: dict[str, Any], context: str) -> list[dict[str, Any]]:
    tags = entry.get("tags") or []
    if not isinstance(tags, list) or not all(isinstance(t, dict) for t in tags):
        msg = f"{context}: 'tags' must be a list of mappings"
        raise MetadataError(msg)
    return tags


def _visibility(entry: dict[str, Any], context: str) -> str:
    visibility = as_text(entry.get("visibility")).lower() or "public"
    if visibility not in VALID_VISIBILITIES:
        msg = f"{context}: unknown visibility {visibility!r}"
        raise MetadataError(msg)
    return visibility


def _is_deprecated(entry: dict[str, Any], tags: list[dict[str, Any]]) -> bool:
    return as_flag(entry.get("deprecated")) or any(
        t.get("name") == "deprecated" for t in tags
    )
