"""Canonical textual signatures for methods, properties and constants."""

from collections.abc import Sequence

from apidoc_md.member_definitions import Argument


def method_signature(
    class_name: str,
    method_name: str,
    arguments: Sequence[Argument],
    return_type: str,
) -> str:
    """Render ``ClassName::methodName( type name, ... ): returnType``.

    The type prefix of an argument is left out when it has no declared type,
    and the return clause is left out when the return type is empty.
    """
    argument_str = ", ".join(
        f"{a.type} {a.name}" if a.type else a.name for a in arguments
    )
    signature = f"{class_name}::{method_name}( {argument_str} )"
    if return_type:
        signature += f": {return_type}"
    return signature


def property_signature(visibility: str, type_: str, name: str, default: str) -> str:
    """Render ``visibility type name = default``."""
    signature = f"{visibility} {type_} {name}"
    if default:
        signature += f" = {default}"
    return signature


def constant_signature(name: str, value: str) -> str:
    """Render ``const NAME = value``."""
    return f"const {name} = {value}"
