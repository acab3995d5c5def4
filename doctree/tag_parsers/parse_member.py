"""Tag parsers for @member and @memberof."""

from typing import Any

from doctree.doc_kind import DocKind
from doctree.tag_parsers.tag_value import (
    value_field,
    value_name,
    value_text,
    value_type,
)


def parse_member(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    """Mark the comment as documenting a property.

    ``@member {PIXI.filters} [name]`` sets the data type and, when present,
    an explicit name that lets the doc exist without a matching syntax node.
    """
    result = {**options, "kind": DocKind.PROPERTY}
    data_type = value_type(value)
    if data_type:
        result["data_type"] = data_type
    name = value_name(value)
    if name:
        result["name"] = name
    scope = value_field(value, "scope")
    if scope:
        result["scope"] = str(scope)
    return result


def parse_memberof(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    """Record the explicit owner path of the documented symbol."""
    owner = value_name(value) or value_text(value)
    if not owner:
        return dict(options)
    return {**options, "memberof": owner}
