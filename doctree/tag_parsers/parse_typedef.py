"""Tag parser for @typedef."""

from typing import Any

from doctree.doc_kind import DocKind
from doctree.tag_parsers.tag_value import value_name, value_type


def parse_typedef(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    """Mark the comment as a typedef.

    ``@typedef {object} Typed`` arrives as ``{"type": "object", "name": "Typed"}``
    or as the raw string; the name becomes both the doc name and its alias.
    """
    result = {**options, "kind": DocKind.TYPEDEF}
    data_type = value_type(value)
    if data_type:
        result["data_type"] = data_type
    name = value_name(value)
    if name:
        result["name"] = name
        result["alias"] = name
    return result
