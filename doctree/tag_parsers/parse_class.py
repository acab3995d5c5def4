"""Tag parsers for @class and @extends."""

from typing import Any

from doctree.doc_kind import DocKind
from doctree.tag_parsers.tag_value import value_name


def parse_class(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    result = {**options, "kind": DocKind.CLASS}
    name = value_name(value)
    if name:
        result["name"] = name
    return result


def parse_extends(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    base = value_name(value)
    if not base:
        return dict(options)
    return {**options, "extends": [*options.get("extends", []), base]}
