"""Tag parser for @property, which lists the fields of a typedef."""

from typing import Any

from doctree.tag_parsers.tag_value import as_param


def parse_property(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    """Append a field to ``properties``."""
    prop = as_param(value)
    if prop is None:
        return dict(options)
    return {**options, "properties": [*options.get("properties", []), prop]}
