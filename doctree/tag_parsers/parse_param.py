"""Tag parser for @param."""

from typing import Any

from doctree.tag_parsers.tag_value import as_param


def parse_param(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    """Append the parameter described by ``value`` to ``params``."""
    param = as_param(value)
    if param is None:
        return dict(options)
    return {**options, "params": [*options.get("params", []), param]}
