"""Tag parser for @return / @returns."""

from typing import Any

from doctree.models import Return
from doctree.tag_parsers.tag_value import split_type_prefix, value_text, value_type


def parse_return(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    """Record the return type and description."""
    returns = Return(
        data_type=value_type(value) or ["any"],
        description=_description(value),
    )
    return {**options, "returns": returns}


def _description(value: Any) -> str:
    if isinstance(value, str):
        return split_type_prefix(value)[1]
    return value_text(value)
