"""Tag parsers for prose: @brief/@summary and @description."""

from typing import Any

from doctree.tag_parsers.tag_value import value_text


def parse_brief(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "brief": value_text(value)}


def parse_description(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "description": value_text(value)}
