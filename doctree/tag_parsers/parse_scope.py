"""Tag parsers for scope: @scope, @static, @instance, @inner."""

from typing import Any

from doctree.tag_parsers.tag_value import value_text


def parse_scope(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    """Handle an explicit, free-form ``@scope <name>``."""
    scope = value_text(value)
    if not scope:
        return dict(options)
    return {**options, "scope": scope}


def parse_static(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "scope": "static"}


def parse_instance(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "scope": "instance"}


def parse_inner(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "scope": "inner"}
