"""Tag parsers for events: @event declares one, @fires emits one."""

from typing import Any

from doctree.tag_parsers.tag_value import value_name


def parse_event(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    """Record the name of the event this comment declares."""
    name = value_name(value)
    if not name:
        return dict(options)
    return {**options, "event": name}


def parse_fires(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    """Append an emitted event to ``fires``."""
    name = value_name(value)
    if not name:
        return dict(options)
    fires = options.get("fires", [])
    if name in fires:
        return dict(options)
    return {**options, "fires": [*fires, name]}
