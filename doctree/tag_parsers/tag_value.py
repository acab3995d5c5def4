"""Helpers for normalizing tokenized tag values."""

import re
from typing import Any

from doctree.models import Param

# A leading JSDoc type expression such as "{string|number}". Inline tags like
# "{@link Foo}" are description text, not types.
TYPE_PREFIX = re.compile(r"\s*\{(?!@)([^{}]*)\}\s*")


def as_data_type(raw: Any) -> list[str] | None:
    """Normalize a tag's type expression into a list of type names.

    ``"{string|number}"`` and ``["string", "number"]`` both become
    ``["string", "number"]``. Returns None when no type was given.
    """
    if raw is None:
        return None
    if isinstance(raw, (list, tuple)):
        types = [str(t).strip() for t in raw]
    else:
        types = str(raw).strip().strip("{}").split("|")
    types = [t.strip() for t in types if t.strip()]
    return types or None


def split_type_prefix(text: str) -> tuple[str | None, str]:
    """Split ``"{number} count"`` into ``("number", "count")``."""
    match = TYPE_PREFIX.match(text)
    if match is None:
        return None, text.strip()
    return match.group(1), text[match.end() :].strip()


def value_field(value: Any, key: str) -> Any:
    """Read ``key`` from a dict-shaped value, or None for other shapes."""
    if isinstance(value, dict):
        return value.get(key)
    return None


def value_type(value: Any) -> list[str] | None:
    """Return the data type of a tag value, from a dict or a ``{Type}`` prefix."""
    if isinstance(value, dict):
        return as_data_type(value.get("type"))
    if isinstance(value, str):
        return as_data_type(split_type_prefix(value)[0])
    return None


def value_text(value: Any) -> str:
    """Return the free text of a tag value, whatever its shape."""
    if value is None:
        return ""
    if isinstance(value, dict):
        return str(value.get("description") or value.get("text") or "").strip()
    return str(value).strip()


def _name_and_rest(text: str) -> tuple[str | None, str]:
    rest = split_type_prefix(text)[1]
    if not rest:
        return None, ""
    parts = rest.split(None, 1)
    return parts[0], parts[1].strip() if len(parts) > 1 else ""


def value_name(value: Any) -> str | None:
    """Return the name carried by a tag value, if any."""
    if isinstance(value, dict):
        name = value.get("name")
    elif isinstance(value, str):
        name = _name_and_rest(value)[0]
    else:
        name = None
    return str(name) if name else None


def as_param(value: Any) -> Param | None:
    """Build a Param from ``{name, type, description, optional, default}``.

    String values follow the comment syntax: ``"{type} [name=default] text"``.
    """
    name = value_name(value)
    if not name:
        return None
    optional = bool(value_field(value, "optional"))
    # JSDoc spells optional params as [name] or [name=default]
    if name.startswith("[") and name.endswith("]"):
        optional = True
        name = name[1:-1]
    default = value_field(value, "default")
    if "=" in name:
        name, default = name.split("=", 1)
    data_type = value_type(value) or ["any"]
    if isinstance(value, dict):
        description = value_text(value)
    else:
        description = _name_and_rest(str(value))[1]
    return Param(
        name=name,
        data_type=data_type,
        description=description,
        optional=optional,
        default=str(default) if default is not None else None,
    )
