"""Merging of a user configuration over the built-in defaults."""

from typing import Any

# Lists under these keys extend the defaults instead of replacing them.
ADDITIVE_KEYS = frozenset({"custom_tags"})


def deep_merge(
    base: dict[str, Any],
    update: dict[str, Any],
    additive: frozenset[str] = ADDITIVE_KEYS,
) -> dict[str, Any]:
    """Return ``base`` with ``update`` merged on top.

    Nested mappings merge key by key; any other value in ``update`` replaces
    the one in ``base``. Lists under an additive key are concatenated without
    duplicates, keeping the order in which entries were first seen.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value, additive)
        elif key in additive and isinstance(current, list) and isinstance(value, list):
            merged[key] = list(dict.fromkeys([*current, *value]))
        else:
            merged[key] = value
    return merged
