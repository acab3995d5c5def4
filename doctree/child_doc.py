"""Lookup of a direct child doc by name."""

from doctree.models import Doc


def child_doc(name: str, scope: Doc) -> Doc | None:
    """Return the first child of ``scope`` called ``name``, or None."""
    for child in scope.children:
        if child.name == name:
            return child
    return None
