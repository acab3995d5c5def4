"""Insertion and reparenting of a doc directly under a scope."""

from typing import TypeVar

from doctree.models import Doc

D = TypeVar("D", bound=Doc)


def add_child_doc(doc: D, scope: Doc) -> D:
    """Attach ``doc`` to ``scope`` and return it.

    The doc is first detached from its current parent. A same-named child of
    ``scope`` is replaced in place, keeping sibling order; otherwise the doc is
    appended. ``path`` and ``stack`` are recomputed for the doc and every
    descendant it carries along.
    """
    ancestor: Doc | None = scope
    while ancestor is not None:
        if ancestor is doc:
            msg = f"Cannot attach {doc.name!r} inside its own subtree"
            raise ValueError(msg)
        ancestor = ancestor.parent

    old_parent = doc.parent
    if old_parent is not None:
        for i, child in enumerate(old_parent.children):
            if child is doc:
                del old_parent.children[i]
                break

    children = scope.children
    for i, child in enumerate(children):
        if child.name == doc.name:
            if child is not doc:
                child.parent = None
            children[i] = doc
            break
    else:
        children.append(doc)

    doc.parent = scope
    _refresh_lineage(doc, scope)
    return doc


def _refresh_lineage(doc: Doc, scope: Doc) -> None:
    """Recompute ``stack`` and ``path`` below ``scope``, depth first."""
    doc.stack = [*scope.stack, doc.name]
    doc.path = f"{scope.path}.{doc.name}" if scope.path else doc.name
    for child in doc.children:
        _refresh_lineage(child, doc)
