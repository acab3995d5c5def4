"""Parser for typedef docs."""

from typing import Any

from doctree.create_doc import create_doc
from doctree.doc_kind import DocKind
from doctree.models import TypedefDoc
from doctree.syntax_nodes import SyntaxNode


def parse_typedef_doc(
    node: SyntaxNode | None, options: dict[str, Any]
) -> TypedefDoc | None:
    """Create a TypedefDoc from ``@typedef`` options; the node is not consulted.

    A typedef must be named by its tag. ``org``, the doc the alias stands
    for, is filled in by the tree builder once the tree exists.
    """
    name = options.get("name")
    if not name:
        return None
    options = dict(options)
    options.setdefault("alias", name)
    return create_doc(name, DocKind.TYPEDEF, options)
