"""Parser for object literal docs (``const Utils = { ... }``)."""

from typing import Any

from doctree.create_doc import create_doc
from doctree.doc_kind import DocKind
from doctree.models import ObjectDoc
from doctree.node_predicates import identifier_name
from doctree.syntax_nodes import (
    ObjectExpression,
    ObjectProperty,
    SyntaxNode,
    VariableDeclaration,
)


def parse_object_doc(node: SyntaxNode | None, options: dict[str, Any]) -> ObjectDoc | None:
    name: str | None = None
    if isinstance(node, VariableDeclaration) and len(node.declarations) == 1:
        declarator = node.declarations[0]
        if isinstance(declarator.init, ObjectExpression):
            name = identifier_name(declarator.id)
    elif isinstance(node, ObjectProperty) and isinstance(node.value, ObjectExpression):
        name = identifier_name(node.key)

    name = name or options.get("name")
    if not name:
        return None
    return create_doc(name, DocKind.OBJECT, dict(options))
