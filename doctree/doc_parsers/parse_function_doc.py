"""Parser for free function docs."""

from typing import Any

from doctree.create_doc import create_doc
from doctree.doc_kind import DocKind
from doctree.models import FunctionDoc, Param
from doctree.node_predicates import identifier_name
from doctree.syntax_nodes import (
    FunctionDeclaration,
    FunctionExpression,
    SyntaxNode,
    VariableDeclaration,
)


def parse_function_doc(
    node: SyntaxNode | None, options: dict[str, Any]
) -> FunctionDoc | None:
    """Create a FunctionDoc for ``function f() {}`` or ``const f = () => {}``."""
    options = dict(options)
    name: str | None = None
    params: tuple[str, ...] = ()

    if isinstance(node, FunctionDeclaration):
        name = node.id.name if node.id else None
        params = node.params
    elif isinstance(node, VariableDeclaration) and len(node.declarations) == 1:
        declarator = node.declarations[0]
        if isinstance(declarator.init, FunctionExpression):
            name = identifier_name(declarator.id)
            params = declarator.init.params

    name = name or options.get("name")
    if not name:
        return None
    if "params" not in options and params:
        options["params"] = [Param(name=p) for p in params]
    return create_doc(name, DocKind.FUNCTION, options)
