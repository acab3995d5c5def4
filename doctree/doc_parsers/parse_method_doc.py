"""Parser for method docs inside class bodies and object literals."""

from typing import Any

from doctree.create_doc import create_doc
from doctree.doc_kind import DocKind
from doctree.models import MethodDoc, Param
from doctree.node_predicates import identifier_name, is_class_method
from doctree.syntax_nodes import FunctionExpression, ObjectProperty, SyntaxNode


def parse_method_doc(node: SyntaxNode | None, options: dict[str, Any]) -> MethodDoc | None:
    """Create a MethodDoc for a plain class or object method.

    Constructors and accessors are not methods: the former documents the
    class, the latter are properties.
    """
    options = dict(options)
    if is_class_method(node):
        if node.kind != "method":
            return None
        name = identifier_name(node.key)
        if not options.get("scope"):
            options["scope"] = "static" if node.static else "instance"
        params = node.params
    elif isinstance(node, ObjectProperty) and isinstance(node.value, FunctionExpression):
        name = identifier_name(node.key)
        if not options.get("scope"):
            options["scope"] = "static"
        params = node.value.params
    else:
        name = None
        params = ()

    name = name or options.get("name")
    if not name:
        return None
    if "params" not in options and params:
        options["params"] = [Param(name=p) for p in params]
    return create_doc(name, DocKind.METHOD, options)
