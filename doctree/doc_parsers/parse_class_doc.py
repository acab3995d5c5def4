"""Parser for class docs."""

from typing import Any

from doctree.apply_tags import apply_tags
from doctree.create_doc import create_doc
from doctree.doc_kind import DocKind
from doctree.models import ClassDoc, Param
from doctree.node_predicates import member_path
from doctree.syntax_nodes import (
    ClassDeclaration,
    ClassMethod,
    FunctionDeclaration,
    SyntaxNode,
)


def parse_class_doc(node: SyntaxNode | None, options: dict[str, Any]) -> ClassDoc | None:
    """Create a ClassDoc for a class declaration.

    A ``@class``-tagged function declaration (a pre-ES2015 constructor) or a
    named ``@class`` comment also produces a class.
    """
    options = dict(options)

    if isinstance(node, FunctionDeclaration):
        name = options.get("name") or (node.id.name if node.id else None)
        if name and "params" not in options and node.params:
            options["params"] = [Param(name=p) for p in node.params]
        return create_doc(name, DocKind.CLASS, options) if name else None

    if not isinstance(node, ClassDeclaration):
        if options.get("name"):
            return create_doc(options["name"], DocKind.CLASS, options)
        return None

    name = node.id.name if node.id else options.get("name")
    if not name:
        return None

    base = member_path(node.super_class)
    if base and base not in options.get("extends", []):
        options["extends"] = [*options.get("extends", []), base]

    # Constructor @param tags document the class itself.
    if "params" not in options:
        for member in node.body:
            if isinstance(member, ClassMethod) and member.kind == "constructor":
                ctor_params = apply_tags(member.tags).get("params")
                if ctor_params:
                    options["params"] = ctor_params
                elif member.params:
                    options["params"] = [Param(name=p) for p in member.params]
                break

    return create_doc(name, DocKind.CLASS, options)
