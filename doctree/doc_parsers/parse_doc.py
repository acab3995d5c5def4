"""Selection of the node-shape parser for a syntax node and its tags."""

from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from doctree.doc_kind import DocKind
from doctree.doc_parsers.parse_class_doc import parse_class_doc
from doctree.doc_parsers.parse_function_doc import parse_function_doc
from doctree.doc_parsers.parse_method_doc import parse_method_doc
from doctree.doc_parsers.parse_object_doc import parse_object_doc
from doctree.doc_parsers.parse_property_doc import parse_property_doc
from doctree.doc_parsers.parse_typedef_doc import parse_typedef_doc
from doctree.models import Doc
from doctree.node_predicates import is_accessor, is_class_method, is_class_property
from doctree.syntax_nodes import (
    ClassDeclaration,
    ExpressionStatement,
    FunctionDeclaration,
    FunctionExpression,
    ObjectExpression,
    ObjectProperty,
    SyntaxNode,
    VariableDeclaration,
)

DocParser = Callable[[SyntaxNode | None, dict[str, Any]], Doc | None]

DOC_PARSERS: MappingProxyType[DocKind, DocParser] = MappingProxyType(
    {
        DocKind.CLASS: parse_class_doc,
        DocKind.FUNCTION: parse_function_doc,
        DocKind.METHOD: parse_method_doc,
        DocKind.OBJECT: parse_object_doc,
        DocKind.PROPERTY: parse_property_doc,
        DocKind.TYPEDEF: parse_typedef_doc,
    }
)


def infer_doc_kind(node: SyntaxNode | None) -> DocKind | None:
    """Guess the doc kind from the node shape alone."""
    if isinstance(node, ClassDeclaration):
        return DocKind.CLASS
    if isinstance(node, FunctionDeclaration):
        return DocKind.FUNCTION
    if is_class_property(node) or is_accessor(node):
        return DocKind.PROPERTY
    if is_class_method(node):
        return DocKind.METHOD
    if isinstance(node, ExpressionStatement):
        return DocKind.PROPERTY
    if isinstance(node, ObjectProperty):
        if isinstance(node.value, FunctionExpression):
            return DocKind.METHOD
        if isinstance(node.value, ObjectExpression):
            return DocKind.OBJECT
        return DocKind.PROPERTY
    if isinstance(node, VariableDeclaration) and len(node.declarations) == 1:
        init = node.declarations[0].init
        if isinstance(init, FunctionExpression):
            return DocKind.FUNCTION
        if isinstance(init, ObjectExpression):
            return DocKind.OBJECT
        return DocKind.PROPERTY
    return None


def parse_doc(node: SyntaxNode | None, options: dict[str, Any]) -> Doc | None:
    """Produce a detached doc for ``node``, or None when nothing applies.

    A kind forced by a tag (``@typedef``, ``@member``, ``@class``) takes
    precedence over what the node looks like.
    """
    kind = options.get("kind") or infer_doc_kind(node)
    if kind is None:
        return None
    parser = DOC_PARSERS.get(DocKind(kind))
    if parser is None:
        return None
    return parser(node, options)
