"""Parser for property docs: assigned members, class fields and accessors."""

from typing import Any

from doctree.create_doc import create_doc
from doctree.doc_kind import DocKind
from doctree.models import PropertyDoc
from doctree.node_predicates import (
    identifier_name,
    is_accessor,
    is_assignment_expression,
    is_class_property,
    is_expression_statement,
    is_member_expression,
    is_this_expression,
    member_path,
)
from doctree.syntax_nodes import ObjectProperty, SyntaxNode, VariableDeclaration


def parse_property_doc(
    node: SyntaxNode | None, options: dict[str, Any]
) -> PropertyDoc | None:
    """Create a PropertyDoc for ``node``, or None if the node is not a property.

    Tag-provided options win; the node shape only fills the gaps (scope, name).
    """
    options = dict(options)
    if not options.get("data_type"):
        options["data_type"] = ["any"]

    if is_expression_statement(node) and is_assignment_expression(node.expression):
        doc = _parse_assigned_property_doc(node.expression.left, options)
        if doc is not None:
            return doc

    if is_class_property(node) or is_accessor(node):
        return _parse_class_property_doc(node, options)

    declared = _declared_name(node)
    if declared:
        if isinstance(node, ObjectProperty) and not options.get("scope"):
            options["scope"] = "static"
        return create_doc(declared, DocKind.PROPERTY, options)

    if options.get("name"):
        return create_doc(options["name"], DocKind.PROPERTY, options)

    return None


def _parse_assigned_property_doc(
    left: SyntaxNode, options: dict[str, Any]
) -> PropertyDoc | None:
    """Handle ``this.member = value`` and ``Owner.member = value``."""
    if not is_member_expression(left) or left.computed:
        return None
    name = identifier_name(left.property)
    owner = "this" if is_this_expression(left.object) else member_path(left.object)
    if not name or not owner:
        return None

    default_scope = "instance" if owner == "this" else "static"
    if owner.endswith(".prototype"):
        owner = owner.removesuffix(".prototype")
        default_scope = "instance"

    options["object"] = owner
    if not options.get("scope"):
        options["scope"] = default_scope
    return create_doc(name, DocKind.PROPERTY, options)


def _declared_name(node: SyntaxNode | None) -> str | None:
    """Name of ``const x = ...`` or of an object literal key ``{x: ...}``."""
    if isinstance(node, VariableDeclaration) and len(node.declarations) == 1:
        return identifier_name(node.declarations[0].id)
    if isinstance(node, ObjectProperty):
        return identifier_name(node.key)
    return None


def _parse_class_property_doc(
    node: SyntaxNode, options: dict[str, Any]
) -> PropertyDoc | None:
    """Handle ``class A { prop = 1; static count = 0; get size() {} }``."""
    name = identifier_name(node.key)
    if not name:
        return None
    if not options.get("scope"):
        options["scope"] = "static" if node.static else "instance"
    return create_doc(name, DocKind.PROPERTY, options)
