"""Capability checks on syntax nodes."""

from typing import TypeGuard

from doctree.syntax_nodes import (
    AssignmentExpression,
    ClassMethod,
    ClassProperty,
    ExpressionStatement,
    Identifier,
    MemberExpression,
    SyntaxNode,
    ThisExpression,
)


def is_expression_statement(node: SyntaxNode | None) -> TypeGuard[ExpressionStatement]:
    return isinstance(node, ExpressionStatement)


def is_assignment_expression(
    node: SyntaxNode | None,
) -> TypeGuard[AssignmentExpression]:
    return isinstance(node, AssignmentExpression)


def is_this_expression(node: SyntaxNode | None) -> TypeGuard[ThisExpression]:
    return isinstance(node, ThisExpression)


def is_member_expression(node: SyntaxNode | None) -> TypeGuard[MemberExpression]:
    return isinstance(node, MemberExpression)


def is_identifier(node: SyntaxNode | None) -> TypeGuard[Identifier]:
    return isinstance(node, Identifier)


def is_class_property(node: SyntaxNode | None) -> TypeGuard[ClassProperty]:
    return isinstance(node, ClassProperty)


def is_class_method(node: SyntaxNode | None) -> TypeGuard[ClassMethod]:
    return isinstance(node, ClassMethod)


def is_accessor(node: SyntaxNode | None) -> bool:
    """Check if the node is a getter or setter in a class body."""
    return is_class_method(node) and node.kind in {"get", "set"}


def identifier_name(node: SyntaxNode | None) -> str | None:
    """Return the name of an identifier node, or None for any other shape."""
    if is_identifier(node):
        return node.name
    return None


def member_path(node: SyntaxNode | None) -> str | None:
    """Flatten ``a.b.c`` into a dotted path; ``this`` yields ``"this"``."""
    if is_this_expression(node):
        return "this"
    if is_identifier(node):
        return node.name
    if is_member_expression(node) and not node.computed:
        owner = member_path(node.object)
        prop = identifier_name(node.property)
        if owner and prop:
            return f"{owner}.{prop}"
    return None
