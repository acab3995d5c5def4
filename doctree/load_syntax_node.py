"""Conversion of Babel-shaped syntax dumps into syntax nodes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from doctree.models import Tag
from doctree.syntax_nodes import (
    AssignmentExpression,
    BlockStatement,
    ClassDeclaration,
    ClassMethod,
    ClassProperty,
    DocComment,
    ExpressionStatement,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    MemberExpression,
    ObjectExpression,
    ObjectProperty,
    Program,
    SyntaxNode,
    ThisExpression,
    UnknownNode,
    VariableDeclaration,
    VariableDeclarator,
)

logger = logging.getLogger(__name__)

WRAPPER_TYPES = {"ExportNamedDeclaration", "ExportDefaultDeclaration"}


def load_tags(raw: Any) -> tuple[Tag, ...]:
    """Read ``[{name, value}, ...]`` pairs from the tokenizer output."""
    tags = []
    for entry in raw or []:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name") or entry.get("tagName")
        if name:
            tags.append(Tag(name=str(name).lstrip("@"), value=entry.get("value")))
    return tuple(tags)


def load_syntax_node(raw: dict[str, Any]) -> SyntaxNode:
    """Convert one Babel-shaped node dict (and its subtree) into a SyntaxNode."""
    if not isinstance(raw, dict) or "type" not in raw:
        msg = f"Syntax node without a 'type': {raw!r}"
        raise ValueError(msg)

    node_type = raw["type"]
    tags = load_tags(raw.get("tags"))

    if node_type in WRAPPER_TYPES and isinstance(raw.get("declaration"), dict):
        # Comments attach to the export; move them onto the declaration.
        inner = dict(raw["declaration"])
        inner["tags"] = [*(raw.get("tags") or []), *(inner.get("tags") or [])]
        return load_syntax_node(inner)

    builder = _BUILDERS.get(node_type)
    if builder is None:
        return UnknownNode(type=str(node_type), tags=tags)
    return builder(raw, tags)


def load_program(data: dict[str, Any]) -> Program:
    """Load a Program from a dump that is either the node or wraps it."""
    if isinstance(data, dict) and "program" in data:
        data = data["program"]
    if isinstance(data, dict) and data.get("type") == "File":
        data = data.get("program") or {}
    node = load_syntax_node(data)
    if not isinstance(node, Program):
        return Program(body=(node,))
    return node


def load_syntax_dump(path: Path) -> Program:
    """Load a YAML or JSON syntax dump from disk."""
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    logger.debug("Loaded syntax dump %s", path)
    return load_program(data)


def _opt(raw: Any) -> SyntaxNode | None:
    if isinstance(raw, dict):
        return load_syntax_node(raw)
    return None


def _nodes(raw: Any) -> tuple[SyntaxNode, ...]:
    return tuple(load_syntax_node(n) for n in raw or [] if isinstance(n, dict))


def _block(raw: Any) -> BlockStatement | None:
    if not isinstance(raw, dict):
        return None
    if raw.get("type") != "BlockStatement":
        # Arrow functions with an expression body
        return BlockStatement(body=(load_syntax_node(raw),))
    return BlockStatement(body=_nodes(raw.get("body")), tags=load_tags(raw.get("tags")))


def _param_names(raw: Any) -> tuple[str, ...]:
    names = []
    for p in raw or []:
        if not isinstance(p, dict):
            continue
        if p.get("type") == "AssignmentPattern":
            p = p.get("left") or {}
        elif p.get("type") == "RestElement":
            p = p.get("argument") or {}
        if p.get("name"):
            names.append(str(p["name"]))
    return tuple(names)


def _identifier(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    return Identifier(name=str(raw.get("name", "")), tags=tags)


def _string_key(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    # Quoted keys behave like identifiers for naming purposes.
    return Identifier(name=str(raw.get("value", "")), tags=tags)


def _this(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    return ThisExpression(tags=tags)


def _member(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    return MemberExpression(
        object=load_syntax_node(raw["object"]),
        property=load_syntax_node(raw["property"]),
        computed=bool(raw.get("computed")),
        tags=tags,
    )


def _assignment(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    return AssignmentExpression(
        left=load_syntax_node(raw["left"]),
        right=_opt(raw.get("right")),
        operator=str(raw.get("operator", "=")),
        tags=tags,
    )


def _expression_statement(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    return ExpressionStatement(expression=load_syntax_node(raw["expression"]), tags=tags)


def _block_statement(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    return BlockStatement(body=_nodes(raw.get("body")), tags=tags)


def _class_property(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    return ClassProperty(
        key=load_syntax_node(raw["key"]),
        static=bool(raw.get("static")),
        value=_opt(raw.get("value")),
        tags=tags,
    )


def _class_method(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    return ClassMethod(
        key=load_syntax_node(raw["key"]),
        kind=str(raw.get("kind", "method")),
        static=bool(raw.get("static")),
        params=_param_names(raw.get("params")),
        body=_block(raw.get("body")),
        tags=tags,
    )


def _class(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    body = raw.get("body") or {}
    members = body.get("body") if isinstance(body, dict) else body
    ident = _opt(raw.get("id"))
    return ClassDeclaration(
        id=ident if isinstance(ident, Identifier) else None,
        super_class=_opt(raw.get("superClass")),
        body=_nodes(members),
        tags=tags,
    )


def _function(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    ident = _opt(raw.get("id"))
    return FunctionDeclaration(
        id=ident if isinstance(ident, Identifier) else None,
        params=_param_names(raw.get("params")),
        body=_block(raw.get("body")),
        tags=tags,
    )


def _function_expression(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    return FunctionExpression(
        params=_param_names(raw.get("params")),
        body=_block(raw.get("body")),
        tags=tags,
    )


def _object_property(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    if raw.get("type") == "ObjectMethod":
        value: SyntaxNode | None = FunctionExpression(
            params=_param_names(raw.get("params")), body=_block(raw.get("body"))
        )
    else:
        value = _opt(raw.get("value"))
    return ObjectProperty(key=load_syntax_node(raw["key"]), value=value, tags=tags)


def _object(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    props = [
        n for n in _nodes(raw.get("properties")) if isinstance(n, ObjectProperty)
    ]
    return ObjectExpression(properties=tuple(props), tags=tags)


def _declarator(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    return VariableDeclarator(
        id=load_syntax_node(raw["id"]), init=_opt(raw.get("init")), tags=tags
    )


def _variable_declaration(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    declarators = [
        n for n in _nodes(raw.get("declarations")) if isinstance(n, VariableDeclarator)
    ]
    return VariableDeclaration(
        kind=str(raw.get("kind", "const")), declarations=tuple(declarators), tags=tags
    )


def _doc_comment(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    return DocComment(tags=tags)


def _program(raw: dict[str, Any], tags: tuple[Tag, ...]) -> SyntaxNode:
    return Program(body=_nodes(raw.get("body")), tags=tags)


_BUILDERS: dict[str, Callable[[dict[str, Any], tuple[Tag, ...]], SyntaxNode]] = {
    "Identifier": _identifier,
    "StringLiteral": _string_key,
    "ThisExpression": _this,
    "MemberExpression": _member,
    "AssignmentExpression": _assignment,
    "ExpressionStatement": _expression_statement,
    "BlockStatement": _block_statement,
    "ClassProperty": _class_property,
    "ClassMethod": _class_method,
    "ClassDeclaration": _class,
    "ClassExpression": _class,
    "FunctionDeclaration": _function,
    "FunctionExpression": _function_expression,
    "ArrowFunctionExpression": _function_expression,
    "ObjectProperty": _object_property,
    "ObjectMethod": _object_property,
    "ObjectExpression": _object,
    "VariableDeclarator": _declarator,
    "VariableDeclaration": _variable_declaration,
    "DocComment": _doc_comment,
    "Program": _program,
}
