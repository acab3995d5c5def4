"""Syntax node shapes the doc-tree builder understands.

These mirror the Babel/ESTree node types the builder needs and nothing more.
Every node carries the tokenized tags of the doc comment that precedes it.
"""

from __future__ import annotations

from dataclasses import dataclass

from doctree.models import Tag


@dataclass(frozen=True, kw_only=True)
class SyntaxNode:
    """Base for all syntax nodes."""

    tags: tuple[Tag, ...] = ()


@dataclass(frozen=True, kw_only=True)
class Identifier(SyntaxNode):
    name: str


@dataclass(frozen=True, kw_only=True)
class ThisExpression(SyntaxNode):
    pass


@dataclass(frozen=True, kw_only=True)
class MemberExpression(SyntaxNode):
    object: SyntaxNode
    property: SyntaxNode
    computed: bool = False


@dataclass(frozen=True, kw_only=True)
class AssignmentExpression(SyntaxNode):
    left: SyntaxNode
    right: SyntaxNode | None = None
    operator: str = "="


@dataclass(frozen=True, kw_only=True)
class ExpressionStatement(SyntaxNode):
    expression: SyntaxNode


@dataclass(frozen=True, kw_only=True)
class BlockStatement(SyntaxNode):
    body: tuple[SyntaxNode, ...] = ()


@dataclass(frozen=True, kw_only=True)
class ClassProperty(SyntaxNode):
    key: SyntaxNode
    static: bool = False
    value: SyntaxNode | None = None


@dataclass(frozen=True, kw_only=True)
class ClassMethod(SyntaxNode):
    """A method inside a class body; ``kind`` is method, constructor, get or set."""

    key: SyntaxNode
    kind: str = "method"
    static: bool = False
    params: tuple[str, ...] = ()
    body: BlockStatement | None = None


@dataclass(frozen=True, kw_only=True)
class ClassDeclaration(SyntaxNode):
    id: Identifier | None = None
    super_class: SyntaxNode | None = None
    body: tuple[SyntaxNode, ...] = ()


@dataclass(frozen=True, kw_only=True)
class FunctionDeclaration(SyntaxNode):
    id: Identifier | None = None
    params: tuple[str, ...] = ()
    body: BlockStatement | None = None


@dataclass(frozen=True, kw_only=True)
class FunctionExpression(SyntaxNode):
    """A function or arrow function used as a value."""

    params: tuple[str, ...] = ()
    body: BlockStatement | None = None


@dataclass(frozen=True, kw_only=True)
class ObjectProperty(SyntaxNode):
    key: SyntaxNode
    value: SyntaxNode | None = None


@dataclass(frozen=True, kw_only=True)
class ObjectExpression(SyntaxNode):
    properties: tuple[ObjectProperty, ...] = ()


@dataclass(frozen=True, kw_only=True)
class VariableDeclarator(SyntaxNode):
    id: SyntaxNode
    init: SyntaxNode | None = None


@dataclass(frozen=True, kw_only=True)
class VariableDeclaration(SyntaxNode):
    kind: str = "const"
    declarations: tuple[VariableDeclarator, ...] = ()


@dataclass(frozen=True, kw_only=True)
class DocComment(SyntaxNode):
    """A doc comment that is not attached to any code, e.g. a lone @typedef."""


@dataclass(frozen=True, kw_only=True)
class Program(SyntaxNode):
    body: tuple[SyntaxNode, ...] = ()


@dataclass(frozen=True, kw_only=True)
class UnknownNode(SyntaxNode):
    """Any node type the builder has no use for."""

    type: str
