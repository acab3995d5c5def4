"""Assembly of a doc tree from tagged syntax nodes."""

import logging
from collections.abc import Iterable
from typing import Any

from doctree.add_child_doc import add_child_doc
from doctree.add_doc import add_doc
from doctree.apply_tags import apply_tags
from doctree.child_doc import child_doc
from doctree.create_doc import create_doc
from doctree.doc_kind import DocKind
from doctree.doc_parsers.parse_doc import parse_doc
from doctree.find_doc import find_doc
from doctree.load_config import load_config
from doctree.models import Doc, RootDoc, TypedefDoc
from doctree.node_predicates import (
    identifier_name,
    is_assignment_expression,
    member_path,
)
from doctree.syntax_nodes import (
    BlockStatement,
    ClassDeclaration,
    ClassMethod,
    DocComment,
    ExpressionStatement,
    FunctionDeclaration,
    FunctionExpression,
    MemberExpression,
    ObjectExpression,
    ObjectProperty,
    Program,
    SyntaxNode,
    VariableDeclaration,
)

logger = logging.getLogger(__name__)


class DocTreeBuilder:
    """Walks a program once, front to back, placing documented symbols in a tree.

    ``scope`` is the doc new entries are added under; ``this_scope`` is the
    class doc that ``this.x = ...`` assignments belong to, if any.
    """

    def __init__(self, config: dict[str, Any], root: RootDoc | None = None) -> None:
        """Initialize the builder with config and an optional existing root."""
        self.config = config
        self.root = root if root is not None else RootDoc()
        self.known_tags = config.get("custom_tags", [])
        self.warn_unattached = config.get("assembly", {}).get(
            "warn_unattached_tags", True
        )
        self.typedefs: list[TypedefDoc] = []
        self.skipped = 0

    def build(self, program: Program) -> RootDoc:
        """Document every node of ``program`` and return the root."""
        self._walk(program.body, self.root, None)
        self._link_typedefs()
        logger.info(
            "Built doc tree with %d top-level docs (%d comments skipped)",
            len(self.root.children),
            self.skipped,
        )
        return self.root

    def _walk(
        self,
        nodes: Iterable[SyntaxNode],
        scope: Doc,
        this_scope: Doc | None,
        local: bool = False,
    ) -> None:
        for node in nodes:
            self._visit(node, scope, this_scope, local)

    def _visit(
        self, node: SyntaxNode, scope: Doc, this_scope: Doc | None, local: bool
    ) -> None:
        """Document ``node`` and descend into it.

        ``local`` is set inside function bodies: declarations there are not
        members of ``scope``, but ``this.x``, ``Owner.x`` and ``@memberof``
        still place docs.
        """
        if isinstance(node, ClassDeclaration):
            self._visit_class(node, scope, this_scope, local)
        elif isinstance(node, ClassMethod):
            if node.kind != "constructor":
                self._document(node, scope, this_scope, local)
            if node.body is not None:
                self._walk(node.body.body, scope, this_scope, local=True)
        elif isinstance(node, FunctionDeclaration):
            doc = self._document(node, scope, this_scope, local)
            if node.body is not None:
                # An @class function is an old-style constructor.
                owner = doc if doc is not None and doc.kind == DocKind.CLASS else None
                self._walk(node.body.body, scope, owner, local=True)
        elif isinstance(node, VariableDeclaration):
            doc = self._document(node, scope, this_scope, local)
            for declarator in node.declarations:
                self._visit_value(
                    declarator.init,
                    doc,
                    scope,
                    this_scope,
                    local,
                    identifier_name(declarator.id),
                )
        elif isinstance(node, ObjectProperty):
            doc = self._document(node, scope, this_scope, local)
            self._visit_value(
                node.value, doc, scope, this_scope, local, identifier_name(node.key)
            )
        elif isinstance(node, ExpressionStatement):
            self._document(node, scope, this_scope, local)
            if is_assignment_expression(node.expression):
                self._visit_value(
                    node.expression.right, None, scope, this_scope, local, None
                )
        elif isinstance(node, BlockStatement):
            self._walk(node.body, scope, this_scope, local)
        elif isinstance(node, DocComment) or node.tags:
            self._document(node, scope, this_scope, local)

    def _visit_value(
        self,
        value: SyntaxNode | None,
        doc: Doc | None,
        scope: Doc,
        this_scope: Doc | None,
        local: bool,
        name: str | None,
    ) -> None:
        """Descend into the right-hand side of a declaration or property."""
        if isinstance(value, ObjectExpression):
            inner = doc if doc is not None and doc.kind == DocKind.OBJECT else scope
            self._walk(value.properties, inner, this_scope, local and inner is scope)
        elif isinstance(value, FunctionExpression) and value.body is not None:
            owner = doc if doc is not None and doc.kind == DocKind.CLASS else this_scope
            self._walk(value.body.body, scope, owner, local=True)
        elif isinstance(value, ClassDeclaration):
            declared = doc if doc is not None and doc.kind == DocKind.CLASS else None
            self._visit_class(value, scope, this_scope, local, declared, name)

    def _visit_class(
        self,
        node: ClassDeclaration,
        scope: Doc,
        this_scope: Doc | None,
        local: bool,
        declared: Doc | None = None,
        name: str | None = None,
    ) -> None:
        """Document a class and its members.

        Members of an undocumented class still need an owner, so a named class
        gets a bare ClassDoc. Members of a class with no usable name are skipped.
        """
        doc = declared or self._document(node, scope, this_scope, local)
        if doc is None and not node.tags and not local:
            class_name = identifier_name(node.id) or name
            if class_name:
                doc = self._implicit_class(node, class_name, scope)

        if doc is None:
            for member in node.body:
                if member.tags:
                    self._skip(member, "member of an unnamed or local class")
            return
        self._walk(node.body, doc, doc)

    def _implicit_class(
        self, node: ClassDeclaration, name: str, scope: Doc
    ) -> Doc | None:
        """Return the doc for an undocumented class, creating a bare one if needed."""
        existing = child_doc(name, scope)
        if existing is not None:
            return existing
        options: dict[str, Any] = {}
        base = member_path(node.super_class)
        if base:
            options["extends"] = [base]
        logger.debug("Adding undocumented class %r to hold its documented members", name)
        return self._insert(create_doc(name, DocKind.CLASS, options), scope)

    def _document(
        self,
        node: SyntaxNode,
        scope: Doc,
        this_scope: Doc | None,
        local: bool = False,
    ) -> Doc | None:
        """Turn one tagged node into a doc and place it; None if nothing applies."""
        if not node.tags:
            return None

        options = apply_tags(node.tags, known_tags=self.known_tags)
        doc = parse_doc(node, options)
        if doc is None:
            self._skip(node, "no documentable symbol")
            return None

        target = self._target_scope(node, doc, options, scope, this_scope, local)
        if target is None:
            return None
        return self._insert(doc, target)

    def _target_scope(
        self,
        node: SyntaxNode,
        doc: Doc,
        options: dict[str, Any],
        scope: Doc,
        this_scope: Doc | None,
        local: bool,
    ) -> Doc | None:
        memberof = options.get("memberof")
        if memberof:
            target = find_doc(memberof, self.root)
            if target is None:
                self._skip(node, f"unknown @memberof {memberof!r}")
            return target

        owner = getattr(doc, "object", None)
        if owner is None and isinstance(node, ExpressionStatement):
            # Assignments to computed members never produce an owner.
            left = getattr(node.expression, "left", None)
            if isinstance(left, MemberExpression):
                owner = member_path(left.object)

        if owner == "this":
            if this_scope is None:
                self._skip(node, "'this' outside a documented class")
            return this_scope
        if owner:
            target = find_doc(owner, scope) or find_doc(owner, self.root)
            if target is None:
                self._skip(node, f"unknown owner {owner!r}")
            return target
        if local:
            self._skip(node, "local declaration inside a function body")
            return None
        return scope

    def _insert(self, doc: Doc, scope: Doc) -> Doc | None:
        """Place ``doc`` under ``scope``; a same-named doc hands over its children."""
        existing = child_doc(doc.name, scope)
        if existing is not None and existing is not doc:
            logger.debug("Merging %r into existing doc at %s", doc.name, existing.path)
            for child in list(existing.children):
                add_child_doc(child, doc)

        doc.stack = [*scope.stack, doc.name]
        placed = add_doc(doc, self.root)
        if placed is None:
            logger.warning("Could not place %r: parent scope is not in the tree", doc.name)
            return None
        if isinstance(placed, TypedefDoc):
            self.typedefs.append(placed)
        return placed

    def _link_typedefs(self) -> None:
        """Point each typedef at the doc it aliases, when that doc exists."""
        for typedef in self.typedefs:
            if len(typedef.data_type) != 1:
                continue
            org = find_doc(typedef.data_type[0], self.root)
            if org is not None and org is not typedef:
                typedef.org = org

    def _skip(self, node: SyntaxNode, reason: str) -> None:
        self.skipped += 1
        if self.warn_unattached:
            tag_names = ", ".join(f"@{t.name}" for t in node.tags)
            logger.warning(
                "Skipping doc comment (%s) on %s: %s",
                tag_names,
                type(node).__name__,
                reason,
            )


def build_doc_tree(
    program: Program,
    root: RootDoc | None = None,
    config: dict[str, Any] | None = None,
) -> RootDoc:
    """Build (or extend) a doc tree from a parsed program."""
    builder = DocTreeBuilder(config if config is not None else load_config(), root)
    return builder.build(program)
