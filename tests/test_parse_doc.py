"""Tests for choosing and running node-shape parsers."""

from doctree.doc_kind import DocKind
from doctree.doc_parsers.parse_doc import infer_doc_kind, parse_doc
from doctree.models import (
    ClassDoc,
    FunctionDoc,
    MethodDoc,
    ObjectDoc,
    Param,
    PropertyDoc,
    Tag,
    TypedefDoc,
)
from doctree.syntax_nodes import (
    ClassDeclaration,
    ClassMethod,
    DocComment,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    ObjectExpression,
    ObjectProperty,
    UnknownNode,
    VariableDeclaration,
    VariableDeclarator,
)


def test_class_declaration() -> None:
    """Verify that a class gets its base class and constructor params."""
    ctor = ClassMethod(
        key=Identifier(name="constructor"),
        kind="constructor",
        params=("opts",),
        tags=(Tag("param", {"name": "opts", "type": "object"}),),
    )
    node = ClassDeclaration(
        id=Identifier(name="Babri"),
        super_class=Identifier(name="EventEmitter"),
        body=(ctor,),
    )
    doc = parse_doc(node, {})
    assert isinstance(doc, ClassDoc)
    assert doc.name == "Babri"
    assert doc.extends == ["EventEmitter"]
    assert doc.params == [Param(name="opts", data_type=["object"])]


def test_class_tag_on_function() -> None:
    """Verify that an @class function declaration is a class."""
    node = FunctionDeclaration(id=Identifier(name="Legacy"), params=("a",))
    doc = parse_doc(node, {"kind": DocKind.CLASS})
    assert isinstance(doc, ClassDoc)
    assert doc.params == [Param(name="a")]


def test_method_and_constructor() -> None:
    """Verify that plain methods are parsed and constructors are not."""
    method = ClassMethod(key=Identifier(name="karta"), params=("kyu",))
    doc = parse_doc(method, {})
    assert isinstance(doc, MethodDoc)
    assert doc.scope == "instance"
    assert doc.params == [Param(name="kyu")]

    ctor = ClassMethod(key=Identifier(name="constructor"), kind="constructor")
    assert parse_doc(ctor, {}) is None


def test_tag_params_win_over_node_params() -> None:
    """Verify that documented params replace the bare node parameter names."""
    method = ClassMethod(key=Identifier(name="karta"), params=("kyu",))
    documented = [Param(name="kyu", data_type=["boolean"])]
    doc = parse_doc(method, {"params": documented})
    assert isinstance(doc, MethodDoc)
    assert doc.params == documented


def test_function_declaration_and_expression() -> None:
    """Verify that both function forms produce function docs."""
    decl = FunctionDeclaration(id=Identifier(name="helper"))
    assert isinstance(parse_doc(decl, {}), FunctionDoc)

    arrow = VariableDeclaration(
        declarations=(
            VariableDeclarator(
                id=Identifier(name="double"), init=FunctionExpression(params=("n",))
            ),
        )
    )
    doc = parse_doc(arrow, {})
    assert isinstance(doc, FunctionDoc)
    assert doc.name == "double"
    assert doc.params == [Param(name="n")]


def test_object_literal() -> None:
    """Verify that object literals become object docs."""
    node = VariableDeclaration(
        declarations=(
            VariableDeclarator(id=Identifier(name="Utils"), init=ObjectExpression()),
        )
    )
    assert isinstance(parse_doc(node, {}), ObjectDoc)


def test_object_members() -> None:
    """Verify the kinds inferred for object literal members."""
    method = ObjectProperty(key=Identifier(name="fmt"), value=FunctionExpression())
    nested = ObjectProperty(key=Identifier(name="inner"), value=ObjectExpression())
    plain = ObjectProperty(key=Identifier(name="n"), value=Identifier(name="x"))
    assert infer_doc_kind(method) == DocKind.METHOD
    assert infer_doc_kind(nested) == DocKind.OBJECT
    doc = parse_doc(plain, {})
    assert isinstance(doc, PropertyDoc)
    assert doc.scope == "static"


def test_typedef_comment() -> None:
    """Verify that a lone @typedef comment produces a typedef."""
    options = {"kind": DocKind.TYPEDEF, "name": "Typed", "data_type": ["object"]}
    doc = parse_doc(DocComment(), options)
    assert isinstance(doc, TypedefDoc)
    assert doc.alias == "Typed"
    assert doc.data_type == ["object"]


def test_typedef_requires_name() -> None:
    """Verify that an unnamed typedef is not applicable."""
    assert parse_doc(DocComment(), {"kind": DocKind.TYPEDEF}) is None


def test_unknown_shape_is_not_applicable() -> None:
    """Verify that nodes with no documentable shape yield nothing."""
    assert parse_doc(UnknownNode(type="IfStatement"), {}) is None
    assert parse_doc(DocComment(), {}) is None
