"""Tests for inserting docs at their own qualified path."""

from doctree.add_child_doc import add_child_doc
from doctree.add_doc import add_doc
from doctree.create_doc import create_doc
from doctree.doc_kind import DocKind
from doctree.find_doc import find_doc
from doctree.models import ClassDoc, RootDoc


def test_add_doc_by_stack(root: RootDoc, babri: ClassDoc) -> None:
    """Verify that the doc lands under the scope named by its stack."""
    prop = create_doc("kya", DocKind.PROPERTY, {"stack": ["Babri", "kya"]})
    assert add_doc(prop, root) is prop
    assert prop.parent is babri
    assert find_doc("Babri.kya", root) is prop


def test_add_doc_by_path(root: RootDoc, babri: ClassDoc) -> None:
    """Verify that the path is used when the doc has no stack."""
    method = create_doc("karta", DocKind.METHOD, {"path": "Babri#karta"})
    assert add_doc(method, root) is method
    assert method.path == "Babri.karta"
    assert method.stack == ["Babri", "karta"]


def test_add_doc_descends_multiple_levels(root: RootDoc, babri: ClassDoc) -> None:
    """Verify that ancestor resolution walks past the first segment."""
    inner = add_child_doc(create_doc("Inner", DocKind.OBJECT), babri)
    leaf = create_doc("leaf", DocKind.PROPERTY, {"stack": ["Babri", "Inner", "leaf"]})
    assert add_doc(leaf, root) is leaf
    assert leaf.parent is inner
    assert leaf.path == "Babri.Inner.leaf"


def test_add_doc_without_location_goes_to_root(root: RootDoc) -> None:
    """Verify that a doc with neither stack nor path is added at the top."""
    fn = create_doc("helper", DocKind.FUNCTION)
    assert add_doc(fn, root) is fn
    assert root.children == [fn]


def test_add_doc_missing_ancestor(root: RootDoc, babri: ClassDoc) -> None:
    """Verify that a missing ancestor fails the insertion and nothing is created."""
    prop = create_doc("kya", DocKind.PROPERTY, {"stack": ["Missing", "kya"]})
    assert add_doc(prop, root) is None
    assert prop.parent is None
    assert [c.name for c in root.children] == ["Babri"]
    assert babri.children == []


def test_add_doc_overwrites_in_place(root: RootDoc, babri: ClassDoc) -> None:
    """Verify that inserting a second doc with the same name replaces the first."""
    add_child_doc(create_doc("before", DocKind.PROPERTY), babri)
    add_child_doc(create_doc("kya", DocKind.PROPERTY), babri)
    add_child_doc(create_doc("after", DocKind.PROPERTY), babri)

    replacement = create_doc("kya", DocKind.PROPERTY, {"stack": ["Babri", "kya"]})
    add_doc(replacement, root)

    assert [c.name for c in babri.children] == ["before", "kya", "after"]
    assert babri.children[1] is replacement
