"""Tests for child lookup and path resolution."""

from doctree.add_child_doc import add_child_doc
from doctree.child_doc import child_doc
from doctree.create_doc import create_doc
from doctree.doc_kind import DocKind
from doctree.find_doc import find_doc
from doctree.models import ClassDoc, Doc, RootDoc
from doctree.split_doc_path import split_doc_path


def test_split_doc_path() -> None:
    """Verify that dots and hashes both separate segments."""
    assert split_doc_path("Babri.kya") == ["Babri", "kya"]
    assert split_doc_path("Babri#karta") == ["Babri", "karta"]
    assert split_doc_path("a.b#c") == ["a", "b", "c"]
    stack = ["Babri", "kya"]
    copied = split_doc_path(stack)
    assert copied == stack
    assert copied is not stack


def test_child_doc_hit_and_miss(babri: ClassDoc) -> None:
    """Verify that child lookup scans direct children only."""
    prop = add_child_doc(create_doc("kya", DocKind.PROPERTY), babri)
    assert child_doc("kya", babri) is prop
    assert child_doc("nokey", babri) is None


def test_find_doc_by_path(root: RootDoc, babri: ClassDoc) -> None:
    """Verify that a dotted path resolves to the inserted doc."""
    prop = add_child_doc(create_doc("kya", DocKind.PROPERTY), babri)
    assert find_doc("Babri.kya", root) is prop
    assert find_doc("Babri#kya", root) is prop
    assert find_doc("Babri.nokey", root) is None


def test_find_doc_missing_intermediate(root: RootDoc, babri: ClassDoc) -> None:
    """Verify that a missing middle segment fails the whole lookup."""
    add_child_doc(create_doc("kya", DocKind.PROPERTY), babri)
    assert find_doc("Nope.kya", root) is None
    assert find_doc("kya", root) is None


def test_find_doc_relative_to_scope(babri: ClassDoc) -> None:
    """Verify that paths resolve relative to any scope, not only the root."""
    prop = add_child_doc(create_doc("kya", DocKind.PROPERTY), babri)
    assert find_doc("kya", babri) is prop


def test_find_doc_empty_stack_is_root(root: RootDoc) -> None:
    """Verify that an empty stack resolves to the starting scope."""
    assert find_doc([], root) is root


def _all_docs(doc: Doc) -> list[Doc]:
    found = []
    for child in doc.children:
        found.append(child)
        found.extend(_all_docs(child))
    return found


def test_stack_resolves_back_to_doc(root: RootDoc, babri: ClassDoc) -> None:
    """Verify that every doc is found again by its own stack and path."""
    obj = add_child_doc(create_doc("Utils", DocKind.OBJECT), root)
    add_child_doc(create_doc("kya", DocKind.PROPERTY), babri)
    add_child_doc(create_doc("karta", DocKind.METHOD), babri)
    add_child_doc(create_doc("format", DocKind.FUNCTION), obj)

    for doc in _all_docs(root):
        assert find_doc(doc.stack, root) is doc
        assert find_doc(doc.path, root) is doc
