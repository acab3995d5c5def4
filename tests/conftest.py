"""Shared fixtures for doc tree tests."""

import pytest

from doctree.add_child_doc import add_child_doc
from doctree.create_doc import create_doc
from doctree.doc_kind import DocKind
from doctree.models import ClassDoc, RootDoc


@pytest.fixture
def root() -> RootDoc:
    """An empty tree root."""
    return RootDoc()


@pytest.fixture
def babri(root: RootDoc) -> ClassDoc:
    """A class named Babri attached directly under the root."""
    cls = create_doc("Babri", DocKind.CLASS)
    add_child_doc(cls, root)
    return cls
