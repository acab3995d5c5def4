"""Insertion of a doc at its own qualified path in a tree."""

import logging
from typing import TypeVar

from doctree.add_child_doc import add_child_doc
from doctree.child_doc import child_doc
from doctree.models import Doc
from doctree.split_doc_path import split_doc_path

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Doc)


def add_doc(doc: D, root: Doc) -> D | None:
    """Add ``doc`` under the scope named by its stack (or path).

    Ancestors are never created on the fly: if any of them is missing the doc
    is left detached and None is returned.
    """
    if doc.stack:
        doc_stack = list(doc.stack)
    elif doc.path:
        doc_stack = split_doc_path(doc.path)
    else:
        doc_stack = [doc.name]

    scope = root
    for segment in doc_stack[:-1]:
        child = child_doc(segment, scope)
        if child is None:
            logger.debug(
                "Cannot add %r: missing ancestor %r", ".".join(doc_stack), segment
            )
            return None
        scope = child

    return add_child_doc(doc, scope)
