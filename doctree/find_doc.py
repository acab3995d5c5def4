"""Resolution of a qualified path to a doc in a tree."""

import logging

from doctree.child_doc import child_doc
from doctree.models import Doc
from doctree.split_doc_path import split_doc_path

logger = logging.getLogger(__name__)


def find_doc(path: str | list[str], root: Doc) -> Doc | None:
    """Find the doc whose path relative to ``root`` is ``path``.

    ``path`` is either a string using ``.`` or ``#`` as separators, or a list of
    names such as a doc's ``stack``. A single missing segment fails the whole
    lookup; there is no partial match.
    """
    scope = root
    for segment in split_doc_path(path):
        child = child_doc(segment, scope)
        if child is None:
            logger.debug("No doc named %r under %r", segment, scope.path or "<root>")
            return None
        scope = child
    return scope
