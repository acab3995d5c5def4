"""Utility for splitting qualified doc paths into segments."""

import re

DOC_PATH_SEPARATOR_RE = re.compile(r"[.#]")


def split_doc_path(path: str | list[str]) -> list[str]:
    """Split a dotted or hashed path (``Foo.bar#baz``) into its name segments."""
    if isinstance(path, list):
        return list(path)
    return DOC_PATH_SEPARATOR_RE.split(path)
