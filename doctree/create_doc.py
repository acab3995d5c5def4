"""Constructor for detached documentation entries."""

from dataclasses import fields
from typing import Any

from doctree.doc_class_for import doc_class_for
from doctree.doc_kind import DocKind
from doctree.models import Doc


def create_doc(
    name: str = "",
    kind: DocKind | str = DocKind.BASE,
    options: dict[str, Any] | None = None,
) -> Doc:
    """Create a detached doc of the requested kind.

    Every field starts at its default; ``options`` is shallow-merged on top.
    Keys that the variant has no field for are kept in ``extras``. The ``kind``
    argument always wins over an option of the same name.
    """
    cls = doc_class_for(kind)
    accepted = {f.name for f in fields(cls) if f.init}

    options = options or {}
    init_args: dict[str, Any] = {}
    extras: dict[str, Any] = dict(options.get("extras") or {})
    for key, value in options.items():
        if key in {"kind", "parent", "extras"}:
            continue
        if key in accepted and key != "name":
            init_args[key] = value
        else:
            extras[key] = value
    # An explicit name argument wins; the option is the fallback.
    option_name = extras.pop("name", None)
    doc_name = name or option_name or ""

    doc = cls(name=doc_name, extras=extras, **init_args)
    if options.get("parent") is not None:
        doc.parent = options["parent"]
    return doc
