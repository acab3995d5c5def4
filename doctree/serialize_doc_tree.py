"""Conversion of a doc tree into plain data for YAML/JSON output."""

from dataclasses import asdict
from typing import Any

from doctree.doc_kind import DocKind
from doctree.models import Doc, Param, Return

# Fields emitted on top of the shared base fields, per kind.
VARIANT_FIELDS: dict[DocKind, tuple[str, ...]] = {
    DocKind.BASE: (),
    DocKind.ROOT: (),
    DocKind.CLASS: ("params", "extends"),
    DocKind.FUNCTION: ("params", "returns"),
    DocKind.METHOD: ("scope", "params", "returns"),
    DocKind.OBJECT: (),
    DocKind.PROPERTY: ("scope", "data_type", "object"),
    DocKind.TYPEDEF: ("alias", "data_type", "properties", "org"),
}


def serialize_doc_tree(
    doc: Doc,
    *,
    include_private: bool = True,
    include_tags: bool = False,
) -> dict[str, Any]:
    """Return a nested dict describing ``doc`` and its visible descendants."""
    data: dict[str, Any] = {
        "name": doc.name,
        "kind": doc.kind.value,
        "path": doc.path,
    }
    if doc.kind != DocKind.ROOT:
        data["visibility"] = doc.visibility
        data["version"] = doc.version
    if doc.brief:
        data["brief"] = doc.brief
    if doc.description:
        data["description"] = doc.description
    if doc.fires:
        data["fires"] = list(doc.fires)

    for field_name in VARIANT_FIELDS[doc.kind]:
        value = _plain(getattr(doc, field_name))
        if value not in (None, [], ""):
            data[field_name] = value

    if doc.extras:
        data["extras"] = {k: _plain(v) for k, v in doc.extras.items()}
    if include_tags and doc.tags:
        data["tags"] = [{"name": t.name, "value": _plain(t.value)} for t in doc.tags]

    children = [
        serialize_doc_tree(
            child, include_private=include_private, include_tags=include_tags
        )
        for child in doc.children
        if include_private or child.visibility != "private"
    ]
    if children:
        data["children"] = children
    return data


def _plain(value: Any) -> Any:
    """Reduce model values to YAML-safe builtins."""
    if isinstance(value, Doc):
        # Only a reference: serializing the target would duplicate the subtree.
        return value.path
    if isinstance(value, (Param, Return)):
        return asdict(value)
    if isinstance(value, DocKind):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    return value
