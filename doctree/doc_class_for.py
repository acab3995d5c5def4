"""Mapping from a doc kind to the dataclass implementing it."""

from types import MappingProxyType

from doctree.doc_kind import DocKind
from doctree.models import (
    ClassDoc,
    Doc,
    FunctionDoc,
    MethodDoc,
    ObjectDoc,
    PropertyDoc,
    RootDoc,
    TypedefDoc,
)

DOC_CLASSES: MappingProxyType[DocKind, type[Doc]] = MappingProxyType(
    {
        DocKind.BASE: Doc,
        DocKind.ROOT: RootDoc,
        DocKind.CLASS: ClassDoc,
        DocKind.FUNCTION: FunctionDoc,
        DocKind.METHOD: MethodDoc,
        DocKind.OBJECT: ObjectDoc,
        DocKind.PROPERTY: PropertyDoc,
        DocKind.TYPEDEF: TypedefDoc,
    }
)


def doc_class_for(kind: DocKind | str) -> type[Doc]:
    """Return the dataclass for a kind, accepting enum members or their values."""
    try:
        return DOC_CLASSES[DocKind(kind)]
    except (KeyError, ValueError) as e:
        msg = f"Unknown doc kind: {kind!r}"
        raise ValueError(msg) from e
