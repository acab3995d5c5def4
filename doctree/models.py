"""Data models for documentation entries and the tag values that feed them."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Any

from doctree.doc_kind import DocKind


@dataclass(frozen=True)
class Tag:
    """A single tokenized comment tag, e.g. ``@param`` with its value."""

    name: str
    value: Any = None


@dataclass
class Param:
    """A named, typed slot: a function parameter or a typedef property."""

    name: str
    data_type: list[str] = field(default_factory=lambda: ["any"])
    description: str = ""
    optional: bool = False
    default: str | None = None


@dataclass
class Return:
    """The documented return value of a function or method."""

    data_type: list[str] = field(default_factory=lambda: ["any"])
    description: str = ""


@dataclass(eq=False)
class Doc:
    """Base documentation entry.

    ``path`` and ``stack`` are derived from the parent chain and are recomputed
    whenever the doc is inserted or moved. The parent link is weak: a doc is
    owned by its parent's ``children`` list, not the other way round.
    """

    name: str = ""
    path: str = ""
    stack: list[str] = field(default_factory=list)
    children: list[Doc] = field(default_factory=list, repr=False)
    tags: list[Tag] = field(default_factory=list, repr=False)
    brief: str = ""
    description: str = ""
    visibility: str = "public"
    version: str = "public"
    fires: list[str] = field(default_factory=list)
    extras: dict[str, Any] = field(default_factory=dict)
    kind: DocKind = field(default=DocKind.BASE, init=False)
    _parent_ref: weakref.ReferenceType[Doc] | None = field(
        default=None, init=False, repr=False
    )

    @property
    def parent(self) -> Doc | None:
        """Return the doc this entry is attached to, if any."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: Doc | None) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None


@dataclass(eq=False)
class RootDoc(Doc):
    """The synthetic, unnamed root of a doc tree."""

    kind: DocKind = field(default=DocKind.ROOT, init=False)


@dataclass(eq=False)
class ClassDoc(Doc):
    """A documented class; ``params`` are the constructor parameters."""

    params: list[Param] = field(default_factory=list)
    extends: list[str] = field(default_factory=list)
    kind: DocKind = field(default=DocKind.CLASS, init=False)


@dataclass(eq=False)
class FunctionDoc(Doc):
    """A free-standing documented function."""

    params: list[Param] = field(default_factory=list)
    returns: Return | None = None
    kind: DocKind = field(default=DocKind.FUNCTION, init=False)


@dataclass(eq=False)
class MethodDoc(FunctionDoc):
    """A function that belongs to a class or object."""

    scope: str | None = None
    kind: DocKind = field(default=DocKind.METHOD, init=False)


@dataclass(eq=False)
class ObjectDoc(Doc):
    """A documented object literal acting as a namespace."""

    kind: DocKind = field(default=DocKind.OBJECT, init=False)


@dataclass(eq=False)
class PropertyDoc(Doc):
    """A documented property of a class, object or instance."""

    scope: str | None = None
    data_type: list[str] = field(default_factory=lambda: ["any"])
    object: str | None = None  # owner reference: "this" or an identifier
    kind: DocKind = field(default=DocKind.PROPERTY, init=False)


@dataclass(eq=False)
class TypedefDoc(Doc):
    """A named alias for a type shape."""

    org: Doc | None = field(default=None, repr=False)
    alias: str = ""
    data_type: list[str] = field(default_factory=lambda: ["any"])
    properties: list[Param] = field(default_factory=list)
    kind: DocKind = field(default=DocKind.TYPEDEF, init=False)
