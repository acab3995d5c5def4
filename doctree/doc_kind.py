"""Discriminator for the documentation node variants."""

from enum import Enum


class DocKind(str, Enum):
    """Kinds of documentation entries that can live in a doc tree."""

    BASE = "BaseDoc"
    ROOT = "RootDoc"
    CLASS = "ClassDoc"
    FUNCTION = "FunctionDoc"
    METHOD = "MethodDoc"
    OBJECT = "ObjectDoc"
    PROPERTY = "PropertyDoc"
    TYPEDEF = "TypedefDoc"


VISIBILITIES = ("public", "protected", "private")
