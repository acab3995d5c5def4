"""The mapping from tag name to tag parser, built once at import time."""

from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from doctree.tag_parsers.parse_access import (
    parse_access,
    parse_private,
    parse_protected,
    parse_public,
)
from doctree.tag_parsers.parse_class import parse_class, parse_extends
from doctree.tag_parsers.parse_event import parse_event, parse_fires
from doctree.tag_parsers.parse_member import parse_member, parse_memberof
from doctree.tag_parsers.parse_param import parse_param
from doctree.tag_parsers.parse_property import parse_property
from doctree.tag_parsers.parse_return import parse_return
from doctree.tag_parsers.parse_scope import (
    parse_inner,
    parse_instance,
    parse_scope,
    parse_static,
)
from doctree.tag_parsers.parse_text import parse_brief, parse_description
from doctree.tag_parsers.parse_typedef import parse_typedef
from doctree.tag_parsers.parse_version import (
    parse_alpha,
    parse_beta,
    parse_deprecated,
    parse_internal,
)

TagParser = Callable[[Any, dict[str, Any]], dict[str, Any]]

TAG_PARSERS: MappingProxyType[str, TagParser] = MappingProxyType(
    {
        # access
        "access": parse_access,
        "public": parse_public,
        "protected": parse_protected,
        "private": parse_private,
        # signatures
        "param": parse_param,
        "arg": parse_param,
        "argument": parse_param,
        "return": parse_return,
        "returns": parse_return,
        # scope
        "scope": parse_scope,
        "static": parse_static,
        "instance": parse_instance,
        "inner": parse_inner,
        # kinds
        "class": parse_class,
        "constructor": parse_class,
        "extends": parse_extends,
        "augments": parse_extends,
        "typedef": parse_typedef,
        "property": parse_property,
        "prop": parse_property,
        "member": parse_member,
        "var": parse_member,
        "memberof": parse_memberof,
        # events
        "event": parse_event,
        "fires": parse_fires,
        "emits": parse_fires,
        # release stage
        "alpha": parse_alpha,
        "beta": parse_beta,
        "internal": parse_internal,
        "deprecated": parse_deprecated,
        # prose
        "brief": parse_brief,
        "summary": parse_brief,
        "description": parse_description,
        "desc": parse_description,
    }
)


def tag_parser_for(tag_name: str) -> TagParser | None:
    """Return the parser for a tag name (with or without the leading ``@``)."""
    return TAG_PARSERS.get(tag_name.lstrip("@").lower())
