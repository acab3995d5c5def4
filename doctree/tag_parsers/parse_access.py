"""Tag parsers for access levels: @access, @public, @protected, @private."""

import logging
from typing import Any

from doctree.doc_kind import VISIBILITIES
from doctree.tag_parsers.tag_value import value_text

logger = logging.getLogger(__name__)


def parse_access(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    """Handle ``@access <level>``."""
    level = value_text(value).lower()
    if level not in VISIBILITIES:
        logger.debug("Ignoring unknown access level %r", level)
        return dict(options)
    return {**options, "visibility": level}


def parse_public(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "visibility": "public"}


def parse_protected(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "visibility": "protected"}


def parse_private(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "visibility": "private"}
