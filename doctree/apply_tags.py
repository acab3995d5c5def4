"""Folding a comment's tags into the options used to create a doc."""

import logging
from collections.abc import Iterable
from typing import Any

from doctree.models import Tag
from doctree.tag_parsers.registry import tag_parser_for

logger = logging.getLogger(__name__)


def apply_tags(
    tags: Iterable[Tag],
    options: dict[str, Any] | None = None,
    known_tags: Iterable[str] = (),
) -> dict[str, Any]:
    """Run every tag through its parser, in comment order.

    Later tags overwrite fields set by earlier ones. All tags, recognized or
    not, are kept in ``options["tags"]``; unrecognized ones change nothing
    else. Names in ``known_tags`` are accepted without a debug message.
    """
    known = {name.lstrip("@").lower() for name in known_tags}
    result = dict(options or {})
    seen = list(result.get("tags", []))

    for tag in tags:
        seen.append(tag)
        parser = tag_parser_for(tag.name)
        if parser is None:
            if tag.name.lstrip("@").lower() not in known:
                logger.debug("Unrecognized tag @%s kept verbatim", tag.name)
            continue
        result = parser(tag.value, result)

    result["tags"] = seen
    return result
