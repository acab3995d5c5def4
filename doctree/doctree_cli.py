"""Build a doc tree from a tagged syntax dump and print it as YAML or JSON.

The input is the output of a JavaScript parser (Babel/ESTree shaped, as YAML or
JSON) in which every node carries the tokenized tags of its leading doc
comment under a ``tags`` key.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from doctree.build_doc_tree import build_doc_tree
from doctree.load_config import load_config
from doctree.load_syntax_node import load_syntax_dump
from doctree.serialize_doc_tree import serialize_doc_tree

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace) -> int:
    """Execute the build for parsed CLI arguments."""
    if not args.input.exists():
        msg = f"Syntax dump not found: {args.input}"
        raise SystemExit(msg)
    if args.config and not Path(args.config).exists():
        msg = f"Config file not found: {args.config}"
        raise SystemExit(msg)

    config = load_config(args.config)
    try:
        program = load_syntax_dump(args.input)
    except (yaml.YAMLError, ValueError) as e:
        msg = f"Could not read syntax dump {args.input}: {e}"
        raise SystemExit(msg) from e

    root = build_doc_tree(program, config=config)
    data = serialize_doc_tree(
        root,
        include_private=config["output"]["include_private"],
        include_tags=config["output"]["include_tags"],
    )
    text = _dump(data, args.format)

    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(text, encoding="utf-8")
        logger.info("Wrote doc tree to %s", args.out)
    else:
        sys.stdout.write(text)
    return 0


def _dump(data: dict[str, Any], fmt: str) -> str:
    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the build."""
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument(
        "input",
        type=Path,
        help="Syntax dump (YAML or JSON) with tokenized doc-comment tags",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--out",
        type=Path,
        help="Write the tree to this file instead of stdout",
    )
    ap.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml)",
    )
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default: WARNING)",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
