"""Command line entry point: render a YAML/JSON tree to markup."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

from .config import load_config, read_document
from .core.errors import XTypeError
from .core.manager import create_svg_manager
from .dom import Document, to_markup

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="xtype", description="Render declarative element trees.")
    commands = parser.add_subparsers(dest="command", required=True)

    render = commands.add_parser("render", help="Render a tree file to markup")
    render.add_argument("tree", help="Tree config (.yaml/.yml/.json)")
    render.add_argument("-o", "--output", help="Write markup here instead of stdout")
    render.add_argument("-c", "--config", help="Engine config (.yaml/.yml/.json)")
    render.add_argument("-t", "--tags", action="append", default=[],
                        help="Extra tag table to install (builtin name or YAML path)")
    return parser


def render_tree(tree, config=None, tags=()) -> str:
    """Render a tree (a config mapping or a list of them) and return its markup."""
    manager = create_svg_manager(config)
    for table in tags:
        manager.load_tags(table)

    host = Document().create_element("div")
    for item in tree if isinstance(tree, list) else [tree]:
        manager.render(item, host)
    return "".join(to_markup(child) for child in host.children)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    logging.basicConfig(level=config.log_level.upper(), stream=sys.stderr,
                        format="%(name)s %(levelname)s: %(message)s")

    try:
        tree = read_document(args.tree)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        logger.error("Cannot read %s: %s", args.tree, e)
        return 1

    try:
        markup = render_tree(tree, config, args.tags)
    except XTypeError as e:
        logger.error("Render failed: %s", e)
        return 1

    if args.output:
        Path(args.output).write_text(markup + "\n")
    else:
        sys.stdout.write(markup + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
