#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for bbml.

Render BbML markup from a file or stdin and paint it in the terminal.

Usage::

    bbml page.html                    # styled output followed by the link list
    bbml page.html --width 100        # wider table budget
    cat page.html | bbml --plain      # unstyled text
    bbml page.html --link 3           # print the target of link [3]

Options not given on the command line are read from the first configuration
file found (``.bbml.toml``, ``.bbml.yaml``, ``.bbml.yml``, ``.bbml.json`` or
``[tool.bbml]`` in ``pyproject.toml``), searching upwards from the working
directory and then the home directory.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.text import Text as RichText

from bbml import __version__
from bbml.api import render
from bbml.cli.config import discover_config_file, load_config_file, merge_configs
from bbml.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_USAGE_ERROR, SUPPORTED_HTML_PARSERS
from bbml.document import Document
from bbml.exceptions import BbmlError
from bbml.links import LinkRegistry
from bbml.logging_utils import configure_logging
from bbml.options.render import RenderOptions
from bbml.style import LINK_COLOR

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``bbml`` command."""
    parser = argparse.ArgumentParser(
        prog="bbml",
        description="Render BbML (Blackboard HTML subset) as styled terminal text.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Markup file to render, or '-' for stdin (default: %(default)s).",
    )
    parser.add_argument(
        "-w", "--width",
        dest="target_width",
        type=int,
        help="Column budget tables must fit within (default: 70).",
    )
    parser.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        help="Maximum markup nesting depth (default: 100).",
    )
    parser.add_argument(
        "--parser",
        dest="html_parser",
        choices=SUPPORTED_HTML_PARSERS,
        help="BeautifulSoup parser backend (default: html.parser).",
    )
    parser.add_argument(
        "-e", "--encoding",
        default="utf-8",
        help="Input file encoding (default: %(default)s).",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print unstyled text instead of using terminal styles.",
    )
    parser.add_argument(
        "--no-links",
        action="store_true",
        help="Do not print the link list after the document.",
    )
    parser.add_argument(
        "--link",
        type=int,
        metavar="N",
        help="Print only the target of link [N] and exit.",
    )
    parser.add_argument(
        "--config",
        help="Configuration file to use instead of automatic discovery.",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        help="Ignore configuration files.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: %(default)s).",
    )
    parser.add_argument("--log-file", help="Also write log output to this file.")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Include timestamps and logger names in log output.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def build_options(args: argparse.Namespace) -> RenderOptions:
    """Combine configuration file values with command-line overrides.

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file cannot be loaded
    ValueError
        If the combined values are invalid

    """
    file_config: Dict[str, Any] = {}
    if args.config:
        file_config = load_config_file(args.config)
    elif not args.no_config:
        config_path = discover_config_file()
        if config_path is not None:
            logger.info("Using configuration file %s", config_path)
            file_config = load_config_file(config_path)

    overrides = {
        "target_width": args.target_width,
        "max_depth": args.max_depth,
        "html_parser": args.html_parser,
    }
    return RenderOptions.from_mapping(merge_configs(file_config, overrides))


def _read_input(source: str, encoding: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding=encoding)


def print_document(console: Console, document: Document, links: list[str], plain: bool, show_links: bool) -> None:
    """Print a rendered document and, optionally, its numbered link list.

    Link labels are padded to a common width so the targets line up.
    """
    if plain:
        console.print(RichText(document.to_plain_text()), soft_wrap=True)
    else:
        console.print(document.to_rich_text(), soft_wrap=True)

    if show_links and links:
        registry = LinkRegistry.from_hrefs(links)
        label_width = registry.index_digits + 2
        console.print()
        console.print(RichText("Links:", style="bold"))
        for index, href in enumerate(registry):
            line = RichText(f"[{index}]".ljust(label_width) + " ")
            line.append(href, style=None if plain else LINK_COLOR.value)
            console.print(line, soft_wrap=True)


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the ``bbml`` command.

    Returns
    -------
    int
        0 on success, 1 on rendering or lookup errors, 2 on usage or
        configuration errors

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace)

    try:
        options = build_options(args)
    except (argparse.ArgumentTypeError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        markup = _read_input(args.input, args.encoding)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read {args.input}: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    console = Console(highlight=False, no_color=args.plain)
    try:
        document, links = render(markup, options)
        if args.link is not None:
            href = LinkRegistry.from_hrefs(links).resolve(args.link)
            console.print(RichText(href), soft_wrap=True)
            return EXIT_SUCCESS
    except BbmlError as e:
        logger.debug("Rendering failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR

    print_document(console, document, links, plain=args.plain, show_links=not args.no_links)
    return EXIT_SUCCESS


__all__ = ["create_parser", "build_options", "print_document", "main"]
