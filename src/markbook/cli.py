#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/cli.py
"""Command-line interface for markbook.

Renders a markup file (or standard input) to one of the supported output
formats.

Examples
--------
    $ markbook notes.md --format html --standalone --out notes.html
    $ cat notes.md | markbook render - --format chat
    $ markbook notes.md --format ast

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from markbook import __version__
from markbook.api import MarkdownProcessor
from markbook.ast import ast_to_json
from markbook.constants import DEFAULT_LOG_LEVEL, LOG_LEVELS
from markbook.exceptions import MarkbookError, OutputWriteError, ValidationError
from markbook.logging_utils import configure_logging
from markbook.options import (
    BaseRendererOptions,
    HtmlRendererOptions,
    MarkdownParserOptions,
    PlainTextOptions,
    RichRendererOptions,
)
from markbook.renderers import RichTextRenderer, available_renderers, get_renderer
from markbook.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5

OUTPUT_FORMATS = ("html", "chat", "plain", "rich", "ast")


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (OutputWriteError, OSError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, (ValidationError, ValueError)):
        return EXIT_FORMAT_ERROR

    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``markbook`` command."""
    parser = argparse.ArgumentParser(
        prog="markbook",
        description="Render restricted markdown to HTML, chat formatting codes, plain text or the terminal.",
    )
    parser.add_argument("input", help="Input file to render, or '-' to read standard input")
    parser.add_argument(
        "--format",
        "-f",
        choices=OUTPUT_FORMATS,
        default="html",
        help="Output format (default: html)",
    )
    parser.add_argument("--out", "-o", help="Output file path (default: standard output)")
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")

    parsing_group = parser.add_argument_group("parsing options")
    parsing_group.add_argument(
        "--underscore-emphasis",
        action="store_true",
        help=MarkdownParserOptions.field_help("underscore_emphasis"),
    )
    parsing_group.add_argument(
        "--line-breaks",
        action="store_true",
        help=MarkdownParserOptions.field_help("emit_line_breaks"),
    )

    rendering_group = parser.add_argument_group("rendering options")
    rendering_group.add_argument(
        "--standalone",
        action="store_true",
        help=f"{HtmlRendererOptions.field_help('standalone')} (html format only)",
    )
    rendering_group.add_argument(
        "--width",
        type=int,
        default=None,
        help="Wrap plain output, or set the terminal width for rich output",
    )

    logging_group = parser.add_argument_group("logging options")
    logging_group.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help=f"Set logging level for debugging (default: {DEFAULT_LOG_LEVEL})",
    )
    logging_group.add_argument("--log-file", help="Also write log messages to this file")
    logging_group.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps and logger names",
    )
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    logger.debug(f"Reading input from {path}")
    return path.read_text(encoding="utf-8")


def _renderer_options(parsed_args: argparse.Namespace) -> Optional[BaseRendererOptions]:
    if parsed_args.format == "html":
        return HtmlRendererOptions(standalone=parsed_args.standalone)
    if parsed_args.format == "plain" and parsed_args.width is not None:
        return PlainTextOptions(max_line_width=parsed_args.width)
    if parsed_args.format == "rich" and parsed_args.width is not None:
        return RichRendererOptions(width=parsed_args.width)
    return None


def render_command(parsed_args: argparse.Namespace) -> int:
    """Render one input according to parsed arguments and return an exit code."""
    if parsed_args.standalone and parsed_args.format != "html":
        print("Error: --standalone is only supported with --format html", file=sys.stderr)
        return EXIT_FORMAT_ERROR

    try:
        text = _read_input(parsed_args.input)
    except OSError as e:
        print(f"Error: Cannot read input '{parsed_args.input}': {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        processor = MarkdownProcessor(
            MarkdownParserOptions(
                underscore_emphasis=parsed_args.underscore_emphasis,
                emit_line_breaks=parsed_args.line_breaks,
            )
        )
        document = processor.parse(text)

        if parsed_args.format == "ast":
            output = ast_to_json(document, indent=2)
        else:
            renderer = get_renderer(parsed_args.format, _renderer_options(parsed_args))
            if isinstance(renderer, RichTextRenderer) and not parsed_args.out:
                Console(width=parsed_args.width).print(renderer.render_to_text(document))
                return EXIT_SUCCESS
            output = renderer.render_to_string(document)

        if parsed_args.out:
            BaseRenderer.write_text_output(output, parsed_args.out)
            logger.info(f"Wrote {parsed_args.format} output to {parsed_args.out}")
        else:
            print(output)
    except (MarkbookError, ValueError) as e:
        logger.debug("Render failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the ``markbook`` command.

    Parameters
    ----------
    args : list of str or None, default None
        Command-line arguments; ``sys.argv[1:]`` when None. A leading
        ``render`` subcommand is accepted and ignored.

    Returns
    -------
    int
        Process exit code

    """
    argv = list(sys.argv[1:] if args is None else args)
    if argv and argv[0] == "render":
        argv = argv[1:]

    parser = create_parser()
    parsed_args = parser.parse_args(argv)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)
    logger.debug(f"Available renderers: {', '.join(available_renderers())}")

    return render_command(parsed_args)


if __name__ == "__main__":
    sys.exit(main())
