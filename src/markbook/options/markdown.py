#  Copyright (c) 2025 Tom Villani, Ph.D.
# markbook/options/markdown.py
"""Configuration options for lexing and parsing the markup.

This module defines the options shared by the lexer and the parser.
"""

from dataclasses import dataclass, field

from markbook.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for the markdown lexer and parser.

    Parameters
    ----------
    underscore_emphasis : bool, default False
        Accept ``_italic_`` and ``__bold__`` in addition to the asterisk forms.
        Disabled by default so identifiers such as ``snake_case_name`` stay
        plain text.
    emit_line_breaks : bool, default False
        Emit a ``LineBreak`` node for each blank line at document level
        instead of silently skipping it.

    Examples
    --------
        >>> from markbook.options import MarkdownParserOptions
        >>> from markbook.api import parse_markdown
        >>> doc = parse_markdown("__bold__", MarkdownParserOptions(underscore_emphasis=True))

    """

    underscore_emphasis: bool = field(
        default=False,
        metadata={
            "help": "Treat _text_ and __text__ as italic and bold",
            "cli_name": "underscore-emphasis",
            "importance": "core",
        },
    )
    emit_line_breaks: bool = field(
        default=False,
        metadata={
            "help": "Emit an explicit line break node for blank lines",
            "cli_name": "line-breaks",
            "importance": "advanced",
        },
    )
