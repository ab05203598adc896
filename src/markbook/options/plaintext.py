#  Copyright (c) 2025 Tom Villani, Ph.D.
# markbook/options/plaintext.py
"""Configuration options for plain text rendering.

This module defines options for rendering the AST to plain text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markbook.constants import DEFAULT_BULLET
from markbook.options.base import BaseRendererOptions, check_positive


@dataclass(frozen=True)
class PlainTextOptions(BaseRendererOptions):
    """Configuration options for plain text rendering.

    All formatting (bold, italic, heading levels ...) is stripped, leaving
    the text content with simple list prefixes.

    Parameters
    ----------
    max_line_width : int or None, default None
        Wrap lines longer than this width at word boundaries. None disables
        wrapping.
    bullet : str, default "• "
        Prefix for unordered list items.
    include_link_urls : bool, default True
        Render links as ``text (url)`` instead of just ``text``.

    Examples
    --------
        >>> from markbook.options import PlainTextOptions
        >>> options = PlainTextOptions(max_line_width=50)

    """

    max_line_width: int | None = field(
        default=None,
        metadata={"help": "Maximum line width for wrapping (None = no wrapping)", "type": int, "importance": "core"},
    )
    bullet: str = field(
        default=DEFAULT_BULLET,
        metadata={"help": "Prefix for unordered list items", "type": str, "importance": "advanced"},
    )
    include_link_urls: bool = field(
        default=True,
        metadata={
            "help": "Append link URLs in parentheses",
            "cli_name": "no-include-link-urls",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate the wrapping width.

        Raises
        ------
        ValueError
            If ``max_line_width`` is not positive.

        """
        super().__post_init__()
        check_positive("max_line_width", self.max_line_width)
