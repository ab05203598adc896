#  Copyright (c) 2025 Tom Villani, Ph.D.
# markbook/options/rich.py
"""Configuration options for rich component-tree rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from rich.errors import StyleSyntaxError
from rich.style import Style

from markbook.constants import (
    DEFAULT_BULLET,
    DEFAULT_RICH_CODE_STYLE,
    DEFAULT_RICH_HEADING_FALLBACK_STYLE,
    DEFAULT_RICH_HEADING_STYLES,
    DEFAULT_RICH_LINK_STYLE,
    DEFAULT_RICH_QUOTE_STYLE,
)
from markbook.options.base import BaseRendererOptions, check_positive, freeze_mapping


@dataclass(frozen=True)
class RichRendererOptions(BaseRendererOptions):
    """Configuration options for rendering to ``rich.text.Text`` trees.

    Style values are rich style definitions such as ``"bold blue"``.

    Parameters
    ----------
    heading_styles : Mapping[int, str]
        Style per heading level; missing levels use ``heading_fallback_style``.
    heading_fallback_style : str, default "default"
        Style for heading levels without an explicit style.
    code_style : str, default "green"
        Style for inline code and code blocks.
    link_style : str, default "underline cyan"
        Style for link text. The URL is attached as a terminal hyperlink.
    quote_style : str, default "italic bright_black"
        Style for blockquotes.
    bullet : str, default "• "
        Prefix for unordered list items.
    width : int or None, default None
        Console width used by ``render_to_ansi``.

    """

    heading_styles: Mapping[int, str] = field(
        default_factory=lambda: dict(DEFAULT_RICH_HEADING_STYLES),
        hash=False,
        metadata={"help": "Rich style per heading level", "importance": "advanced"},
    )
    heading_fallback_style: str = field(
        default=DEFAULT_RICH_HEADING_FALLBACK_STYLE,
        metadata={"help": "Style for heading levels without a mapping", "type": str, "importance": "advanced"},
    )
    code_style: str = field(
        default=DEFAULT_RICH_CODE_STYLE,
        metadata={"help": "Style for code", "type": str, "importance": "core"},
    )
    link_style: str = field(
        default=DEFAULT_RICH_LINK_STYLE,
        metadata={"help": "Style for links", "type": str, "importance": "core"},
    )
    quote_style: str = field(
        default=DEFAULT_RICH_QUOTE_STYLE,
        metadata={"help": "Style for blockquotes", "type": str, "importance": "core"},
    )
    bullet: str = field(
        default=DEFAULT_BULLET,
        metadata={"help": "Prefix for unordered list items", "type": str, "importance": "advanced"},
    )
    width: int | None = field(
        default=None,
        metadata={"help": "Console width for ANSI output", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the console width and style definitions.

        Raises
        ------
        ValueError
            If ``width`` is not positive or a style cannot be parsed by rich.

        """
        super().__post_init__()
        check_positive("width", self.width)
        freeze_mapping(self, "heading_styles")

        styles = [
            self.heading_fallback_style,
            self.code_style,
            self.link_style,
            self.quote_style,
            *self.heading_styles.values(),
        ]
        for style in styles:
            try:
                Style.parse(style)
            except StyleSyntaxError as e:
                raise ValueError(f"Invalid rich style {style!r}: {e}") from e
