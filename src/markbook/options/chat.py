#  Copyright (c) 2025 Tom Villani, Ph.D.
# markbook/options/chat.py
"""Configuration options for game-chat formatting rendering.

The chat renderer emits legacy section-sign formatting codes. Colours are
configured by name (``"dark_blue"``, ``"gray"`` ...) and validated against
the known colour table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from markbook.constants import (
    CHAT_COLOR_CODES,
    DEFAULT_BULLET,
    DEFAULT_CHAT_BOLD_HEADING_LEVELS,
    DEFAULT_CHAT_CODE_COLOR,
    DEFAULT_CHAT_HEADING_COLORS,
    DEFAULT_CHAT_HEADING_FALLBACK_COLOR,
    DEFAULT_CHAT_IMAGE_COLOR,
    DEFAULT_CHAT_LINK_COLOR,
    DEFAULT_CHAT_QUOTE_COLOR,
)
from markbook.options.base import BaseRendererOptions, freeze_mapping


@dataclass(frozen=True)
class ChatRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-chat-formatting rendering.

    Parameters
    ----------
    heading_colors : Mapping[int, str]
        Colour name per heading level. Levels missing from the mapping use
        ``heading_fallback_color``.
    heading_fallback_color : str, default "black"
        Neutral colour for heading levels without an explicit colour.
    bold_heading_levels : frozenset[int], default {1, 2}
        Heading levels that are additionally rendered bold.
    code_color : str, default "green"
        Colour for inline code and code blocks.
    link_color : str, default "aqua"
        Colour for link text (links are also underlined).
    quote_color : str, default "gray"
        Colour for blockquotes (blockquotes are also italic).
    image_color : str, default "yellow"
        Colour for image placeholders.
    bullet : str, default "• "
        Prefix for unordered list items.

    """

    heading_colors: Mapping[int, str] = field(
        default_factory=lambda: dict(DEFAULT_CHAT_HEADING_COLORS),
        hash=False,
        metadata={"help": "Colour name per heading level", "importance": "advanced"},
    )
    heading_fallback_color: str = field(
        default=DEFAULT_CHAT_HEADING_FALLBACK_COLOR,
        metadata={"help": "Colour for heading levels without a mapping", "type": str, "importance": "advanced"},
    )
    bold_heading_levels: frozenset[int] = field(
        default=DEFAULT_CHAT_BOLD_HEADING_LEVELS,
        metadata={"help": "Heading levels rendered bold", "importance": "advanced"},
    )
    code_color: str = field(
        default=DEFAULT_CHAT_CODE_COLOR,
        metadata={"help": "Colour for inline code and code blocks", "type": str, "importance": "core"},
    )
    link_color: str = field(
        default=DEFAULT_CHAT_LINK_COLOR,
        metadata={"help": "Colour for link text", "type": str, "importance": "core"},
    )
    quote_color: str = field(
        default=DEFAULT_CHAT_QUOTE_COLOR,
        metadata={"help": "Colour for blockquotes", "type": str, "importance": "core"},
    )
    image_color: str = field(
        default=DEFAULT_CHAT_IMAGE_COLOR,
        metadata={"help": "Colour for image placeholders", "type": str, "importance": "advanced"},
    )
    bullet: str = field(
        default=DEFAULT_BULLET,
        metadata={"help": "Prefix for unordered list items", "type": str, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate colour names.

        Raises
        ------
        ValueError
            If any configured colour is not a known chat colour.

        """
        super().__post_init__()
        freeze_mapping(self, "heading_colors")
        colors = [
            self.heading_fallback_color,
            self.code_color,
            self.link_color,
            self.quote_color,
            self.image_color,
            *self.heading_colors.values(),
        ]
        for color in colors:
            if color not in CHAT_COLOR_CODES:
                raise ValueError(f"Unknown chat colour: {color!r}")
