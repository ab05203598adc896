#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the markbook library.

This module centralizes the literal types, default option values and limits
used across the lexer, parser, renderers and the host record. Constants are
organized by category:

1. Type Definitions - Literal types and type aliases
2. Lexical Markers - Delimiters recognised by the lexer
3. Rendering Defaults - HTML, chat, plain text and rich defaults
4. Host Record Limits - Title/content bounds owned by the host
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

RendererName = Literal["html", "chat", "plain", "rich"]
ChatColor = Literal[
    "black",
    "dark_blue",
    "dark_green",
    "dark_aqua",
    "dark_red",
    "dark_purple",
    "gold",
    "gray",
    "dark_gray",
    "blue",
    "green",
    "aqua",
    "red",
    "light_purple",
    "yellow",
    "white",
]

# =============================================================================
# Lexical Markers
# =============================================================================

MAX_HEADING_LEVEL = 6
HEADER_MARKER = "#"
CODE_FENCE = "```"
INLINE_CODE_MARKER = "`"
BOLD_MARKER = "**"
ITALIC_MARKER = "*"
STRIKETHROUGH_MARKER = "~~"
UNDERSCORE_BOLD_MARKER = "__"
UNDERSCORE_ITALIC_MARKER = "_"
UNORDERED_LIST_MARKERS = frozenset("-+*")
BLOCKQUOTE_MARKER = ">"
LINK_PAYLOAD_SEPARATOR = "|"

# =============================================================================
# Rendering Defaults
# =============================================================================

# HTML
HTML_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)
DEFAULT_HTML_LANGUAGE_CLASS_PREFIX = "language-"
DEFAULT_HTML_TITLE = "Document"

# Game chat formatting codes (section sign + code character)
CHAT_SECTION_SIGN = "§"
CHAT_COLOR_CODES: dict[str, str] = {
    "black": "0",
    "dark_blue": "1",
    "dark_green": "2",
    "dark_aqua": "3",
    "dark_red": "4",
    "dark_purple": "5",
    "gold": "6",
    "gray": "7",
    "dark_gray": "8",
    "blue": "9",
    "green": "a",
    "aqua": "b",
    "red": "c",
    "light_purple": "d",
    "yellow": "e",
    "white": "f",
}
CHAT_FORMAT_CODES: dict[str, str] = {
    "obfuscated": "k",
    "bold": "l",
    "strikethrough": "m",
    "underline": "n",
    "italic": "o",
    "reset": "r",
}
DEFAULT_CHAT_HEADING_COLORS: dict[int, str] = {
    1: "dark_blue",
    2: "blue",
    3: "dark_green",
    4: "green",
    5: "dark_purple",
}
DEFAULT_CHAT_HEADING_FALLBACK_COLOR = "black"
DEFAULT_CHAT_BOLD_HEADING_LEVELS = frozenset({1, 2})
DEFAULT_CHAT_CODE_COLOR = "green"
DEFAULT_CHAT_LINK_COLOR = "aqua"
DEFAULT_CHAT_QUOTE_COLOR = "gray"
DEFAULT_CHAT_IMAGE_COLOR = "yellow"

# Lists (shared by the text-like renderers)
DEFAULT_BULLET = "• "

# Rich (terminal) styles
DEFAULT_RICH_HEADING_STYLES: dict[int, str] = {
    1: "bold blue",
    2: "bold bright_blue",
    3: "green",
    4: "bright_green",
    5: "magenta",
}
DEFAULT_RICH_HEADING_FALLBACK_STYLE = "default"
DEFAULT_RICH_CODE_STYLE = "green"
DEFAULT_RICH_LINK_STYLE = "underline cyan"
DEFAULT_RICH_QUOTE_STYLE = "italic bright_black"

# =============================================================================
# Host Record Limits
# =============================================================================

TAG_TITLE = "title"
TAG_CONTENT = "content"
MAX_TITLE_LENGTH = 100
MAX_CONTENT_LENGTH = 32767

# =============================================================================
# Command Line
# =============================================================================

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
