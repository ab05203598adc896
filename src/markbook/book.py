#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/book.py
"""Persisted book record holding a title and raw markup content.

The record is what a host stores for an editable book: two plain strings
under fixed keys. Length limits belong to the host and are applied only when
an edit is accepted through :meth:`MarkdownBook.with_edits`; parsing and
rendering accept content of any length.

"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from markbook.api import render as render_markup
from markbook.constants import MAX_CONTENT_LENGTH, MAX_TITLE_LENGTH, TAG_CONTENT, TAG_TITLE
from markbook.options.base import BaseRendererOptions

logger = logging.getLogger(__name__)


def _read_string(mapping: Mapping[str, Any], key: str) -> str:
    value = mapping.get(key, "")
    if not isinstance(value, str):
        logger.debug(f"Ignoring non-string value for '{key}': {type(value).__name__}")
        return ""
    return value


@dataclass(frozen=True)
class MarkdownBook:
    """An immutable book record.

    Parameters
    ----------
    title : str, default ""
        Book title; empty means untitled
    content : str, default ""
        Raw markup shown when the book is read

    Examples
    --------
        >>> book = MarkdownBook(title="Notes", content="# Day 1")
        >>> book.to_tag()
        {'title': 'Notes', 'content': '# Day 1'}

    """

    title: str = ""
    content: str = ""

    TAG_TITLE = TAG_TITLE
    TAG_CONTENT = TAG_CONTENT
    MAX_TITLE_LENGTH = MAX_TITLE_LENGTH
    MAX_CONTENT_LENGTH = MAX_CONTENT_LENGTH

    def with_edits(self, title: Optional[str] = None, content: Optional[str] = None) -> MarkdownBook:
        """Return a copy with an accepted edit applied.

        Values longer than the host limits are truncated. ``None`` keeps the
        current value.

        Parameters
        ----------
        title : str or None, default None
            New title
        content : str or None, default None
            New raw markup

        Returns
        -------
        MarkdownBook
            Updated record

        """
        new_title = self.title if title is None else title
        new_content = self.content if content is None else content
        if len(new_title) > MAX_TITLE_LENGTH:
            logger.info(f"Truncating book title from {len(new_title)} to {MAX_TITLE_LENGTH} characters")
            new_title = new_title[:MAX_TITLE_LENGTH]
        if len(new_content) > MAX_CONTENT_LENGTH:
            logger.info(f"Truncating book content from {len(new_content)} to {MAX_CONTENT_LENGTH} characters")
            new_content = new_content[:MAX_CONTENT_LENGTH]
        return replace(self, title=new_title, content=new_content)

    def to_tag(self) -> dict[str, str]:
        """Return the record as a key-value mapping."""
        return {TAG_TITLE: self.title, TAG_CONTENT: self.content}

    @classmethod
    def from_tag(cls, mapping: Mapping[str, Any]) -> MarkdownBook:
        """Load a record from a key-value mapping.

        Missing keys and values that are not strings read as ``""``.
        """
        return cls(title=_read_string(mapping, TAG_TITLE), content=_read_string(mapping, TAG_CONTENT))

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize the record to a JSON object string."""
        return json.dumps(self.to_tag(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> MarkdownBook:
        """Load a record from a JSON object string.

        Raises
        ------
        ValueError
            If the JSON is malformed or not an object

        """
        data = json.loads(json_str)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object for a book record, got {type(data).__name__}")
        return cls.from_tag(data)

    def display_name(self, default: str = "Book") -> str:
        """Return the title, or ``default`` when the title is empty."""
        return self.title or default

    def render(self, renderer: Any = "chat", options: Optional[BaseRendererOptions] = None) -> str:
        """Render the content with a named renderer or a visitor instance.

        Parameters
        ----------
        renderer : str or visitor, default "chat"
            Renderer name or visitor, as accepted by :func:`markbook.api.render`
        options : BaseRendererOptions or None, default None
            Options for a named renderer

        Returns
        -------
        str
            Rendered content

        """
        return render_markup(self.content, renderer, options)
