#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/renderers/__init__.py
"""AST renderers for converting documents to output formats.

Available renderers:
- HtmlRenderer (``"html"``): HTML fragment or standalone document
- ChatRenderer (``"chat"``): section-sign formatted game-chat text
- PlainTextRenderer (``"plain"``): unformatted text
- RichTextRenderer (``"rich"``): ``rich.text.Text`` component tree

Renderers are looked up by name through a small registry so callers (and
the CLI) can select a format from a string. Custom renderers can be added
with :func:`register_renderer`; any object implementing the visitor methods
can also be passed directly to :func:`markbook.api.render`.

Examples
--------
    >>> from markbook.renderers import get_renderer
    >>> from markbook.ast import Document, Heading
    >>> doc = Document(children=(Heading(level=2, text="Intro"),))
    >>> get_renderer("html").render_to_string(doc)
    '<h2>Intro</h2>'

"""

from __future__ import annotations

import logging

from markbook.exceptions import UnknownRendererError
from markbook.options.base import BaseRendererOptions
from markbook.renderers.base import BaseRenderer
from markbook.renderers.chat import ChatRenderer
from markbook.renderers.html import HtmlRenderer
from markbook.renderers.plaintext import PlainTextRenderer
from markbook.renderers.rich_text import RichTextRenderer

logger = logging.getLogger(__name__)

_RENDERERS: dict[str, type[BaseRenderer]] = {
    "html": HtmlRenderer,
    "chat": ChatRenderer,
    "plain": PlainTextRenderer,
    "rich": RichTextRenderer,
}


def available_renderers() -> list[str]:
    """Return the registered renderer names in sorted order."""
    return sorted(_RENDERERS)


def register_renderer(name: str, renderer_class: type[BaseRenderer]) -> None:
    """Register a renderer class under ``name``.

    Parameters
    ----------
    name : str
        Lookup name, e.g. ``"markdown"``
    renderer_class : type of BaseRenderer
        Class instantiated by :func:`get_renderer`

    Raises
    ------
    TypeError
        If ``renderer_class`` is not a BaseRenderer subclass

    """
    if not (isinstance(renderer_class, type) and issubclass(renderer_class, BaseRenderer)):
        raise TypeError(f"Renderer for '{name}' must be a BaseRenderer subclass, got {renderer_class!r}")
    if name in _RENDERERS:
        logger.warning(f"Replacing registered renderer '{name}' ({_RENDERERS[name].__name__})")
    _RENDERERS[name] = renderer_class


def get_renderer(name: str, options: BaseRendererOptions | None = None) -> BaseRenderer:
    """Create a renderer instance by name.

    Parameters
    ----------
    name : str
        Registered renderer name
    options : BaseRendererOptions or None, default = None
        Options for the renderer; must match the renderer's options class

    Returns
    -------
    BaseRenderer
        A new renderer instance

    Raises
    ------
    UnknownRendererError
        If no renderer is registered under ``name``
    InvalidOptionsError
        If ``options`` is of the wrong type for the renderer

    """
    renderer_class = _RENDERERS.get(name)
    if renderer_class is None:
        raise UnknownRendererError(name, available=available_renderers())
    return renderer_class(options)  # type: ignore[call-arg]


__all__ = [
    "BaseRenderer",
    "ChatRenderer",
    "HtmlRenderer",
    "PlainTextRenderer",
    "RichTextRenderer",
    "available_renderers",
    "get_renderer",
    "register_renderer",
]
