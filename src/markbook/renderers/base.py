#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/renderers/base.py
"""Base classes for AST renderers.

Every renderer is a :class:`~markbook.ast.visitors.NodeVisitor` whose
``visit_*`` methods return the rendered form of one node. Rendering a
document is therefore just ``document.accept(renderer)``; this module adds
option validation and writing the result to files and streams.

"""

from __future__ import annotations

import io
import logging
from abc import ABC
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Any, Union, cast

from markbook.ast import Document, Node
from markbook.ast.visitors import NodeVisitor
from markbook.exceptions import InvalidOptionsError, OutputWriteError
from markbook.options.base import BaseRendererOptions

logger = logging.getLogger(__name__)


class BaseRenderer(NodeVisitor, ABC):
    """Abstract base class for all AST renderers.

    Subclasses implement the ``visit_*`` methods of :class:`NodeVisitor`.
    Each visit method returns the rendered node; containers render their
    children first and then wrap the joined result.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class UpperRenderer(BaseRenderer):
        ...     def visit_text(self, node):
        ...         return node.content.upper()
        ...     # ... remaining visit_* methods ...

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """
        return str(doc.accept(self))

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination (file path or file-like object)

        Raises
        ------
        OutputWriteError
            If the output cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    def _render_children(self, nodes: tuple[Node, ...], separator: str = "") -> str:
        """Render ``nodes`` and join the results with ``separator``."""
        return separator.join(str(result) for result in self.visit_children(nodes))

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination. Can be:
            - File path (str or Path), written as UTF-8
            - File-like object in binary mode (IO[bytes]), written as UTF-8
            - File-like object in text mode (IO[str])

        Raises
        ------
        OutputWriteError
            If the destination cannot be written
        TypeError
            If output type is not supported

        Examples
        --------
        Write to StringIO:

            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("<p>Hello</p>", buffer)
            >>> buffer.getvalue()
            '<p>Hello</p>'

        """
        if isinstance(output, (str, Path)):
            output_path = Path(output)
            try:
                output_path.write_text(text, encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(str(output_path), original_error=e) from e
            logger.debug(f"Wrote {len(text)} characters to {output_path}")
            return

        if not hasattr(output, "write"):
            raise TypeError(f"Unsupported output type: {type(output).__name__}")

        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, StringIO):
            is_binary_mode = False
        elif isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        else:
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode

        target_name = str(getattr(output, "name", "<stream>"))
        try:
            if is_binary_mode:
                cast(IO[bytes], output).write(text.encode("utf-8"))
            else:
                cast(IO[str], output).write(text)
        except OSError as e:
            raise OutputWriteError(target_name, original_error=e) from e


def render_with(visitor: Any, doc: Document) -> str:
    """Render ``doc`` with any conforming visitor.

    Renderers derived from :class:`BaseRenderer` go through
    ``render_to_string``; any other object implementing the visitor methods
    is driven through ``doc.accept`` directly.

    Parameters
    ----------
    visitor : Any
        A :class:`BaseRenderer` or another object with ``visit_*`` methods
    doc : Document
        Document to render

    Returns
    -------
    str
        Rendered output

    """
    if isinstance(visitor, BaseRenderer):
        return visitor.render_to_string(doc)
    return str(doc.accept(visitor))
