#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exceptions raised around the markbook pipeline.

Markup itself never produces an exception: unclosed spans, broken links and
stray fences become literal text. What can fail is the code wrapped around
the pipeline, so the hierarchy is small.

Exception Hierarchy
-------------------
- MarkbookError

  - ValidationError
    - InvalidOptionsError (options object of the wrong class)

  - UnknownRendererError (name not in the renderer registry)

  - RenderingError
    - OutputWriteError (rendered text could not be written)

"""

from __future__ import annotations


class MarkbookError(Exception):
    """Base class for markbook errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        Exception that triggered this one, kept for callers that log it

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MarkbookError):
    """A caller passed an argument markbook cannot use."""


class InvalidOptionsError(ValidationError):
    """A lexer, parser or renderer received options of the wrong class.

    For example, ``ChatRendererOptions`` handed to ``HtmlRenderer``.

    Parameters
    ----------
    component_name : str
        Class or registry name of the component that rejected the options
    expected_type : type
        Options class the component accepts
    received_type : type
        Class of the object actually passed

    """

    def __init__(self, component_name: str, expected_type: type, received_type: type):
        super().__init__(
            f"{component_name} expected options of type '{expected_type.__name__}' "
            f"but received '{received_type.__name__}'."
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class UnknownRendererError(MarkbookError):
    """No renderer is registered under the requested name."""

    def __init__(self, renderer_name: str, available: list[str] | None = None):
        message = f"Unknown renderer: '{renderer_name}'"
        if available:
            message += f". Available renderers: {', '.join(available)}"
        super().__init__(message)
        self.renderer_name = renderer_name
        self.available = available


class RenderingError(MarkbookError):
    """Rendered output could not be produced or delivered."""


class OutputWriteError(RenderingError):
    """Writing rendered text to a file or stream failed.

    Parameters
    ----------
    target : str
        Path or stream description that could not be written
    original_error : Exception, optional
        The underlying OS or encoding error

    """

    def __init__(self, target: str, original_error: Exception | None = None):
        super().__init__(f"Failed to write output: {target}", original_error=original_error)
        self.target = target
