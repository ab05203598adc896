"""Base classes for parser and renderer options.

Every option object in markbook is a frozen dataclass. Fields document
themselves through ``metadata={"help": ...}`` so the CLI can reuse the same
wording, and ``create_updated`` returns a modified copy instead of mutating.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


def check_positive(name: str, value: Optional[int]) -> None:
    """Raise ValueError unless ``value`` is None or a positive integer."""
    if value is not None and value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def freeze_mapping(options: Any, name: str) -> None:
    """Replace the mapping field ``name`` with a read-only copy.

    Used from ``__post_init__`` of frozen options. Fields frozen this way are
    declared with ``hash=False`` because mapping proxies are not hashable.
    """
    value: Mapping[Any, Any] = getattr(options, name)
    object.__setattr__(options, name, MappingProxyType(dict(value)))


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Cloning and introspection helpers for frozen option dataclasses."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with the given fields replaced; validation runs again

        Examples
        --------
        >>> from markbook.options import HtmlRendererOptions
        >>> HtmlRendererOptions().create_updated(standalone=True).standalone
        True

        """
        return replace(self, **kwargs)

    @classmethod
    def field_help(cls, name: str) -> str:
        """Return the help text stored in a field's metadata.

        Raises
        ------
        KeyError
            If ``name`` is not a field of this options class

        """
        for options_field in fields(cls):
            if options_field.name == name:
                return options_field.metadata.get("help", "")
        raise KeyError(f"{cls.__name__} has no option {name!r}")


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers convert an AST document into one output format (HTML, chat
    formatting codes, plain text, rich component trees). ``BaseRenderer``
    checks that it received an instance of the options class it expects.
    """

    def __post_init__(self) -> None:
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for lexer and parser options."""

    def __post_init__(self) -> None:
        pass
