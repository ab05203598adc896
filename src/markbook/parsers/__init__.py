#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/parsers/__init__.py
"""Lexer and parser turning raw markup into an AST."""

from markbook.parsers.lexer import MarkdownLexer, tokenize
from markbook.parsers.markdown import MarkdownParser, parse
from markbook.parsers.tokens import Token, TokenKind

__all__ = [
    "MarkdownLexer",
    "MarkdownParser",
    "Token",
    "TokenKind",
    "parse",
    "tokenize",
]
