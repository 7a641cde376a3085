"""
Frontend module for minilang.

This module provides the lexer and parser components: the lexer turns
source text into tokens and the parser turns tokens into a Program.
"""

from .lexer import Lexer, Token, TokenType, is_truncated, tokenize_source, without_comments
from .parser import (
    Parser,
    ParseError,
    ParseErrorKind,
    ParseResult,
    parse_source,
    parse_tokens,
    try_parse,
    try_parse_source,
)

__all__ = [
    # Lexer components
    "Lexer",
    "Token",
    "TokenType",
    "is_truncated",
    "tokenize_source",
    "without_comments",
    # Parser components
    "Parser",
    "ParseError",
    "ParseErrorKind",
    "ParseResult",
    "parse_source",
    "parse_tokens",
    "try_parse",
    "try_parse_source",
]
