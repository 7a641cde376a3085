"""
minilang - a front end for a minimal statically-typed language

A tokenizer and a recursive descent parser for typed variable declarations.
Each initializer literal is checked against the declared type while parsing.

Example:
    >>> from minilang import tokenize_source, parse_tokens
    >>> program = parse_tokens(tokenize_source('string name = "Ada";'))
    >>> program.statements[0].initializer
    Literal(value='Ada', type='string')

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "minilang Team"

from .frontend import (
    Lexer,
    Token,
    TokenType,
    Parser,
    ParseError,
    ParseErrorKind,
    ParseResult,
    tokenize_source,
    parse_tokens,
    parse_source,
    try_parse,
    try_parse_source,
)
from .syntax import Program, VarDecl, Literal, Identifier

__all__ = [
    "__version__",
    "__author__",
    "Lexer",
    "Token",
    "TokenType",
    "Parser",
    "ParseError",
    "ParseErrorKind",
    "ParseResult",
    "tokenize_source",
    "parse_tokens",
    "parse_source",
    "try_parse",
    "try_parse_source",
    "Program",
    "VarDecl",
    "Literal",
    "Identifier",
]
