"""
Syntax tree module for minilang.

This module defines the AST produced by the parser and the helpers that
render tokens, trees and parse errors as text.
"""

from .nodes import (
    # Expressions
    Literal,
    Identifier,
    Expr,
    # Statements
    VarDecl,
    Stmt,
    # Top level
    Program,
    TYPE_NAMES,
)

__all__ = [
    # Expressions
    "Literal",
    "Identifier",
    "Expr",
    # Statements
    "VarDecl",
    "Stmt",
    # Top level
    "Program",
    "TYPE_NAMES",
]
