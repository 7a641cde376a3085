"""
Text rendering for tokens, syntax trees and parse errors.

Used by the command-line interface to show what the lexer and parser
produced.
"""

from typing import Iterable, List

from ..frontend.lexer import Token, TokenType
from ..frontend.parser import ParseError
from .nodes import Expr, Identifier, Literal, Program, Stmt, VarDecl


def format_token(token: Token) -> str:
    """Render one token as ``TYPE<TAB>"value"<TAB>Line: n<TAB>Col: m``."""
    return f'{token.type.name}\t"{token.value}"\tLine: {token.line}\tCol: {token.column}'


def format_tokens(tokens: Iterable[Token], show_comments: bool = True) -> str:
    """Render a token list, one token per line."""
    return "\n".join(
        format_token(t) for t in tokens
        if show_comments or t.type != TokenType.COMMENT
    )


def _emit_expr(expr: Expr, lines: List[str], depth: int, indent_width: int) -> None:
    pad = " " * (depth * indent_width)
    if isinstance(expr, Literal):
        lines.append(f"{pad}Literal({expr.type}: {expr.value})")
    elif isinstance(expr, Identifier):
        lines.append(f"{pad}Identifier({expr.name})")
    else:
        raise TypeError(f"Unknown expression node: {type(expr).__name__}")


def _emit_stmt(stmt: Stmt, lines: List[str], depth: int, indent_width: int) -> None:
    pad = " " * (depth * indent_width)
    if isinstance(stmt, VarDecl):
        lines.append(f"{pad}VarDecl({stmt.declared_type} {stmt.name})")
        if stmt.initializer is not None:
            lines.append(f"{pad}{' ' * indent_width}Initializer:")
            _emit_expr(stmt.initializer, lines, depth + 2, indent_width)
    else:
        raise TypeError(f"Unknown statement node: {type(stmt).__name__}")


def format_program(program: Program, indent_width: int = 2) -> str:
    """Render a program as an indented tree.

    Example:
        VarDecl(int x)
          Initializer:
            Literal(int: 42)
    """
    lines: List[str] = []
    for stmt in program.statements:
        _emit_stmt(stmt, lines, 0, indent_width)
    return "\n".join(lines)


def format_parse_error(error: ParseError) -> str:
    """Render a parse error with its kind, offending token, position and message."""
    token = error.token
    return (
        f'Parse error: {error.kind} at token ({token.type.name}, "{token.value}") '
        f"line {token.line}, col {token.column} msg: {error.message}"
    )
