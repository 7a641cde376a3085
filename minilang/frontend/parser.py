"""
Parser module for minilang.

This module provides a recursive descent parser that turns the lexer's token
list into a Program of variable declarations. Initializer literals are
checked against the declared type while parsing, so type mismatches and
syntax errors are reported through the same ParseError.

Grammar:
    program    := statement* EOF
    statement  := varDecl
    varDecl    := typeKeyword IDENTIFIER ("=" expression)? ";"
    expression := INT_LIT | FLOAT_LIT | STRING_LIT | BOOL_LIT | IDENTIFIER
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, NoReturn, Optional, Sequence, Tuple

from ..syntax import Expr, Identifier, Literal, Program, Stmt, VarDecl
from .lexer import Token, TokenType, tokenize_source


logger = logging.getLogger(__name__)


class ParseErrorKind(Enum):
    """Kinds of parse failure. The value is the display name."""
    UNEXPECTED_EOF = "UnexpectedEOF"
    FAILED_TO_FIND_TOKEN = "FailedToFindToken"
    EXPECTED_TYPE_TOKEN = "ExpectedTypeToken"
    EXPECTED_IDENTIFIER = "ExpectedIdentifier"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    EXPECTED_FLOAT_LIT = "ExpectedFloatLit"
    EXPECTED_INT_LIT = "ExpectedIntLit"
    EXPECTED_STRING_LIT = "ExpectedStringLit"
    EXPECTED_BOOL_LIT = "ExpectedBoolLit"
    EXPECTED_EXPR = "ExpectedExpr"

    def __str__(self) -> str:
        return self.value


class ParseError(Exception):
    """Exception raised for parsing errors.

    Attributes:
        kind: The ParseErrorKind
        token: The offending token
        message: Human-readable description
    """

    def __init__(self, kind: ParseErrorKind, token: Token, message: str = ""):
        self.kind = kind
        self.token = token
        self.message = message or kind.value
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"Line {self.token.line}, col {self.token.column}: {self.kind}: {self.message}"


@dataclass(frozen=True)
class ParseResult:
    """Result of a parse that does not raise.

    Exactly one of program and error is set.

    Attributes:
        success: Whether parsing succeeded
        program: The parsed program on success
        error: The parse error on failure
    """
    success: bool
    program: Optional[Program] = None
    error: Optional[ParseError] = None


# Type keyword token -> declared type name
TYPE_KEYWORDS: Dict[TokenType, str] = {
    TokenType.INT: "int",
    TokenType.FLOAT: "float",
    TokenType.STRING: "string",
    TokenType.BOOL: "bool",
}

# Literal token -> type name it satisfies
LITERAL_TYPES: Dict[TokenType, str] = {
    TokenType.INT_LIT: "int",
    TokenType.FLOAT_LIT: "float",
    TokenType.STRING_LIT: "string",
    TokenType.BOOL_LIT: "bool",
}

# Declared type name -> error raised when another literal kind is supplied
_MISMATCH_ERRORS: Dict[str, Tuple[ParseErrorKind, str]] = {
    "int": (ParseErrorKind.EXPECTED_INT_LIT, "Expected integer literal"),
    "float": (ParseErrorKind.EXPECTED_FLOAT_LIT, "Expected float literal"),
    "string": (ParseErrorKind.EXPECTED_STRING_LIT, "Expected string literal"),
    "bool": (ParseErrorKind.EXPECTED_BOOL_LIT, "Expected boolean literal"),
}


class Parser:
    """Recursive descent parser for minilang.

    Uses a single token of lookahead and never backtracks. The first error
    stops the parse; no partial program is returned.

    A Parser resets its cursor on every call but is not meant to be shared
    between threads; the module-level helpers create one per call.

    Example:
        >>> parser = Parser()
        >>> program = parser.parse(tokenize_source("int x = 42;"))
        >>> program.statements[0]
        VarDecl(declared_type='int', name='x', initializer=Literal(value='42', type='int'))
    """

    def __init__(self):
        """Initialize the parser."""
        self._tokens: Sequence[Token] = ()
        self._pos: int = 0

    def parse(self, tokens: Sequence[Token]) -> Program:
        """Parse a token list into a Program.

        Args:
            tokens: Tokens produced by the lexer

        Returns:
            Program: The declarations in source order

        Raises:
            ParseError: On the first grammar or type violation
        """
        self._tokens = tokens
        self._pos = 0

        statements: List[Stmt] = []
        while not self._at_end():
            statements.append(self._parse_statement())

        logger.debug("Parsed %d statements", len(statements))
        return Program(statements=tuple(statements))

    def parse_source(self, source: str, filename: str = "<input>") -> Program:
        """Tokenize and parse source code.

        Args:
            source: minilang source code string
            filename: Source name used in debug logging

        Returns:
            Program: The parsed program

        Raises:
            ParseError: If the source does not parse
        """
        return self.parse(tokenize_source(source, filename))

    def try_parse(self, tokens: Sequence[Token]) -> ParseResult:
        """Parse without raising.

        Args:
            tokens: Tokens produced by the lexer

        Returns:
            ParseResult holding either the program or the error
        """
        try:
            program = self.parse(tokens)
        except ParseError as e:
            return ParseResult(success=False, error=e)
        return ParseResult(success=True, program=program)

    # ---- Cursor ----

    def _current(self) -> Token:
        """Get the current token, or a synthetic EOF past the end."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return self._end_token()

    def _end_token(self) -> Token:
        if not self._tokens:
            return Token(TokenType.EOF, "", 1, 1)
        last = self._tokens[-1]
        if last.type == TokenType.EOF:
            return last
        # A list only lacks EOF after an aborted scan, which always ends on an
        # INVALID_IDENTIFIER whose value is its exact source text
        return Token(TokenType.EOF, "", last.line, last.column + len(last.value))

    def _at_end(self) -> bool:
        return self._current().type == TokenType.EOF

    def _advance(self) -> Token:
        """Advance to the next token and return the current one."""
        token = self._current()
        if not self._at_end():
            self._pos += 1
        return token

    def _match(self, token_type: TokenType) -> bool:
        """Consume the current token if it has the given type."""
        if self._current().type == token_type:
            self._advance()
            return True
        return False

    def _expect(self, token_type: TokenType, kind: ParseErrorKind, message: str) -> Token:
        """Consume a token of the given type or raise kind."""
        token = self._current()
        if token.type != token_type:
            self._fail(kind, token, f"{message}, got {_describe(token)}")
        return self._advance()

    def _fail(self, kind: ParseErrorKind, token: Token, message: str) -> NoReturn:
        logger.debug("Parse error %s at line %d, col %d: %s",
                     kind, token.line, token.column, message)
        raise ParseError(kind, token, message)

    # ---- Productions ----

    def _parse_statement(self) -> Stmt:
        if self._current().type in TYPE_KEYWORDS:
            return self._parse_var_decl()
        token = self._current()
        self._fail(ParseErrorKind.EXPECTED_TYPE_TOKEN, token,
                   f"Expected a type at start of statement, got {_describe(token)}")

    def _parse_var_decl(self) -> VarDecl:
        type_token = self._advance()
        declared_type = TYPE_KEYWORDS[type_token.type]

        name = self._expect(TokenType.IDENTIFIER, ParseErrorKind.EXPECTED_IDENTIFIER,
                            "Expected variable name after type")

        initializer: Optional[Expr] = None
        if self._match(TokenType.ASSIGN):
            initializer = self._parse_expression(declared_type)

        self._expect(TokenType.SEMICOLON, ParseErrorKind.FAILED_TO_FIND_TOKEN,
                     "Expected ';' after variable declaration")

        return VarDecl(
            declared_type=declared_type,
            name=name.value,
            initializer=initializer,
            line=type_token.line,
            column=type_token.column,
        )

    def _parse_expression(self, expected_type: str) -> Expr:
        """Parse an initializer for a variable of expected_type."""
        token = self._current()

        if token.type in LITERAL_TYPES:
            literal_type = LITERAL_TYPES[token.type]
            if literal_type != expected_type:
                kind, message = _MISMATCH_ERRORS[expected_type]
                self._fail(kind, token,
                           f"{message} for '{expected_type}' variable, got {_describe(token)}")
            self._advance()
            return Literal(value=token.value, type=literal_type)

        if token.type == TokenType.IDENTIFIER:
            # Accepted for every declared type; names are not resolved
            self._advance()
            return Identifier(name=token.value)

        self._fail(ParseErrorKind.EXPECTED_EXPR, token,
                   f"Expected an expression after '=', got {_describe(token)}")


def _describe(token: Token) -> str:
    if token.type == TokenType.EOF:
        return "end of input"
    return f"{token.type.name} {token.value!r}"


def parse_tokens(tokens: Sequence[Token]) -> Program:
    """Convenience function to parse a token list.

    Raises:
        ParseError: If the tokens do not form a valid program
    """
    return Parser().parse(tokens)


def try_parse(tokens: Sequence[Token]) -> ParseResult:
    """Convenience function to parse a token list without raising."""
    return Parser().try_parse(tokens)


def parse_source(source: str, filename: str = "<input>") -> Program:
    """Convenience function to tokenize and parse source code.

    Raises:
        ParseError: If the source does not parse
    """
    return Parser().parse_source(source, filename)


def try_parse_source(source: str, filename: str = "<input>") -> ParseResult:
    """Convenience function to tokenize and parse source code without raising."""
    return Parser().try_parse(tokenize_source(source, filename))
