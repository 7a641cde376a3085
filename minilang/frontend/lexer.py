"""
Lexer module for minilang.

This module provides a hand-written, single-pass scanner that converts
minilang source text into a list of tokens for the parser.

Malformed input never raises here. Unknown characters, unterminated strings
and numbers that run into letters all become tokens of their own. The one
fatal case, a number with two decimal points, ends the scan early and the
returned list has no EOF token (see ``is_truncated``).
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterable, List


logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types for minilang."""
    # Keywords
    FN = auto()          # fn
    INT = auto()         # int
    FLOAT = auto()       # float
    STRING = auto()      # string
    BOOL = auto()        # bool
    RETURN = auto()      # return
    IF = auto()          # if
    ELSE = auto()        # else
    FOR = auto()         # for
    WHILE = auto()       # while
    BREAK = auto()       # break
    CONTINUE = auto()    # continue

    # Literals
    INT_LIT = auto()     # 42
    FLOAT_LIT = auto()   # 3.14
    STRING_LIT = auto()  # "text"
    BOOL_LIT = auto()    # true / false

    # Identifiers
    IDENTIFIER = auto()
    INVALID_IDENTIFIER = auto()  # 123abc, 1.2.3

    # Two-character operators
    EQUALS = auto()      # ==
    INCREMENT = auto()   # ++
    PLUS_ASSIGN = auto() # +=

    # Single-character operators
    ASSIGN = auto()      # =
    PLUS = auto()        # +
    MINUS = auto()       # -
    STAR = auto()        # *
    SLASH = auto()       # /
    PERCENT = auto()     # %
    LESS = auto()        # <
    GREATER = auto()     # >
    NOT = auto()         # !
    BITAND = auto()      # &
    BITOR = auto()       # |
    BITXOR = auto()      # ^
    BITNOT = auto()      # ~

    # Delimiters
    LPAR = auto()        # (
    RPAR = auto()        # )
    LBRACE = auto()      # {
    RBRACE = auto()      # }
    LBRACKET = auto()    # [
    RBRACKET = auto()    # ]
    COMMA = auto()       # ,
    SEMICOLON = auto()   # ;
    COLON = auto()       # :
    QUESTION = auto()    # ?
    DOT = auto()         # .

    # Special
    COMMENT = auto()     # // line or /* block */
    EOF = auto()         # End of input
    UNKNOWN = auto()     # Unrecognized character


@dataclass(frozen=True)
class Token:
    """Represents a token in the source code.

    Attributes:
        type: The token type
        value: The token text (decoded content for strings and comments)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    type: TokenType
    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, line={self.line}, col={self.column})"


KEYWORDS: Dict[str, TokenType] = {
    'fn': TokenType.FN,
    'int': TokenType.INT,
    'float': TokenType.FLOAT,
    'string': TokenType.STRING,
    'bool': TokenType.BOOL,
    'return': TokenType.RETURN,
    'if': TokenType.IF,
    'else': TokenType.ELSE,
    'for': TokenType.FOR,
    'while': TokenType.WHILE,
    'break': TokenType.BREAK,
    'continue': TokenType.CONTINUE,
}

BOOLEAN_LITERALS = frozenset({'true', 'false'})

# Checked before SYMBOLS
TWO_CHAR_OPERATORS: Dict[str, TokenType] = {
    '==': TokenType.EQUALS,
    '++': TokenType.INCREMENT,
    '+=': TokenType.PLUS_ASSIGN,
}

SYMBOLS: Dict[str, TokenType] = {
    '=': TokenType.ASSIGN,
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.STAR,
    '/': TokenType.SLASH,
    '%': TokenType.PERCENT,
    '<': TokenType.LESS,
    '>': TokenType.GREATER,
    '!': TokenType.NOT,
    '&': TokenType.BITAND,
    '|': TokenType.BITOR,
    '^': TokenType.BITXOR,
    '~': TokenType.BITNOT,
    '(': TokenType.LPAR,
    ')': TokenType.RPAR,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
    ',': TokenType.COMMA,
    ';': TokenType.SEMICOLON,
    ':': TokenType.COLON,
    '?': TokenType.QUESTION,
    '.': TokenType.DOT,
}

# Whitespace in the C sense; other Unicode spaces are identifier characters
WHITESPACE = frozenset(" \t\n\r\v\f")

_ESCAPES: Dict[str, str] = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '\\': '\\',
    '"': '"',
}


def _is_ascii_letter(ch: str) -> bool:
    return ('a' <= ch <= 'z') or ('A' <= ch <= 'Z')


def _is_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


def _is_ident_start(ch: str) -> bool:
    # Non-ASCII characters are accepted as-is, without validation
    return _is_ascii_letter(ch) or ch == '_' or ord(ch) >= 128


def _is_ident_char(ch: str) -> bool:
    return _is_ident_start(ch) or _is_digit(ch)


class _Scanner:
    """Cursor over one source string; lives for a single tokenize call."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.aborted = False

    def at_end(self, offset: int = 0) -> bool:
        return self.pos + offset >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        if self.at_end(offset):
            return ''
        return self.source[self.pos + offset]

    def advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def emit(self, token_type: TokenType, value: str, line: int, column: int) -> None:
        self.tokens.append(Token(token_type, value, line, column))

    def run(self) -> List[Token]:
        while not self.at_end():
            ch = self.peek()

            if ch in WHITESPACE:
                self.advance()
            elif _is_ident_start(ch):
                self._scan_word()
            elif _is_digit(ch):
                self._scan_number()
                if self.aborted:
                    return self.tokens
            elif ch == '"':
                self._scan_string()
            elif ch == '/' and self.peek(1) == '/':
                self._scan_line_comment()
            elif ch == '/' and self.peek(1) == '*':
                self._scan_block_comment()
            else:
                self._scan_symbol()

        self.emit(TokenType.EOF, '', self.line, self.column)
        return self.tokens

    def _scan_word(self) -> None:
        line, column = self.line, self.column
        start = self.pos
        while not self.at_end() and _is_ident_char(self.peek()):
            self.advance()
        word = self.source[start:self.pos]

        if word in BOOLEAN_LITERALS:
            self.emit(TokenType.BOOL_LIT, word, line, column)
        elif word in KEYWORDS:
            self.emit(KEYWORDS[word], word, line, column)
        else:
            self.emit(TokenType.IDENTIFIER, word, line, column)

    def _scan_number(self) -> None:
        line, column = self.line, self.column
        start = self.pos
        dot_seen = False

        while not self.at_end():
            ch = self.peek()
            if _is_digit(ch):
                self.advance()
            elif ch == '.':
                if dot_seen:
                    # Fold the rest of the run into the bad token and stop
                    while not self.at_end() and (_is_digit(self.peek()) or self.peek() == '.'):
                        self.advance()
                    text = self.source[start:self.pos]
                    logger.debug("Multiple decimal points in number %r at line %d, col %d; "
                                 "scanning stopped", text, line, column)
                    self.emit(TokenType.INVALID_IDENTIFIER, text, line, column)
                    self.aborted = True
                    return
                dot_seen = True
                self.advance()
            else:
                break

        nxt = self.peek()
        if nxt and (_is_ascii_letter(nxt) or nxt == '_'):
            while not self.at_end() and (_is_ascii_letter(self.peek()) or _is_digit(self.peek())
                                         or self.peek() == '_'):
                self.advance()
            self.emit(TokenType.INVALID_IDENTIFIER, self.source[start:self.pos], line, column)
            return

        token_type = TokenType.FLOAT_LIT if dot_seen else TokenType.INT_LIT
        self.emit(token_type, self.source[start:self.pos], line, column)

    def _scan_string(self) -> None:
        line, column = self.line, self.column
        self.advance()  # opening quote
        chars: List[str] = []

        while not self.at_end() and self.peek() != '"':
            ch = self.advance()
            if ch == '\\' and not self.at_end():
                esc = self.advance()
                chars.append(_ESCAPES.get(esc, esc))
            else:
                chars.append(ch)

        if self.at_end():
            logger.debug("Unterminated string starting at line %d, col %d", line, column)
        else:
            self.advance()  # closing quote
        self.emit(TokenType.STRING_LIT, ''.join(chars), line, column)

    def _scan_line_comment(self) -> None:
        line, column = self.line, self.column
        self.advance()
        self.advance()
        start = self.pos
        while not self.at_end() and self.peek() != '\n':
            self.advance()
        self.emit(TokenType.COMMENT, self.source[start:self.pos], line, column)

    def _scan_block_comment(self) -> None:
        line, column = self.line, self.column
        self.advance()
        self.advance()
        start = self.pos
        while not self.at_end() and not (self.peek() == '*' and self.peek(1) == '/'):
            self.advance()
        body = self.source[start:self.pos]
        if not self.at_end():
            self.advance()
            self.advance()
        self.emit(TokenType.COMMENT, body, line, column)

    def _scan_symbol(self) -> None:
        line, column = self.line, self.column
        pair = self.source[self.pos:self.pos + 2]
        if pair in TWO_CHAR_OPERATORS:
            self.advance()
            self.advance()
            self.emit(TWO_CHAR_OPERATORS[pair], pair, line, column)
            return

        ch = self.advance()
        self.emit(SYMBOLS.get(ch, TokenType.UNKNOWN), ch, line, column)


class Lexer:
    """Lexer for tokenizing minilang source code.

    The lexer keeps no state between calls, so one instance may be shared.

    Example:
        >>> lexer = Lexer()
        >>> tokens = lexer.tokenize("int x = 42;")
        >>> for token in tokens:
        ...     print(token)
    """

    def tokenize(self, source: str, filename: str = "<input>") -> List[Token]:
        """Tokenize minilang source code.

        Args:
            source: minilang source code string
            filename: Source name used in debug logging

        Returns:
            List of Token objects. The list ends with an EOF token unless
            scanning was aborted by a malformed number.
        """
        tokens = _Scanner(source).run()
        if is_truncated(tokens):
            logger.debug("%s: tokenization aborted after %d tokens", filename, len(tokens))
        else:
            logger.debug("%s: produced %d tokens", filename, len(tokens))
        return tokens

    def is_keyword(self, name: str) -> bool:
        """Check if a name is a keyword.

        Args:
            name: Identifier to check

        Returns:
            True if name is a keyword
        """
        return name in KEYWORDS

    def get_keyword_tokens(self) -> List[str]:
        """Get list of keywords.

        Returns:
            Sorted list of keyword strings
        """
        return sorted(KEYWORDS)


def is_truncated(tokens: List[Token]) -> bool:
    """Return True if the token list lacks its trailing EOF token.

    That only happens when the lexer stopped on a number with more than one
    decimal point.
    """
    return not tokens or tokens[-1].type != TokenType.EOF


def without_comments(tokens: Iterable[Token]) -> List[Token]:
    """Return the tokens with every COMMENT token removed."""
    return [t for t in tokens if t.type != TokenType.COMMENT]


def tokenize_source(source: str, filename: str = "<input>") -> List[Token]:
    """Convenience function to tokenize source code.

    Args:
        source: minilang source code string
        filename: Source name used in debug logging

    Returns:
        List of Token objects
    """
    lexer = Lexer()
    return lexer.tokenize(source, filename)
