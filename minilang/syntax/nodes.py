"""
AST node definitions for minilang.

This module contains the data classes that make up the syntax tree produced
by the parser. Nodes are frozen and own their children, so a tree is never
shared or mutated after construction.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple, Union


# Names a declaration may use as its type
TYPE_NAMES = ("int", "float", "string", "bool")


# ==================== Expressions ====================

@dataclass(frozen=True)
class Literal:
    """Literal initializer.

    Attributes:
        value: The literal text as written (decoded for strings)
        type: Declared-type name of the branch that accepted the literal
    """
    value: str
    type: str


@dataclass(frozen=True)
class Identifier:
    """Reference to another variable by name.

    The name is not resolved; any identifier is accepted as an initializer.

    Attributes:
        name: The referenced name
    """
    name: str


# Union type for all expressions
Expr = Union[Literal, Identifier]


# ==================== Statements ====================

@dataclass(frozen=True)
class VarDecl:
    """Variable declaration: ``<type> <name> [= <expr>];``

    Attributes:
        declared_type: One of TYPE_NAMES
        name: The declared variable name
        initializer: Optional initializer expression
        line: Line of the type keyword (not compared)
        column: Column of the type keyword (not compared)
    """
    declared_type: str
    name: str
    initializer: Optional[Expr] = None
    line: int = field(default=0, compare=False, repr=False)
    column: int = field(default=0, compare=False, repr=False)


# Union type for all statements
Stmt = Union[VarDecl]


# ==================== Program ====================

@dataclass(frozen=True)
class Program:
    """Top-level syntax tree: the statements in source order.

    Attributes:
        statements: Tuple of statements
    """
    statements: Tuple[Stmt, ...] = ()

    def __iter__(self) -> Iterator[Stmt]:
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)
