"""
Test suite for minilang.

This package contains unit tests for the lexer, the parser, the syntax tree
nodes and printer, and the command-line interface.
"""

__version__ = "0.1.0"
