"""
Unit tests for syntax tree nodes.

This module tests the node classes defined in minilang.syntax.nodes.
"""

import pytest
from minilang.syntax import Identifier, Literal, Program, VarDecl, TYPE_NAMES


class TestLiteral:
    """Tests for Literal nodes."""

    def test_fields(self):
        """Test creating a literal."""
        node = Literal(value="42", type="int")
        assert node.value == "42"
        assert node.type == "int"

    def test_equality(self):
        """Test structural equality."""
        assert Literal("1.5", "float") == Literal("1.5", "float")
        assert Literal("1", "int") != Literal("1", "float")

    def test_immutability(self):
        """Test that Literal is immutable."""
        node = Literal("42", "int")
        with pytest.raises(AttributeError):
            node.value = "43"


class TestIdentifier:
    """Tests for Identifier nodes."""

    def test_name(self):
        """Test creating an identifier reference."""
        assert Identifier(name="other").name == "other"

    def test_not_equal_to_literal(self):
        """Test that variants never compare equal."""
        assert Identifier("true") != Literal("true", "bool")


class TestVarDecl:
    """Tests for VarDecl nodes."""

    def test_defaults(self):
        """Test that the initializer defaults to None."""
        node = VarDecl("bool", "flag")
        assert node.initializer is None

    def test_position_ignored_in_equality(self):
        """Test that line and column are not compared."""
        a = VarDecl("int", "x", Literal("1", "int"), line=1, column=1)
        b = VarDecl("int", "x", Literal("1", "int"), line=9, column=4)
        assert a == b
        assert "line" not in repr(a)

    def test_immutability(self):
        """Test that VarDecl is immutable."""
        node = VarDecl("int", "x")
        with pytest.raises(AttributeError):
            node.name = "y"


class TestProgram:
    """Tests for Program nodes."""

    def test_empty(self):
        """Test the empty program."""
        program = Program()
        assert len(program) == 0
        assert list(program) == []

    def test_iteration_order(self):
        """Test that iteration follows statement order."""
        stmts = (VarDecl("int", "a"), VarDecl("float", "b"))
        assert list(Program(stmts)) == list(stmts)

    def test_type_names(self):
        """Test the declarable type names."""
        assert TYPE_NAMES == ("int", "float", "string", "bool")
