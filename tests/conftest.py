"""
Pytest configuration and fixtures for minilang tests.
"""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def sample_source_file(temp_dir):
    """Create a sample minilang source file for testing."""
    src_file = temp_dir / "sample.ml"
    src_file.write_text('int x = 42;\n// greeting\nstring s = "hi";\n', encoding="utf-8")
    return src_file


@pytest.fixture
def lexer():
    """Provide a Lexer instance."""
    from minilang.frontend import Lexer
    return Lexer()


@pytest.fixture
def parser():
    """Provide a Parser instance."""
    from minilang.frontend import Parser
    return Parser()
