"""
Entry point for running minilang as a module.

Usage:
    python -m minilang parse input.ml
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
