"""
Command-line interface for minilang.

Provides the main entry point with subcommands for listing the tokens of a
source file and for parsing it into a syntax tree.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .frontend import Lexer, Parser, is_truncated, without_comments
from .syntax.printer import format_parse_error, format_program, format_tokens
from .utils.settings import DEFAULT_SETTINGS, Settings


logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: The configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="minilang",
        description="minilang: tokenizer and parser for typed declarations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m minilang tokens input.ml
  python -m minilang parse input.ml --strip-comments
  echo 'int x = 42;' | python -m minilang parse -
        """
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Tokens command
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the tokens of a source file"
    )
    tokens_parser.add_argument(
        "input",
        type=str,
        help="Input source file, or '-' for stdin"
    )
    tokens_parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Leave COMMENT tokens out of the listing"
    )

    # Parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a source file and print its syntax tree"
    )
    parse_parser.add_argument(
        "input",
        type=str,
        help="Input source file, or '-' for stdin"
    )
    parse_parser.add_argument(
        "--strip-comments",
        action="store_true",
        help="Remove comment tokens before parsing"
    )
    parse_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help=f"Indentation width of the printed tree (default: {DEFAULT_SETTINGS.indent_width})"
    )

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Parse a source file and report only success or failure"
    )
    check_parser.add_argument(
        "input",
        type=str,
        help="Input source file, or '-' for stdin"
    )

    # Version command
    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    return parser


def configure_logging(verbose: bool, settings: Settings) -> None:
    """Configure root logging for a CLI run."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    )


def read_source(path: str, settings: Settings) -> str:
    """Read source text from a file path, or from stdin when path is '-'.

    Raises:
        OSError: If the file cannot be read
    """
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding=settings.encoding)


def handle_tokens(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the tokens command.

    Args:
        args: Parsed command-line arguments
        settings: Active settings

    Returns:
        int: Exit code (1 if tokenization was aborted)
    """
    source = read_source(args.input, settings)
    tokens = Lexer().tokenize(source, args.input)

    show_comments = settings.show_comments and not args.no_comments
    listing = format_tokens(tokens, show_comments=show_comments)
    if listing:
        print(listing)

    if is_truncated(tokens):
        print("[minilang] Tokenization stopped at a malformed number", file=sys.stderr)
        return 1
    return 0


def _parse_input(args: argparse.Namespace, settings: Settings, strip_comments: bool):
    source = read_source(args.input, settings)
    tokens = Lexer().tokenize(source, args.input)
    if is_truncated(tokens):
        logger.info("%s: token stream is truncated", args.input)
    if strip_comments:
        tokens = without_comments(tokens)
    return tokens, Parser().try_parse(tokens)


def handle_parse(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the parse command.

    Args:
        args: Parsed command-line arguments
        settings: Active settings

    Returns:
        int: Exit code (0 for success, 1 for a parse error or aborted scan)
    """
    tokens, result = _parse_input(args, settings, args.strip_comments)

    if not result.success:
        print(format_parse_error(result.error), file=sys.stderr)
        return 1

    indent = settings.indent_width if args.indent is None else args.indent
    tree = format_program(result.program, indent_width=indent)
    if tree:
        print(tree)

    if is_truncated(tokens):
        print("[minilang] Tokenization stopped at a malformed number", file=sys.stderr)
        return 1
    return 0


def handle_check(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the check command.

    Returns:
        int: Exit code (0 when the input parses from a complete token stream)
    """
    tokens, result = _parse_input(args, settings, strip_comments=False)
    if not result.success:
        print(format_parse_error(result.error), file=sys.stderr)
        return 1
    if is_truncated(tokens):
        print("[minilang] Tokenization stopped at a malformed number", file=sys.stderr)
        return 1
    print(f"[minilang] OK: {len(result.program)} declaration(s)")
    return 0


def handle_version(args: argparse.Namespace, settings: Settings) -> int:
    """Handle the version command.

    Returns:
        int: Exit code (always 0 for version)
    """
    from . import __version__, __author__
    print(f"minilang version {__version__}")
    print(f"Author: {__author__}")
    return 0


_HANDLERS = {
    "tokens": handle_tokens,
    "parse": handle_parse,
    "check": handle_check,
    "version": handle_version,
}


def main(argv: Optional[list] = None, settings: Optional[Settings] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)
        settings: Optional settings (defaults to DEFAULT_SETTINGS)

    Returns:
        int: Exit code
    """
    settings = settings or DEFAULT_SETTINGS
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, settings)

    handler = _HANDLERS.get(args.command)
    if handler is None:
        parser.print_help()
        return 2

    try:
        return handler(args, settings)
    except (OSError, UnicodeDecodeError) as e:
        print(f"[minilang] Error: cannot read {args.input}: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
