"""
Configuration settings for minilang.

This module contains default configuration values used by the command-line
interface. The lexer and parser read no configuration.
"""

from dataclasses import dataclass


@dataclass
class Settings:
    """Command-line settings and configuration.

    Attributes:
        indent_width: Spaces per nesting level when printing a syntax tree
        log_level: Logging level name used when --verbose is not given
        show_comments: Whether token listings include COMMENT tokens
        encoding: Text encoding used to read input files
    """
    indent_width: int = 2
    log_level: str = "WARNING"
    show_comments: bool = True
    encoding: str = "utf-8"

    def __post_init__(self):
        if self.indent_width < 0:
            raise ValueError(f"indent_width must be non-negative, got {self.indent_width}")
        self.log_level = self.log_level.upper()


# Global default settings instance
DEFAULT_SETTINGS = Settings()
