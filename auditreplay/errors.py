"""Exceptions raised by command parsers."""


class CommandFormatError(ValueError):
    """Raised when a raw audit line cannot be turned into a command."""

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line


class ParserInitializationError(Exception):
    """Raised when a parser cannot be set up from its configuration."""
