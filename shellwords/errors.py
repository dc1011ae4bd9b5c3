"""Exceptions raised by shellwords."""

from typing import Optional


class ShellwordsException(Exception):
    """Base exception for shellwords errors."""

    pass


class ParseError(ShellwordsException, ValueError):
    """Raised when a line cannot be split into words."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class UnmatchedQuote(ParseError):
    """Raised when input ends inside an open quote."""

    def __init__(self, quote: str, position: int):
        kind = "single" if quote == "'" else "double"
        super().__init__(
            f"Unmatched {kind} quote opened at position {position}", position
        )
        self.quote = quote


class TrailingEscape(ParseError):
    """Raised when input ends with a backslash that escapes nothing."""

    def __init__(self, position: int):
        super().__init__(f"Trailing backslash at position {position}", position)


class CheckFailed(ShellwordsException):
    """Raised when one or more lines of a checked file fail to split."""

    pass


class ConfigError(ShellwordsException):
    """Raised when the configuration file is malformed."""

    pass
