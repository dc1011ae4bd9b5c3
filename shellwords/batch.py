"""Splitting every line of a file, with per-line error tracking."""

import sys
from dataclasses import dataclass
from typing import Iterable

from . import splitter
from .errors import CheckFailed, ParseError, ShellwordsException


@dataclass
class SplitError:
    """Represents a line that failed to split."""

    message: str
    line_num: int
    path: str


@dataclass
class SplitResult:
    """Words produced from a single line."""

    line_num: int
    words: list[str]


@dataclass
class BatchStats:
    """Statistics about the lines split so far."""

    line_count: int
    word_count: int
    error_count: int


class BatchSplitter:
    """Splits lines from one or more files and collects results and errors."""

    def __init__(self, skip_comments: bool = True):
        """Initialize an empty batch."""
        self.skip_comments = skip_comments
        self.results: list[SplitResult] = []
        self.errors: list[SplitError] = []
        self.line_count: int = 0

    def stats(self) -> BatchStats:
        """
        Return statistics about the batch.

        Returns:
            BatchStats with counts of split lines, words, and errors
        """
        return BatchStats(
            line_count=self.line_count,
            word_count=sum(len(result.words) for result in self.results),
            error_count=len(self.errors),
        )

    def _is_skipped(self, line: str) -> bool:
        """Check if a line is blank or, when enabled, a comment."""
        stripped = line.lstrip()
        if len(stripped) == 0:
            return True
        return self.skip_comments and stripped[0] == "#"

    def split_lines(self, lines: Iterable[str], path: str = "<stdin>") -> None:
        """Split each line, recording words or the error it raised."""
        for line_num, line in enumerate(lines, start=1):
            line = line.rstrip("\r\n")
            if self._is_skipped(line):
                continue

            self.line_count += 1
            try:
                words = splitter.split(line)
            except ParseError as e:
                error_name = type(e).__name__
                self.errors.append(
                    SplitError(message=error_name, line_num=line_num, path=path)
                )
                continue

            self.results.append(SplitResult(line_num=line_num, words=words))

    def split_file(self, path: str) -> None:
        """Split every line of a text file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ShellwordsException(f"Cannot read file '{path}': {e}")

        self.split_lines(content.split("\n"), path)

    def check(self) -> None:
        """
        Report collected errors.

        Raises:
            CheckFailed: If any line failed to split
        """
        if self.errors:
            self._print_errors()
            raise CheckFailed(f"{len(self.errors)} line(s) failed to split")

    def _print_errors(self) -> None:
        """Print all errors to stderr."""
        for error in self.errors:
            print(
                f"{error.path}:{error.line_num}: error.{error.message}", file=sys.stderr
            )
