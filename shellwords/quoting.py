"""Escaping words for re-use as Bourne shell input."""

import re
from typing import Iterable

# Anything outside this set has a meaning to the shell (or might, depending on
# locale and position) and forces the word to be quoted.
UNSAFE_RE = re.compile(r"[^A-Za-z0-9@%+=:,./_-]")


def escape(word: str) -> str:
    """
    Escape a word so the shell reads it back as exactly one word.

    Words made only of safe characters are returned unchanged. Anything else
    is enclosed in single quotes. A single quote can't be escaped inside
    single quotes, so each one closes the quoted string, adds an escaped
    quote and reopens it: it's -> 'it'\\''s'.

    Args:
        word: The word to escape

    Returns:
        The escaped word; '' for the empty string
    """
    if not word:
        return "''"

    if not UNSAFE_RE.search(word):
        return word

    return "'" + word.replace("'", "'\\''") + "'"


def join(words: Iterable[str]) -> str:
    """Escape each word and join them with single spaces."""
    return " ".join(escape(word) for word in words)
