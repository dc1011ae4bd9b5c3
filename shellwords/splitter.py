"""Bourne shell word splitting."""

from enum import Enum

from .errors import TrailingEscape, UnmatchedQuote

# Characters a backslash escapes inside double quotes. Any other escaped
# character keeps its backslash.
DOUBLE_QUOTE_ESCAPABLE = frozenset('"\\`$\n')


class Mode(Enum):
    """Lexer state while scanning a line."""

    UNQUOTED = "unquoted"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"
    ESCAPE = "escape"
    DOUBLE_QUOTED_ESCAPE = "double_quoted_escape"


def split(line: str) -> list[str]:
    """
    Split a line into words the way the Bourne shell does.

    Rules:
    - Unquoted whitespace separates words; runs of it never produce empty words
    - Single quotes (') keep everything up to the next single quote literally
    - Double quotes (") group words; inside them a backslash only escapes
      one of $ ` " \\ or newline, otherwise it is kept
    - An unquoted backslash (\\) makes the next character literal
    - Quoted and unquoted fragments with no whitespace between them are one
      word, and an empty quote pair is an empty word

    Only quotes and backslashes are metacharacters here; pipes, redirections
    and the like come through as ordinary words.

    Args:
        line: The line to split

    Returns:
        List of words

    Raises:
        UnmatchedQuote: If the line ends inside a quoted string
        TrailingEscape: If the line ends with an unescaped backslash
    """
    words = []
    chars = []
    started = False
    mode = Mode.UNQUOTED
    # Offsets of the open quote and the pending backslash, for error reporting
    quote_start = 0
    escape_start = 0

    for i, c in enumerate(line):
        if mode is Mode.UNQUOTED:
            if c.isspace():
                if started:
                    words.append("".join(chars))
                    chars = []
                    started = False
                continue

            started = True
            if c == "'":
                mode = Mode.SINGLE_QUOTED
                quote_start = i
            elif c == '"':
                mode = Mode.DOUBLE_QUOTED
                quote_start = i
            elif c == "\\":
                mode = Mode.ESCAPE
                escape_start = i
            else:
                chars.append(c)

        elif mode is Mode.SINGLE_QUOTED:
            if c == "'":
                mode = Mode.UNQUOTED
            else:
                chars.append(c)

        elif mode is Mode.DOUBLE_QUOTED:
            if c == '"':
                mode = Mode.UNQUOTED
            elif c == "\\":
                mode = Mode.DOUBLE_QUOTED_ESCAPE
                escape_start = i
            else:
                chars.append(c)

        elif mode is Mode.ESCAPE:
            chars.append(c)
            mode = Mode.UNQUOTED

        else:
            if c not in DOUBLE_QUOTE_ESCAPABLE:
                chars.append("\\")
            chars.append(c)
            mode = Mode.DOUBLE_QUOTED

    if mode is Mode.SINGLE_QUOTED:
        raise UnmatchedQuote("'", quote_start)
    if mode is Mode.DOUBLE_QUOTED:
        raise UnmatchedQuote('"', quote_start)
    if mode in (Mode.ESCAPE, Mode.DOUBLE_QUOTED_ESCAPE):
        raise TrailingEscape(escape_start)

    if started:
        words.append("".join(chars))

    return words
