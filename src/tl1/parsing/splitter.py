"""
Quote-aware splitting of TL1 message fragments.

Delimiters inside a double-quoted span are inert and the quotes themselves
are kept. Backslashes are not interpreted here; unescaping happens once in the
record scanner before fragments ever reach this module.
"""

from tl1.exceptions import UnterminatedQuotedSpan

QUOTE = '"'


def split(string: str, delimiter: str) -> list[str]:
    """
    Split a string on a single-character delimiter, respecting quoted spans.

    Params:
        string: Text to split
        delimiter: Single delimiter character (usually ':' or ',')

    Returns:
        List of segments; always at least one (an empty string yields [''])

    Raises:
        UnterminatedQuotedSpan: If the text ends inside a quoted span
    """
    segments = [""]
    position = 0
    length = len(string)

    while position < length:
        char = string[position]
        if char == delimiter:
            segments.append("")
            position += 1
        elif char == QUOTE:
            quoted, position = _split_quoted(string, position)
            segments[-1] += quoted
        else:
            segments[-1] += char
            position += 1

    return segments


def _split_quoted(string: str, start: int) -> tuple[str, int]:
    """Consume a quoted span starting at `start`, returning it with both quotes."""
    end = string.find(QUOTE, start + 1)
    if end == -1:
        raise UnterminatedQuotedSpan(string, start)
    return string[start : end + 1], end + 1


def remove_quotes(string: str) -> str:
    """Strip one leading and one trailing double quote, only when both are present."""
    if len(string) >= 2 and string.startswith(QUOTE) and string.endswith(QUOTE):
        return string[1:-1]
    return string
