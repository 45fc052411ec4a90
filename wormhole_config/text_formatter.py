"""Line wrapping helpers for terminal output.

Every message the ``wormhole`` command prints goes through :func:`break_text`.
Lines are broken at whitespace unless that would leave an abnormally large gap
at the end of a line, in which case the overflowing word is hyphenated and
continued on the next line. Explicit newlines and leading indentation are
preserved.
"""

from __future__ import annotations

import math
import shutil
import sys

DEFAULT_LINE_LENGTH = 60
DEFAULT_TERMINAL_WIDTH = 80

# Break and trim characters. Narrower than str.isspace(): the information
# separators 0x1C-0x1F and NEL (0x85) are not breaks, while the byte order
# mark (U+FEFF) is.
WHITESPACE = "".join(
    chr(code)
    for code in (
        0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680,
        *range(0x2000, 0x200B),
        0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
    )
)


def _long_word_threshold(text: str, max_line_length: int) -> float:
    """Return the length above which a token counts as abnormally long.

    The threshold is one population standard deviation above the mean token
    length, capped at ``max_line_length``.
    """

    lengths = [len(token) for token in text.split(" ")]
    average = sum(lengths) / len(lengths)
    variance = sum((length - average) ** 2 for length in lengths) / len(lengths)
    return min(max_line_length, average + math.sqrt(variance))


def _hyphenation_point(word: str, line: str, max_line_length: int, max_word_length: float) -> int | None:
    minsplit = max(2, math.floor(len(word) * 0.3))
    maxsplit = min(len(word) - 3, math.ceil(len(word) * 0.7))
    middle = max_line_length - len(line) - 1
    first = word[0]
    # Only natural-language looking words get a hyphen; digits, hex and
    # symbols have no case.
    if first.lower() == first.upper():
        return None
    if len(word) <= max_word_length:
        return None
    if not minsplit < middle < maxsplit:
        return None
    return middle


def break_text(text: str, max_line_length: int = DEFAULT_LINE_LENGTH) -> str:
    """Break ``text`` into lines no longer than ``max_line_length``.

    A non-positive ``max_line_length`` disables wrapping. Tokens that cannot be
    split keep their full length on a line of their own.
    """

    if max_line_length <= 0:
        return text

    max_word_length = _long_word_threshold(text, max_line_length)

    lines: list[str] = []
    line = ""
    word = ""
    indentation = ""
    indentation_determined = False
    last_index = len(text) - 1

    for index, char in enumerate(text):
        word += char

        if not (char in WHITESPACE or index == last_index):
            indentation_determined = True
            continue

        if not indentation_determined:
            indentation += char

        if len(line) + len(word) < max_line_length:
            line += word
        else:
            middle = None
            if len(line) + len(word) > max_line_length and len(word) > max_word_length:
                middle = _hyphenation_point(word, line, max_line_length, max_word_length)
            if middle is not None:
                remaining = word[middle:]
                lines.append(line + word[:middle] + ("-" if remaining else ""))
                line = indentation + remaining
            else:
                lines.append(line.rstrip(WHITESPACE))
                line = indentation + word
        word = ""

        if char == "\n":
            lines.append(line.rstrip(WHITESPACE))
            line = ""
            indentation = ""
            indentation_determined = False
        elif len(line) >= max_line_length or index == last_index:
            lines.append(line.rstrip(WHITESPACE))
            line = ""

    if line:
        lines.append(line)
    return "\n".join(lines)


def get_terminal_width() -> int:
    """Return the width of the attached terminal, or 80 when it is unknown."""

    columns = shutil.get_terminal_size((DEFAULT_TERMINAL_WIDTH, 24)).columns
    return columns if columns > 0 else DEFAULT_TERMINAL_WIDTH


def echo(text: str = "", columns: int | None = None, *, err: bool = False) -> None:
    """Print ``text`` wrapped to ``columns`` (the terminal width by default).

    Trailing newlines are kept; :func:`break_text` would otherwise fold them
    into the last line.
    """

    width = get_terminal_width() if columns is None else columns
    body = text.rstrip("\n")
    trailing = "\n" * (len(text) - len(body))
    print(break_text(body, width) + trailing, file=sys.stderr if err else sys.stdout)
