"""Word-boundary wrapping with a caller-supplied line break."""

from __future__ import annotations


def wrap_words(text: str, width: int, line_break: str = "\n") -> str:
    """Wrap ``text`` so each line holds at most ``width`` characters.

    Breaks only happen at a single space, which the break replaces. A word
    longer than ``width`` is never cut and overflows its line. Occurrences of
    ``line_break`` already inside ``text`` are kept and restart the line count,
    so text wrapped once with the same break wraps again to itself.

    >>> wrap_words("The quick brown fox", 10)
    'The quick\\nbrown fox'
    """

    if not line_break:
        raise ValueError("Line break must not be empty.")
    if not text:
        return text

    length = len(text)
    break_length = len(line_break)
    pieces: list[str] = []
    line_start = last_space = 0
    position = 0
    while position < length:
        if position + break_length < length and text.startswith(line_break, position):
            position += break_length
            pieces.append(text[line_start:position])
            line_start = last_space = position
            continue

        if text[position] == " ":
            if position - line_start >= width:
                pieces.append(text[line_start:position])
                pieces.append(line_break)
                line_start = position + 1
            last_space = position
        elif position - line_start >= width and line_start < last_space:
            # The current word overflows; break at the space before it.
            pieces.append(text[line_start:last_space])
            pieces.append(line_break)
            line_start = last_space = last_space + 1
        position += 1

    if line_start < length:
        pieces.append(text[line_start:])
    return "".join(pieces)
