"""Text helpers used by the TikZ editor: brackets, words under the cursor and gutter width."""

from __future__ import annotations

from typing import Optional

_OPENING = {"(": ")", "{": "}", "[": "]"}
_CLOSING = {")": "(", "}": "{", "]": "["}


def is_bracket(char: str) -> bool:
    """Tell whether char is one of the brackets ( ) { } [ ]."""
    return char in _OPENING or char in _CLOSING


def matching_bracket(text: str, position: int) -> Optional[tuple[int, int]]:
    """Find the pair of brackets at the cursor position.

    The bracket right after the cursor is tried first, then the one right
    before it. Returns the sorted positions of the bracket and its partner,
    or None when there is no bracket or no matching partner.
    """
    def char_at(pos: int) -> str:
        return text[pos] if 0 <= pos < len(text) else ""

    pos = position
    if not is_bracket(char_at(pos)):
        pos -= 1
        if pos < 0 or not is_bracket(char_at(pos)):
            return None

    car = char_at(pos)
    if car in _OPENING:
        match_car, step = _OPENING[car], 1
    else:
        match_car, step = _CLOSING[car], -1

    begin = pos
    depth = 0
    while 0 <= pos < len(text):
        char = text[pos]
        if char == car:
            # nested brackets of the same kind must be skipped
            depth += 1
        elif char == match_car:
            depth -= 1
            if depth == 0:
                return (begin, pos) if begin < pos else (pos, begin)
        pos += step
    return None


def word_before(text: str, position: int) -> str:
    """Return the word that ends at position, as used for completion.

    A word starts after white space, '[' or ',' and starts at a backslash
    or at the beginning of the line.
    """
    start_of_line = text.rfind("\n", 0, position) + 1
    pos = position - 1
    while pos > 0:
        char = text[pos]
        if char.isspace() or char in "[,":
            pos += 1
            break
        if char == "\\" or pos == start_of_line:
            break
        pos -= 1
    pos = max(pos, 0)
    return text[pos:position] if pos <= position else ""


def line_number_area_width(block_count: int, digit_width: int, visible: bool = True) -> int:
    """Return the width of the line number gutter, at least five digits wide."""
    if not visible:
        return 0
    digits = max(4, len(str(max(1, block_count)))) + 1
    return 3 + digit_width * digits