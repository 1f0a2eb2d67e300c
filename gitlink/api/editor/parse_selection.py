"""Parse a selection given on the command line."""

import re

from ..link.Position import Position
from ..link.Selection import Selection

# LINE[:CHAR][-LINE[:CHAR]], zero-based
SELECTION_PATTERN = re.compile(r"(\d+)(?::(\d+))?(?:-(\d+)(?::(\d+))?)?")


def parse_selection(text: str) -> Selection:
    """Parse ``LINE[:CHAR][-LINE[:CHAR]]`` into a Selection.

    Coordinates are zero-based, as editors report them. A missing character
    offset is 0 and a missing end collapses the selection onto its start.

    Examples:
        >>> parse_selection("10:4")
        Selection(start=Position(line=10, character=4), end=Position(line=10, character=4))
        >>> parse_selection("10:0-12:7")
        Selection(start=Position(line=10, character=0), end=Position(line=12, character=7))

    Raises:
        ValueError: If ``text`` is not a valid selection
    """
    match = SELECTION_PATTERN.fullmatch(text.strip())
    if not match:
        raise ValueError(f"Invalid selection {text!r}: expected LINE[:CHAR][-LINE[:CHAR]]")

    start_line, start_char, end_line, end_char = match.groups()
    start = Position(int(start_line), int(start_char or 0))
    if end_line is None:
        return Selection(start, start)
    return Selection(start, Position(int(end_line), int(end_char or 0)))
