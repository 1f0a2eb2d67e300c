"""Reduce editor selections to a single line range."""

from collections.abc import Sequence
from functools import reduce

from .LineRange import LineRange
from .Selection import Selection


def reduce_selections(selections: Sequence[Selection]) -> LineRange:
    """Compute the one-based line range covering the union of all selections.

    A multi-line span ending at character 0 stops on the previous line: selecting
    a whole line including its line break puts the cursor on the next line, but
    the link should still cover only the selected line.

    Raises:
        ValueError: If ``selections`` is empty
    """
    if not selections:
        raise ValueError("At least one selection is required")

    total = reduce(Selection.union, selections)

    has_trailing_line_break = not total.is_single_line and total.end.character == 0

    start = total.start.line + 1
    end = total.end.line + (0 if has_trailing_line_break else 1)

    return LineRange(start, end)
