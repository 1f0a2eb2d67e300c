"""Selection span between two editor positions."""

from dataclasses import dataclass

from .Position import Position


@dataclass(frozen=True)
class Selection:
    """A span of text from ``start`` to ``end``.

    Positions given in reverse (an editor's anchor after its active end) are
    swapped so that ``start <= end`` always holds.
    """

    start: Position
    end: Position

    def __post_init__(self):
        if self.end < self.start:
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    @classmethod
    def at(cls, line: int, character: int = 0) -> "Selection":
        """A collapsed selection (a cursor)."""
        position = Position(line, character)
        return cls(position, position)

    @property
    def is_single_line(self) -> bool:
        return self.start.line == self.end.line

    def union(self, other: "Selection") -> "Selection":
        """Smallest selection covering both spans."""
        return Selection(min(self.start, other.start), max(self.end, other.end))
