"""Zero-based editor coordinate."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """A zero-based line/character coordinate, ordered by line then character."""

    line: int
    character: int = 0

    def __post_init__(self):
        if self.line < 0 or self.character < 0:
            raise ValueError(f"Position must be non-negative, got {self.line}:{self.character}")
