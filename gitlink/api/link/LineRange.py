"""One-based inclusive line range."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineRange:
    """Lines to highlight in a permalink, one-based and inclusive on both ends."""

    start: int
    end: int

    def __post_init__(self):
        if self.start < 1:
            raise ValueError(f"LineRange start must be >= 1, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"LineRange end ({self.end}) must be >= start ({self.start})")

    @property
    def is_single_line(self) -> bool:
        return self.start == self.end
