"""Unit tests for gitlink.api.link.LineRange."""

from dataclasses import FrozenInstanceError

import pytest

from gitlink.api.link.LineRange import LineRange


def test_single_line():
    assert LineRange(5, 5).is_single_line
    assert not LineRange(5, 9).is_single_line


@pytest.mark.parametrize(("start", "end"), [(0, 1), (3, 2), (-1, 4)])
def test_invalid_bounds_rejected(start, end):
    with pytest.raises(ValueError):
        LineRange(start, end)


def test_immutable():
    line_range = LineRange(1, 2)
    with pytest.raises(FrozenInstanceError):
        line_range.start = 2  # type: ignore[misc]
