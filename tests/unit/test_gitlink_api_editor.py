"""Unit tests for gitlink.api.editor."""

from pathlib import Path

import pytest

from gitlink.api.editor.CommandLineEditor import CommandLineEditor
from gitlink.api.editor.parse_selection import parse_selection
from gitlink.api.link.Position import Position
from gitlink.api.link.Selection import Selection


class TestParseSelection:
    def test_line_only(self):
        assert parse_selection("10") == Selection.at(10, 0)

    def test_line_and_character(self):
        assert parse_selection("10:4") == Selection.at(10, 4)

    def test_range(self):
        assert parse_selection("10:0-12:7") == Selection(Position(10, 0), Position(12, 7))

    def test_range_without_characters(self):
        assert parse_selection("3-5") == Selection(Position(3, 0), Position(5, 0))

    def test_reversed_range_normalized(self):
        assert parse_selection("12:7-10:0") == Selection(Position(10, 0), Position(12, 7))

    def test_surrounding_whitespace(self):
        assert parse_selection(" 2:1 ") == Selection.at(2, 1)

    @pytest.mark.parametrize("text", ["", "a", "1:", "-3", "1-2-3", "1:2:3", "1.5"])
    def test_invalid(self, text):
        with pytest.raises(ValueError, match="Invalid selection"):
            parse_selection(text)


class TestCommandLineEditor:
    def test_default_cursor(self):
        editor = CommandLineEditor(Path("a.py"))
        assert editor.selections() == [Selection.at(0)]

    def test_selections_returned_in_order(self):
        selections = [Selection.at(5), Selection.at(1)]
        editor = CommandLineEditor(Path("a.py"), selections)
        assert editor.selections() == selections

    def test_no_document(self):
        assert CommandLineEditor(None).active_document() is None
