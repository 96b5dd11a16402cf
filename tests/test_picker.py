"""Tests for ferry.ui.picker selection state."""

import curses

import pytest

from ferry.errors import AbortedError
from ferry.ui.picker import REQUIRED_FILES_MESSAGE, FilePicker, _status_color


@pytest.fixture
def picker(sample_entries):
    return FilePicker(sample_entries)


class TestFilePicker:
    def test_confirm_without_selection_reports_error(self, picker):
        assert picker.confirm() is None
        assert picker.message == REQUIRED_FILES_MESSAGE

    def test_toggle_and_confirm(self, picker):
        picker.toggle()
        assert picker.confirm() == ["src/app.py"]

    def test_toggle_twice_deselects(self, picker):
        picker.toggle()
        picker.toggle()
        assert picker.selection() == []

    def test_toggle_clears_message(self, picker):
        picker.confirm()
        picker.toggle()
        assert picker.message == ""

    def test_selection_in_status_order(self, picker):
        picker.move(2)
        picker.toggle()
        picker.move(-2)
        picker.toggle()
        assert picker.selection() == ["src/app.py", "old.txt"]

    def test_move_is_clamped(self, picker):
        picker.move(-5)
        assert picker.current == 0
        picker.move(10)
        assert picker.current == 2

    def test_filter(self, picker):
        for ch in "NOTE":
            picker.type_char(ch)
        assert [e.path for e in picker.visible()] == ["notes.md"]
        picker.toggle()
        picker.clear_query()
        assert len(picker.visible()) == 3
        assert picker.selection() == ["notes.md"]

    def test_backspace(self, picker):
        picker.type_char("x")
        assert picker.visible() == []
        picker.backspace()
        assert len(picker.visible()) == 3

    def test_toggle_with_no_matches(self, picker):
        picker.type_char("zzz")
        picker.toggle()
        assert picker.selection() == []


class TestHandleKey:
    def test_enter_without_selection_stays(self, picker):
        assert picker.handle_key(10) is None
        assert picker.message == REQUIRED_FILES_MESSAGE

    def test_space_down_space_enter(self, picker):
        picker.handle_key(ord(" "))
        picker.handle_key(curses.KEY_DOWN)
        picker.handle_key(ord(" "))
        assert picker.handle_key(13) == ["src/app.py", "notes.md"]

    def test_typing_filters(self, picker):
        picker.handle_key(ord("o"))
        picker.handle_key(ord("l"))
        assert [e.path for e in picker.visible()] == ["old.txt"]
        picker.handle_key(127)
        assert picker.query == "o"

    def test_escape_aborts(self, picker):
        with pytest.raises(AbortedError):
            picker.handle_key(27)


class TestStatusColor:
    @pytest.mark.parametrize("y, pair", [("?", 3), ("M", 4), ("D", 1), (" ", 1)])
    def test_color_follows_worktree_code(self, mocker, y, pair):
        color_pair = mocker.patch("ferry.ui.picker.curses.color_pair", side_effect=lambda n: n)
        assert _status_color(y) == pair
        color_pair.assert_called_once_with(pair)
