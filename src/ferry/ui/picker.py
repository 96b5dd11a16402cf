"""Curses-based file picker with type-to-filter search."""

import curses
from typing import Optional

from ferry.errors import AbortedError
from ferry.models.core import StatusEntry
from ferry.ui.output import printable

REQUIRED_FILES_MESSAGE = "You need to select at least one file."

KEY_ESC = 27
KEY_CTRL_U = 21


class FilePicker:
    """Selection state for the file picker, independent of curses."""

    def __init__(self, entries: list[StatusEntry]):
        self.entries = entries
        self.query = ""
        self.current = 0
        self.selected: set[str] = set()
        self.message = ""

    def visible(self) -> list[StatusEntry]:
        """Entries whose path contains the query (case-insensitive)."""
        q = self.query.lower()
        return [e for e in self.entries if q in e.path.lower()]

    def move(self, delta: int) -> None:
        count = len(self.visible())
        self.current = max(0, min(count - 1, self.current + delta)) if count else 0

    def toggle(self) -> None:
        items = self.visible()
        if not items:
            return
        path = items[self.current].path
        if path in self.selected:
            self.selected.remove(path)
        else:
            self.selected.add(path)
        self.message = ""

    def type_char(self, ch: str) -> None:
        self.query += ch
        self.current = 0

    def backspace(self) -> None:
        self.query = self.query[:-1]
        self.current = 0

    def clear_query(self) -> None:
        self.query = ""
        self.current = 0

    def selection(self) -> list[str]:
        """Selected paths in status order."""
        return [e.path for e in self.entries if e.path in self.selected]

    def confirm(self) -> Optional[list[str]]:
        """Return the selection, or None (with message set) if nothing is selected."""
        chosen = self.selection()
        if not chosen:
            self.message = REQUIRED_FILES_MESSAGE
            return None
        return chosen

    def handle_key(self, key: int) -> Optional[list[str]]:
        """Apply one keypress. Returns the selection once confirmed.

        Raises AbortedError on ESC.
        """
        if key == KEY_ESC:
            raise AbortedError()
        elif key == curses.KEY_UP:
            self.move(-1)
        elif key == curses.KEY_DOWN:
            self.move(1)
        elif key == ord(" "):
            self.toggle()
        elif key in (curses.KEY_ENTER, 10, 13):
            return self.confirm()
        elif key == KEY_CTRL_U:
            self.clear_query()
        elif key in (curses.KEY_BACKSPACE, 127, 8):
            self.backspace()
        elif 33 <= key <= 126:  # Printable ASCII except space
            self.type_char(chr(key))
        return None


def _status_color(y: str) -> int:
    """Color pair for a work tree status code: untracked red, modified green."""
    if y == "?":
        return curses.color_pair(3)
    if y == "M":
        return curses.color_pair(4)
    return curses.color_pair(1)


def pick_files_curses(entries: list[StatusEntry], prompt: str = "Files to commit:") -> list[str]:
    """Interactive checkbox list of changed files. Returns selected paths.

    Controls:
    - ↑/↓: navigate
    - Space: toggle selection
    - type: filter by path, Backspace / Ctrl+U to edit the filter
    - Enter: confirm (at least one file required)
    - ESC: abort
    """

    def _curses_main(stdscr) -> list[str]:
        curses.curs_set(0)
        curses.start_color()
        curses.use_default_colors()

        curses.init_pair(1, curses.COLOR_CYAN, -1)  # Header, other statuses
        curses.init_pair(2, curses.COLOR_YELLOW, -1)  # Current item
        curses.init_pair(3, curses.COLOR_RED, -1)  # Untracked, errors
        curses.init_pair(4, curses.COLOR_GREEN, -1)  # Modified, checked
        curses.init_pair(5, curses.COLOR_WHITE, -1)  # Dimmed text

        picker = FilePicker(entries)

        while True:
            stdscr.clear()
            height, width = stdscr.getmaxyx()

            if height < 8 or width < 40:
                stdscr.addstr(0, 0, "Terminal too small")
                stdscr.refresh()
                stdscr.getch()
                raise AbortedError("Terminal too small for file picker")

            stdscr.addstr(0, 0, prompt[: width - 1], curses.color_pair(1) | curses.A_BOLD)
            search = f"Search: {picker.query}" if picker.query else "Type to search"
            stdscr.addstr(1, 2, search[: width - 4], curses.color_pair(5) | curses.A_DIM)

            items = picker.visible()
            list_rows = height - 6
            offset = max(0, picker.current - list_rows + 1)
            row = 3
            for i, entry in enumerate(items[offset : offset + list_rows], start=offset):
                checked = entry.path in picker.selected
                marker = ">" if i == picker.current else " "
                stdscr.addstr(row, 2, marker, curses.color_pair(2) | curses.A_BOLD)
                checkbox = "[x]" if checked else "[ ]"
                stdscr.addstr(row, 4, checkbox, curses.color_pair(4 if checked else 5))
                stdscr.addstr(row, 8, entry.y, _status_color(entry.y))
                path_color = (
                    curses.color_pair(2) | curses.A_BOLD if i == picker.current else curses.A_NORMAL
                )
                stdscr.addstr(row, 10, printable(entry.path)[: width - 12], path_color)
                row += 1
            if not items:
                stdscr.addstr(row, 4, "No matching files", curses.color_pair(5) | curses.A_DIM)

            # Footer (avoid last row - curses errors on last char)
            footer_row = height - 3
            if picker.message:
                stdscr.addstr(footer_row, 2, picker.message[: width - 4], curses.color_pair(3))
            controls = "  UP/DN nav  SPACE toggle  type to filter  ENTER confirm  ESC abort  "
            stdscr.addstr(
                footer_row + 1, 2, controls[: width - 4], curses.color_pair(5) | curses.A_DIM
            )

            stdscr.refresh()

            chosen = picker.handle_key(stdscr.getch())
            if chosen is not None:
                return chosen

    return curses.wrapper(_curses_main)
