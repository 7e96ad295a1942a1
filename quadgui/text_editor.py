"""Text editing state for an edit box: cursor, selection, clicks and undo history.

Text is an immutable ``str``; every operation that edits it returns the new text.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Protocol

DOUBLE_CLICK_TIME = 0.5

_DELIMITERS = frozenset(' ();"')


def word_delimiter(character: str) -> bool:
    """Whether the character separates words."""
    return character in _DELIMITERS


def _char_at(text: str, index: int, default: str) -> str:
    return text[index] if 0 <= index < len(text) else default


class _Command(Protocol):
    def apply(self, cursor: int, text: str) -> tuple[int, str]: ...

    def unapply(self, cursor: int, text: str) -> tuple[int, str]: ...


@dataclass(frozen=True)
class _InsertCharacter:
    character: str
    cursor: int

    def apply(self, cursor: int, text: str) -> tuple[int, str]:
        if self.cursor <= len(text):
            text = text[: self.cursor] + self.character + text[self.cursor :]
        return self.cursor + 1, text

    def unapply(self, cursor: int, text: str) -> tuple[int, str]:
        if self.cursor < len(text):
            text = text[: self.cursor] + text[self.cursor + 1 :]
        return self.cursor, text


@dataclass(frozen=True)
class _InsertString:
    data: str
    cursor: int

    def apply(self, cursor: int, text: str) -> tuple[int, str]:
        if self.cursor <= len(text):
            text = text[: self.cursor] + self.data + text[self.cursor :]
        return self.cursor + len(self.data), text

    def unapply(self, cursor: int, text: str) -> tuple[int, str]:
        if self.cursor < len(text):
            end = min(self.cursor + len(self.data), len(text))
            text = text[: self.cursor] + text[end:]
        return self.cursor, text


@dataclass(frozen=True)
class _DeleteCharacter:
    character: str
    cursor: int

    def apply(self, cursor: int, text: str) -> tuple[int, str]:
        if self.cursor < len(text):
            text = text[: self.cursor] + text[self.cursor + 1 :]
        return self.cursor, text

    def unapply(self, cursor: int, text: str) -> tuple[int, str]:
        if self.cursor <= len(text):
            text = text[: self.cursor] + self.character + text[self.cursor :]
        return self.cursor + 1, text


@dataclass(frozen=True)
class _DeleteRange:
    start: int
    end: int
    data: str

    @classmethod
    def of(cls, text: str, selection: tuple[int, int]) -> _DeleteRange:
        start, end = selection
        lo, hi = min(start, end), max(start, end)
        return cls(start, end, text[lo:hi])

    def apply(self, cursor: int, text: str) -> tuple[int, str]:
        lo, hi = min(self.start, self.end), max(self.start, self.end)
        return lo, text[:lo] + text[hi:]

    def unapply(self, cursor: int, text: str) -> tuple[int, str]:
        lo = min(self.start, self.end)
        return lo, text[:lo] + self.data + text[lo:]


class ClickMode(enum.Enum):
    """What a mouse drag currently selects."""

    NONE = enum.auto()
    SELECTING_CHARS = enum.auto()
    SELECTING_WORDS = enum.auto()
    SELECTING_LINES = enum.auto()
    SELECTED = enum.auto()


@dataclass(frozen=True)
class ClickState:
    """Mouse selection mode with the anchor it started from.

    ``selection_begin`` is used while selecting characters, ``span`` while
    selecting words or lines.
    """

    mode: ClickMode = ClickMode.NONE
    selection_begin: int = 0
    span: tuple[int, int] = (0, 0)


@dataclass
class EditboxState:
    """Cursor, selection, click tracking and undo history of one edit box."""

    cursor: int = 0
    click_state: ClickState = field(default_factory=ClickState)
    clicks_counter: int = 0
    current_click: int = 0
    last_click_time: float = 0.0
    last_click: int = 0
    selection: Optional[tuple[int, int]] = None
    _undo_stack: list[_Command] = field(default_factory=list, repr=False)
    _redo_stack: list[_Command] = field(default_factory=list, repr=False)

    def clamp_selection(self, text: str) -> None:
        """Keep the selection inside the text after it changed from outside."""
        if self.selection is not None:
            start, end = self.selection
            self.selection = (min(start, len(text)), min(end, len(text)))

    def selected_text(self, text: str) -> Optional[str]:
        """The selected part of ``text``, or None without a selection."""
        if self.selection is None:
            return None
        start, end = self.selection
        lo, hi = min(start, end), max(start, end)
        if hi > len(text):
            raise ValueError(f"selection {self.selection} exceeds text length {len(text)}")
        return text[lo:hi]

    def in_selected_range(self, cursor: int) -> bool:
        """Whether the character at ``cursor`` is selected."""
        if self.selection is None:
            return False
        start, end = self.selection
        if start < end:
            return start <= cursor < end
        return end <= cursor < start

    def find_line_begin(self, text: str) -> int:
        """Distance from the cursor back to the start of its line."""
        position = self.cursor
        while position > 0 and _char_at(text, position - 1, "x") != "\n":
            position -= 1
        return self.cursor - position

    def find_line_end(self, text: str) -> int:
        """Distance from the cursor forward to the end of its line."""
        position = self.cursor
        while position < len(text) and _char_at(text, position, "x") != "\n":
            position += 1
        return max(position - self.cursor, 0)

    def find_word_begin(self, text: str, cursor: int) -> int:
        """Distance from ``cursor`` back to the start of its word."""
        position = cursor
        while position > 0:
            current = _char_at(text, position - 1, " ")
            if word_delimiter(current) or current == "\n":
                break
            position -= 1
        return cursor - position

    def find_word_end(self, text: str, cursor: int) -> int:
        """Distance from ``cursor`` past the end of its word and following delimiters."""
        position = cursor
        space_skipping = False
        while position < len(text):
            current = _char_at(text, position, " ")
            if word_delimiter(current) or current == "\n":
                space_skipping = True
            if space_skipping and not word_delimiter(current):
                break
            position += 1
        return max(position - cursor, 0)

    def _perform(self, command: _Command, text: str) -> str:
        self.cursor, text = command.apply(self.cursor, text)
        self._undo_stack.append(command)
        return text

    def insert_character(self, text: str, character: str) -> str:
        """Insert one character at the cursor and return the new text."""
        self._redo_stack.clear()
        self.selection = None
        return self._perform(_InsertCharacter(character, self.cursor), text)

    def insert_string(self, text: str, string: str) -> str:
        """Insert a string at the cursor and return the new text."""
        self._redo_stack.clear()
        self.selection = None
        return self._perform(_InsertString(string, self.cursor), text)

    def delete_selected(self, text: str) -> str:
        """Remove the selected text, if any, and return the new text."""
        self._redo_stack.clear()
        if self.selection is not None:
            text = self._perform(_DeleteRange.of(text, self.selection), text)
        self.selection = None
        return text

    def delete_next_character(self, text: str) -> str:
        """Remove the character at the cursor and return the new text."""
        self._redo_stack.clear()
        if 0 <= self.cursor < len(text):
            text = self._perform(_DeleteCharacter(text[self.cursor], self.cursor), text)
        return text

    def delete_current_character(self, text: str) -> str:
        """Remove the character before the cursor (backspace)."""
        if self.cursor > 0:
            self.cursor -= 1
            text = self.delete_next_character(text)
        return text

    def move_cursor_next_word(self, text: str, shift: bool) -> None:
        next_word = self.find_word_end(text, self.cursor + 1) + 1
        self.move_cursor(text, next_word, shift)

    def move_cursor_prev_word(self, text: str, shift: bool) -> None:
        if self.cursor > 1:
            prev_word = self.find_word_begin(text, self.cursor - 1) + 1
            self.move_cursor(text, -prev_word, shift)

    def move_cursor(self, text: str, dx: int, shift: bool) -> None:
        """Move by ``dx`` if that stays in the text; with shift, extend the selection."""
        start_cursor = self.cursor
        end_cursor = start_cursor
        if 0 <= self.cursor + dx <= len(text):
            end_cursor = self.cursor + dx
            self.cursor = end_cursor

        if not shift:
            self.selection = None
        elif self.selection is None:
            self.selection = (start_cursor, end_cursor)
        else:
            self.selection = (self.selection[0], end_cursor)

    def move_cursor_within_line(self, text: str, dx: int, shift: bool) -> None:
        """Move right by up to ``dx`` characters without leaving the line."""
        if dx < 0:
            raise ValueError("moving left within a line is not supported")
        for _ in range(dx):
            if _char_at(text, self.cursor, "x") == "\n" or self.cursor == len(text):
                break
            self.move_cursor(text, 1, shift)

    def select_all(self, text: str) -> None:
        self.selection = (0, len(text))
        self.click_state = ClickState()

    def deselect(self) -> None:
        self.click_state = ClickState()
        self.selection = None

    def select_word(self, text: str) -> tuple[int, int]:
        """Select the word under the cursor and return the selection."""
        begin = self.find_word_begin(text, self.cursor)
        end = self.find_word_end(text, self.cursor)
        self.selection = (self.cursor - begin, self.cursor + end)
        return self.selection

    def select_line(self, text: str) -> tuple[int, int]:
        """Select the line under the cursor and return the selection."""
        begin = self.find_line_begin(text)
        end = self.find_line_end(text)
        self.selection = (self.cursor - begin, self.cursor + end)
        return self.selection

    def click_down(self, time: float, text: str, cursor: int) -> None:
        """Mouse pressed at text position ``cursor`` at ``time`` seconds."""
        self.current_click = cursor

        if self.last_click == self.current_click and time - self.last_click_time < DOUBLE_CLICK_TIME:
            self.clicks_counter += 1
            phase = self.clicks_counter % 3
            if phase == 0:
                self.deselect()
            elif phase == 1:
                word = self.select_word(text)
                self.click_state = ClickState(ClickMode.SELECTING_WORDS, span=word)
            else:
                line = self.select_line(text)
                self.click_state = ClickState(ClickMode.SELECTING_LINES, span=line)
        else:
            self.clicks_counter = 0
            if self.click_state.mode in (ClickMode.NONE, ClickMode.SELECTED):
                self.click_state = ClickState(ClickMode.SELECTING_CHARS, selection_begin=cursor)
                self.selection = (cursor, cursor)
            else:
                self.click_state = ClickState()
                self.selection = None
                self.cursor = cursor

        self.last_click_time = time

    def click_move(self, text: str, cursor: int) -> None:
        """Mouse dragged to text position ``cursor`` with the button held."""
        self.cursor = cursor
        if self.cursor != self.last_click:
            self.clicks_counter = 0

        state = self.click_state
        if state.mode is ClickMode.SELECTING_CHARS:
            self.selection = (state.selection_begin, cursor)
        elif state.mode is ClickMode.SELECTING_WORDS:
            start, end = state.span
            if cursor < start:
                word_begin = self.cursor - self.find_word_begin(text, self.cursor)
                self.selection = (word_begin, end)
                self.cursor = word_begin
            elif cursor > end:
                word_end = self.cursor + self.find_word_end(text, self.cursor)
                self.selection = (start, word_end)
                self.cursor = word_end
            else:
                self.selection = (start, end)
                self.cursor = end
        elif state.mode is ClickMode.SELECTING_LINES:
            start, end = state.span
            if cursor < start:
                line_begin = self.cursor - self.find_line_begin(text)
                line_end = self.cursor + self.find_line_end(text)
                self.selection = (line_begin, end)
                self.cursor = line_end
            elif cursor > end:
                line_end = self.cursor + self.find_line_end(text)
                self.selection = (start, line_end)
                self.cursor = line_end
            else:
                self.selection = (start, end)
                self.cursor = end

        self.last_click = cursor

    def click_up(self, text: str) -> None:
        """Mouse released: keep a non-empty selection, drop an empty one."""
        self.click_state = ClickState()
        if self.selection is not None:
            start, end = self.selection
            if start != end:
                self.click_state = ClickState(ClickMode.SELECTED)
            else:
                self.selection = None

    def undo(self, text: str) -> str:
        """Revert the last edit and return the new text."""
        if self._undo_stack:
            command = self._undo_stack.pop()
            self.cursor, text = command.unapply(self.cursor, text)
            self._redo_stack.append(command)
        return text

    def redo(self, text: str) -> str:
        """Re-apply the last undone edit and return the new text."""
        if self._redo_stack:
            command = self._redo_stack.pop()
            self.cursor, text = command.apply(self.cursor, text)
            self._undo_stack.append(command)
        return text