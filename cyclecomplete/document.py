"""In-memory text document and editor context.

The completion core talks to an editor through a small duck-typed surface:

- ``editor.selections``: list of Selection, the first one is primary
- ``editor.document``: object with ``line_count``, ``line_at(n)``,
  ``get_text(range)`` and ``get_word_range_at_position(position)``
- ``editor.edit(range, text)``: replace range with text, returns True on success

BufferEditor implements that surface over a plain string and supports
multiple cursors. The Qt adapter lives in qt_editor.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from cyclecomplete.tokenizer import DEFAULT_WORD_SEPARATORS, word_span_at

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Position:
    line: int
    character: int


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def is_single_line(self) -> bool:
        return self.start.line == self.end.line


@dataclass(frozen=True)
class Selection(Range):
    """A cursor (collapsed) or a selected span. end is the caret side."""

    @classmethod
    def cursor(cls, line: int, character: int) -> 'Selection':
        pos = Position(line, character)
        return cls(pos, pos)


@dataclass(frozen=True)
class TextLine:
    line_number: int
    text: str


class TextDocument:
    """Line-addressable text with word-range lookup."""

    def __init__(self, text: str = "", word_separators: str = DEFAULT_WORD_SEPARATORS):
        self._lines: List[str] = text.split('\n')
        self.word_separators = word_separators

    @property
    def text(self) -> str:
        return '\n'.join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, line: int) -> TextLine:
        if not 0 <= line < len(self._lines):
            raise ValueError(f"line {line} out of range (0..{len(self._lines) - 1})")
        return TextLine(line, self._lines[line])

    def validate_position(self, position: Position) -> Position:
        text = self.line_at(position.line).text
        if not 0 <= position.character <= len(text):
            raise ValueError(f"character {position.character} out of range on line {position.line}")
        return position

    def offset_at(self, position: Position) -> int:
        self.validate_position(position)
        return sum(len(line) + 1 for line in self._lines[:position.line]) + position.character

    def position_at(self, offset: int) -> Position:
        offset = max(0, min(offset, len(self.text)))
        for number, line in enumerate(self._lines):
            if offset <= len(line):
                return Position(number, offset)
            offset -= len(line) + 1
        last = len(self._lines) - 1
        return Position(last, len(self._lines[last]))

    def get_text(self, rng: Optional[Range] = None) -> str:
        if rng is None:
            return self.text
        return self.text[self.offset_at(rng.start):self.offset_at(rng.end)]

    def get_word_range_at_position(self, position: Position) -> Optional[Range]:
        """Range of the word containing or touching position, or None."""
        text = self.line_at(position.line).text
        span = word_span_at(text, position.character, self.word_separators)
        if span is None:
            return None
        return Range(Position(position.line, span[0]), Position(position.line, span[1]))

    def replace(self, rng: Range, new_text: str):
        start = self.offset_at(rng.start)
        end = self.offset_at(rng.end)
        text = self.text
        self._lines = (text[:start] + new_text + text[end:]).split('\n')


class BufferEditor:
    """Editor context over a TextDocument with any number of cursors.

    Selection-changed listeners are notified after every edit, which is how an
    editing surface reports that its carets moved.
    """

    def __init__(self, text: str = "", selections: Optional[List[Selection]] = None,
                 word_separators: str = DEFAULT_WORD_SEPARATORS):
        self.document = TextDocument(text, word_separators)
        self._selections: List[Selection] = list(selections or [Selection.cursor(0, 0)])
        self._listeners: List[Callable[[], None]] = []

    @property
    def selections(self) -> List[Selection]:
        return list(self._selections)

    @selections.setter
    def selections(self, selections: List[Selection]):
        for sel in selections:
            self.document.validate_position(sel.start)
            self.document.validate_position(sel.end)
        self._selections = list(selections)
        self._notify()

    @property
    def selection(self) -> Selection:
        return self._selections[0]

    def on_selection_changed(self, callback: Callable[[], None]):
        self._listeners.append(callback)

    def edit(self, rng: Range, new_text: str) -> bool:
        """Replace rng with new_text, shifting carets that sit after it."""
        try:
            start = self.document.offset_at(rng.start)
            end = self.document.offset_at(rng.end)
        except ValueError as e:
            logger.warning("Edit rejected: %s", e)
            return False
        if end < start:
            return False

        offsets = [(self.document.offset_at(s.start), self.document.offset_at(s.end))
                   for s in self._selections]
        self.document.replace(rng, new_text)

        delta = len(new_text) - (end - start)

        def shift(offset):
            if offset >= end:
                return offset + delta
            if offset > start:
                return start + len(new_text)
            return offset

        self._selections = [
            Selection(self.document.position_at(shift(a)), self.document.position_at(shift(b)))
            for a, b in offsets
        ]
        self._notify()
        return True

    def _notify(self):
        for callback in list(self._listeners):
            callback()
