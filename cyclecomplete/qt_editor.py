"""Qt editing surface — QPlainTextEdit wired to a SimpleAutocomplete."""
import logging
from typing import List, Optional

from PyQt5.QtGui import QKeySequence, QTextCursor
from PyQt5.QtWidgets import QPlainTextEdit, QShortcut

from cyclecomplete.autocomplete import SimpleAutocomplete
from cyclecomplete.document import Position, Range, Selection, TextLine
from cyclecomplete.tokenizer import DEFAULT_WORD_SEPARATORS, word_span_at

logger = logging.getLogger(__name__)


class QtDocument:
    """Live read access to a QTextDocument, addressed by block number."""

    def __init__(self, qdoc, separators=None):
        self._qdoc = qdoc
        self._separators = separators or (lambda: DEFAULT_WORD_SEPARATORS)

    @property
    def line_count(self) -> int:
        return self._qdoc.blockCount()

    def line_at(self, line: int) -> TextLine:
        if not 0 <= line < self._qdoc.blockCount():
            raise ValueError(f"line {line} out of range")
        return TextLine(line, self._qdoc.findBlockByNumber(line).text())

    def offset_at(self, position: Position) -> int:
        block = self._qdoc.findBlockByNumber(position.line)
        if not block.isValid() or not 0 <= position.character <= len(block.text()):
            raise ValueError(f"position {position} out of range")
        return block.position() + position.character

    def position_at(self, offset: int) -> Position:
        block = self._qdoc.findBlock(offset)
        return Position(block.blockNumber(), offset - block.position())

    def get_text(self, rng: Optional[Range] = None) -> str:
        text = self._qdoc.toPlainText()
        if rng is None:
            return text
        return text[self.offset_at(rng.start):self.offset_at(rng.end)]

    def get_word_range_at_position(self, position: Position) -> Optional[Range]:
        text = self.line_at(position.line).text
        span = word_span_at(text, position.character, self._separators())
        if span is None:
            return None
        return Range(Position(position.line, span[0]), Position(position.line, span[1]))


class QtEditorContext:
    """Editor context over a QPlainTextEdit's single text cursor."""

    def __init__(self, widget: QPlainTextEdit, separators=None):
        self._widget = widget
        self.document = QtDocument(widget.document(), separators)

    @property
    def selections(self) -> List[Selection]:
        cursor = self._widget.textCursor()
        anchor = self.document.position_at(cursor.anchor())
        caret = self.document.position_at(cursor.position())
        return [Selection(anchor, caret)]

    def edit(self, rng: Range, new_text: str) -> bool:
        try:
            start = self.document.offset_at(rng.start)
            end = self.document.offset_at(rng.end)
        except ValueError as e:
            logger.warning("Edit rejected: %s", e)
            return False
        cursor = self._widget.textCursor()
        cursor.beginEditBlock()
        cursor.setPosition(start)
        cursor.setPosition(end, QTextCursor.KeepAnchor)
        cursor.insertText(new_text)
        cursor.endEditBlock()
        self._widget.setTextCursor(cursor)
        return True


class CompletingTextEdit(QPlainTextEdit):
    """Plain text editor with cycling word completion on hotkeys.

    Moving the caret by any means resets the completion session; the
    completion's own edits are ignored while they are being written.
    """

    def __init__(self, config, parent=None):
        super().__init__(parent)
        self.config = config
        self.autocomplete = SimpleAutocomplete(config)
        self.context = QtEditorContext(self, lambda: self.config.word_separators)

        self._next_shortcut = QShortcut(QKeySequence(config.hotkey_next), self)
        self._next_shortcut.activated.connect(self.complete_next)
        self._prev_shortcut = QShortcut(QKeySequence(config.hotkey_previous), self)
        self._prev_shortcut.activated.connect(self.complete_previous)

        self.cursorPositionChanged.connect(self._on_cursor_moved)

    def complete_next(self):
        self.autocomplete.next(self.context)

    def complete_previous(self):
        self.autocomplete.previous(self.context)

    def rebind_shortcuts(self):
        self._next_shortcut.setKey(QKeySequence(self.config.hotkey_next))
        self._prev_shortcut.setKey(QKeySequence(self.config.hotkey_previous))
        logger.info("Shortcuts: next=%s previous=%s",
                    self.config.hotkey_next, self.config.hotkey_previous)

    def _on_cursor_moved(self):
        if self.config.reset_on_cursor_move:
            self.autocomplete.reset()
