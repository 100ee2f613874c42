"""Lazy candidate producer — walks the document nearest-first for fuzzy matches.

A producer is created once per session and resumed by pull(). Between pulls
it remembers where it stopped: the line being read and the index of the next
token on that line. Once exhausted it stays exhausted; a new scan needs a new
session.
"""
import logging
from typing import Callable, Iterator, Optional

from cyclecomplete.fuzzy import fuzzy_search
from cyclecomplete.scanner import ripple_scan
from cyclecomplete.tokenizer import DEFAULT_WORD_SEPARATORS, tokenize

logger = logging.getLogger(__name__)


class CandidateProducer:
    """Pull-one-at-a-time source of completion candidates for a session."""

    def __init__(self, session, editor,
                 separators: Optional[Callable[[], str]] = None):
        self._session = session
        self._editor = editor
        self._separators = separators or (lambda: DEFAULT_WORD_SEPARATORS)
        self._started = False
        self._done = False
        self._lines: Optional[Iterator] = None
        self._tokens: Optional[Iterator[str]] = None
        self.line_number: Optional[int] = None  # line currently being read
        self.token_index = 0                    # next token on that line

    @property
    def exhausted(self) -> bool:
        return self._done

    def pull(self) -> Optional[str]:
        """Return the next candidate, or None once the document is exhausted.

        The first pull captures the needle and returns it, so it lands at
        index 0 of the session's matches.
        """
        if self._done:
            return None
        if not self._started:
            self._started = True
            return self._start()
        return self._advance()

    def _start(self) -> Optional[str]:
        document = self._editor.document
        position = self._editor.selections[0].end
        word_range = document.get_word_range_at_position(position)
        needle = document.get_text(word_range) if word_range is not None else ""

        if not needle:
            logger.debug("No word at %s, nothing to scan", position)
            return self._finish()

        self._session.capture_needle(needle)
        self._lines = ripple_scan(document, position.line)
        logger.debug("Captured needle %r at line %d", needle, position.line)
        return needle

    def _advance(self) -> Optional[str]:
        needle = self._session.needle
        needle_lower = needle.lower()
        while True:
            if self._tokens is None:
                line = next(self._lines, None)
                if line is None:
                    return self._finish()
                self.line_number = line.line_number
                self.token_index = 0
                self._tokens = tokenize(line.text, self._separators())

            for token in self._tokens:
                self.token_index += 1
                if token == needle or token in self._session.matches:
                    continue
                if fuzzy_search(needle_lower, token.lower()):
                    logger.debug("Found %r on line %d", token, self.line_number)
                    return token
            self._tokens = None

    def _finish(self) -> None:
        self._done = True
        self._lines = None
        self._tokens = None
        logger.debug("Scan exhausted with %d match(es)", len(self._session.matches))
        return None
