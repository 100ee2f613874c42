"""Cycle controller — next/previous/reset over a lazily discovered match set."""
import logging
from typing import Optional

from cyclecomplete.applier import MatchApplier
from cyclecomplete.producer import CandidateProducer
from cyclecomplete.session import Session
from cyclecomplete.tokenizer import DEFAULT_WORD_SEPARATORS

logger = logging.getLogger(__name__)


class SimpleAutocomplete:
    """Cycles the word under the cursor through fuzzy matches from the document.

    next() walks forward, discovering one new candidate at a time once the
    known ones are used up, and wraps to the needle when the document has
    nothing more. previous() only walks back over what was already found.
    reset() drops the session, but only one that has been stepped and is not
    in the middle of writing a match.
    """

    def __init__(self, config=None):
        self.config = config
        self._session: Optional[Session] = None
        self._applier = MatchApplier()
        self.reset()

    @property
    def session(self) -> Session:
        return self._session

    def word_separators(self) -> str:
        if self.config is None:
            return DEFAULT_WORD_SEPARATORS
        return self.config.word_separators

    def reset(self):
        if self._session is None or self._session.can_discard():
            if self._session is not None:
                logger.debug("Session reset (needle=%r, %d match(es))",
                             self._session.needle, len(self._session.matches))
            self._session = Session()

    def next(self, editor):
        session = self._session
        session.activate()

        if not self.can_autocomplete(editor):
            self.reset()
            return

        match = session.select(self._next_match_index(editor))
        if match:
            self._applier.apply(session, match, editor)

    def previous(self, editor):
        session = self._session
        if session.is_active and session.matches:
            if session.cursor > 0:
                idx = session.cursor - 1
            else:
                idx = len(session.matches) - 1
            match = session.select(idx)
            self._applier.apply(session, match, editor)
            return

        self.reset()

    @staticmethod
    def can_autocomplete(editor) -> bool:
        """Collapsed single-line caret sitting at the end of a word."""
        selection = editor.selections[0]
        if not selection.is_single_line or not selection.is_empty:
            return False
        word_range = editor.document.get_word_range_at_position(selection.end)
        if word_range is None:
            return False
        return word_range.end.character == selection.end.character

    def _next_match_index(self, editor) -> int:
        session = self._session
        if session.cursor < len(session.matches) - 1:
            return session.cursor + 1

        if session.scan_exhausted:
            return 0

        if session.producer is None:
            session.producer = CandidateProducer(session, editor, self.word_separators)

        token = session.producer.pull()
        if token is None:
            session.mark_exhausted()
            logger.debug("Cycling %d match(es) for %r", len(session.matches), session.needle)
            return 0

        return session.add_match(token)
