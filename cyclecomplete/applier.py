"""Match applier — writes the chosen candidate over the word at every cursor."""
import logging

logger = logging.getLogger(__name__)


class MatchApplier:
    """Replaces the word at each cursor, holding the session's edit guard.

    Editing moves carets, and editing surfaces report that as a selection
    change, which integrations usually route to reset(). The guard makes the
    session ignore those resets until the whole batch is written.
    """

    def apply(self, session, match: str, editor) -> int:
        """Replace the word at every cursor with match.

        Cursors are processed from last to first in document order so earlier
        edits never shift the positions of cursors still to be processed.
        Cursors without an adjacent word are skipped, and a rejected edit
        moves on to the next cursor. An edit that raises ends the batch:
        cursors already processed keep their replacement, the rest are left
        untouched. Returns the number of successful edits.
        """
        document = editor.document
        selections = sorted(editor.selections, key=lambda s: s.end, reverse=True)
        applied = 0

        with session.edit_scope():
            for selection in selections:
                word_range = document.get_word_range_at_position(selection.end)
                if word_range is None:
                    continue
                try:
                    ok = editor.edit(word_range, match)
                except Exception as e:
                    logger.warning("Edit failed at %s, stopping batch: %s", word_range.start, e)
                    break
                if ok:
                    applied += 1
                else:
                    logger.warning("Edit rejected by editor at %s", word_range.start)

        logger.debug("Applied %r at %d of %d cursor(s)", match, applied, len(selections))
        return applied
