"""Tests for session state and the lazy candidate producer."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cyclecomplete.document import BufferEditor, Selection, TextDocument
from cyclecomplete.producer import CandidateProducer
from cyclecomplete.session import Phase, Session

SCENARIO = "let value = 1\nlet val = 2\nlet v = 3"


class CountingDocument(TextDocument):
    """TextDocument that records which lines were read."""

    def __init__(self, text):
        super().__init__(text)
        self.reads = []

    def line_at(self, line):
        self.reads.append(line)
        return super().line_at(line)


def make_producer(text, line, character, separators=None):
    session = Session()
    editor = BufferEditor(text, [Selection.cursor(line, character)])
    return session, editor, CandidateProducer(session, editor, separators)


def drain(session, producer):
    """Pull until exhaustion, appending like the controller does."""
    while True:
        token = producer.pull()
        if token is None:
            return session.matches
        session.add_match(token)


def test_session_defaults():
    s = Session()
    assert s.needle == ''
    assert s.matches == []
    assert s.cursor == -1
    assert s.phase is Phase.IDLE
    assert not s.is_active
    assert not s.scan_exhausted
    assert not s.edit_guard
    assert s.producer is None


def test_session_phases_move_forward_only():
    s = Session()
    s.activate()
    assert s.phase is Phase.SCANNING
    s.mark_exhausted()
    s.activate()
    assert s.phase is Phase.CYCLING
    assert s.is_active and s.scan_exhausted


def test_session_edit_scope_guards_discard():
    s = Session()
    s.activate()
    assert s.can_discard()
    with s.edit_scope():
        assert s.edit_guard
        assert not s.can_discard()
        with s.edit_scope():
            assert s.edit_guard
        assert s.edit_guard
    assert not s.edit_guard
    assert s.can_discard()


def test_session_edit_scope_released_on_error():
    s = Session()
    try:
        with s.edit_scope():
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert not s.edit_guard


def test_session_idle_is_not_discardable():
    assert not Session().can_discard()


def test_session_add_match_deduplicates():
    s = Session()
    assert s.add_match('val') == 0
    assert s.add_match('value') == 1
    assert s.add_match('val') == 0
    assert s.matches == ['val', 'value']


def test_session_select_keeps_cursor_valid():
    s = Session()
    assert s.select(0) is None
    assert s.cursor == -1
    s.add_match('a')
    assert s.select(0) == 'a'
    assert s.select(5) is None
    assert s.cursor == 0
    assert s.current == 'a'


def test_session_needle_is_immutable():
    s = Session()
    s.capture_needle('val')
    try:
        s.capture_needle('other')
    except RuntimeError:
        pass
    else:
        raise AssertionError("needle was overwritten")
    assert s.needle == 'val'


def test_first_pull_yields_needle():
    session, _, producer = make_producer(SCENARIO, 1, 7)
    assert producer.pull() == 'val'
    assert session.needle == 'val'


def test_scenario_candidates_in_ripple_order():
    session, _, producer = make_producer(SCENARIO, 1, 7)
    assert drain(session, producer) == ['val', 'value']
    assert producer.exhausted


def test_exhausted_producer_stays_exhausted():
    session, _, producer = make_producer(SCENARIO, 1, 7)
    drain(session, producer)
    assert producer.pull() is None
    assert producer.pull() is None


def test_empty_needle_yields_nothing():
    session, _, producer = make_producer("a = b\n  \nc", 1, 1)
    assert producer.pull() is None
    assert producer.exhausted
    assert session.needle == ''
    assert session.matches == []


def test_case_insensitive_match_case_sensitive_dedupe():
    session, _, producer = make_producer("Value VALUE value\nval", 1, 3)
    assert drain(session, producer) == ['val', 'Value', 'VALUE', 'value']


def test_duplicates_on_later_lines_skipped():
    text = "value\nvalue other\nval\nvalue"
    session, _, producer = make_producer(text, 2, 3)
    assert drain(session, producer) == ['val', 'value']


def test_scan_is_lazy():
    text = "\n".join(["val valid"] + ["noise"] * 50)
    session = Session()
    editor = BufferEditor(text, [Selection.cursor(0, 3)])
    editor.document = CountingDocument(text)
    producer = CandidateProducer(session, editor)
    session.add_match(producer.pull())
    session.add_match(producer.pull())
    assert session.matches == ['val', 'valid']
    assert set(editor.document.reads) == {0}
    assert producer.line_number == 0
    assert producer.token_index == 2


def test_resume_position_crosses_lines():
    text = "x1 x2\nx"
    session, _, producer = make_producer(text, 1, 1)
    assert producer.pull() == 'x'
    assert producer.pull() == 'x1'
    assert producer.line_number == 0
    assert producer.token_index == 1
    assert producer.pull() == 'x2'
    assert producer.token_index == 2


def test_needle_never_yielded_twice():
    session, _, producer = make_producer("val value\nval", 1, 3)
    assert producer.pull() == "val"
    assert producer.pull() == "value"
    assert producer.pull() is None
    assert session.matches == []


def test_separators_read_per_line():
    current = {"seps": " "}
    session = Session()
    editor = BufferEditor("foo-bar\nfoo", [Selection.cursor(1, 3)])
    producer = CandidateProducer(session, editor, lambda: current["seps"])
    assert session.add_match(producer.pull()) == 0
    current["seps"] = "-"
    assert producer.pull() is None
    assert session.matches == ["foo"]


if __name__ == '__main__':
    test_session_defaults()
    test_session_phases_move_forward_only()
    test_session_edit_scope_guards_discard()
    test_session_edit_scope_released_on_error()
    test_session_idle_is_not_discardable()
    test_session_add_match_deduplicates()
    test_session_select_keeps_cursor_valid()
    test_session_needle_is_immutable()
    test_first_pull_yields_needle()
    test_scenario_candidates_in_ripple_order()
    test_exhausted_producer_stays_exhausted()
    test_empty_needle_yields_nothing()
    test_case_insensitive_match_case_sensitive_dedupe()
    test_duplicates_on_later_lines_skipped()
    test_scan_is_lazy()
    test_resume_position_crosses_lines()
    test_needle_never_yielded_twice()
    test_separators_read_per_line()
    print("All producer tests passed.")
