"""Tests for tokenizer and fuzzy matcher."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cyclecomplete.tokenizer import tokenize, iter_word_spans, word_span_at
from cyclecomplete.fuzzy import fuzzy_search


def test_tokenize_default_separators():
    assert list(tokenize("let value = 1")) == ['let', 'value', '1']
    assert list(tokenize("foo.bar(baz, qux)")) == ['foo', 'bar', 'baz', 'qux']


def test_tokenize_custom_separators():
    # '-' and '.' are word chars unless listed
    assert list(tokenize("my-var.x y", " ")) == ['my-var.x', 'y']
    assert list(tokenize("my-var.x y", "-")) == ['my', 'var.x', 'y']


def test_tokenize_empty_and_blank():
    assert list(tokenize("")) == []
    assert list(tokenize("   \t ")) == []
    assert list(tokenize("== ;; ==")) == []


def test_tokenize_is_lazy():
    tokens = tokenize("a b c")
    assert next(tokens) == 'a'
    assert next(tokens) == 'b'


def test_word_spans():
    assert list(iter_word_spans("  ab cd")) == [(2, 4), (5, 7)]


def test_word_span_at_end_of_word():
    assert word_span_at("let val = 2", 7) == (4, 7)


def test_word_span_at_start_and_middle():
    assert word_span_at("let val = 2", 4) == (4, 7)
    assert word_span_at("let val = 2", 5) == (4, 7)


def test_word_span_at_separator_only():
    assert word_span_at("a  = b", 3) is None
    assert word_span_at("", 0) is None


def test_word_span_prefers_left_word_on_shared_boundary():
    assert word_span_at("foo.bar", 3) == (0, 3)


def test_fuzzy_subsequence():
    assert fuzzy_search('val', 'value')
    assert fuzzy_search('vl', 'value')
    assert fuzzy_search('val', 'interval')
    assert not fuzzy_search('val', 'v')
    assert not fuzzy_search('val', 'lav')


def test_fuzzy_empty_needle_matches():
    assert fuzzy_search('', 'anything')
    assert fuzzy_search('', '')


def test_fuzzy_is_case_sensitive():
    assert not fuzzy_search('val', 'VALUE')
    assert fuzzy_search('val', 'VALUE'.lower())


if __name__ == '__main__':
    test_tokenize_default_separators()
    test_tokenize_custom_separators()
    test_tokenize_empty_and_blank()
    test_tokenize_is_lazy()
    test_word_spans()
    test_word_span_at_end_of_word()
    test_word_span_at_start_and_middle()
    test_word_span_at_separator_only()
    test_word_span_prefers_left_word_on_shared_boundary()
    test_fuzzy_subsequence()
    test_fuzzy_empty_needle_matches()
    test_fuzzy_is_case_sensitive()
    print("All tokenizer tests passed.")
