"""Tokenizer — splits line text into word tokens on configurable separators."""
from typing import Iterator, Optional, Tuple

DEFAULT_WORD_SEPARATORS = "`~!@#$%^&*()-=+[{]}\\|;:'\",.<>/?"


def _is_boundary(char: str, separators: str) -> bool:
    return char.isspace() or char in separators


def tokenize(text: str, separators: str = DEFAULT_WORD_SEPARATORS) -> Iterator[str]:
    """Yield maximal runs of non-separator, non-whitespace characters."""
    for start, end in iter_word_spans(text, separators):
        yield text[start:end]


def iter_word_spans(text: str, separators: str = DEFAULT_WORD_SEPARATORS) -> Iterator[Tuple[int, int]]:
    """Yield (start, end) character spans of the tokens in text."""
    start = None
    for i, char in enumerate(text):
        if _is_boundary(char, separators):
            if start is not None:
                yield start, i
                start = None
        elif start is None:
            start = i
    if start is not None:
        yield start, len(text)


def word_span_at(text: str, character: int,
                 separators: str = DEFAULT_WORD_SEPARATORS) -> Optional[Tuple[int, int]]:
    """Return the span of the word containing or touching character.

    A cursor sitting right after the last char of a word (or right before the
    first one) counts as adjacent. Returns None if no word touches it.
    """
    for start, end in iter_word_spans(text, separators):
        if start > character:
            break
        if start <= character <= end:
            return start, end
    return None
