"""Ripple line scanner — visits document lines nearest-first."""
from typing import Iterator

from cyclecomplete.document import TextLine


def ripple_order(start_line: int, line_count: int) -> Iterator[int]:
    """Yield line numbers start, start+1, start-1, start+2, start-2, ...

    Numbers outside 0..line_count-1 are skipped; every line is yielded once.
    """
    if line_count <= 0:
        return
    start_line = max(0, min(start_line, line_count - 1))
    yield start_line
    distance = 1
    while start_line + distance < line_count or start_line - distance >= 0:
        if start_line + distance < line_count:
            yield start_line + distance
        if start_line - distance >= 0:
            yield start_line - distance
        distance += 1


def ripple_scan(document, start_line: int) -> Iterator[TextLine]:
    """Lazily yield the document's lines in ripple order from start_line.

    Lines are read as they are reached, so edits made to lines not yet
    visited are seen by the scan.
    """
    for number in ripple_order(start_line, document.line_count):
        if number >= document.line_count:
            continue
        yield document.line_at(number)
