"""Fuzzy subsequence matching."""


def fuzzy_search(needle: str, haystack: str) -> bool:
    """True if the chars of needle appear in haystack in order.

    Not necessarily contiguous: 'vl' matches 'value'. Case-sensitive, callers
    lowercase both sides. An empty needle matches everything.
    """
    if len(needle) > len(haystack):
        return False
    pos = 0
    for char in needle:
        pos = haystack.find(char, pos)
        if pos == -1:
            return False
        pos += 1
    return True
