# naive.py
# Naive string search: try the pattern at every offset of the text.


def find_all(pattern, text, stats=None):
    """Yields every offset of text where pattern starts. O(m*n), no extra space."""
    n = len(text); m = len(pattern)
    counting = stats is not None

    if m == 0:
        yield from range(n + 1)
        return
    if n < m:
        return

    for i in range(n - m + 1):
        j = 0
        while j < m:
            if counting:
                stats["comparisons"] += 1
            if text[i + j] != pattern[j]:
                break
            j += 1
        if j == m:
            yield i


def contains(pattern, text):
    """True if pattern occurs somewhere in text."""
    m = len(pattern)
    if m == 0:
        return True
    if len(text) < m:
        return False

    for i in range(len(text)):
        if _matches_at(pattern, text, i):
            return True
    return False


def _matches_at(pattern, text, offset):
    for j, char in enumerate(pattern):
        if offset + j == len(text):
            return False
        if text[offset + j] != char:
            return False
    return True
