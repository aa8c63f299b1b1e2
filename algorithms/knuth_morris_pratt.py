# knuth_morris_pratt.py
# Knuth-Morris-Pratt string search. A partial-match table built from the
# pattern tells the scan how far the pattern cursor can fall back after a
# mismatch, so the text cursor never moves backwards.

# Table entry meaning "no overlap: advance the text and restart the pattern".
NO_OVERLAP = -1


def _build_table(pattern):
    m = len(pattern)
    if m == 0:
        return (), 0

    table = [0] * m
    table[0] = NO_OVERLAP
    cnd = 0
    for i in range(1, m):
        if pattern[i] == pattern[cnd]:
            table[i] = table[cnd]
        else:
            table[i] = cnd
            while cnd >= 0 and pattern[i] != pattern[cnd]:
                cnd = table[cnd]
        cnd += 1

    # cnd is now the longest proper border of the whole pattern
    return tuple(table), cnd


def partial_match_table(pattern):
    """Returns the partial-match table, one entry per pattern position.

    >>> partial_match_table("abcdabd")
    (-1, 0, 0, 0, -1, 0, 2)
    """
    return _build_table(pattern)[0]


def find_all(pattern, text, stats=None):
    """Yields every offset of text where pattern starts. Linear in n + m."""
    n = len(text); m = len(pattern)
    counting = stats is not None

    if m == 0:
        yield from range(n + 1)
        return
    if n < m:
        return

    table, border = _build_table(pattern)
    i = j = 0
    while i < n:
        if counting:
            stats["comparisons"] += 1
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == m:
                yield i - j
                j = border
        else:
            j = table[j]
            if j == NO_OVERLAP:
                i += 1
                j = 0


def contains(pattern, text):
    """True if pattern occurs somewhere in text."""
    for _ in find_all(pattern, text):
        return True
    return False
