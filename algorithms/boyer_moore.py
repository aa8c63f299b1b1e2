# boyer_moore.py
# Boyer-Moore string search. The pattern is compared right to left against
# the text; on a mismatch the text cursor jumps ahead by the larger of the
# bad-character shift and the good-suffix shift.
#
# All shifts are measured from the text position of the mismatching
# character, and the cursor always lands on the text position aligned with
# the pattern's last character.


def bad_character_table(pattern):
    """Maps each pattern character to its distance from the pattern's end.

    The rightmost occurrence wins. Characters not in the table shift by the
    full pattern length.

    >>> bad_character_table("abac")
    {'a': 1, 'b': 2, 'c': 0}
    """
    m = len(pattern)
    table = {}
    for i, char in enumerate(pattern):
        table[char] = m - 1 - i
    return table


def good_suffix_table(pattern):
    """Returns the shift to use after matching k trailing characters, k = 0..m-1.

    For each matched suffix, the rightmost other occurrence of it inside the
    pattern (not preceded by the character that failed) decides the shift.
    Without one, the longest pattern prefix that ends the matched suffix is
    aligned instead, and failing that the pattern moves past the text entirely.

    >>> good_suffix_table("bcacbcbc")
    (1, 5, 8, 5, 10, 11, 12, 13)
    """
    m = len(pattern)
    if m == 0:
        return ()

    table = [1] * m
    for k in range(1, m):
        suffix = pattern[m - k:]
        preceding = pattern[m - k - 1]

        shift = None
        # occurrences must end before the pattern's last character
        for start in range(m - k):
            if pattern[start:start + k] != suffix:
                continue
            if start == 0 or pattern[start - 1] != preceding:
                shift = m - start

        if shift is None:
            shift = m + k
            for length in range(k - 1, 0, -1):
                if pattern[:length] == pattern[m - length:]:
                    shift = m - length + k
                    break

        table[k] = shift
    return tuple(table)


def find_all(pattern, text, stats=None):
    """Yields every offset of text where pattern starts."""
    n = len(text); m = len(pattern)
    counting = stats is not None

    if m == 0:
        yield from range(n + 1)
        return
    if n < m:
        return

    bad = bad_character_table(pattern)
    good = good_suffix_table(pattern)

    i = m - 1
    while i < n:
        j = m - 1
        while True:
            if counting:
                stats["comparisons"] += 1
            if text[i] != pattern[j]:
                i += max(bad.get(text[i], m), good[m - 1 - j])
                break
            if j == 0:
                yield i
                # resume one position to the right of this alignment
                i += m
                break
            i -= 1
            j -= 1


def contains(pattern, text):
    """True if pattern occurs somewhere in text."""
    for _ in find_all(pattern, text):
        return True
    return False
