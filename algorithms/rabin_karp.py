# rabin_karp.py
# Rabin-Karp string search. A window of pattern length slides over the text;
# its hash is updated in constant time per step and only windows whose hash
# equals the pattern's hash are compared character by character.

# Small on purpose: the hash is a pre-filter, collisions are expected.
MULTIPLIER = 10
MODULO = 256


def _value(char):
    return ord(char) if isinstance(char, str) else int(char)


class RollingHash:
    """Polynomial hash of a fixed-length window.

    The hash of c0 c1 ... c(w-1) is sum(ci * MULTIPLIER**(w-i-1)) % MODULO.
    roll() drops the oldest character and appends a new one in place, and
    always leaves the same value as hashing the new window from scratch.
    """

    def __init__(self, window):
        self.window = len(window)
        self.hash = 0
        for char in window:
            self.hash = (self.hash * MULTIPLIER + _value(char)) % MODULO
        self._lead_weight = pow(MULTIPLIER, max(self.window - 1, 0), MODULO)

    def roll(self, incoming, outgoing):
        """Slides the window one position: outgoing leaves, incoming enters."""
        previous = (_value(outgoing) * self._lead_weight) % MODULO
        self.hash = (self.hash + MODULO - previous) % MODULO
        self.hash = self.hash * MULTIPLIER
        self.hash = (self.hash + _value(incoming)) % MODULO

    def value(self):
        return self.hash


def find_all(pattern, text, stats=None):
    """Yields every offset of text where pattern starts."""
    n = len(text); m = len(pattern)
    counting = stats is not None

    if m == 0:
        yield from range(n + 1)
        return
    if n < m:
        return

    pattern_hash = RollingHash(pattern).value()
    window = RollingHash(text[:m])

    for i in range(n - m + 1):
        if i > 0:
            window.roll(text[i + m - 1], text[i - 1])
        if window.value() != pattern_hash:
            continue

        match = True
        for j in range(m):
            if counting:
                stats["comparisons"] += 1
            if text[i + j] != pattern[j]:
                match = False
                break
        if match:
            yield i


def contains(pattern, text):
    """True if pattern occurs somewhere in text."""
    for _ in find_all(pattern, text):
        return True
    return False
