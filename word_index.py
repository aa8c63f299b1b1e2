# word_index.py
# Word-occurrence index: maps each word of a corpus to the lines containing it.


class WordIndex:
    """Dictionary-backed index of word -> line numbers."""

    def __init__(self):
        self._occurrences = {}

    @classmethod
    def build(cls, corpus):
        """Indexes corpus, an ordered sequence of lines split on whitespace."""
        index = cls()
        for line_number, line in enumerate(corpus):
            for word in line.split():
                index._occurrences.setdefault(word, []).append(line_number)
        return index

    def find(self, word):
        """Returns the line numbers containing word, or None if it never occurs."""
        occurrences = self._occurrences.get(word)
        if occurrences is None:
            return None
        return list(occurrences)

    def __len__(self):
        return len(self._occurrences)

    def __contains__(self, word):
        return word in self._occurrences
