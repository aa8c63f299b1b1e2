# word_trie.py
# Prefix-tree variant of the word index. Each node stores the line numbers of
# the words that end on it.


class WordTrie:
    """Trie of word -> line numbers, one node per character."""

    def __init__(self):
        self.next = {}
        self.occurrences = []

    @classmethod
    def build(cls, corpus):
        """Indexes corpus, an ordered sequence of lines split on whitespace."""
        root = cls()
        for line_number, line in enumerate(corpus):
            for word in line.split():
                root.insert(word, line_number)
        return root

    def insert(self, word, line_number):
        node = self
        for char in word:
            node = node.next.setdefault(char, WordTrie())
        node.occurrences.append(line_number)

    def find(self, word):
        """Returns the line numbers for word, or None if no stored word starts with it.

        A word that is only a prefix of stored words returns an empty list.
        """
        node = self
        for char in word:
            node = node.next.get(char)
            if node is None:
                return None
        return list(node.occurrences)
