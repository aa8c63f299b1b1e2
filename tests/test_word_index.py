import pytest

from word_index import WordIndex
from word_trie import WordTrie

CORPUS = [
    "Cats nap often, basking in warm spots.",
    "Raindrops patter softly on windowpanes.",
    "Stars twinkle brightly in the night.",
    "Rivers flow quietly through lush valleys.",
    "Birds chirp merrily at dawn's break.",
    "Autumn leaves rustle underfoot, falling gently.",
    "Waves crash rhythmically against rocky shores.",
    "Children giggle while playing in parks.",
    "Sunflowers turn eagerly towards the sun.",
    "Snowflakes drift down gracefully from the sky.",
]


@pytest.fixture(params=[WordIndex, WordTrie], ids=["index", "trie"])
def index(request):
    return request.param.build(CORPUS)


@pytest.mark.parametrize("word, expected", [
    ("in", [0, 2, 7]),
    ("on", [1]),
    ("the", [2, 8, 9]),
    ("often,", [0]),
])
def test_find(index, word, expected):
    assert index.find(word) == expected


def test_absent_word(index):
    assert index.find("zebra") is None


def test_repeated_word_on_one_line_is_recorded_twice():
    corpus = ["the cat and the hat"]
    assert WordIndex.build(corpus).find("the") == [0, 0]
    assert WordTrie.build(corpus).find("the") == [0, 0]


def test_find_returns_a_copy(index):
    index.find("in").append(99)
    assert index.find("in") == [0, 2, 7]


def test_trie_prefix_without_word_is_empty():
    trie = WordTrie.build(CORPUS)
    assert trie.find("Sun") == []
    assert trie.find("Sunx") is None


def test_word_index_membership():
    index = WordIndex.build(CORPUS)
    assert "nap" in index
    assert "Nap" not in index
    assert len(WordIndex.build(["a b", "b c"])) == 3
