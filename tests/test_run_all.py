import pytest

from algorithms import boyer_moore, knuth_morris_pratt, naive, rabin_karp
from algorithms.run_all import ALGORITHMS, get_algorithm, run_all_algorithms, search


def test_registry_holds_every_algorithm():
    assert list(ALGORITHMS) == ["Naive", "Rabin-Karp", "Knuth-Morris-Pratt (KMP)", "Boyer-Moore"]


@pytest.mark.parametrize("name, module", [
    ("Naive", naive),
    ("naive", naive),
    ("Rabin-Karp", rabin_karp),
    ("rabin_karp", rabin_karp),
    ("knuth_morris_pratt", knuth_morris_pratt),
    ("Boyer-Moore", boyer_moore),
    ("boyer_moore", boyer_moore),
])
def test_get_algorithm(name, module):
    assert get_algorithm(name) is module.contains


def test_get_algorithm_unknown():
    with pytest.raises(KeyError, match="Unknown algorithm"):
        get_algorithm("regex")


def test_search_counts_occurrences():
    result = search(naive.find_all, "abracadabra", "abra")
    assert result["found"] is True
    assert result["count"] == 2
    assert result["comparisons"] > 0


def test_search_not_found():
    result = search(knuth_morris_pratt.find_all, "abc", "abcd")
    assert result == {"found": False, "count": 0, "comparisons": 0}


def test_run_all_algorithms_agree():
    text = "the quick brown fox jumps over the lazy dog"
    patterns = ["the", "fox", "cat"]
    performance = run_all_algorithms(text, patterns)

    assert list(performance) == list(ALGORITHMS)
    for row in performance.values():
        assert row["time"] >= 0
        assert row["comparisons"] == sum(r["comparisons"] for r in row["results"].values())
        assert row["results"]["the"]["count"] == 2
        assert row["results"]["fox"]["count"] == 1
        assert row["results"]["cat"]["found"] is False
