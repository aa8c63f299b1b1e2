import time

from algorithms import boyer_moore, knuth_morris_pratt, naive, rabin_karp

ALGORITHMS = {
    "Naive": naive,
    "Rabin-Karp": rabin_karp,
    "Knuth-Morris-Pratt (KMP)": knuth_morris_pratt,
    "Boyer-Moore": boyer_moore,
}


def get_algorithm(name):
    """Returns the contains() function registered under a display or module name."""
    for display_name, module in ALGORITHMS.items():
        if name in (display_name, module.__name__.rsplit(".", 1)[-1]):
            return module.contains
    choices = ", ".join(ALGORITHMS)
    raise KeyError(f"Unknown algorithm {name!r} (choose from: {choices})")


def search(find_all, text, pattern):
    stats = {"comparisons": 0}
    count = sum(1 for _ in find_all(pattern, text, stats))
    return {
        "found": count > 0,
        "count": count,
        "comparisons": stats["comparisons"]
    }


def run_all_algorithms(text: str, patterns: list[str]) -> dict:
    results = {}

    for name, module in ALGORITHMS.items():
        per_pattern = {}
        total_comparisons = 0

        start = time.perf_counter()
        for pattern in patterns:
            per_pattern[pattern] = search(module.find_all, text, pattern)
            total_comparisons += per_pattern[pattern]["comparisons"]
        elapsed = (time.perf_counter() - start) * 1000

        results[name] = {
            "time": elapsed,
            "comparisons": total_comparisons,
            "results": per_pattern
        }

    return results
