# main.py
# Command-line entry point: runs every search algorithm and prints the results.

# === IMPORTS ===
#
# --- Standard Library ---
import argparse

# --- Local ---
from algorithms.run_all import ALGORITHMS, run_all_algorithms
from charts import save_performance_chart
from file_utils import extract_text, split_lines
from word_index import WordIndex
from word_trie import WordTrie

# === DEFAULTS ===
DEMO_PATTERN = "abc"
DEMO_TEXT = "abcdefg"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="substring-search",
        description="Compare naive, Rabin-Karp, KMP and Boyer-Moore substring search",
    )
    parser.add_argument("--pattern", default=DEMO_PATTERN, help="Pattern to look for")
    parser.add_argument("--text", default=DEMO_TEXT, help="Text to search in")
    parser.add_argument("--file", help="Search a .txt, .pdf or .docx document instead of --text")
    parser.add_argument("--chart", help="Save a performance chart to this path (with --file)")
    parser.add_argument("--word", help="Look a word up in the line indexes (with --file)")
    args = parser.parse_args(argv)
    if not args.file and (args.chart or args.word):
        parser.error("--chart and --word require --file")
    return args


def print_contains(pattern, text):
    for name, module in ALGORITHMS.items():
        print(f"{name}: {module.contains(pattern, text)}")


def print_performance(performance, pattern):
    print(f"{'Algorithm':<26} {'Found':>6} {'Count':>7} {'Comparisons':>13} {'Time (ms)':>10}")
    for name, row in performance.items():
        result = row["results"][pattern]
        print(
            f"{name:<26} {str(result['found']):>6} {result['count']:>7} "
            f"{result['comparisons']:>13,} {row['time']:>10.3f}"
        )


def print_word_lookup(corpus, word):
    print(f"Index '{word}': {WordIndex.build(corpus).find(word)}")
    print(f"Trie  '{word}': {WordTrie.build(corpus).find(word)}")


def main(argv=None):
    args = parse_args(argv)

    if not args.file:
        print_contains(args.pattern, args.text)
        return 0

    text = extract_text(args.file)
    if text is None:
        return 1

    performance = run_all_algorithms(text, [args.pattern])
    print_performance(performance, args.pattern)

    if args.chart:
        save_performance_chart(performance, args.chart)
        print(f"Chart saved to {args.chart}")

    if args.word:
        print_word_lookup(split_lines(text), args.word)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
