#!/usr/bin/env python
"""I/O-free performance test of the two autocomplete algorithms.

Every prefix of every dictionary word is completed by descending to the
prefix's subtree and by filtering the full word list. The results must agree.

$ python -m autocomplete.perf --dictionary wordlists/countries.txt
"""

import argparse
import random
import time
from typing import Callable, Sequence

from tqdm import tqdm

from autocomplete.args import add_standard_args, get_trie_from_args
from autocomplete.trie import Trie


def all_prefixes(words: Sequence[str]) -> list[str]:
    return sorted({word[:i] for word in words for i in range(1, len(word) + 1)})


def time_queries(
    name: str, complete: Callable[[str], list[str]], prefixes: Sequence[str]
) -> tuple[float, list[list[str]]]:
    results = []
    start_s = time.time()
    for prefix in tqdm(prefixes, desc=name, smoothing=0):
        results.append(complete(prefix))
    end_s = time.time()
    return end_s - start_s, results


def compare(trie: Trie, prefixes: Sequence[str]):
    descend_s, descend_results = time_queries("descend", trie.auto_complete, prefixes)
    filter_s, filter_results = time_queries(
        "filter", trie.auto_complete_by_filter, prefixes
    )
    assert descend_results == filter_results

    n = len(prefixes)
    for name, elapsed in (("descend", descend_s), ("filter", filter_s)):
        rate = n / elapsed if elapsed > 0 else float("inf")
        print(f"{name}: {elapsed:.2f}s, {rate:.2f} queries/sec")


def main():
    parser = argparse.ArgumentParser(
        prog="Autocomplete perf test",
        description="Compare the speed of subtree descent vs. filtering all words.",
    )
    add_standard_args(parser)
    parser.add_argument(
        "--random_seed",
        help="Explicitly set the random seed.",
        type=int,
        default=-1,
    )
    parser.add_argument(
        "num_prefixes",
        type=int,
        help="Number of prefixes to sample (0 = all of them).",
        default=0,
        nargs="?",
    )
    args = parser.parse_args()
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    t = get_trie_from_args(args)
    words = t.get_all_words()
    prefixes = all_prefixes(words)
    print(f"{len(words)} words, {t.num_nodes()} nodes, {len(prefixes)} prefixes")
    if 0 < args.num_prefixes < len(prefixes):
        prefixes = random.sample(prefixes, args.num_prefixes)

    compare(t, prefixes)


if __name__ == "__main__":
    main()
