#!/usr/bin/env python
"""Print the autocompletions of each prefix.

Prefixes come from the command line or, if there are none, one per line
from stdin:

$ python -m autocomplete.complete fr
france
french guiana
french polynesia
french southern territories
"""

import argparse
import fileinput
import sys

from autocomplete.args import add_standard_args, get_trie_from_args
from autocomplete.trie import EmptyPrefixError, Trie


def print_completions(trie: Trie, prefix: str, count=False, limit=0):
    try:
        words = trie.auto_complete(prefix)
    except EmptyPrefixError as e:
        print(f"error: {e}", file=sys.stderr)
        return
    if count:
        print(f"{prefix}\t{len(words)}")
        return
    if limit > 0:
        words = words[:limit]
    for word in words:
        print(word)


def main():
    parser = argparse.ArgumentParser(
        prog="Autocomplete",
        description="Print all the words in a dictionary which start with each prefix.",
    )
    add_standard_args(parser)
    parser.add_argument(
        "--count",
        action="store_true",
        help="Print the number of completions instead of the completions.",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=0,
        help="Print at most this many completions per prefix (0 = no limit).",
    )
    parser.add_argument("prefixes", nargs="*", help="Prefixes to complete.")
    args = parser.parse_args()

    t = get_trie_from_args(args)
    prefixes = args.prefixes or (line.rstrip("\n") for line in fileinput.input("-"))
    for prefix in prefixes:
        print_completions(t, prefix, count=args.count, limit=args.limit)


if __name__ == "__main__":
    main()
