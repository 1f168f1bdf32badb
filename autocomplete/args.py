"""Standard command-line arguments shared across the tools."""

import argparse

from autocomplete.trie import Trie
from autocomplete.wordlist import make_trie


def add_standard_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/countries.txt",
        help="Path to dictionary file with one word per line.",
    )


def get_trie_from_args(args: argparse.Namespace) -> Trie:
    t = make_trie(args.dictionary)
    assert t.size() > 0, f"No words in {args.dictionary}"
    return t
