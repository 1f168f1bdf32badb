"""Load a word list (one word per line) into a Trie."""

from typing import Iterator

from autocomplete.trie import Trie


def read_words(path: str) -> Iterator[str]:
    """Words may contain spaces ("french guiana"); lines starting with # are skipped."""
    with open(path, encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if not word or word.startswith("#"):
                continue
            yield word


def make_trie(path: str) -> Trie:
    return Trie.create_from_wordlist(read_words(path))
