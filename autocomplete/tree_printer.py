#!/usr/bin/env python
"""Print the node structure of a Trie as JSON, for debugging.

$ python -m autocomplete.tree_printer tea ten
"""

import json
import sys

from autocomplete.trie import Trie


def trie_to_json(trie: Trie) -> str:
    return json.dumps(trie.to_dict(), indent=2, ensure_ascii=False)


def main():
    words = sys.argv[1:]
    t = Trie.create_from_wordlist(words)
    print(trie_to_json(t))


if __name__ == "__main__":
    main()
