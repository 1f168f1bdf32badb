from inline_snapshot import snapshot

from autocomplete.tree_printer import trie_to_json
from autocomplete.trie import Trie


def test_to_dict():
    t = Trie.create_from_wordlist(["tea", "ten"])
    assert t.to_dict() == snapshot(
        {
            "end": False,
            "children": {
                "t": {
                    "end": False,
                    "children": {
                        "e": {
                            "end": False,
                            "children": {
                                "a": {"end": True, "children": {}},
                                "n": {"end": True, "children": {}},
                            },
                        }
                    },
                }
            },
        }
    )


def test_trie_to_json():
    t = Trie.create_from_wordlist(["A"])
    assert trie_to_json(t) == snapshot(
        """\
{
  "end": false,
  "children": {
    "a": {
      "end": true,
      "children": {}
    }
  }
}\
"""
    )


def test_empty_trie_to_json():
    assert trie_to_json(Trie()) == '{\n  "end": false,\n  "children": {}\n}'
