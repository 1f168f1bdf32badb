import sys

from autocomplete import complete
from autocomplete.complete import print_completions
from autocomplete.trie import Trie


def make_trie():
    return Trie.create_from_wordlist(["france", "french guiana", "germany"])


def test_print_completions(capsys):
    t = make_trie()
    print_completions(t, "Fr")
    assert capsys.readouterr().out == "france\nfrench guiana\n"

    print_completions(t, "z")
    assert capsys.readouterr().out == ""


def test_print_completions_count_and_limit(capsys):
    t = make_trie()
    print_completions(t, "fr", count=True)
    assert capsys.readouterr().out == "fr\t2\n"

    print_completions(t, "fr", limit=1)
    assert capsys.readouterr().out == "france\n"


def test_print_completions_empty_prefix(capsys):
    t = make_trie()
    print_completions(t, "")
    out, err = capsys.readouterr()
    assert out == ""
    assert err == "error: Prefix must be non-empty\n"


def test_main(capsys, monkeypatch):
    monkeypatch.setattr(
        sys,
        "argv",
        ["complete", "--dictionary", "wordlists/countries.txt", "ger", "united k"],
    )
    complete.main()
    assert capsys.readouterr().out == "germany\nunited kingdom\n"
