"""Prefix tree for case-insensitive word lookup and autocomplete."""

from typing import Iterable, Iterator, Self


class EmptyPrefixError(ValueError):
    def __init__(self):
        super().__init__("Prefix must be non-empty")


class WordNotFoundError(LookupError):
    def __init__(self, word: str):
        super().__init__(f"{word!r} is not in the trie")
        self.word = word


def normalize(word: str) -> str:
    return word.lower()


class Node:
    __slots__ = ("children", "is_terminal")

    children: dict[str, Self]
    is_terminal: bool

    def __init__(self):
        self.children = {}
        self.is_terminal = False


class Trie:
    """Trie of lowercased words.

    Children are visited in sorted character order, so every enumeration
    (get_all_words, auto_complete) comes out in lexicographic order.
    """

    def __init__(self):
        self.root = Node()

    def insert(self, word: str) -> None:
        # The root never represents a word.
        if word == "":
            return
        node = self.root
        for ch in normalize(word):
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = Node()
            node = child
        node.is_terminal = True

    def find_node(self, prefix: str) -> Node | None:
        node = self.root
        for ch in normalize(prefix):
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        node = self.find_node(word)
        return node is not None and node.is_terminal

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def is_prefix(self, prefix: str) -> bool:
        return self.find_node(prefix) is not None

    def iter_words(self, prefix: str = "") -> Iterator[str]:
        """Yield every word starting with prefix, in lexicographic order."""
        prefix = normalize(prefix)
        start = self.find_node(prefix)
        if start is None:
            return
        stack = [(prefix, start)]
        while stack:
            word, node = stack.pop()
            if node.is_terminal:
                yield word
            # Reversed so that the smallest character is popped first.
            for ch in sorted(node.children, reverse=True):
                stack.append((word + ch, node.children[ch]))

    def __iter__(self) -> Iterator[str]:
        return self.iter_words()

    def get_all_words(self) -> list[str]:
        return [*self.iter_words()]

    def auto_complete(self, prefix: str) -> list[str]:
        """All words which start with prefix.

        This descends directly to the prefix's node and only enumerates its
        subtree. A prefix which falls off the trie has no completions.
        """
        if prefix == "":
            raise EmptyPrefixError()
        return [*self.iter_words(prefix)]

    def auto_complete_by_filter(self, prefix: str) -> list[str]:
        """Same as auto_complete, but filters the full word list.

        This is O(total words) per query; it's here as a reference.
        """
        if prefix == "":
            raise EmptyPrefixError()
        prefix = normalize(prefix)
        return [word for word in self.iter_words() if word.startswith(prefix)]

    def remove(self, word: str, prune=False) -> None:
        """Unmark word as a member of the trie.

        Nodes along the word's path are left in place unless prune is set, in
        which case childless non-terminal nodes are trimmed back up the path.
        """
        path = [(self.root, "")]
        node = self.root
        for ch in normalize(word):
            node = node.children.get(ch)
            if node is None:
                raise WordNotFoundError(word)
            path.append((node, ch))
        if not node.is_terminal:
            raise WordNotFoundError(word)

        node.is_terminal = False
        if not prune:
            return
        for i in range(len(path) - 1, 0, -1):
            node, ch = path[i]
            if node.is_terminal or node.children:
                break
            parent, _ = path[i - 1]
            del parent.children[ch]

    def size(self) -> int:
        return sum(1 for _ in self.iter_words())

    def __len__(self) -> int:
        return self.size()

    def num_nodes(self) -> int:
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def to_dict(self) -> dict:
        """Nested dict view of the trie, for debugging."""

        def node_to_dict(node: Node) -> dict:
            return {
                "end": node.is_terminal,
                "children": {
                    ch: node_to_dict(node.children[ch]) for ch in sorted(node.children)
                },
            }

        return node_to_dict(self.root)

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> "Trie":
        trie = Trie()
        for word in words:
            trie.insert(word)
        return trie
