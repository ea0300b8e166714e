"""
Prefix trie used as the game dictionary.

The lexicon is built once from a word list before play starts and is only
read afterwards. Words are expected to be case-normalised by the caller.
"""

from typing import Dict, Iterable, Optional


class TrieNode:
    """A single trie node: child edges keyed by character plus a terminal flag."""

    def __init__(self):
        self.children: Dict[str, "TrieNode"] = {}
        self.is_word = False


class Lexicon:
    """
    Dictionary membership and prefix lookups over a prefix trie.

    Not safe for concurrent insert and query; fill it first, then share it
    read-only.

    Attributes:
        root: The root node (spells the empty string)
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        self.root = TrieNode()
        self._size = 0
        for word in words or ():
            self.insert(word)

    def insert(self, word: str) -> None:
        """
        Add a word to the trie.

        Inserting the same word twice has no further effect. The empty
        string is ignored.

        Args:
            word: The word to add
        """
        if not word:
            return

        node = self.root
        for char in word:
            if char not in node.children:
                node.children[char] = TrieNode()
            node = node.children[char]

        if not node.is_word:
            node.is_word = True
            self._size += 1

    def _find(self, key: str) -> Optional[TrieNode]:
        node = self.root
        for char in key:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def has_word(self, word: str) -> bool:
        """Return True if `word` was inserted."""
        if not word:
            return False
        node = self._find(word)
        return node is not None and node.is_word

    def has_prefix(self, prefix: str) -> bool:
        """
        Return True if some inserted word starts with `prefix`.

        The empty prefix matches iff the lexicon holds at least one word.
        """
        if not prefix:
            return self._size > 0
        return self._find(prefix) is not None

    def __contains__(self, word: str) -> bool:
        return self.has_word(word)

    def __len__(self) -> int:
        return self._size
