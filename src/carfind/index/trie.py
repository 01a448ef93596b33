# src/carfind/index/trie.py
"""
Character trie used as the prefix index.

- children are kept in a dict, so any alphabet works without per-node arrays
- an optional alphabet restricts what ``insert`` accepts
- subtree traversal uses an explicit stack (no recursion limit on long words)
"""

from typing import Dict, Iterable, List, Optional, Tuple

from ..exceptions import UnsupportedCharacterError

ASCII_ALPHABET = frozenset(chr(i) for i in range(128))


class Node:
    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: Dict[str, "Node"] = {}
        self.is_terminal = False

    def __repr__(self):
        return f"Node(children={sorted(self.children)}, is_terminal={self.is_terminal})"


class Trie:
    def __init__(self, alphabet: Optional[Iterable[str]] = None):
        """
        Args:
            alphabet: characters ``insert`` accepts; ``None`` accepts any character
        """
        self._root = Node()
        self._alphabet = frozenset(alphabet) if alphabet is not None else None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    # ---------- Build ----------
    def insert(self, word: str) -> None:
        """Store ``word``; storing it again is a no-op."""
        self._check_alphabet(word)

        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = Node()
                node.children[ch] = child
            node = child

        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def _check_alphabet(self, word: str) -> None:
        # Validate up front so a rejected word never leaves half a path behind.
        if self._alphabet is None:
            return
        for ch in word:
            if ch not in self._alphabet:
                raise UnsupportedCharacterError(word, ch)

    # ---------- Lookup ----------
    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def find_completions(self, prefix: str) -> List[str]:
        """
        Return every stored word starting with ``prefix``.

        Callers must not rely on the order; words come out depth first,
        children visited in character order.
        """
        node = self._walk(prefix)
        if node is None:
            return []

        completions: List[str] = []
        path = list(prefix)
        # (None, None) marks the point where the last character leaves the path
        stack: List[Tuple[Optional[Node], Optional[str]]] = [(node, None)]
        while stack:
            current, ch = stack.pop()
            if current is None:
                path.pop()
                continue
            if ch is not None:
                path.append(ch)
                stack.append((None, None))
            if current.is_terminal:
                completions.append("".join(path))
            for child_ch in sorted(current.children, reverse=True):
                stack.append((current.children[child_ch], child_ch))
        return completions

    def _walk(self, s: str) -> Optional[Node]:
        node = self._root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
