"""Aho-Corasick automaton over a fixed alphabet."""

import string


class AhoCorasick:
    """Trie of words completed into an automaton with suffix links."""

    def __init__(self, alphabet: str = string.ascii_lowercase):
        self._index = {ch: i for i, ch in enumerate(alphabet)}
        self._size = len(alphabet)
        self._next = [[0] * self._size]
        self._link = [0]
        self._terminal = [False]
        self._built = False

    def _code(self, char: str) -> int:
        try:
            return self._index[char]
        except KeyError:
            raise ValueError(f"character {char!r} is not in the alphabet") from None

    def add(self, word: str) -> int:
        """Insert ``word``; return the state where it ends."""
        if self._built:
            raise RuntimeError("cannot add words after build()")
        v = 0
        for ch in word:
            c = self._code(ch)
            if not self._next[v][c]:
                self._next[v][c] = len(self._next)
                self._next.append([0] * self._size)
                self._link.append(0)
                self._terminal.append(False)
            v = self._next[v][c]
        self._terminal[v] = True
        return v

    def build(self) -> None:
        """Compute suffix links and complete the transition table."""
        queue = [0]
        for v in queue:
            u = self._link[v]
            row = self._next[v]
            for c in range(self._size):
                if row[c]:
                    self._link[row[c]] = self._next[u][c] if v else 0
                    queue.append(row[c])
                else:
                    row[c] = self._next[u][c]
        self._built = True

    def transition(self, state: int, char: str) -> int:
        return self._next[state][self._code(char)]

    def link(self, state: int) -> int:
        return self._link[state]

    def is_terminal(self, state: int) -> bool:
        return self._terminal[state]

    def __len__(self) -> int:
        return len(self._next)