"""Suffix automaton built online, one symbol at a time."""

from __future__ import annotations

from collections.abc import Hashable, Iterable


class SuffixAutomaton:
    """Minimal automaton recognising every substring of the text fed to it."""

    def __init__(self, text: Iterable[Hashable] = ()) -> None:
        self._length = [0]
        self._link = [-1]
        self._next: list[dict] = [{}]
        self._last = 0
        for symbol in text:
            self.extend(symbol)

    def _new_state(self, length: int, link: int, transitions: dict) -> int:
        self._length.append(length)
        self._link.append(link)
        self._next.append(transitions)
        return len(self._length) - 1

    def extend(self, symbol: Hashable) -> None:
        """Append one symbol to the text."""
        p = self._new_state(self._length[self._last] + 1, 0, {})
        v = self._last
        self._last = p
        while v != -1 and symbol not in self._next[v]:
            self._next[v][symbol] = p
            v = self._link[v]
        if v == -1:
            return
        q = self._next[v][symbol]
        if self._length[v] + 1 == self._length[q]:
            self._link[p] = q
            return
        clone = self._new_state(self._length[v] + 1, self._link[q], dict(self._next[q]))
        self._link[p] = self._link[q] = clone
        while v != -1 and self._next[v].get(symbol) == q:
            self._next[v][symbol] = clone
            v = self._link[v]

    def contains(self, substring: Iterable[Hashable]) -> bool:
        """Return True if ``substring`` occurs in the text."""
        state = 0
        for symbol in substring:
            state = self._next[state].get(symbol)
            if state is None:
                return False
        return True

    def distinct_substrings(self) -> int:
        """Return the number of distinct non-empty substrings of the text."""
        return sum(
            self._length[v] - self._length[self._link[v]]
            for v in range(1, len(self._length))
        )