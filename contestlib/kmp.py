"""Knuth-Morris-Pratt string matching."""

from __future__ import annotations


class KMP:
    """Prefix-function automaton for a fixed, non-empty pattern."""

    def __init__(self, pattern: str) -> None:
        if not pattern:
            raise ValueError("pattern must not be empty")
        self.pattern = pattern
        n = len(pattern)
        self._failure = [0] * (n + 1)
        for i in range(1, n):
            self._failure[i + 1] = self.advance(self._failure[i], pattern[i])

    def advance(self, state: int, char: str) -> int:
        """Return the automaton state after reading ``char`` from ``state``."""
        s, n = self.pattern, len(self.pattern)
        while state and (state >= n or s[state] != char):
            state = self._failure[state]
        if state < n and s[state] == char:
            state += 1
        return state

    def find_all(self, text: str) -> list[int]:
        """Return the indices in ``text`` at which an occurrence of the pattern ends."""
        n = len(self.pattern)
        ends = []
        state = 0
        for i, char in enumerate(text):
            state = self.advance(state, char)
            if state == n:
                ends.append(i)
        return ends

    def min_factor(self) -> int:
        """Return the length of the shortest string whose repetition gives the pattern."""
        n = len(self.pattern)
        i = self._failure[n]
        while i:
            if n % (n - i) == 0:
                return n - i
            i = self._failure[i]
        return n