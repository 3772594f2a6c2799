"""Ukkonen suffix tree over a sliding window of a text."""

from __future__ import annotations

from collections import deque

_INF = 1 << 62


class _Node:
    __slots__ = ("s", "e", "parent", "link", "children")

    def __init__(self, s: int, e: int = _INF) -> None:
        self.s = s
        self.e = e
        self.parent: _Node | None = None
        self.link: _Node | None = None
        self.children: dict[str, _Node] = {}

    def length(self, end: int) -> int:
        return min(self.e, end) - self.s

    def get(self, char):
        return self.children.get(char)

    def set(self, char, node) -> None:
        old = self.children.pop(char, None)
        if old is not None:
            old.parent = None
        if node is not None:
            self.children[char] = node
            node.parent = self


class SlidingSuffixTree:
    """Suffix tree of ``text[start:end]`` where symbols are appended and removed in order."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._pos = 0
        self._head = 0
        self._start = 0
        self._root = self._cur = _Node(0, 0)
        self._total = 0
        self._leaves: deque[_Node] = deque()

    @property
    def window(self) -> str:
        """The text currently held in the tree."""
        return self.text[self._start:self._pos]

    def _char(self, i: int):
        return self.text[i] if i < len(self.text) else None

    def _traverse(self, end: int) -> None:
        while (u := self._cur.get(self._char(self._head))) is not None:
            if end - self._head <= u.length(end):
                break
            self._head += u.length(end)
            self._cur = u

    def _follow_link(self) -> None:
        if self._cur.e == 0:
            self._head += 1
        else:
            self._cur = self._cur.link

    def _split(self, u: _Node, d: int) -> _Node:
        p = u.parent
        key = self.text[self._head]
        p.set(key, None)
        v = _Node(u.s, u.s + d)
        u.s += d
        p.set(key, v)
        v.set(self.text[u.s], u)
        return v

    def extend(self) -> None:
        """Append the next symbol of the text to the window."""
        if self._pos >= len(self.text):
            raise IndexError("the whole text is already in the window")
        s, pos = self.text, self._pos
        self._total += len(self._leaves)
        last = None
        while self._head <= pos:
            self._traverse(pos + 1)
            u = self._cur.get(s[self._head])
            if u is not None:
                window = pos - self._head
                if s[pos] == s[u.s + window]:
                    if last is not None:
                        last.link = self._cur
                    break
                v = self._split(u, window)
                w = _Node(pos)
                v.set(s[pos], w)
                self._leaves.append(w)
                self._total += 1
                if last is not None:
                    last.link = v
                last = v
            else:
                v = _Node(pos)
                self._cur.set(s[self._head], v)
                self._leaves.append(v)
                self._total += 1
                if last is not None:
                    last.link = self._cur
                last = None
            self._follow_link()
        self._pos += 1

    def _delete_leaf(self, leaf: _Node) -> _Node:
        p = leaf.parent
        self._total -= leaf.length(self._pos)
        p.set(self.text[leaf.s], None)
        return p

    def trim(self) -> None:
        """Remove the oldest symbol from the window."""
        if self._start >= self._pos:
            raise IndexError("the window is empty")
        pos = self._pos
        self._traverse(pos)
        leaf = self._leaves.popleft()
        u = self._cur if pos - self._head == 0 else self._cur.get(self._char(self._head))
        while not leaf.children and leaf is not u:
            leaf = self._delete_leaf(leaf)
        if leaf is u and pos - self._head != 0 and not u.children:
            self._split(u, pos - self._head)
            leaf = self._delete_leaf(leaf)
            self._traverse(pos)
        if leaf.e != 0 and not leaf.children:
            self._leaves.append(leaf)
            leaf.s = pos - leaf.length(pos)
            leaf.e = _INF
            self._follow_link()
        self._start += 1

    def distinct_substrings(self) -> int:
        """Return the number of distinct non-empty substrings of the window."""
        return self._total