"""Upper envelope of lines supporting insertion and maximum queries."""

from __future__ import annotations

from bisect import bisect_right


class MaximumHull:
    """Set of lines ``y = m*x + c``; ``evaluate(x)`` returns the largest value at x.

    Lines that can never be the maximum are discarded as soon as they are inserted.
    """

    def __init__(self) -> None:
        self._slopes: list[int] = []
        self._intercepts: list[int] = []

    def __len__(self) -> int:
        return len(self._slopes)

    def _bad(self, y: int) -> bool:
        m, c = self._slopes, self._intercepts
        has_prev = y > 0
        has_next = y + 1 < len(m)
        if not has_prev and not has_next:
            return False
        if not has_prev:
            return m[y] == m[y + 1] and c[y] <= c[y + 1]
        if not has_next:
            return m[y] == m[y - 1] and c[y] <= c[y - 1]
        x, z = y - 1, y + 1
        return (c[x] - c[y]) * (m[z] - m[y]) >= (c[y] - c[z]) * (m[y] - m[x])

    def _remove(self, i: int) -> None:
        del self._slopes[i]
        del self._intercepts[i]

    def insert_line(self, slope: int, intercept: int) -> None:
        """Add the line ``y = slope*x + intercept``."""
        y = bisect_right(self._slopes, slope)
        self._slopes.insert(y, slope)
        self._intercepts.insert(y, intercept)
        if self._bad(y):
            self._remove(y)
            return
        while y + 1 < len(self._slopes) and self._bad(y + 1):
            self._remove(y + 1)
        while y > 0 and self._bad(y - 1):
            self._remove(y - 1)
            y -= 1

    def evaluate(self, x: int) -> int:
        """Return the maximum over all lines at ``x``; raise ValueError if empty."""
        if not self._slopes:
            raise ValueError("no lines in the hull")
        m, c = self._slopes, self._intercepts
        lo, hi = 0, len(m) - 1
        while lo < hi:
            mid = (lo + hi) // 2
            if c[mid] - c[mid + 1] < (m[mid + 1] - m[mid]) * x:
                lo = mid + 1
            else:
                hi = mid
        return m[lo] * x + c[lo]