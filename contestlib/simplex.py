"""Two-phase simplex for: maximize c.x subject to A x <= b, x >= 0."""

from __future__ import annotations

from collections.abc import Sequence

EPS = 1e-9


class InfeasibleError(ValueError):
    """The constraints admit no solution."""


class UnboundedError(ValueError):
    """The objective can grow without limit."""


class _Tableau:
    def __init__(self, a: list[list[float]], b: list[float], c: list[float]) -> None:
        self.m = len(b)
        self.n = len(c)
        n = self.n
        self.d = [row + [-1.0, bi] for row, bi in zip(a, b)]
        self.d.append([-cj for cj in c] + [0.0, 0.0])
        phase_one = [0.0] * (n + 2)
        phase_one[n] = 1.0
        self.d.append(phase_one)
        self.basic = list(range(n, n + self.m))
        self.nonbasic = list(range(n)) + [-1]

    def pivot(self, r: int, s: int) -> None:
        d = self.d
        pivot_row = d[r]
        inv = 1.0 / pivot_row[s]
        for i, row in enumerate(d):
            if i == r:
                continue
            factor = row[s] * inv
            if factor:
                for j, value in enumerate(pivot_row):
                    if j != s:
                        row[j] -= value * factor
        for j in range(len(pivot_row)):
            if j != s:
                pivot_row[j] *= inv
        for i, row in enumerate(d):
            if i != r:
                row[s] *= -inv
        pivot_row[s] = inv
        self.basic[r], self.nonbasic[s] = self.nonbasic[s], self.basic[r]

    def entering(self, row: list[float], columns) -> int:
        return min(columns, key=lambda j: (row[j], self.nonbasic[j]))

    def run(self, phase: int) -> bool:
        m, n, d = self.m, self.n, self.d
        objective = d[m + 1] if phase == 1 else d[m]
        columns = [
            j for j in range(n + 1) if not (phase == 2 and self.nonbasic[j] == -1)
        ]
        while True:
            columns = [
                j for j in range(n + 1) if not (phase == 2 and self.nonbasic[j] == -1)
            ]
            s = self.entering(objective, columns)
            if objective[s] > -EPS:
                return True
            rows = [i for i in range(m) if d[i][s] >= EPS]
            if not rows:
                return False
            r = min(rows, key=lambda i: (d[i][n + 1] / d[i][s], self.basic[i]))
            self.pivot(r, s)


class LPSolver:
    """Linear program in standard inequality form."""

    def __init__(
        self,
        a: Sequence[Sequence[float]],
        b: Sequence[float],
        c: Sequence[float],
    ) -> None:
        self._a = [[float(v) for v in row] for row in a]
        self._b = [float(v) for v in b]
        self._c = [float(v) for v in c]
        if len(self._a) != len(self._b):
            raise ValueError("A must have one row per entry of b")
        if any(len(row) != len(self._c) for row in self._a):
            raise ValueError("every row of A must have one entry per entry of c")

    def solve(self) -> tuple[float, list[float]]:
        """Return ``(optimal value, optimal x)``.

        Raises InfeasibleError or UnboundedError.
        """
        t = _Tableau([row[:] for row in self._a], self._b[:], self._c[:])
        m, n, d = t.m, t.n, t.d
        if m:
            r = min(range(m), key=lambda i: d[i][n + 1])
            if d[r][n + 1] < -EPS:
                t.pivot(r, n)
                if not t.run(1) or d[m + 1][n + 1] < -EPS:
                    raise InfeasibleError("linear program is infeasible")
                for i in range(m):
                    if t.basic[i] == -1:
                        t.pivot(i, t.entering(d[i], range(n + 1)))
        if not t.run(2):
            raise UnboundedError("linear program is unbounded")
        x = [0.0] * n
        for i, var in enumerate(t.basic):
            if 0 <= var < n:
                x[var] = d[i][n + 1]
        return d[m][n + 1], x


def solve_lp(
    a: Sequence[Sequence[float]], b: Sequence[float], c: Sequence[float]
) -> tuple[float, list[float]]:
    """Solve max c.x s.t. A x <= b, x >= 0 and return ``(value, x)``."""
    return LPSolver(a, b, c).solve()