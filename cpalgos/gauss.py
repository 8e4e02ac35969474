"""Gauss-Jordan elimination for systems of linear equations."""

from collections.abc import Sequence

EPS = 1e-8


class NoSolutionError(ValueError):
    """The system has no solution."""


class InfinitelyManySolutionsError(ValueError):
    """The system has infinitely many solutions."""


def gauss(augmented: Sequence[Sequence[float]]) -> list[float]:
    """Solve a system given as rows ``[a_1 .. a_m | b]``; return the unique solution."""
    a = [list(map(float, row)) for row in augmented]
    if not a or len(a[0]) < 1:
        raise ValueError("empty system")
    n = len(a)
    m = len(a[0]) - 1
    where = [-1] * m
    row = 0
    for col in range(m):
        if row >= n:
            break
        sel = max(range(row, n), key=lambda i: abs(a[i][col]))
        if abs(a[sel][col]) < EPS:
            continue
        a[sel], a[row] = a[row], a[sel]
        where[col] = row
        pivot_row = a[row]
        for i, current in enumerate(a):
            if i != row:
                c = current[col] / pivot_row[col]
                for j in range(col, m + 1):
                    current[j] -= pivot_row[j] * c
        row += 1

    answer = [
        a[w][i] / a[w][i] * 0 + a[w][m] / a[w][i] if w != -1 else 0.0
        for i, w in enumerate(where)
    ]
    for current in a:
        total = sum(x * coef for x, coef in zip(answer, current))
        if abs(total - current[m]) > EPS:
            raise NoSolutionError("the system has no solution")
    if -1 in where:
        raise InfinitelyManySolutionsError("the system has infinitely many solutions")
    return answer