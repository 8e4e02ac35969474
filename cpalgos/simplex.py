"""Simplex method: maximize c^T x subject to A x <= b, x >= 0."""

from collections.abc import Sequence

EPS = 1e-8


class UnboundedError(ValueError):
    """The objective is unbounded."""


class InfeasibleError(ValueError):
    """The constraints admit no solution."""


def simplex(a: Sequence[Sequence[float]], b: Sequence[float], c: Sequence[float]) -> list[float]:
    """Return an optimal ``x`` for the linear program."""
    n = len(a)
    m = len(a[0]) + 1
    r = n
    s = m - 1
    d = [[0.0] * (m + 1) for _ in range(n + 2)]
    ix = list(range(n + m))
    for i, row in enumerate(a):
        for j in range(m - 1):
            d[i][j] = -float(row[j])
        d[i][m - 1] = 1.0
        d[i][m] = float(b[i])
        if d[r][m] > d[i][m]:
            r = i
    for j in range(m - 1):
        d[n][j] = float(c[j])
    d[n + 1][m - 1] = -1.0

    while True:
        if r < n:
            ix[s], ix[r + m] = ix[r + m], ix[s]
            pivot = d[r]
            pivot[s] = 1.0 / pivot[s]
            for j in range(m + 1):
                if j != s:
                    pivot[j] *= -pivot[s]
            for i in range(n + 2):
                if i == r:
                    continue
                row = d[i]
                for j in range(m + 1):
                    if j != s:
                        row[j] += pivot[j] * row[s]
                row[s] *= pivot[s]
        r = s = -1
        for j in range(m):
            if s < 0 or ix[s] > ix[j]:
                if d[n + 1][j] > EPS or (d[n + 1][j] > -EPS and d[n][j] > EPS):
                    s = j
        if s < 0:
            break
        for i in range(n):
            if d[i][s] < -EPS:
                if r < 0:
                    r = i
                    continue
                delta = d[r][m] / d[r][s] - d[i][m] / d[i][s]
                if delta < -EPS or (delta < EPS and ix[r + m] > ix[i + m]):
                    r = i
        if r < 0:
            raise UnboundedError("objective is unbounded")

    if d[n + 1][m] < -EPS:
        raise InfeasibleError("constraints are infeasible")
    x = [0.0] * (m - 1)
    for i in range(m, n + m):
        if ix[i] < m - 1:
            x[ix[i]] = d[i - m][m]
    return x