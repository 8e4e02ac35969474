"""Strongly connected components and 2-SAT solving."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class SCC:
    """Components of a directed graph in topological order.

    ``ids[v]`` is the index of the component holding ``v``; an edge ``u -> v``
    always satisfies ``ids[u] <= ids[v]``.
    """

    ids: list[int] = field(default_factory=list)
    groups: list[list[int]] = field(default_factory=list)


def strongly_connected_components(graph: Sequence[Sequence[int]]) -> SCC:
    """Tarjan's algorithm; components come out in topological order."""
    n = len(graph)
    order = [-1] * n
    low = [0] * n
    on_stack = [False] * n
    stack: list[int] = []
    groups: list[list[int]] = []
    timer = 0

    for start in range(n):
        if order[start] != -1:
            continue
        order[start] = low[start] = timer
        timer += 1
        stack.append(start)
        on_stack[start] = True
        calls = [(start, 0)]
        while calls:
            v, i = calls[-1]
            if i < len(graph[v]):
                calls[-1] = (v, i + 1)
                to = graph[v][i]
                if order[to] == -1:
                    order[to] = low[to] = timer
                    timer += 1
                    stack.append(to)
                    on_stack[to] = True
                    calls.append((to, 0))
                elif on_stack[to]:
                    low[v] = min(low[v], order[to])
                continue
            calls.pop()
            if low[v] == order[v]:
                group = []
                while True:
                    u = stack.pop()
                    on_stack[u] = False
                    group.append(u)
                    if u == v:
                        break
                groups.append(group)
            if calls:
                parent = calls[-1][0]
                low[parent] = min(low[parent], low[v])

    groups.reverse()
    ids = [0] * n
    for index, group in enumerate(groups):
        for v in group:
            ids[v] = index
    return SCC(ids=ids, groups=groups)


class TwoSat:
    """A 2-CNF formula over ``n`` boolean variables."""

    def __init__(self, n: int):
        if n < 0:
            raise ValueError("number of variables must be non-negative")
        self.n = n
        self._graph: list[list[int]] = [[] for _ in range(2 * n)]
        self.assignment: list[bool] | None = None

    def _check(self, var: int) -> None:
        if not 0 <= var < self.n:
            raise IndexError(f"variable {var} out of range")

    def add_clause(self, a: int, a_value: bool, b: int, b_value: bool) -> None:
        """Require ``(x[a] == a_value) or (x[b] == b_value)``."""
        self._check(a)
        self._check(b)
        self._graph[2 * a + (0 if a_value else 1)].append(2 * b + (1 if b_value else 0))
        self._graph[2 * b + (0 if b_value else 1)].append(2 * a + (1 if a_value else 0))

    def solve(self) -> list[bool] | None:
        """Return a satisfying assignment, or ``None`` if there is none."""
        ids = strongly_connected_components(self._graph).ids
        result = []
        for i in range(self.n):
            if ids[2 * i] == ids[2 * i + 1]:
                self.assignment = None
                return None
            result.append(ids[2 * i] < ids[2 * i + 1])
        self.assignment = result
        return result


def main(argv=None) -> int:
    """Solve a DIMACS 2-CNF read from stdin and print the answer."""
    tokens = sys.stdin.read().split()
    n, m = int(tokens[2]), int(tokens[3])
    solver = TwoSat(n)
    rest = tokens[4:]
    for k in range(m):
        a, b = int(rest[3 * k]), int(rest[3 * k + 1])
        solver.add_clause(abs(a) - 1, a > 0, abs(b) - 1, b > 0)
    result = solver.solve()
    if result is None:
        sys.stdout.write("s UNSATISFIABLE\n")
    else:
        literals = "".join(f"{i + 1 if value else -i - 1} " for i, value in enumerate(result))
        sys.stdout.write(f"s SATISFIABLE\nv {literals}0\n")
    return 0