"""Pairing up edges of an undirected graph that share a vertex."""

from __future__ import annotations

from collections.abc import Iterable


def pair_edges(num_vertices: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Pair edges (by index) so that paired edges share an endpoint.

    Every connected component with ``m`` edges yields ``m // 2`` pairs.
    Vertices are numbered from 0.
    """
    edge_list = [tuple(e) for e in edges]
    graph: list[list[tuple[int, int]]] = [[] for _ in range(num_vertices)]
    for eid, (u, v) in enumerate(edge_list):
        if not (0 <= u < num_vertices and 0 <= v < num_vertices):
            raise IndexError(f"edge {eid} has an endpoint out of range")
        if u == v:
            raise ValueError(f"edge {eid} is a self-loop")
        graph[u].append((v, eid))
        graph[v].append((u, eid))

    m = len(edge_list)
    used = [False] * num_vertices
    depth = [0] * num_vertices
    leftover: list[int | None] = [None] * num_vertices
    in_tree = [False] * m
    dead = [False] * m
    pairs: list[tuple[int, int]] = []

    def add(i: int, j: int) -> None:
        pairs.append((i, j))
        dead[i] = dead[j] = True

    def finish(v: int) -> None:
        children = []
        for to, eid in graph[v]:
            if in_tree[eid] and not dead[eid] and depth[to] == depth[v] + 1:
                rest = leftover[to]
                if rest is not None and not dead[rest]:
                    add(eid, rest)
                else:
                    children.append(eid)
        for i in range(0, len(children) - 1, 2):
            add(children[i], children[i + 1])
        extra = [eid for _, eid in graph[v] if not in_tree[eid] and not dead[eid]]
        for i in range(0, len(extra) - 1, 2):
            add(extra[i], extra[i + 1])
        if len(children) % 2 and len(extra) % 2:
            add(children[-1], extra[-1])
        elif len(children) % 2:
            leftover[v] = children[-1]
        elif len(extra) % 2:
            leftover[v] = extra[-1]

    for root in range(num_vertices):
        if used[root]:
            continue
        used[root] = True
        stack = [(root, 0)]
        while stack:
            v, i = stack[-1]
            if i < len(graph[v]):
                stack[-1] = (v, i + 1)
                to, eid = graph[v][i]
                if not used[to]:
                    used[to] = True
                    in_tree[eid] = True
                    depth[to] = depth[v] + 1
                    stack.append((to, 0))
            else:
                stack.pop()
                finish(v)
    return pairs