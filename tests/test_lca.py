import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpalgos.lca import LCA

SMALL = [[1, 2], [0, 3, 4], [0, 5], [1], [1], [2]]


def test_small_tree():
    tree = LCA(SMALL, 0)
    assert tree.lca(3, 4) == 1
    assert tree.lca(3, 5) == 0
    assert tree.distance(3, 5) == 4


def test_ancestor_relation():
    tree = LCA(SMALL, 0)
    assert tree.is_ancestor(1, 3)
    assert not tree.is_ancestor(3, 1)
    assert tree.is_ancestor(4, 4)


def test_other_root():
    tree = LCA(SMALL, 3)
    assert tree.lca(0, 4) == 1
    assert tree.is_ancestor(3, 5)


def test_cycle_rejected():
    with pytest.raises(ValueError):
        LCA([[1, 2], [0, 2], [0, 1]], 0)


def test_disconnected_rejected():
    with pytest.raises(ValueError):
        LCA([[1], [0], []], 0)


def test_bad_vertex():
    tree = LCA(SMALL, 0)
    with pytest.raises(IndexError):
        tree.lca(0, 6)


@st.composite
def trees(draw):
    n = draw(st.integers(1, 40))
    parents = [0] + [draw(st.integers(0, i - 1)) for i in range(1, n)]
    adjacency = [[] for _ in range(n)]
    for child in range(1, n):
        adjacency[child].append(parents[child])
        adjacency[parents[child]].append(child)
    return adjacency, parents


def _chain(parents, v):
    chain = [v]
    while v != 0:
        v = parents[v]
        chain.append(v)
    return chain


@given(trees(), st.data())
def test_against_ancestor_chains(tree_data, data):
    adjacency, parents = tree_data
    n = len(adjacency)
    tree = LCA(adjacency, 0)
    u = data.draw(st.integers(0, n - 1))
    v = data.draw(st.integers(0, n - 1))
    cu, cv = _chain(parents, u), _chain(parents, v)
    common = next(x for x in cu if x in cv)
    assert tree.lca(u, v) == common
    assert tree.lca(v, u) == common
    assert tree.distance(u, v) == cu.index(common) + cv.index(common)
    assert tree.is_ancestor(u, v) == (u in cv)
    assert tree.is_ancestor(0, v)