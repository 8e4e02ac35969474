import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cpalgos.hld import HeavyLightDecomposition, LazySegmentTree, NaiveTree

PATH3 = [[1], [0, 2], [1]]


def test_path_graph_edges():
    hld = HeavyLightDecomposition(PATH3, 0, True)
    hld.update_path(0, 2, 5)
    assert hld.query_path(0, 2) == 10
    assert hld.query_path(1, 1) == 0


def test_path_graph_vertices():
    hld = HeavyLightDecomposition(PATH3, 0, False)
    hld.update_path(0, 2, 5)
    assert hld.query_path(2, 0) == 15
    assert hld.query_subtree(1) == hld.query_path(1, 2)


def test_leaf_subtree_edges_is_empty():
    hld = HeavyLightDecomposition(PATH3, 0, True)
    hld.update_subtree(2, 7)
    assert hld.query_subtree(0) == 0


def test_lca_and_ancestor():
    adjacency = [[1, 2], [0, 3, 4], [0, 5], [1], [1], [2]]
    hld = HeavyLightDecomposition(adjacency, 0)
    assert hld.lca(3, 4) == 1
    assert hld.lca(4, 5) == 0
    assert hld.is_ancestor(1, 4)
    assert not hld.is_ancestor(4, 1)


def test_not_a_tree():
    with pytest.raises(ValueError):
        HeavyLightDecomposition([[1, 2], [0, 2], [0, 1]], 0)
    with pytest.raises(ValueError):
        NaiveTree([[1], [0], []], 0)


def test_segment_tree_bounds():
    tree = LazySegmentTree(4)
    with pytest.raises(IndexError):
        tree.update(0, 4, 1)
    with pytest.raises(IndexError):
        tree.query(-1, 2)
    with pytest.raises(ValueError):
        LazySegmentTree(0)


@settings(max_examples=200)
@given(st.data())
def test_segment_tree_against_list(data):
    size = data.draw(st.integers(1, 20))
    tree = LazySegmentTree(size)
    cells = [0] * size
    index = st.integers(0, size - 1)
    for _ in range(data.draw(st.integers(1, 30))):
        left, right = sorted((data.draw(index), data.draw(index)))
        if data.draw(st.booleans()):
            value = data.draw(st.integers(-100, 100))
            tree.update(left, right, value)
            for i in range(left, right + 1):
                cells[i] += value
        else:
            assert tree.query(left, right) == sum(cells[left:right + 1])
    assert tree.query(0, size - 1) == sum(cells)


@st.composite
def trees(draw):
    n = draw(st.integers(1, 30))
    adjacency = [[] for _ in range(n)]
    for child in range(1, n):
        p = draw(st.integers(0, child - 1))
        adjacency[child].append(p)
        adjacency[p].append(child)
    return adjacency


@settings(max_examples=200)
@given(trees(), st.booleans(), st.data())
def test_hld_matches_naive(adjacency, weighted, data):
    n = len(adjacency)
    root = data.draw(st.integers(0, n - 1))
    hld = HeavyLightDecomposition(adjacency, root, weighted)
    naive = NaiveTree(adjacency, root, weighted)
    vertex = st.integers(0, n - 1)
    value = st.integers(-(1 << 30), 1 << 30)
    for _ in range(data.draw(st.integers(1, 25))):
        kind = data.draw(st.integers(1, 4))
        if kind == 1:
            u, v, x = data.draw(vertex), data.draw(vertex), data.draw(value)
            hld.update_path(u, v, x)
            naive.update_path(u, v, x)
        elif kind == 2:
            v, x = data.draw(vertex), data.draw(value)
            hld.update_subtree(v, x)
            naive.update_subtree(v, x)
        elif kind == 3:
            u, v = data.draw(vertex), data.draw(vertex)
            assert hld.query_path(u, v) == naive.query_path(u, v)
        else:
            v = data.draw(vertex)
            assert hld.query_subtree(v) == naive.query_subtree(v)
    assert hld.query_subtree(root) == naive.query_subtree(root)