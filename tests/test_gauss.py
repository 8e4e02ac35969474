import pytest

from cpalgos.gauss import InfinitelyManySolutionsError, NoSolutionError, gauss


def test_unique_solution_satisfies_system():
    system = [[2, 1, -1, 8], [-3, -1, 2, -11], [-2, 1, 2, -3]]
    x = gauss(system)
    for row in system:
        assert sum(c * v for c, v in zip(row, x)) == pytest.approx(row[-1])


def test_identity_system():
    assert gauss([[1, 0, 5], [0, 1, 7]]) == pytest.approx([5, 7])


def test_no_solution():
    with pytest.raises(NoSolutionError):
        gauss([[1, 1, 1], [1, 1, 2]])


def test_infinitely_many():
    with pytest.raises(InfinitelyManySolutionsError):
        gauss([[1, 1, 1], [2, 2, 2]])


def test_input_not_modified():
    system = [[0, 1, 2], [1, 0, 3]]
    gauss(system)
    assert system == [[0, 1, 2], [1, 0, 3]]