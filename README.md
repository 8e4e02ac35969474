# cpalgos

A collection of classic algorithms from competitive programming, written as
plain Python with no third-party dependencies.

## What is inside

| Module | What it gives you |
| --- | --- |
| `cpalgos.gauss` | `gauss(augmented)` solves a linear system given as an augmented matrix `[a_1 .. a_m \| b]` and returns the unique solution as a list of floats; raises `NoSolutionError` or `InfinitelyManySolutionsError` (both subclasses of `ValueError`) otherwise. |
| `cpalgos.matrix` | `Matrix` built from a list of rows, with `+`, `-`, `*`, `**`, `==`, indexing by row, `str()` as space-separated rows, and the constructors `Matrix.zeros(rows, cols)`, `Matrix.identity(n)` and `Matrix.parse(text, rows, cols)`. `matrix_power(matrix, exponent)` raises a square matrix to a non-negative power by binary exponentiation. Shape mismatches raise `ValueError`. |
| `cpalgos.simplex` | `simplex(a, b, c)` maximises `c·x` subject to `A x <= b`, `x >= 0` and returns an optimal `x`; raises `UnboundedError` or `InfeasibleError`. |
| `cpalgos.inversions` | `count_inversions(values)` counts pairs `i < j` with `values[i] > values[j]`, by merge sort. |
| `cpalgos.kmp` | `prefix_function(s)` and `kmp(pattern, text)`, which returns the 0-based start positions of every occurrence. Both work on strings or any sequence. |
| `cpalgos.aho_corasick` | `AhoCorasick(alphabet)` automaton (lower-case Latin letters by default): `add(word)` returns the state where the word ends, `build()` computes suffix links and completes the transitions, then `transition(state, char)`, `link(state)`, `is_terminal(state)` and `len()` for the number of states. |
| `cpalgos.tandems` | `count_tandems(sequence)` returns, for k = 2 .. len(sequence), the number of substrings made of some block repeated k times. |
| `cpalgos.twosat` | `strongly_connected_components(graph)` returns an `SCC` with `ids` and `groups` in topological order; `TwoSat(n)` with `add_clause(a, a_value, b, b_value)` meaning `(x[a] == a_value) or (x[b] == b_value)`, and `solve()` returning a list of booleans or `None`. |
| `cpalgos.edge_pairing` | `pair_edges(num_vertices, edges)` splits the edges of a graph into pairs of edges sharing a vertex, returned as pairs of edge indices; each connected component with `m` edges gives `m // 2` pairs. |
| `cpalgos.lca` | `LCA(adjacency, root)` with binary lifting: `is_ancestor`, `lca`, `distance`. |
| `cpalgos.hld` | `HeavyLightDecomposition(adjacency, root, weighted_edges)` for path and subtree additions and sums (`update_path`, `update_subtree`, `query_path`, `query_subtree`, plus `is_ancestor` and `lca`), backed by `LazySegmentTree`; `NaiveTree` is a simple reference implementation with the same interface. |

Graph vertices are numbered from 0. Tree structures check that the input is a
connected tree and raise `ValueError` if it is not; out-of-range vertices raise
`IndexError`.

With `weighted_edges=True` (the default) the value of an edge is stored at its
lower endpoint, and paths and subtrees cover edges; with `False` they cover
vertices.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Linear systems:

```python
from cpalgos.gauss import gauss, NoSolutionError

# x + y = 3, x - y = 1
print(gauss([[1, 1, 3], [1, -1, 1]]))  # approximately [2.0, 1.0]

try:
    gauss([[1, 1, 1], [1, 1, 2]])
except NoSolutionError:
    print("inconsistent")
```

Matrix powers, e.g. Fibonacci numbers:

```python
from cpalgos.matrix import Matrix

fib = Matrix([[1, 1], [1, 0]]) ** 10
print(fib)
```

Pattern matching:

```python
from cpalgos.kmp import kmp

print(kmp("aba", "ababa"))  # [0, 2]
```

Inversions:

```python
from cpalgos.inversions import count_inversions

print(count_inversions([3, 1, 2]))  # 2
```

2-SAT:

```python
from cpalgos.twosat import TwoSat

solver = TwoSat(2)
solver.add_clause(0, True, 1, True)    # x0 or x1
solver.add_clause(0, False, 1, False)  # not x0 or not x1
print(solver.solve())
```

Path sums on a tree:

```python
from cpalgos.hld import HeavyLightDecomposition

tree = [[1, 2], [0, 3], [0], [1]]
hld = HeavyLightDecomposition(tree, root=0, weighted_edges=False)
hld.update_path(3, 2, 5)
print(hld.query_path(3, 2))  # 20: four vertices, 5 each
```

## Command-line tools

`cpalgos-tandems` reads `n` followed by `n` integers from standard input and
prints, on one line, the number of k-tandem substrings for k = 2, ..., n:

```
echo "4 1 1 1 1" | cpalgos-tandems
```

`cpalgos-2sat` reads a 2-CNF formula in DIMACS form from standard input
(a `p cnf <variables> <clauses>` header, then one clause of two literals
terminated by `0` per clause) and prints either `s UNSATISFIABLE`, or
`s SATISFIABLE` followed by a `v ...` line giving a satisfying assignment:

```
cpalgos-2sat < formula.cnf
```

## What it does not do

- `AhoCorasick` is the automaton only: it has no method that scans a text and
  reports matches; walk `transition` yourself and follow `link` to find
  terminal states.
- Only the tandem counter and the 2-SAT solver have commands; everything else
  is used from Python.