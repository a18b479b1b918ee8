# algokit

A small collection of classic algorithms in plain Python, using only the
standard library.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Functions and classes |
| --- | --- |
| `algokit.sorting` | `insertion_sort`, `selection_sort`, `merge_sort`, `quicksort`, `min_max` |
| `algokit.matching` | `compute_prefix`, `kmp_search`, `rabin_karp_search`, `longest_common_subsequence` |
| `algokit.knapsack` | `knapsack_01`, `fractional_knapsack`, `KnapsackResult`, `FractionalResult` |
| `algokit.matrix` | `matrix_add`, `matrix_subtract`, `strassen_multiply` |
| `algokit.shortest_paths` | `bellman_ford`, `dijkstra`, `floyd_warshall`, `Edge`, `ShortestPaths`, `AllPairsShortestPaths`, `NegativeCycleError` |
| `algokit.spanning_tree` | `kruskal`, `prim`, `DisjointSet`, `SpanningTree` |
| `algokit.backtracking` | `hamiltonian_cycles`, `graph_colorings`, `n_queens`, `subsets_with_sum` |

## Examples

### Sorting

Every sort takes any iterable and returns a new sorted list. `min_max`
returns `(minimum, maximum)` and raises `ValueError` on an empty input.

```python
from algokit.sorting import merge_sort, quicksort, min_max

merge_sort([5, 2, 9, 1])   # [1, 2, 5, 9]
quicksort([5, 2, 9, 1])    # [1, 2, 5, 9]
min_max([5, 2, 9, 1])      # (1, 9)
```

### String matching

`kmp_search` and `rabin_karp_search` return the list of shifts at which the
pattern occurs. `rabin_karp_search` hashes modulo `modulus` (101 by default)
and checks every hash hit character by character. Both raise `ValueError` for
an empty pattern.

```python
from algokit.matching import compute_prefix, kmp_search, rabin_karp_search
from algokit.matching import longest_common_subsequence

kmp_search("ababcabcabababd", "ababd")          # [10]
rabin_karp_search("GEEKS FOR GEEKS", "GEEK")    # [0, 10]
compute_prefix("ababd")                         # [0, 0, 1, 2, 0]
longest_common_subsequence("ABCBDAB", "BDCABA") # a string of length 4
```

### Knapsack

`knapsack_01` returns a `KnapsackResult` with `max_profit`, `items` (1-based
item numbers, last item first) and the whole profit `table`.
`fractional_knapsack` returns a `FractionalResult` with `total_value` and the
fraction of each item taken, in input order.

```python
from algokit.knapsack import knapsack_01, fractional_knapsack

result = knapsack_01([2, 3, 4], [3, 4, 5], 5)
result.max_profit   # 7
result.items        # (2, 1)

fractional_knapsack([60, 100, 120], [10, 20, 30], 50).total_value   # 240.0
```

### Matrices

`strassen_multiply` multiplies two square matrices of the same size; sizes
that are not a power of two are padded with zeros and trimmed back.

```python
from algokit.matrix import strassen_multiply

strassen_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])   # [[19, 22], [43, 50]]
```

### Shortest paths

`bellman_ford` takes a list of `Edge` values (or `(u, v, weight)` tuples) and
raises `NegativeCycleError` when a negative cycle is reachable from the source.
`dijkstra` takes an adjacency matrix where 0 means no edge. Both return a
`ShortestPaths` with `distances`, `parents` and `path_to(target)`; unreachable
vertices have distance `math.inf` and `path_to` returns `None` for them.
`floyd_warshall` takes a matrix where a missing edge is `None` or `math.inf`
and returns an `AllPairsShortestPaths` with a `path(source, target)` method.

```python
from algokit.shortest_paths import Edge, bellman_ford

paths = bellman_ford([Edge(0, 1, 2), Edge(1, 2, 3)], 3, 0)
paths.distances    # (0, 2, 5)
paths.path_to(2)   # [0, 1, 2]
```

### Spanning trees

`kruskal(vertex_count, edges)` and `prim(graph)` return a `SpanningTree`
whose `edges` are listed in the order chosen and whose `total_weight` is their
sum. `prim` raises `ValueError` if the graph is not connected. `DisjointSet`
is the union-find used by `kruskal`.

```python
from algokit.spanning_tree import kruskal

tree = kruskal(3, [(0, 1, 4), (1, 2, 1), (0, 2, 3)])
tree.total_weight   # 4
```

### Backtracking

Each search is a generator that yields every solution in lexicographic order.

```python
from algokit.backtracking import n_queens, subsets_with_sum

list(n_queens(4))                      # [(1, 3, 0, 2), (2, 0, 3, 1)]
list(subsets_with_sum([1, 2, 3], 3))   # [(1, 2), (3,)]
```

`hamiltonian_cycles(graph)` yields cycles from vertex 0 back to vertex 0, and
`graph_colorings(graph, colors)` yields colour assignments using colours
`1 .. colors`.

## What it does not do

algokit is a library only. It has no command-line program and reads no input
from the terminal or from files: data is passed to the functions as Python
values, and results come back as return values rather than printed tables.