# contestlib

A collection of classic algorithms and data structures in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `contestlib.sorting` | `merge_sort`, `merge_intervals`, `median_of_medians`, `quickselect`, `generate_sequence`, `kth_statistic`, `radix_sort` |
| `contestlib.sequences` | `crossing_index`, `egg_drop_attempts`, `longest_nonincreasing_subsequence` |
| `contestlib.queues` | `MinQueue` (FIFO queue with constant-time minimum), `MiddleQueue` (queue with insertion at the middle), `run_min_queue`, `run_middle_queue` |
| `contestlib.sparse_table` | `SecondMinSparseTable`: second-smallest value of a range |
| `contestlib.hashing` | `ChainedHashSet`, `ChainedCounter`, `run_set_commands`, `multiset_intersection`, `count_equidistant_pairs`, `count_isosceles` |
| `contestlib.avl` | `AVLTree` with `insert`, `get`, `lower_bound`, `in` and `len`; `process_lower_bound_queries`, `lookup_credentials` |
| `contestlib.graphs` | `strongly_connected_components`, `find_bridges` |
| `contestlib.shortest_paths` | `dijkstra`, `find_negative_cycle`, `minimum_spanning_tree_weight`, `DisjointSet` |
| `contestlib.flows` | `max_bipartite_matching`, `min_cut`, `min_cost_max_flow` |
| `contestlib.cli` | the `contestlib` command |

## Examples

```python
from contestlib.sorting import merge_intervals, radix_sort
from contestlib.queues import MinQueue
from contestlib.avl import AVLTree
from contestlib.shortest_paths import DisjointSet

merge_intervals([(1, 3), (2, 5), (7, 8)])   # [(1, 5), (7, 8)]
radix_sort([5, 1, 4])                        # [1, 4, 5]

queue = MinQueue()
queue.push(3)
queue.push(1)
queue.minimum()                              # 1
queue.pop()                                  # 3

tree = AVLTree()
tree.insert(10, None)
tree.insert(20, None)
tree.lower_bound(15)                         # 20
tree.lower_bound(25)                         # None

sets = DisjointSet(4)
sets.union(0, 1)                             # True
sets.find(0) == sets.find(1)                 # True
```

A few conventions worth knowing:

- Empty `MinQueue` and `MiddleQueue` operations raise `IndexError`; the
  `run_*` helpers turn that into an `"error"` reply where applicable.
- `strongly_connected_components`, `find_bridges`, `min_cut`,
  `minimum_spanning_tree_weight`, `max_bipartite_matching` and
  `min_cost_max_flow` take 1-based vertices. `dijkstra` takes 0-based
  vertices, ignores edges of weight -1 and reports unreachable vertices
  as `2009000999`.
- `find_negative_cycle` takes a square weight matrix in which `100000`
  means "no edge" and returns the cycle's 1-based vertices with the first
  one repeated at the end, or `None`.
- `min_cut` returns the cut capacity and the sorted ids (1-based, in input
  order) of the cut edges.

## Command line

The `contestlib` command reads a problem from standard input and prints its
answer. It has two subcommands:

```
contestlib min-cut
contestlib dijkstra
```

`min-cut` reads `n m` followed by `m` undirected edges `u v capacity`
(1-based) and prints the number of cut edges and the cut capacity on one
line, then the sorted edge ids on the next.

`dijkstra` reads the number of graphs, then for each graph `n m`, `m`
undirected edges `u v weight` (0-based) and the source vertex, and prints
one line of distances per graph.

On malformed or incomplete input the command prints a message to standard
error and exits with status 1.

## Limits

Only the minimum cut and shortest-distance problems are available from the
command line; everything else is reachable only as Python functions and
classes. Nothing is stored between runs.