# algotoolkit

A compact collection of classic data structures and algorithms in plain
Python, with no third-party dependencies.

## Installation

```
pip install algotoolkit
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "algotoolkit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algotoolkit.sequences` | `array_insert`, `array_delete`, `insertion_sort`, `merge`, `merge_sort`, `counting_sort`, and `format_value` / `format_sequence` for rendering sequences as `[a, b, c]` |
| `algotoolkit.linked_list` | `Node`, a singly linked list with a sentinel head: `insert_after`, `find_predecessor`, `to_list`, and iteration over the values after the head |
| `algotoolkit.containers` | Fixed-capacity `Stack` (`push`, `pop`, `top`, `is_full`, `len`) and `Queue` (`enqueue`, `dequeue`, `front`, `is_full`, `len`); overfilling raises `OverflowError`, taking from an empty one raises `IndexError` |
| `algotoolkit.binary_tree` | `BinaryTree`, binary search trees (`bst_insert`, `bst_search`), `height`, the generators `df_traversal` (in order) and `bf_traversal` (level by level), and `render_binary_tree` for a text drawing of a tree |
| `algotoolkit.complete_tree` | `CompleteTree`, a view of a list as a complete binary tree with `value`, `left`, `right`, `subtree`, `parent`, and truthiness meaning "not empty" |
| `algotoolkit.heap` | `heap_sift_up`, `heap_sift_down`, `build_heap`, `heap_sort`, and list-backed priority queues via `priority_enqueue` / `priority_dequeue` |
| `algotoolkit.hashing` | `HashTable` with separate chaining (`insert`, `get`, `slot_sizes`, `summary`, `in`, `len`) and the `character_sum_hash` string hash |
| `algotoolkit.graph` | `Hop` (weight and vertex), the sample graphs `TEST_GRAPH` and `SPARSE_TEST_GRAPH`, `to_sparse` to turn an adjacency matrix into adjacency lists, `to_dot` for Graphviz text, and `percent_encode` |
| `algotoolkit.shortest_paths` | `relax`, `bellman_ford` (returns a `BellmanFordResult` with `distances` and `has_negative_cycle`), `dijkstra`, `dijkstra_priority` and `floyd_warshall` |
| `algotoolkit.lsh` | Locality-sensitive hashing for cosine distance: `LshFamily`, `LSHTable`, `SearchResult`, `naive_retrieve`, `benchmark`, `format_row` and the benchmark command |

## Examples

Stacks and queues have a fixed capacity chosen when they are created:

```python
from algotoolkit.containers import Stack, Queue

stack = Stack(10)
for value in range(5):
    stack.push(value)
print(stack.pop(), len(stack), stack.is_full())   # 4 4 False

queue = Queue(5)
for value in range(3):
    queue.enqueue(value)
print(queue.dequeue(), len(queue))                # 0 2
```

Binary search trees are grown with `bst_insert`. `bst_search` returns the
node holding the value, or else the node with the largest smaller value
(`None` if there is none), and `render_binary_tree` draws the tree as text:

```python
from algotoolkit.binary_tree import bst_insert, bst_search, df_traversal, render_binary_tree

tree = None
for value in (12, 5, 18, 2, 9, 15, 19, 13, 17):
    tree = bst_insert(tree, value)

print(render_binary_tree(tree))
print(bst_search(tree, 6).value)                  # 5
print([node.value for node in df_traversal(tree)])
```

Heaps work in place on a plain list. The comparison `compare(a, b)` says
whether `a` belongs above `b`; the default `operator.gt` gives a max-heap,
and `heap_sort` with it sorts ascending:

```python
import operator
from algotoolkit.heap import heap_sort, priority_enqueue, priority_dequeue

values = [1, 19, 2, 9, 12, 18, 4, 8, 5, 6]
heap_sort(values)
print(values)

queue = []
for x in (15, 9, 3, 23):
    priority_enqueue(queue, x, operator.lt)      # min-priority queue
print(priority_dequeue(queue, operator.lt))      # 3
```

Shortest paths are computed on a weighted adjacency matrix, with
`math.inf` marking a missing edge. Each result entry is a `Hop` holding
the distance from the source and the predecessor vertex on the path
(`-1` for the source and for unreachable vertices):

```python
import math
from algotoolkit.shortest_paths import bellman_ford, dijkstra, floyd_warshall

inf = math.inf
graph = [
    [inf, 4, 8],
    [inf, inf, 2],
    [inf, inf, inf],
]
print(dijkstra(graph, 0))
result = bellman_ford(graph, 0)
print(result.distances, result.has_negative_cycle)
print(floyd_warshall(graph))
```

## Locality-sensitive hashing benchmark

The `algotoolkit-lsh-benchmark` command samples a dataset of random
three-dimensional unit vectors and a set of queries, then compares a
linear scan against LSH tables built with 1 to 3 tables, comparison
budgets of 1 to 1000 and amplification factors of 1 to 32. It prints a
table with the mean distance found, its spread, the speed-up in
comparisons, the success rate and the distance relative to the exact
search:

```
algotoolkit-lsh-benchmark
algotoolkit-lsh-benchmark --dataset-size 2000 --queryset-size 200 --seed 1
```

`--dataset-size` (default 10000), `--queryset-size` (default 1000) and
`--seed` (default 0) set the sample sizes and the random seed.

## Limits

- The shortest-path functions take adjacency matrices only; adjacency
  lists can be produced with `to_sparse` and rendered with `to_dot`, but
  no shortest-path routine runs on them.
- There is no function that walks the predecessor entries back into a
  list of vertices; the paths have to be read from the `Hop` vertices.
- `to_dot` and `percent_encode` return text; nothing is drawn or opened.