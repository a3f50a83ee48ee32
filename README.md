# dsakit

Small, dependency-free implementations of classic data structures and
algorithms.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `dsakit.hashtable` | `HashTable`: separately chained hash table that doubles its capacity once the load factor reaches 0.7; `main` for the command below |
| `dsakit.sequential` | `SequentialCollection` (abstract base), `Stack` (last in, first out) and `Queue` (first in, first out) |
| `dsakit.graph` | `Graph`: unweighted adjacency graph with `dfs` and `bfs`, plus `path_from_parents` |
| `dsakit.weighted_graph` | `WeightedGraph` with `dijkstra`, plus `path_map_to_path` |
| `dsakit.spanning` | `EdgeListGraph` and `WeightedEdge`, with `mst` (Jarník/Prim), plus `total_weight` |
| `dsakit.priority_queue` | `PriorityQueue`: binary max-heap |
| `dsakit.bst` | `BST`: unbalanced binary search tree that keeps duplicate keys |
| `dsakit.timing` | `search_speed` and `pop_speed` micro-benchmarks |

## Behaviour worth knowing

- `HashTable.get` returns `None` for a missing key; `remove` ignores a
  missing key. `capacity` and `load_factor` are properties, and `len()`
  gives the number of entries. A capacity below 1 is raised to 1.
- `Stack.pop`/`peek`, `Queue.pop`/`peek` and `PriorityQueue.pop`/`peek`
  raise `IndexError` on an empty collection. `SequentialCollection.remove`
  removes every occurrence of an item.
- `Graph.neighbors` returns a `frozenset` and raises `KeyError` for an
  unknown vertex. `dfs` and `bfs` return the path as a list, or `None`
  when the goal cannot be reached; `bfs` finds a path with the fewest edges.
- `WeightedGraph.dijkstra(start)` returns `(parents, weights)`; vertices
  that cannot be reached appear in neither mapping.
- `EdgeListGraph.mst(start)` returns the spanning tree's `WeightedEdge`
  objects, in the order they were chosen, for the component holding `start`.
- `BST` supports `in`, `len()` and ascending iteration; `in_order_walk`
  returns the keys as a list, and `minimum`/`maximum` return `None` when
  the tree is empty.
- `search_speed(length)` returns `(bst_time, find_time)` and
  `pop_speed(length)` returns `(pq_time, list_time)`, both in
  microseconds, over `length` random integers; a negative length raises
  `ValueError`.

## Examples

```python
from dsakit.hashtable import HashTable

table = HashTable(5)
table.put("dog", 34)
table.get("dog")        # 34
table.remove("dog")
len(table)              # 0
```

```python
from dsakit.sequential import Queue, Stack

stack = Stack()
for item in [1, 8, 3]:
    stack.push(item)
stack.pop()             # 3

queue = Queue()
for item in [7, 3, 25]:
    queue.push(item)
queue.pop()             # 7
```

```python
from dsakit.graph import Graph

g = Graph()
for i in range(10):
    g.add_edge(i, i + 1)
g.bfs(0, 3)             # [0, 1, 2, 3]
g.edge_exists(4, 6)     # False
```

```python
from dsakit.weighted_graph import WeightedGraph, path_map_to_path

g = WeightedGraph()
g.add_edge("A", "B", 3)
g.add_edge("B", "C", 4)
g.add_edge("A", "C", 10)
parents, weights = g.dijkstra("A")
weights["C"]                       # 7
path_map_to_path(parents, "C")     # ['A', 'B', 'C']
```

```python
from dsakit.spanning import EdgeListGraph, total_weight

g = EdgeListGraph()
g.add_edge("A", "B", 1)
g.add_edge("B", "C", 2)
g.add_edge("A", "C", 5)
total_weight(g.mst("A"))           # 3
```

```python
from dsakit.bst import BST
from dsakit.priority_queue import PriorityQueue

tree = BST()
for key in [5, 1, 9, 1]:
    tree.insert(key)
list(tree)                         # [1, 1, 5, 9]
9 in tree                          # True

heap = PriorityQueue()
for key in [3, 8, 1]:
    heap.push(key)
heap.pop()                         # 8
```

## Command line

A quick demonstration of the hash table:

```
dsakit-hashtable
```

It stores the key `age` with value `5` and prints the value looked up.

## What it does not do

The timing functions only return numbers; the package draws no charts and
writes no files. None of the structures are thread-safe, and the binary
search tree and hash table keep everything in memory.