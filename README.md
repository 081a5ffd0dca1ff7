# algokit

A collection of classic algorithms and data structures written in plain Python.
It uses nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite, install the test extra as well:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.array2d` | `Array2D`, a fixed-size grid addressed as `grid[row, col]` |
| `algokit.queens` | `solve_queens` yields every N-queens placement; `format_board` renders one |
| `algokit.stack` | `Stack`, a stack with a fixed capacity, and `StackEmptyError` |
| `algokit.disjoint_set` | `DisjointSet`, union-find with path compression and union by rank |
| `algokit.fenwick` | `FenwickTree`, prefix and range sums over positions `1..size` |
| `algokit.lcg` | `LinearCongruential`, an endless iterator of 32-bit pseudo-random values |
| `algokit.sorting` | in-place `quicksort`, `selection_sort` and Fisher–Yates `shuffle` |
| `algokit.hash_multi` | `MultiplicativeHash`, hashing by multiplication, and `is_prime` |
| `algokit.skiplist` | `SkipList`, an ordered key-value map |
| `algokit.md5` | `MD5` and `md5`, the MD5 message digest |
| `algokit.fib_heap` | `FibHeap`, a Fibonacci min-heap, with `FibNode` handles |
| `algokit.huffman` | `HuffmanTree`, Huffman coding of byte strings |
| `algokit.astar` | `AStar`, eight-way path finding on an `Array2D` with walls |
| `algokit.graph` | `DirectedGraph`, a weighted directed graph |
| `algokit.shortest_path` | `dijkstra` and `BellmanFord` (with negative-cycle detection) |
| `algokit.kmeans` | `KMeans` clustering of lists or binary sample files, and `InitMode` |
| `algokit.suffix_tree` | `SuffixTree`, built with Ukkonen's algorithm |

## Examples

Shortest paths on a directed graph:

```python
from algokit.graph import DirectedGraph
from algokit.shortest_path import dijkstra, BellmanFord

g = DirectedGraph()
for v in range(4):
    g.add_vertex(v)
g.add_edge(0, 1, 4)
g.add_edge(0, 2, 1)
g.add_edge(2, 1, 2)
g.add_edge(1, 3, 1)

previous = dijkstra(g, 0)       # predecessor of each vertex; None for the source
print(previous[1])              # 2

bf = BellmanFord(g)
previous = bf.run(0)
print(bf.has_negative_cycle())  # False
```

Path finding on a grid (cells equal to `AStar.WALL` are impassable):

```python
from algokit.array2d import Array2D
from algokit.astar import AStar

grid = Array2D(5, 5, fill=0)
grid[1, 1] = AStar.WALL
path = AStar(grid).run(0, 0, 4, 4)  # cells from the goal back to the start
```

`run` returns an empty list when the goal cannot be reached and `None` when
the start cell is a wall.

Huffman coding:

```python
from algokit.huffman import HuffmanTree

tree = HuffmanTree(b"abracadabra")
codes, length = tree.encode(b"abracadabra")
assert tree.decode(codes, length) == b"abracadabra"
print(tree.code_for("a"))
```

A Fibonacci heap:

```python
from algokit.fib_heap import FibHeap

heap = FibHeap()
node = heap.insert(10, "ten")
heap.insert(3, "three")
heap.decrease_key(node, 1)
print(heap.extract_min().value)  # "ten"
```

MD5:

```python
from algokit.md5 import md5

print(md5(b"abc").hexdigest())  # 900150983cd24fb0d6963f7d28e17f72
```

A suffix tree (the text may not contain `#`, which is used as the terminator):

```python
from algokit.suffix_tree import SuffixTree

tree = SuffixTree("mississippi")
tree.construct()
print(tree.search("ssi") >= 0)            # True
print(tree.prefix_match_length("sipx"))   # 3
print(tree.format_tree())
```

## Command line

The package installs one command. It builds a suffix tree for a text
(`mississippi` unless `--text` is given), prints the tree and then the result
of `search` for each query given on the command line, or for a fixed set of
sample queries when none are given:

```
algokit-suffix-tree
algokit-suffix-tree --text banana ana nan xyz
```