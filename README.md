# graphsearch

A few small, dependency-free graph search routines.

- `graphsearch.bfs.Graph`: a directed graph with breadth-first traversal
  (`bfs`) and reachability checks (`bfs_find`).
- `graphsearch.bidirectional.Graph` and `bidirectional_search`: an undirected
  graph, searched from both ends in turn until the two searches meet. It
  returns the path found, or `None` when the ends are not connected.
- `graphsearch.gbfs.Graph`: greedy best-first search guided by a heuristic
  value for each node (nodes without a value count as 0). It returns the path
  found, or `None` when the goal cannot be reached. Progress is written to the
  `graphsearch.gbfs` logger at debug level.
- `graphsearch.palindrome.is_palindrome`: tells whether an integer reads the
  same backwards. Negative numbers never do.
- `graphsearch.errors.ClientError`: an exception carrying a `status_code` and
  a `message`, shown as `Error <status_code>: <message>`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from graphsearch.bfs import Graph

graph = Graph()
graph.add_edge("Alice", "Bob")
graph.add_edge("Alice", "Charlie")
graph.add_edge("Bob", "David")

print(graph.bfs("Alice"))                # "Alice Bob Charlie David "
print(graph.bfs_find("Alice", "David"))  # True
```

Edges in `graphsearch.bfs.Graph` are directed: `add_edge(a, b)` only lets the
search go from `a` to `b`.

Bidirectional search on an undirected graph:

```python
from graphsearch.bidirectional import Graph, bidirectional_search

graph = Graph()
graph.add_edge("A", "B")
graph.add_edge("B", "C")
print(bidirectional_search(graph, "A", "C"))  # ['A', 'B', 'C']
```

Greedy best-first search:

```python
from graphsearch.gbfs import Graph

graph = Graph(
    adjacency_list={"A": ["B", "C"], "B": ["D"], "C": ["D"]},
    heuristic={"A": 3, "B": 1, "C": 2, "D": 0},
)
print(graph.greedy_best_first_search("A", "D"))  # ['A', 'B', 'D']
```

## Command line

```
graphsearch
graphsearch Bob
```

This builds a small fixed sample graph (Alice, Bob, Charlie, David, Eve, Frank,
Grace) and prints its breadth-first traversal, starting from Alice or from the
person given as the only argument.

## What it does not do

The command only works on its built-in sample graph; there is no way to load a
graph from a file or to run the bidirectional or greedy searches from the
command line. Graphs live in memory only and are not saved anywhere.