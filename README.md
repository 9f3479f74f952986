# graphsolve

A small collection of classic graph and grid algorithms, usable as a library
or from the command line. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### Graphs — `graphsolve.graphs`

Graphs are described by a node count `n` and a list of edges. The problem
solvers take and return nodes numbered from 1; the building blocks
`adjacency`, `reachable` and `topological_order` work on nodes numbered
from 0.

- `adjacency(n, edges, directed=False)` — build adjacency lists.
- `reachable(adj, start, visited=None)` — depth-first search from `start`;
  returns the newly reached nodes in visiting order and adds them to
  `visited` when a set is given.
- `component_representatives(n, edges)` — the smallest node of every
  connected component, in ascending order.
- `roads_to_connect(n, edges)` — the fewest new roads (pairs of nodes) that
  link all components into one.
- `two_coloring(n, edges)` — a list giving each node team `1` or `2` so that
  no edge joins members of the same team.
- `message_route(n, edges)` — a shortest path of nodes from node 1 to node `n`.
- `find_round_trip(n, edges)` — a cycle in an undirected graph, as a list of
  nodes that starts and ends at the same node.
- `dijkstra(n, edges, source=1)` — shortest distances from `source` over
  directed edges `(a, b, weight)` with non-negative weights; `None` marks an
  unreachable node.
- `discounted_cost(n, edges)` — cheapest cost from node 1 to node `n` over
  directed edges when the price of one flight may be halved (rounded down).
- `high_score(n, edges)` — the largest total weight of a path from node 1 to
  node `n` over directed edges; raises `UnboundedScoreError` when a positive
  cycle lies on such a path.
- `all_pairs_distances(n, edges)` — shortest distances between every pair of
  nodes over undirected weighted edges; `None` marks unconnected pairs.
- `topological_order(n, edges)` — an ordering of the 0-based nodes of a
  directed acyclic graph in which every edge points forwards. It does not
  check for cycles.

When a requested structure does not exist (no route, no cycle, no valid team
split), the functions raise `ImpossibleError`. Both `ImpossibleError` and
`UnboundedScoreError` are subclasses of `ValueError`.

```python
from graphsolve.graphs import two_coloring, ImpossibleError

try:
    teams = two_coloring(3, [(1, 2), (2, 3), (3, 1)])
except ImpossibleError:
    print("IMPOSSIBLE")
```

### Grids — `graphsolve.grids`

A grid is a sequence of equally long strings: `.` for floor, `#` for wall, and
`A`, `B` and `M` for start, goal and monsters. Cells are `(row, column)` pairs
counted from 0.

- `Move` — an enum of the four steps `LEFT`, `RIGHT`, `UP`, `DOWN`, each with
  a `letter` (`L`, `R`, `U`, `D`) and a row and column offset.
- `flood_fill(grid, row, col, visited=None)` — breadth-first fill of the floor
  cells connected to a cell; returns them in visiting order.
- `count_rooms(grid)` — the number of separate floor areas.
- `labyrinth_path(grid)` — a shortest path from `A` to `B` as a string of move
  letters; raises `ImpossibleError` when `B` cannot be reached.
- `escape_monsters(grid)` — a shortest path of move letters taking `A` to the
  border of the grid before any monster `M` can get in the way; empty when `A`
  starts on the border, `ImpossibleError` when there is no safe escape.

```python
from graphsolve.grids import count_rooms, labyrinth_path

rooms = count_rooms([
    "#####",
    "#..##",
    "###.#",
    "#####",
])                                  # 2

path = labyrinth_path(["A.#", "#.B"])  # "RDR"
```

## Command line

```
graphsolve PROBLEM [INPUT]
```

`INPUT` is a file to read; without it, or with `-`, the input is read from
standard input. The answer is written to standard output. Input is read as
whitespace-separated tokens.

- `roads` — input `n m` followed by `m` pairs `a b`. Prints the number of new
  roads needed, then one road `a b` per line.
- `routes` — input `n m q`, then `m` triples `a b weight`, then `q` queries
  `a b`. Prints the shortest distance for each query, or `-1`.
- `labyrinth` — input `n m` followed by `n` grid rows. Prints `NO`, or `YES`,
  the path length and the path letters.

Malformed input ends with a usage error. For the full help:

```
graphsolve --help
```

## What it does not do

The command line covers only the three problems above. The other functions
(team split, message route, round trip, flight discount, high score, monsters,
room counting, topological order and single-source shortest paths) are
available from Python only.