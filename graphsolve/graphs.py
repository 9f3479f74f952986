"""Algorithms on graphs given as a node count and a list of edges.

The solver functions take nodes numbered from 1, as in the problem
statements, and return nodes numbered from 1. The building blocks
``adjacency``, ``reachable`` and ``topological_order`` work on nodes
numbered from 0.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

Edge = tuple[int, int]
WeightedEdge = tuple[int, int, int]


class ImpossibleError(ValueError):
    """Raised when a problem instance has no solution."""


class UnboundedScoreError(ValueError):
    """Raised when a score can be made arbitrarily large."""


def adjacency(n: int, edges: Iterable[Edge], directed: bool = False) -> list[list[int]]:
    """Build adjacency lists for ``n`` nodes from 0-based edges."""
    adj: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        adj[a].append(b)
        if not directed:
            adj[b].append(a)
    return adj


def reachable(
    adj: Sequence[Sequence[int]], start: int, visited: set[int] | None = None
) -> list[int]:
    """Depth-first search from ``start``.

    Returns the newly reached nodes in visiting order and adds them to
    ``visited`` when one is given.
    """
    if visited is None:
        visited = set()
    if start in visited:
        return []
    visited.add(start)
    order = [start]
    stack = [iter(adj[start])]
    while stack:
        for nxt in stack[-1]:
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                stack.append(iter(adj[nxt]))
                break
        else:
            stack.pop()
    return order


def _zero_based(edges: Iterable[Edge]) -> list[Edge]:
    return [(a - 1, b - 1) for a, b in edges]


def component_representatives(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return the smallest node of every connected component, ascending."""
    adj = adjacency(n, _zero_based(edges), directed=False)
    visited: set[int] = set()
    reps = []
    for node in range(n):
        if node not in visited:
            reps.append(node + 1)
            reachable(adj, node, visited)
    return reps


def roads_to_connect(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the fewest new roads that make every city reachable."""
    reps = component_representatives(n, edges)
    return list(zip(reps, reps[1:]))


def two_coloring(n: int, edges: Iterable[Edge]) -> list[int]:
    """Split nodes into teams 1 and 2 so that no edge joins one team.

    Every component starts with team 1 at its smallest node.
    """
    adj = adjacency(n, _zero_based(edges), directed=False)
    team = [0] * n
    for root in range(n):
        if team[root]:
            continue
        team[root] = 1
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for nxt in adj[node]:
                if not team[nxt]:
                    team[nxt] = 3 - team[node]
                    queue.append(nxt)
                elif team[nxt] == team[node]:
                    raise ImpossibleError("graph is not bipartite")
    return team


def message_route(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return a shortest path of nodes from 1 to ``n``."""
    adj = adjacency(n, _zero_based(edges), directed=False)
    parent = [-1] * n
    parent[0] = 0
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            if parent[nxt] == -1:
                parent[nxt] = node
                queue.append(nxt)
    if parent[n - 1] == -1:
        raise ImpossibleError(f"node {n} cannot be reached from node 1")
    path = []
    node = n - 1
    while node != 0:
        path.append(node + 1)
        node = parent[node]
    path.append(1)
    path.reverse()
    return path


def find_round_trip(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return a cycle that starts and ends at the same node."""
    adj = adjacency(n, _zero_based(edges), directed=False)
    visited = [False] * n
    parent = [-1] * n
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            node, prev, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    parent[nxt] = node
                    stack.append((nxt, node, iter(adj[nxt])))
                    break
                if nxt != prev:
                    cycle = [nxt + 1]
                    current = node
                    while current != nxt:
                        cycle.append(current + 1)
                        current = parent[current]
                    cycle.append(nxt + 1)
                    return cycle
            else:
                stack.pop()
    raise ImpossibleError("graph has no cycle")


def dijkstra(n: int, edges: Iterable[WeightedEdge], source: int = 1) -> list[int | None]:
    """Shortest distances from ``source`` over directed weighted edges.

    Entry ``i`` holds the distance to node ``i + 1``, or None if unreachable.
    """
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, w in edges:
        adj[a - 1].append((b - 1, w))
    dist: list[float] = [math.inf] * n
    dist[source - 1] = 0
    heap = [(0, source - 1)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for nxt, w in adj[node]:
            if d + w < dist[nxt]:
                dist[nxt] = d + w
                heapq.heappush(heap, (dist[nxt], nxt))
    return [None if d == math.inf else int(d) for d in dist]


def discounted_cost(n: int, edges: Iterable[WeightedEdge]) -> int:
    """Cheapest route from 1 to ``n`` when one flight may be paid at half price.

    The halved price is rounded down.
    """
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, w in edges:
        adj[a - 1].append((b - 1, w))
    full: list[float] = [math.inf] * n
    used: list[float] = [math.inf] * n
    full[0] = used[0] = 0
    heap = [(0, 0, False), (0, 0, True)]
    while heap:
        d, node, coupon_used = heapq.heappop(heap)
        if d > (used[node] if coupon_used else full[node]):
            continue
        for nxt, w in adj[node]:
            if coupon_used:
                if d + w < used[nxt]:
                    used[nxt] = d + w
                    heapq.heappush(heap, (used[nxt], nxt, True))
            else:
                if d + w < full[nxt]:
                    full[nxt] = d + w
                    heapq.heappush(heap, (full[nxt], nxt, False))
                if d + w // 2 < used[nxt]:
                    used[nxt] = d + w // 2
                    heapq.heappush(heap, (used[nxt], nxt, True))
    if used[n - 1] == math.inf:
        raise ImpossibleError(f"node {n} cannot be reached from node 1")
    return int(used[n - 1])


def high_score(n: int, edges: Sequence[WeightedEdge]) -> int:
    """Largest total weight of a path from 1 to ``n``.

    Raises UnboundedScoreError when a positive cycle lies on such a path.
    """
    score: dict[int, int] = {1: 0}
    for _ in range(n - 1):
        for a, b, w in edges:
            if a in score and (b not in score or score[a] + w > score[b]):
                score[b] = score[a] + w
    if n not in score:
        raise ImpossibleError(f"node {n} cannot be reached from node 1")
    unbounded: set[int] = set()
    for _ in range(n):
        for a, b, w in edges:
            if a in score and (a in unbounded or score[a] + w > score[b]):
                unbounded.add(b)
    if n in unbounded:
        raise UnboundedScoreError("score can grow without limit")
    return score[n]


def all_pairs_distances(n: int, edges: Iterable[WeightedEdge]) -> list[list[int | None]]:
    """Shortest distances between all nodes over undirected weighted edges.

    Row ``a - 1``, column ``b - 1`` holds the distance from ``a`` to ``b``,
    or None if they are not connected.
    """
    dist: list[list[float]] = [[math.inf] * n for _ in range(n)]
    for a, b, w in edges:
        a, b = a - 1, b - 1
        dist[a][b] = min(dist[a][b], w)
        dist[b][a] = min(dist[b][a], w)
    for i in range(n):
        dist[i][i] = 0
    for mid in range(n):
        through = dist[mid]
        for row in dist:
            via = row[mid]
            if via == math.inf:
                continue
            for k, cost in enumerate(through):
                if via + cost < row[k]:
                    row[k] = via + cost
    return [[None if d == math.inf else int(d) for d in row] for row in dist]


def topological_order(n: int, edges: Iterable[Edge]) -> list[int]:
    """Order 0-based nodes so that every directed edge points forwards."""
    adj = adjacency(n, edges, directed=True)
    visited = [False] * n
    finished: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished