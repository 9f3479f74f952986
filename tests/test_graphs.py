import pytest

from graphsolve.graphs import (
    ImpossibleError,
    UnboundedScoreError,
    adjacency,
    all_pairs_distances,
    component_representatives,
    dijkstra,
    discounted_cost,
    find_round_trip,
    high_score,
    message_route,
    reachable,
    roads_to_connect,
    topological_order,
    two_coloring,
)


def _edge_set(edges):
    return {frozenset(e) for e in edges}


def test_adjacency_undirected_and_directed():
    edges = [(0, 1), (1, 2)]
    assert adjacency(3, edges, directed=False) == [[1], [0, 2], [1]]
    assert adjacency(3, edges, directed=True) == [[1], [2], []]


def test_reachable_updates_visited():
    adj = adjacency(4, [(0, 1), (1, 2)], directed=False)
    seen = set()
    order = reachable(adj, 0, seen)
    assert order[0] == 0
    assert set(order) == {0, 1, 2}
    assert seen == {0, 1, 2}
    assert reachable(adj, 1, seen) == []
    assert reachable(adj, 3, seen) == [3]


def test_component_representatives():
    assert component_representatives(5, [(1, 2), (3, 4)]) == [1, 3, 5]


def test_roads_connect_everything():
    edges = [(1, 2), (4, 5), (6, 7)]
    roads = roads_to_connect(8, edges)
    assert len(roads) == len(component_representatives(8, edges)) - 1
    assert component_representatives(8, edges + roads) == [1]


def test_roads_none_needed_when_connected():
    assert roads_to_connect(3, [(1, 2), (2, 3)]) == []


def test_two_coloring_valid():
    edges = [(1, 2), (1, 3), (4, 5), (2, 6), (3, 6)]
    teams = two_coloring(6, edges)
    assert set(teams) <= {1, 2}
    assert teams[0] == 1
    for a, b in edges:
        assert teams[a - 1] != teams[b - 1]


def test_two_coloring_odd_cycle_impossible():
    with pytest.raises(ImpossibleError):
        two_coloring(3, [(1, 2), (2, 3), (3, 1)])


def test_message_route_is_shortest_path():
    edges = [(1, 2), (2, 3), (3, 5), (1, 4), (4, 5), (2, 5)]
    path = message_route(5, edges)
    assert path[0] == 1 and path[-1] == 5
    allowed = _edge_set(edges)
    for a, b in zip(path, path[1:]):
        assert frozenset((a, b)) in allowed
    dist = all_pairs_distances(5, [(a, b, 1) for a, b in edges])
    assert len(path) - 1 == dist[0][4]


def test_message_route_single_node():
    assert message_route(1, []) == [1]


def test_message_route_impossible():
    with pytest.raises(ImpossibleError):
        message_route(4, [(1, 2), (3, 4)])


def test_round_trip_is_cycle():
    edges = [(1, 3), (1, 2), (5, 3), (1, 5), (2, 4), (4, 5)]
    trip = find_round_trip(5, edges)
    assert trip[0] == trip[-1]
    assert len(trip) >= 4
    assert len(set(trip[:-1])) == len(trip) - 1
    allowed = _edge_set(edges)
    for a, b in zip(trip, trip[1:]):
        assert frozenset((a, b)) in allowed


def test_round_trip_tree_impossible():
    with pytest.raises(ImpossibleError):
        find_round_trip(4, [(1, 2), (2, 3), (2, 4)])


def test_dijkstra_matches_all_pairs_on_symmetric_graph():
    undirected = [(1, 2, 4), (2, 3, 1), (1, 3, 7), (3, 4, 2), (5, 6, 1)]
    directed = [(a, b, w) for a, b, w in undirected] + [(b, a, w) for a, b, w in undirected]
    dist = dijkstra(6, directed)
    assert dist == all_pairs_distances(6, undirected)[0]
    assert dist[4] is None


def test_dijkstra_respects_direction():
    dist = dijkstra(2, [(2, 1, 9)])
    assert dist == [0, None]
    assert dijkstra(2, [(2, 1, 9)], source=2) == [9, 0]


def test_discounted_cost_single_flight():
    assert discounted_cost(2, [(1, 2, 10)]) == 5


def test_discounted_cost_bounds():
    edges = [(1, 2, 3), (2, 3, 1), (1, 3, 7), (2, 1, 5), (3, 4, 8)]
    best = discounted_cost(4, edges)
    full = dijkstra(4, edges)[3]
    assert best <= full
    assert 2 * best >= full


def test_discounted_cost_unreachable():
    with pytest.raises(ImpossibleError):
        discounted_cost(3, [(1, 2, 4)])


def test_high_score_single_edge():
    assert high_score(2, [(1, 2, 5)]) == 5


def test_high_score_positive_cycle_on_path():
    with pytest.raises(UnboundedScoreError):
        high_score(3, [(1, 2, 1), (2, 1, 1), (2, 3, 1)])


def test_high_score_cycle_off_path_is_harmless():
    edges = [(1, 2, 3), (1, 3, 1), (3, 3, 1)]
    assert high_score(2, edges) == 3


def test_high_score_unreachable():
    with pytest.raises(ImpossibleError):
        high_score(3, [(1, 2, 4)])


def test_all_pairs_properties():
    edges = [(1, 2, 5), (2, 3, 2), (1, 3, 9), (3, 4, 1)]
    dist = all_pairs_distances(5, edges)
    for i in range(5):
        assert dist[i][i] == 0
        for j in range(5):
            assert dist[i][j] == dist[j][i]
    for i in range(4):
        for j in range(4):
            for k in range(4):
                assert dist[i][k] <= dist[i][j] + dist[j][k]
    assert dist[0][4] is None


def test_all_pairs_parallel_edges_take_minimum():
    assert all_pairs_distances(2, [(1, 2, 7), (1, 2, 3)])[0][1] == 3


def test_topological_order_respects_edges():
    edges = [(0, 3), (1, 3), (3, 2), (4, 1), (4, 0)]
    order = topological_order(5, edges)
    assert sorted(order) == list(range(5))
    position = {node: i for i, node in enumerate(order)}
    for a, b in edges:
        assert position[a] < position[b]