"""Tests for BFS, DFS and Dijkstra traces."""
import math
from collections import deque

import pytest

from algorithms import GRAPH_REGISTRY
from graph import Graph, graph_to_adjacency_list

bfs = GRAPH_REGISTRY["bfs"].execute
dfs = GRAPH_REGISTRY["dfs"].execute
dijkstra = GRAPH_REGISTRY["dijkstra"].execute


def hop_distances(graph, start):
    adj = graph_to_adjacency_list(graph)
    dist = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nbr, _ in adj[node]:
            if nbr not in dist:
                dist[nbr] = dist[node] + 1
                queue.append(nbr)
    return dist


def bellman_ford(graph, start):
    dist = {n: math.inf for n in graph.node_ids()}
    dist[start] = 0
    for _ in range(len(dist) - 1):
        for e in graph.edges:
            w = e.effective_weight
            if dist[e.source] + w < dist[e.target]:
                dist[e.target] = dist[e.source] + w
            if not graph.directed and dist[e.target] + w < dist[e.source]:
                dist[e.source] = dist[e.target] + w
    return dist


@pytest.fixture
def disconnected_graph():
    g = Graph()
    for nid in ["A", "B", "C", "Z"]:
        g.add_node(nid)
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    return g


class TestInvalidInput:
    @pytest.mark.parametrize("key", ["bfs", "dfs", "dijkstra"])
    def test_empty_graph(self, key):
        steps = GRAPH_REGISTRY[key].execute(Graph(), "A")
        assert len(steps) == 1
        assert steps[0].description == "Graph must have at least one node"

    @pytest.mark.parametrize("key", ["bfs", "dfs", "dijkstra"])
    def test_missing_start(self, key, weighted_graph):
        steps = GRAPH_REGISTRY[key].execute(weighted_graph, "Q")
        assert len(steps) == 1
        assert steps[0].description == 'Start node "Q" does not exist in graph'

    def test_dijkstra_negative_weight(self, weighted_graph):
        weighted_graph.add_edge("E", "A", -1)
        steps = dijkstra(weighted_graph, "A")
        assert len(steps) == 1
        assert "non-negative" in steps[0].description

    def test_dijkstra_missing_end(self, weighted_graph):
        steps = dijkstra(weighted_graph, "A", "Q")
        assert len(steps) == 1
        assert steps[0].description == 'End node "Q" does not exist in graph'


class TestBFS:
    def test_unreachable_node_never_visited(self, disconnected_graph):
        steps = bfs(disconnected_graph, "A")
        assert all("Z" not in s.visited_nodes for s in steps)
        assert steps[-1].visited_nodes == ("A", "B", "C")
        assert steps[-1].description == "BFS complete. Visited 3 nodes."

    @pytest.mark.parametrize("seed", range(6))
    def test_level_order(self, seed):
        g = Graph.generate_random(num_nodes=10, edge_probability=0.25, seed=seed)
        order = bfs(g, "0")[-1].visited_nodes
        hops = hop_distances(g, "0")
        assert [hops[n] for n in order] == sorted(hops[n] for n in order)
        assert set(order) == set(g.node_ids())

    def test_first_step_describes_queue(self, weighted_graph):
        first = bfs(weighted_graph, "A")[0]
        assert first.description == "Starting BFS from node A. Queue: [A]"
        assert first.queue == ("A",)

    def test_visited_flags_on_snapshot(self, weighted_graph):
        steps = bfs(weighted_graph, "A")
        last_graph = steps[-1].graph
        assert all(n.visited for n in last_graph.nodes)
        # input graph is never annotated
        assert not any(n.visited for n in weighted_graph.nodes)


class TestDFS:
    def test_visits_first_neighbour_first(self):
        g = Graph.from_adjacency_list("A: B C\nB: D\nC: E")
        order = dfs(g, "A")[-1].visited_nodes
        assert order == ("A", "B", "D", "C", "E")

    def test_unreachable(self, disconnected_graph):
        steps = dfs(disconnected_graph, "A")
        assert "Z" not in steps[-1].visited_nodes
        assert steps[-1].description == "DFS complete. Visited 3 nodes."


class TestDijkstra:
    def test_known_distances(self, weighted_graph):
        final = dijkstra(weighted_graph, "A")[-1]
        assert final.distances == {"A": 0, "B": 3, "C": 1, "D": 8, "E": 11}

    def test_early_exit_at_end_node(self, weighted_graph):
        steps = dijkstra(weighted_graph, "A", "B")
        assert steps[-1].description == "Reached target node B. Shortest distance: 3"
        assert "E" not in steps[-1].visited_nodes

    def test_unreachable_distance_is_infinite(self, disconnected_graph):
        final = dijkstra(disconnected_graph, "A")[-1]
        assert math.isinf(final.distances["Z"])
        assert final.to_dict()["distances"]["Z"] is None

    def test_missing_weight_counts_as_one(self, disconnected_graph):
        final = dijkstra(disconnected_graph, "A")[-1]
        assert final.distances["C"] == 2

    @pytest.mark.parametrize("seed", range(8))
    @pytest.mark.parametrize("directed", [False, True])
    def test_matches_bellman_ford(self, seed, directed):
        g = Graph.generate_random(num_nodes=9, edge_probability=0.3, directed=directed, seed=seed)
        final = dijkstra(g, "0")[-1]
        assert final.distances == bellman_ford(g, "0")

    def test_distance_snapshots_do_not_change(self, weighted_graph):
        steps = dijkstra(weighted_graph, "A")
        assert math.isinf(steps[0].distances["B"])
        assert steps[0].distances["A"] == 0
