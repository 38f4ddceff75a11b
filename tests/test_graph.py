"""Tests for the graph model: construction, validation, import, generation."""
import pytest

from graph import Graph, GraphEdge, GraphNode, graph_to_adjacency_list, validate_graph_input


class TestValidation:
    def test_empty_graph(self):
        result = validate_graph_input(Graph())
        assert result.valid is False
        assert result.error == "Graph must have at least one node"

    def test_duplicate_ids(self):
        g = Graph(nodes=[GraphNode("A"), GraphNode("A")])
        assert validate_graph_input(g).error == "Graph contains duplicate node IDs"

    def test_dangling_edge(self):
        g = Graph(nodes=[GraphNode("A")], edges=[GraphEdge("A", "Q")])
        assert validate_graph_input(g).error == "Edge references non-existent node: Q"

    def test_valid(self):
        g = Graph()
        g.add_node("A")
        assert validate_graph_input(g).valid is True


class TestAdjacency:
    def test_undirected_edges_appear_both_ways(self):
        g = Graph()
        for nid in "ABC":
            g.add_node(nid)
        g.add_edge("A", "B", 2)
        adj = graph_to_adjacency_list(g)
        assert adj == {"A": [("B", 2)], "B": [("A", 2)], "C": []}

    def test_directed_edges_one_way(self):
        g = Graph(directed=True)
        g.add_node("A")
        g.add_node("B")
        g.add_edge("A", "B")
        adj = graph_to_adjacency_list(g)
        assert adj["A"] == [("B", None)]
        assert adj["B"] == []

    def test_resolved_weights_default_to_one(self):
        g = Graph()
        for nid in "ABC":
            g.add_node(nid)
        g.add_edge("A", "B")
        g.add_edge("B", "C", 4)
        adj = graph_to_adjacency_list(g, resolve_weights=True)
        assert adj == {"A": [("B", 1)], "B": [("A", 1), ("C", 4)], "C": [("B", 4)]}


class TestCloneAndSerialisation:
    def test_clone_is_deep(self, weighted_graph):
        copy = weighted_graph.clone()
        copy.nodes[0].visited = True
        copy.edges[0].highlighted = True
        assert weighted_graph.nodes[0].visited is False
        assert weighted_graph.edges[0].highlighted is False

    def test_dict_round_trip(self, weighted_graph):
        data = weighted_graph.to_dict()
        assert data["edges"][0]["from"] == "A"
        assert data["edges"][0]["to"] == "B"
        again = Graph.from_dict(data)
        assert again.node_ids() == weighted_graph.node_ids()
        assert [(e.source, e.target, e.weight) for e in again.edges] == \
               [(e.source, e.target, e.weight) for e in weighted_graph.edges]

    def test_edge_default_weight(self):
        assert GraphEdge("A", "B").effective_weight == 1


class TestAdjacencyImport:
    def test_weighted_text(self):
        g = Graph.from_adjacency_list("A: B(3) C\nB: C(2.5)")
        assert g.node_ids() == ["A", "B", "C"]
        weights = {(e.source, e.target): e.weight for e in g.edges}
        assert weights == {("A", "B"): 3, ("A", "C"): None, ("B", "C"): 2.5}

    def test_arrow_syntax_and_comments(self):
        g = Graph.from_adjacency_list("# demo\n0 -> 1, 2\n1 → 2")
        assert len(g.edges) == 3

    def test_undirected_duplicates_collapse(self):
        g = Graph.from_adjacency_list("A: B\nB: A")
        assert len(g.edges) == 1

    def test_directed_keeps_both(self):
        g = Graph.from_adjacency_list("A: B\nB: A", directed=True)
        assert len(g.edges) == 2


class TestRandomGraph:
    def test_seed_is_deterministic(self):
        a = Graph.generate_random(num_nodes=10, seed=7)
        b = Graph.generate_random(num_nodes=10, seed=7)
        assert a.to_dict() == b.to_dict()

    @pytest.mark.parametrize("seed", range(5))
    def test_connected_from_first_node(self, seed):
        g = Graph.generate_random(num_nodes=12, edge_probability=0.1, seed=seed)
        adj = graph_to_adjacency_list(g)
        seen, frontier = {"0"}, ["0"]
        while frontier:
            node = frontier.pop()
            for nbr, _ in adj[node]:
                if nbr not in seen:
                    seen.add(nbr)
                    frontier.append(nbr)
        assert seen == set(g.node_ids())

    def test_weights_within_range(self):
        g = Graph.generate_random(num_nodes=8, seed=3, weight_range=(2, 5))
        assert all(2 <= e.weight <= 5 for e in g.edges)
