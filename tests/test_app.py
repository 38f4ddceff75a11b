"""Tests for the Flask JSON API."""
import pytest


class TestListing:
    def test_algorithms(self, client):
        resp = client.get("/api/algorithms")
        assert resp.status_code == 200
        data = resp.get_json()
        assert {"array", "graph", "dp"} <= set(data)
        keys = [a["key"] for a in data["array"]]
        assert "quick_sort" in keys
        assert all("pseudocode" in a for a in data["graph"])

    def test_filter_by_category(self, client):
        data = client.get("/api/algorithms?category=graph").get_json()
        assert [a["key"] for a in data["graph"]] == ["bfs", "dfs", "dijkstra"]
        assert data["array"] == [] and data["dp"] == []

    def test_filter_by_category_and_difficulty(self, client):
        data = client.get("/api/algorithms?category=sorting&difficulty=hard").get_json()
        assert [a["key"] for a in data["array"]] == ["heap_sort"]
        easy = client.get("/api/algorithms?difficulty=easy").get_json()
        assert all(a["difficulty"] == "easy" for family in easy.values() for a in family)
        assert "linear_search" in [a["key"] for a in easy["array"]]

    def test_unknown_filter_value(self, client):
        assert client.get("/api/algorithms?category=magic").status_code == 400
        assert client.get("/api/algorithms?difficulty=extreme").status_code == 400


class TestArrayRun:
    def test_text_input(self, client):
        resp = client.post("/api/array/run", json={
            "algorithm": "linear_search", "text": "5, 2, 8, 1, 9", "target": "8",
        })
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["steps"][-1]["description"] == "Success! Found 8 at index 2"
        assert data["total_steps"] == len(data["steps"])

    def test_array_input(self, client):
        resp = client.post("/api/array/run", json={"algorithm": "merge_sort", "array": [3, 1, 2]})
        assert resp.get_json()["steps"][-1]["array"] == [1, 2, 3]

    def test_repeat_hits_cache(self, app, client):
        body = {"algorithm": "bubble_sort", "array": [2, 1]}
        client.post("/api/array/run", json=body)
        client.post("/api/array/run", json=body)
        assert app.extensions["algoviz_runner"].cache.hits == 1

    def test_unknown_algorithm(self, client):
        resp = client.post("/api/array/run", json={"algorithm": "bogo_sort", "array": [1]})
        assert resp.status_code == 400
        assert "Unknown algorithm" in resp.get_json()["error"]

    def test_bad_number(self, client):
        resp = client.post("/api/array/run", json={"algorithm": "bubble_sort", "text": "1, x, 3"})
        assert resp.status_code == 400

    def test_oversize_array(self, client):
        resp = client.post("/api/array/run", json={"algorithm": "bubble_sort", "array": list(range(51))})
        assert resp.status_code == 400

    def test_counting_sort_value_range(self, client):
        wide = client.post("/api/array/run", json={"algorithm": "counting_sort", "array": [0, 2000000000]})
        assert wide.status_code == 400
        assert "range" in wide.get_json()["error"]
        narrow = client.post("/api/array/run", json={"algorithm": "counting_sort", "array": [100, 0, 50]})
        assert narrow.get_json()["steps"][-1]["array"] == [0, 50, 100]

    def test_wide_range_is_fine_for_other_sorts(self, client):
        resp = client.post("/api/array/run", json={"algorithm": "merge_sort", "array": [2000000000, 0]})
        assert resp.status_code == 200

    def test_counting_sort_export_value_range(self, client):
        resp = client.post("/api/export", json={
            "family": "array", "algorithm": "counting_sort", "array": [0, 5000],
        })
        assert resp.status_code == 400

    def test_non_json_body(self, client):
        resp = client.post("/api/array/run", data="hello")
        assert resp.status_code == 400


class TestGraphRun:
    def test_adjacency_text(self, client):
        resp = client.post("/api/graph/run", json={
            "algorithm": "dijkstra", "adjacency": "A: B(4) C(1)\nC: B(2)", "start": "A",
        })
        assert resp.status_code == 200
        final = resp.get_json()["steps"][-1]
        assert final["distances"] == {"A": 0, "B": 3, "C": 1}

    def test_graph_dict(self, client):
        graph = {
            "nodes": [{"id": "A"}, {"id": "B"}, {"id": "Z"}],
            "edges": [{"from": "A", "to": "B"}],
        }
        resp = client.post("/api/graph/run", json={"algorithm": "bfs", "graph": graph, "start": "A"})
        assert resp.get_json()["steps"][-1]["visited_nodes"] == ["A", "B"]

    def test_invalid_graph_is_a_trace_not_an_error(self, client):
        resp = client.post("/api/graph/run", json={"algorithm": "bfs", "graph": {"nodes": []}})
        assert resp.status_code == 200
        steps = resp.get_json()["steps"]
        assert len(steps) == 1
        assert steps[0]["description"] == "Graph must have at least one node"

    def test_non_numeric_weight(self, client):
        graph = {"nodes": [{"id": "A"}, {"id": "B"}], "edges": [{"from": "A", "to": "B", "weight": "x"}]}
        resp = client.post("/api/graph/run", json={"algorithm": "dijkstra", "graph": graph, "start": "A"})
        assert resp.status_code == 400

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_weight(self, client, literal):
        body = (
            '{"algorithm": "dijkstra", "start": "A", "graph": {'
            '"nodes": [{"id": "A"}, {"id": "B"}], '
            '"edges": [{"from": "A", "to": "B", "weight": %s}]}}' % literal
        )
        resp = client.post("/api/graph/run", data=body, content_type="application/json")
        assert resp.status_code == 400
        assert "non-finite" in resp.get_json()["error"]

    def test_generate(self, client):
        resp = client.post("/api/graph/generate", json={"nodes": 6, "seed": 1})
        data = resp.get_json()
        assert data["node_ids"] == ["0", "1", "2", "3", "4", "5"]
        assert client.post("/api/graph/generate", json={"nodes": 500}).status_code == 400


class TestDPRun:
    def test_fibonacci(self, client):
        resp = client.post("/api/dp/run", json={"algorithm": "fibonacci", "n": 10})
        assert resp.get_json()["steps"][-1]["result"] == 55

    def test_lcs(self, client):
        resp = client.post("/api/dp/run", json={"algorithm": "lcs", "str1": "ABCDGH", "str2": "AEDFHR"})
        assert resp.get_json()["steps"][-1]["result"] == {"length": 3, "subsequence": "ADH"}

    def test_knapsack(self, client):
        resp = client.post("/api/dp/run", json={
            "algorithm": "knapsack",
            "items": [{"weight": 10, "value": 60}, {"weight": 20, "value": 100}, {"weight": 30, "value": 120}],
            "capacity": 50,
        })
        assert resp.get_json()["steps"][-1]["result"]["max_value"] == 220

    def test_negative_n_is_a_trace(self, client):
        resp = client.post("/api/dp/run", json={"algorithm": "fibonacci", "n": -1})
        assert resp.status_code == 200
        assert len(resp.get_json()["steps"]) == 1

    def test_oversize_n(self, client):
        resp = client.post("/api/dp/run", json={"algorithm": "fibonacci", "n": 300})
        assert resp.status_code == 400

    def test_oversize_lcs(self, client):
        resp = client.post("/api/dp/run", json={"algorithm": "lcs", "str1": "A" * 60, "str2": "B" * 60})
        assert resp.status_code == 400
        assert "DP table too large" in resp.get_json()["error"]

    def test_lcs_limit_counts_cells_not_length(self, client):
        # 1 × 200 characters is a thin table, well under the cell limit
        resp = client.post("/api/dp/run", json={"algorithm": "lcs", "str1": "", "str2": "A" * 200})
        assert resp.status_code == 200

    def test_oversize_knapsack_table(self, client):
        items = [{"weight": 1, "value": 1}] * 10
        resp = client.post("/api/dp/run", json={"algorithm": "knapsack", "items": items, "capacity": 30})
        assert resp.status_code == 400

    def test_oversize_dp_export(self, client):
        resp = client.post("/api/export", json={
            "family": "dp", "algorithm": "lcs", "str1": "A" * 60, "str2": "B" * 60,
        })
        assert resp.status_code == 400

    def test_malformed_items(self, client):
        resp = client.post("/api/dp/run", json={"algorithm": "knapsack", "items": [{"w": 1}], "capacity": 5})
        assert resp.status_code == 400

    def test_fractional_item_weight(self, client):
        resp = client.post("/api/dp/run", json={
            "algorithm": "knapsack", "items": [{"weight": 2.9, "value": 10}], "capacity": 2,
        })
        assert resp.status_code == 400
        assert "whole number" in resp.get_json()["error"]


class TestTreeBuild:
    def test_build(self, client):
        resp = client.post("/api/tree/build", json={
            "values": "5, 3, 8", "insert": [9], "delete": [3], "search": 9,
        })
        data = resp.get_json()
        assert data["inorder"] == [5, 8, 9]
        assert data["tree"]["x"] == 400
        assert data["search"] == {"path": [5, 8, 9], "found": True}

    def test_empty(self, client):
        data = client.post("/api/tree/build", json={"values": []}).get_json()
        assert data["tree"] is None
        assert data["height"] == 0

    @pytest.mark.parametrize("field", ["insert", "delete"])
    def test_edits_must_be_lists(self, client, field):
        resp = client.post("/api/tree/build", json={"values": [1, 2], field: 5})
        assert resp.status_code == 400
        assert "must be a list" in resp.get_json()["error"]

    def test_inserts_count_towards_size_limit(self, client):
        resp = client.post("/api/tree/build", json={"values": [0], "insert": list(range(1, 50))})
        assert resp.status_code == 200
        assert resp.get_json()["height"] == 50
        resp = client.post("/api/tree/build", json={"values": [0], "insert": list(range(1, 51))})
        assert resp.status_code == 400

    def test_too_many_deletes(self, client):
        resp = client.post("/api/tree/build", json={"values": [1], "delete": list(range(51))})
        assert resp.status_code == 400


class TestExport:
    def test_plain_text(self, client):
        resp = client.post("/api/export", json={
            "family": "array", "algorithm": "bubble_sort", "array": [5, 2, 8, 1, 9, 3],
        })
        assert resp.status_code == 200
        assert resp.mimetype == "text/plain"
        assert "Bubble sort complete! Array is fully sorted" in resp.get_data(as_text=True)

    def test_graph_export(self, client):
        resp = client.post("/api/export", json={
            "family": "graph", "algorithm": "dfs", "adjacency": "A: B", "start": "A",
        })
        assert "DFS complete. Visited 2 nodes." in resp.get_data(as_text=True)

    def test_unknown_family(self, client):
        resp = client.post("/api/export", json={"family": "trees", "algorithm": "bfs"})
        assert resp.status_code == 400
