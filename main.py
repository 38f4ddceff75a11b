"""
main.py — Algorithm Visualizer JSON API
=======================================
Thin Flask surface over the step-generation engine.  Every route parses
its request, hands plain values to the engine and returns the complete
trace as JSON; there is no session state.

Routes:
  GET  /api/algorithms          – registry listing, per family
                                  (?category= / ?difficulty= filters)
  POST /api/array/run           – run a search / sort
  POST /api/graph/run           – run BFS / DFS / Dijkstra
  POST /api/graph/generate      – seeded random graph
  POST /api/dp/run              – run Fibonacci / LCS / knapsack
  POST /api/tree/build          – build, edit and lay out a BST
  POST /api/export              – plain-text walkthrough of any run

Errors:
  A request the API cannot turn into engine arguments (unknown algorithm,
  unparseable number, oversize input) → 400 {"error": ...}.
  Input the engine itself rejects (empty graph, negative n, …) is NOT an
  HTTP error: it comes back as a normal one-step trace.
"""

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from flask import Blueprint, Flask, Response, current_app, jsonify, request

from algorithms import (
    CATEGORIES,
    DIFFICULTIES,
    DP_REGISTRY,
    FAMILIES,
    GRAPH_REGISTRY,
    REGISTRY,
    KnapsackItem,
    algorithms_by_category,
    algorithms_by_difficulty,
)
from config import Settings
from engine import Recorder, ResultCache, Runner
from graph import Graph
from tree import (
    calculate_tree_positions,
    create_bst_from_array,
    delete_from_bst,
    inorder_traversal,
    insert_into_bst,
    level_order_traversal,
    postorder_traversal,
    preorder_traversal,
    search_bst,
    tree_height,
)


logger = logging.getLogger(__name__)

api = Blueprint("api", __name__, url_prefix="/api")


class ApiError(Exception):
    """A request that cannot be turned into engine arguments."""


@api.errorhandler(ApiError)
def _handle_api_error(exc: ApiError):
    logger.info("rejected request to %s: %s", request.path, exc)
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
def _settings() -> Settings:
    return current_app.extensions["algoviz_settings"]


def _runner() -> Runner:
    return current_app.extensions["algoviz_runner"]


def _payload() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ApiError("Request body must be a JSON object")
    return data


def _to_int(raw: Any, field_name: str) -> int:
    if isinstance(raw, bool):
        raise ApiError(f"{field_name} must be an integer")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ApiError(f"{field_name} must be an integer, got {raw!r}") from None
    if not value.is_integer():
        raise ApiError(f"{field_name} must be an integer, got {raw!r}")
    return int(value)


def parse_number_list(text: str) -> List[int]:
    """'5, 2, 8' → [5, 2, 8]; blank entries are skipped."""
    return [_to_int(part.strip(), "array value") for part in text.split(",") if part.strip()]


def _algorithm(data: Dict[str, Any], registry) -> str:
    key = data.get("algorithm")
    if key not in registry:
        raise ApiError(f"Unknown algorithm: {key}")
    return key


def _array_args(key: str, data: Dict[str, Any]) -> Tuple[List[int], Optional[int]]:
    if "array" in data:
        raw = data["array"]
        if not isinstance(raw, list):
            raise ApiError("array must be a list of integers")
        arr = [_to_int(v, "array value") for v in raw]
    else:
        arr = parse_number_list(str(data.get("text", "")))

    s = _settings()
    if len(arr) > s.max_array_length:
        raise ApiError(f"Array too long: {len(arr)} values (max {s.max_array_length})")
    # counting sort allocates one count per value in [min, max]
    if key == "counting_sort" and arr and max(arr) - min(arr) > s.max_value_range:
        raise ApiError(f"Value range too wide for counting sort (max {s.max_value_range})")

    target = data.get("target")
    if target is not None and target != "":
        target = _to_int(target, "target")
    else:
        target = None
    return arr, target


def _graph_args(data: Dict[str, Any]) -> Tuple[Graph, str, Optional[str]]:
    directed = bool(data.get("directed", False))
    try:
        if "graph" in data:
            graph = Graph.from_dict(data["graph"])
        else:
            graph = Graph.from_adjacency_list(str(data.get("adjacency", "")), directed=directed)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise ApiError(f"Malformed graph: {e}") from None
    for edge in graph.edges:
        w = edge.weight
        if w is None:
            continue
        if isinstance(w, bool) or not isinstance(w, (int, float)):
            raise ApiError(f"Edge {edge.source}-{edge.target} has a non-numeric weight")
        if not math.isfinite(w):
            raise ApiError(f"Edge {edge.source}-{edge.target} has a non-finite weight")

    limit = _settings().max_graph_nodes
    if len(graph.nodes) > limit:
        raise ApiError(f"Graph too large: {len(graph.nodes)} nodes (max {limit})")

    start = data.get("start")
    if start is None:
        ids = graph.node_ids()
        start = ids[0] if ids else ""
    end = data.get("end")
    return graph, str(start), None if end in (None, "") else str(end)


def _check_table_size(rows: int, cols: int) -> None:
    # every step clones the whole table, so a trace costs cells × steps
    limit = _settings().max_dp_cells
    if rows * cols > limit:
        raise ApiError(f"DP table too large: {rows} × {cols} cells (max {limit})")


def _dp_args(key: str, data: Dict[str, Any]) -> tuple:
    if key == "fibonacci":
        n = _to_int(data.get("n"), "n")
        _check_table_size(1, n + 1)
        return (n,)

    if key == "lcs":
        str1, str2 = str(data.get("str1", "")), str(data.get("str2", ""))
        _check_table_size(len(str1) + 1, len(str2) + 1)
        return (str1, str2)

    raw_items = data.get("items")
    if not isinstance(raw_items, list):
        raise ApiError("items must be a list of {weight, value} objects")
    try:
        items = [KnapsackItem.from_dict(item) for item in raw_items]
    except (KeyError, TypeError, ValueError) as e:
        raise ApiError(f"Malformed item: {e}") from None
    capacity = _to_int(data.get("capacity"), "capacity")
    _check_table_size(len(items) + 1, capacity + 1)
    return (items, capacity)


def _engine_args(family: str, key: str, data: Dict[str, Any]) -> tuple:
    if family == "array":
        arr, target = _array_args(key, data)
        if REGISTRY[key].requires_target:
            return (arr, 0 if target is None else target)
        return (arr,)
    if family == "graph":
        return _graph_args(data)
    return _dp_args(key, data)


def _value_list(data: Dict[str, Any], field_name: str) -> List[int]:
    raw = data.get(field_name)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ApiError(f"{field_name} must be a list of integers")
    return [_to_int(v, f"{field_name} value") for v in raw]


def _trace_response(info, steps):
    return jsonify({
        "algorithm":   info.to_dict(),
        "total_steps": len(steps),
        "steps":       [s.to_dict() for s in steps],
    })


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@api.route("/algorithms", methods=["GET"])
def api_algorithms():
    """Optional ?category= and ?difficulty= narrow every family's list."""
    wanted = None
    category = request.args.get("category")
    if category is not None:
        if category not in CATEGORIES:
            raise ApiError(f"Unknown category: {category}")
        wanted = {a.key for a in algorithms_by_category(category)}
    difficulty = request.args.get("difficulty")
    if difficulty is not None:
        if difficulty not in DIFFICULTIES:
            raise ApiError(f"Unknown difficulty: {difficulty}")
        keys = {a.key for a in algorithms_by_difficulty(difficulty)}
        wanted = keys if wanted is None else wanted & keys

    return jsonify({
        family: [
            info.to_dict() for info in registry.values()
            if wanted is None or info.key in wanted
        ]
        for family, registry in FAMILIES.items()
    })


@api.route("/array/run", methods=["POST"])
def api_array_run():
    data = _payload()
    key = _algorithm(data, REGISTRY)
    arr, target = _array_args(key, data)
    steps = _runner().run_array(key, arr, target)
    return _trace_response(REGISTRY[key], steps)


@api.route("/graph/run", methods=["POST"])
def api_graph_run():
    data = _payload()
    key = _algorithm(data, GRAPH_REGISTRY)
    graph, start, end = _graph_args(data)
    steps = _runner().run_graph(key, graph, start, end)
    return _trace_response(GRAPH_REGISTRY[key], steps)


@api.route("/graph/generate", methods=["POST"])
def api_graph_generate():
    data = _payload()
    num_nodes = _to_int(data.get("nodes", 8), "nodes")
    limit = _settings().max_graph_nodes
    if not 1 <= num_nodes <= limit:
        raise ApiError(f"nodes must be between 1 and {limit}")
    try:
        prob = float(data.get("prob", 0.3))
    except (TypeError, ValueError):
        raise ApiError("prob must be a number") from None
    seed = data.get("seed")
    graph = Graph.generate_random(
        num_nodes=num_nodes,
        edge_probability=prob,
        directed=bool(data.get("directed", False)),
        weighted=bool(data.get("weighted", True)),
        seed=None if seed is None else _to_int(seed, "seed"),
    )
    return jsonify({"graph": graph.to_dict(), "node_ids": graph.node_ids()})


@api.route("/dp/run", methods=["POST"])
def api_dp_run():
    data = _payload()
    key = _algorithm(data, DP_REGISTRY)
    steps = _runner().run_dp(key, *_dp_args(key, data))
    return _trace_response(DP_REGISTRY[key], steps)


@api.route("/tree/build", methods=["POST"])
def api_tree_build():
    data = _payload()
    raw = data.get("values", [])
    if isinstance(raw, str):
        values = parse_number_list(raw)
    elif isinstance(raw, list):
        values = [_to_int(v, "tree value") for v in raw]
    else:
        raise ApiError("values must be a list or comma-separated text")
    inserts = _value_list(data, "insert")
    deletes = _value_list(data, "delete")
    # inserts can chain into a path as deep as the node count
    limit = _settings().max_array_length
    if len(values) + len(inserts) > limit or len(deletes) > limit:
        raise ApiError(f"Too many tree values (max {limit})")

    root = create_bst_from_array(values)
    for v in inserts:
        root = insert_into_bst(root, v)
    for v in deletes:
        root = delete_from_bst(root, v)

    search = None
    if data.get("search") is not None:
        path, found = search_bst(root, _to_int(data["search"], "search value"))
        search = {"path": path, "found": found}

    s = _settings()
    positioned = calculate_tree_positions(
        root, s.tree_root_x, s.tree_root_y, 0, s.tree_spacing,
    )
    return jsonify({
        "tree":        positioned.to_dict() if positioned else None,
        "height":      tree_height(root),
        "inorder":     inorder_traversal(root),
        "preorder":    preorder_traversal(root),
        "postorder":   postorder_traversal(root),
        "level_order": level_order_traversal(root),
        "search":      search,
    })


@api.route("/export", methods=["POST"])
def api_export():
    data = _payload()
    family = data.get("family")
    registry = FAMILIES.get(family)
    if registry is None:
        raise ApiError(f"Unknown family: {family}")
    key = _algorithm(data, registry)

    rec = Recorder()
    rec.start(family, key, *_engine_args(family, key, data))
    rec.run_to_completion()
    return Response(rec.export_text(), mimetype="text/plain")


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or Settings.from_env()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.config.update(settings.to_flask_config())
    app.extensions["algoviz_settings"] = settings
    app.extensions["algoviz_runner"]   = Runner(ResultCache(settings.cache_capacity))
    app.register_blueprint(api)

    logger.info("app ready (cache capacity %d)", settings.cache_capacity)
    return app


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    create_app().run(debug=True, host="0.0.0.0", port=5000)
