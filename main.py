"""
main.py — wordgraph Flask App & Command Line
=============================================
The outer layer around the graph engine: reads word files, reports
statistics, and serves a JSON API over an in-memory graph.

Command line:
  python main.py report WORDFILE            – statistics report
  python main.py dot WORDFILE [-o OUT]      – GraphViz dump
  python main.py path WORDFILE FROM TO      – shortest word ladder
  python main.py serve [--host H] [--port P]

Routes:
  GET    /api/health                  – liveness
  GET    /api/algorithms              – registry cards
  POST   /api/graph                   – build the session's graph from lines / text
  GET    /api/graph                   – nodes & edges as JSON
  GET    /api/graph/dot               – GraphViz text
  GET    /api/graph/report            – statistics report
  POST   /api/graph/nodes             – add a node
  DELETE /api/graph/nodes/<id>        – remove a node
  POST   /api/graph/edges             – add an edge
  DELETE /api/graph/edges/<a>/<b>     – remove an edge
  POST   /api/run                     – run a registered algorithm
  POST   /api/path                    – shortest path between two labels

State management:
  Word graphs are far too large for a cookie session, so the session only
  holds a key into a process-wide GraphStore.  The engine itself has no
  locking; every request that reads or mutates a stored graph runs under
  the store's one coarse lock.  Building a new graph happens outside it.
  The store keeps at most MAX_GRAPHS graphs and drops the least recently
  used one first.
"""

import argparse
import functools
import logging
import secrets
import sys
import threading
import time
from collections import OrderedDict
from typing import List, Optional

from flask import Flask, Response, jsonify, request, session
from werkzeug.exceptions import BadRequest, HTTPException, NotFound

import config
from wordgraph import (
    Graph,
    GraphError,
    DuplicateNodeError,
    DuplicateEdgeError,
    MissingEdgeError,
    NoPathError,
    UnknownLabelError,
    UnknownNodeError,
    build_from_lines,
    load_word_file,
)
from algorithms import get_algorithm, list_algorithms, shortest_path_by_label
from engine import Recorder, format_report, summarize


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Error → HTTP status
# ---------------------------------------------------------------------------
ERROR_STATUS = [
    (UnknownNodeError,   404),
    (UnknownLabelError,  404),
    (MissingEdgeError,   404),
    (DuplicateNodeError, 409),
    (DuplicateEdgeError, 409),
    (NoPathError,        422),
]


def status_for(error: GraphError) -> int:
    for cls, status in ERROR_STATUS:
        if isinstance(error, cls):
            return status
    return 400


# ---------------------------------------------------------------------------
# Graph store
# ---------------------------------------------------------------------------
class GraphStore:
    """
    Process-wide {key: Graph} with one coarse lock.

    Holds at most `max_graphs` graphs; storing one more evicts the graph
    that was least recently read or written.
    """

    def __init__(self, max_graphs: int):
        self.lock = threading.RLock()
        self.max_graphs = max_graphs
        self._graphs: "OrderedDict[str, Graph]" = OrderedDict()

    def get(self, key: Optional[str]) -> Optional[Graph]:
        if key is None or key not in self._graphs:
            return None
        self._graphs.move_to_end(key)
        return self._graphs[key]

    def put(self, key: str, graph: Graph) -> None:
        self._graphs[key] = graph
        self._graphs.move_to_end(key)
        while len(self._graphs) > self.max_graphs:
            evicted, _ = self._graphs.popitem(last=False)
            logger.info("Evicted graph %s", evicted)

    def __len__(self) -> int:
        return len(self._graphs)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(test_config: Optional[dict] = None) -> Flask:
    app = Flask(__name__)
    app.secret_key = config.SECRET_KEY or secrets.token_hex(32)
    app.config["MAX_LINES"] = config.MAX_LINES
    app.config["BUILD_STRATEGY"] = config.BUILD_STRATEGY
    app.config["MAX_GRAPHS"] = config.MAX_GRAPHS
    if test_config:
        app.config.update(test_config)

    store = GraphStore(app.config["MAX_GRAPHS"])
    app.extensions["wordgraph"] = store

    def locked(view):
        @functools.wraps(view)
        def wrapper(*args, **kwargs):
            with store.lock:
                return view(*args, **kwargs)
        return wrapper

    def current_graph() -> Graph:
        graph = store.get(session.get("graph_key"))
        if graph is None:
            raise NotFound("No graph loaded. POST /api/graph first.")
        return graph

    # ------------------------------------------------------------------
    # Error handlers
    # ------------------------------------------------------------------
    @app.errorhandler(GraphError)
    def handle_graph_error(error: GraphError):
        logger.warning("%s: %s", type(error).__name__, error)
        return jsonify({"error": str(error), "kind": type(error).__name__}), status_for(error)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return jsonify({"error": error.description, "kind": type(error).__name__}), error.code

    # ------------------------------------------------------------------
    # Meta
    # ------------------------------------------------------------------
    @app.route("/api/health")
    def api_health():
        return jsonify({"status": "ok", "graphs": len(store)})

    @app.route("/api/algorithms")
    def api_algorithms():
        return jsonify([a.to_dict() for a in list_algorithms()])

    # ------------------------------------------------------------------
    # Graph
    # ------------------------------------------------------------------
    @app.route("/api/graph", methods=["POST"])
    def api_graph_build():
        data  = _json_body()
        lines = data.get("lines")
        if lines is None:
            lines = str(data.get("text", "")).splitlines()
        if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
            raise BadRequest("'lines' must be a list of strings.")
        if len(lines) > app.config["MAX_LINES"]:
            raise BadRequest(f"Too many lines ({len(lines)} > {app.config['MAX_LINES']}).")

        strategy = data.get("strategy", app.config["BUILD_STRATEGY"])
        started  = time.monotonic()
        try:
            graph = build_from_lines(lines, name=_str_field(data, "name"), strategy=strategy)
        except ValueError as e:
            raise BadRequest(str(e))
        logger.info(
            "Built graph %r: %d nodes, %d edges in %.1f ms",
            graph.name, graph.node_count(), graph.edge_count(),
            (time.monotonic() - started) * 1000,
        )

        # build above runs unlocked; only the swap into the store is guarded
        with store.lock:
            key = session.get("graph_key") or secrets.token_hex(16)
            session["graph_key"] = key
            store.put(key, graph)
        return jsonify(_summary(graph)), 201

    @app.route("/api/graph", methods=["GET"])
    @locked
    def api_graph_get():
        return jsonify(current_graph().to_dict())

    @app.route("/api/graph/dot")
    @locked
    def api_graph_dot():
        return Response(current_graph().to_dot() + "\n", mimetype="text/plain")

    @app.route("/api/graph/report")
    @locked
    def api_graph_report():
        return jsonify(summarize(current_graph()).to_dict())

    @app.route("/api/graph/nodes", methods=["POST"])
    @locked
    def api_node_add():
        data  = _json_body()
        graph = current_graph()
        node_id = _int_field(data, "id")
        graph.add_node(node_id, _str_field(data, "label"))
        return jsonify({"id": node_id, "label": graph.get_label(node_id)}), 201

    @app.route("/api/graph/nodes/<int:node_id>", methods=["DELETE"])
    @locked
    def api_node_remove(node_id: int):
        current_graph().remove_node(node_id)
        return jsonify({"removed": node_id})

    @app.route("/api/graph/edges", methods=["POST"])
    @locked
    def api_edge_add():
        data  = _json_body()
        graph = current_graph()
        a, b  = _int_field(data, "a"), _int_field(data, "b")
        graph.add_edge(a, b)
        return jsonify({"edge": [a, b], "edge_count": graph.edge_count()}), 201

    @app.route("/api/graph/edges/<int:a>/<int:b>", methods=["DELETE"])
    @locked
    def api_edge_remove(a: int, b: int):
        graph = current_graph()
        graph.remove_edge(a, b)
        return jsonify({"removed": [a, b], "edge_count": graph.edge_count()})

    # ------------------------------------------------------------------
    # Algorithms
    # ------------------------------------------------------------------
    @app.route("/api/run", methods=["POST"])
    @locked
    def api_run():
        data  = _json_body()
        graph = current_graph()

        algo_key = data.get("algo", "bfs")
        info = get_algorithm(algo_key)
        if info is None:
            raise BadRequest(f"Unknown algorithm: {algo_key}")

        source = _int_field(data, "source")
        target = _int_field(data, "target") if info.needs_target else None

        rec = Recorder()
        rec.start(algo_key, graph, source, target)
        metrics = rec.run_to_completion()
        logger.info("Ran %s from %s: %d steps", algo_key, source, metrics.total_steps)

        body = {"result": rec.result(), "metrics": metrics.to_dict()}
        if data.get("steps"):
            body["steps"] = [s.to_dict() for s in rec.steps]
        return jsonify(body)

    @app.route("/api/path", methods=["POST"])
    @locked
    def api_path():
        data  = _json_body()
        graph = current_graph()
        src, dst = data.get("from"), data.get("to")
        if not isinstance(src, str) or not isinstance(dst, str):
            raise BadRequest("'from' and 'to' must be labels.")
        path = shortest_path_by_label(graph, src, dst)
        return jsonify({
            "path":   path,
            "labels": [graph.get_label(nid) for nid in path],
            "hops":   len(path) - 1,
        })

    return app


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Expected a JSON object body.")
    return data


def _int_field(data: dict, key: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadRequest(f"'{key}' must be an integer node id.")
    return value


def _str_field(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise BadRequest(f"'{key}' must be a string.")
    return value


def _summary(graph: Graph) -> dict:
    return {
        "name":       graph.name,
        "node_count": graph.node_count(),
        "edge_count": graph.edge_count(),
    }


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build and analyse edit-distance-1 word graphs",
    )
    parser.add_argument(
        "--log-level", default=config.LOG_LEVEL, type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add_wordfile(p: argparse.ArgumentParser) -> None:
        p.add_argument("wordfile", help="Text file with one word per line")
        p.add_argument("--strategy", default=config.BUILD_STRATEGY, choices=["indexed", "pairwise"])

    p_report = sub.add_parser("report", help="Print graph statistics")
    add_wordfile(p_report)

    p_dot = sub.add_parser("dot", help="Write the GraphViz rendering")
    add_wordfile(p_dot)
    p_dot.add_argument("-o", "--output", help="Output file (default: stdout)")

    p_path = sub.add_parser("path", help="Shortest word ladder between two words")
    add_wordfile(p_path)
    p_path.add_argument("source")
    p_path.add_argument("target")

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=config.SERVER_HOST)
    p_serve.add_argument("--port", type=int, default=config.SERVER_PORT)
    p_serve.add_argument("--debug", action="store_true")

    return parser.parse_args(argv)


def load(path: str, strategy: str) -> Graph:
    started = time.monotonic()
    graph = load_word_file(path, strategy=strategy, encoding=config.WORD_FILE_ENCODING)
    logger.info(
        "Loaded %s: %d nodes, %d edges in %.2fs",
        path, graph.node_count(), graph.edge_count(), time.monotonic() - started,
    )
    return graph


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    try:
        if args.command == "serve":
            logger.info("Serving on http://%s:%d", args.host, args.port)
            create_app().run(host=args.host, port=args.port, debug=args.debug)
            return 0

        graph = load(args.wordfile, args.strategy)

        if args.command == "report":
            for line in format_report(summarize(graph)):
                print(line)
        elif args.command == "dot":
            text = graph.to_dot() + "\n"
            if args.output:
                with open(args.output, "w", encoding="utf-8") as f:
                    f.write(text)
                logger.info("Wrote %s", args.output)
            else:
                sys.stdout.write(text)
        elif args.command == "path":
            path = shortest_path_by_label(graph, args.source, args.target)
            print(" → ".join(graph.get_label(nid) or str(nid) for nid in path))
            print(f"{len(path) - 1} step(s)")
    except (GraphError, OSError) as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
