"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (all Steps), then computes the metrics
the CLI and the HTTP API report.

Usage:
    rec = Recorder()
    rec.start(algo_key="dijkstra", graph=g, source=1, target=42)
    metrics = rec.run_to_completion()   # exhausts the generator
    rec.result()                        # order / path / component count
    rec.export()                        # serialisable snapshot

Errors raised by the algorithm (UnknownNodeError, NoPathError, …)
propagate out of run_to_completion(); the steps recorded up to that
point stay available.
"""

import sys
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator, List, Optional

from wordgraph import Graph
from algorithms import AlgoInfo, get_algorithm
from algorithms.step import Step


# ---------------------------------------------------------------------------
# Metrics dataclass
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:       str           = ""
    algo_label:     str           = ""
    source:         Optional[int] = None
    target:         Optional[int] = None
    nodes_visited:  int           = 0
    edges_examined: int           = 0
    nodes_reached:  int           = 0     # order > 0 (traversals)
    components:     int           = 0     # component counting only
    path_length:    int           = 0     # number of edges on the final path
    path_found:     bool          = False
    total_steps:    int           = 0
    wall_time_ms:   float         = 0.0
    memory_bytes:   int           = 0     # approx, sys.getsizeof over the step buffer

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None

        self._algo_info: Optional[AlgoInfo]      = None
        self._source:    Optional[int]           = None
        self._target:    Optional[int]           = None
        self._graph:     Optional[Graph]         = None
        self._gen:       Optional[Iterator[Step]] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        algo_key: str,
        graph: Graph,
        source: int,
        target: Optional[int] = None,
    ) -> None:
        """Initialise the generator for this run."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")
        if info.needs_target and target is None:
            raise ValueError(f"Algorithm {algo_key!r} needs a target node.")

        self._algo_info = info
        self._source    = source
        self._target    = target if info.needs_target else None
        self._graph     = graph
        self.steps      = []
        self.metrics    = None

        if info.needs_target:
            self._gen = info.fn(graph, source, target)
        else:
            self._gen = info.fn(graph, source)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if self._gen is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        for step in self._gen:
            self.steps.append(step)
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    def final_step(self) -> Optional[Step]:
        if self.steps and self.steps[-1].is_final:
            return self.steps[-1]
        return None

    def result(self) -> Dict[str, Any]:
        """The algorithm's answer, shaped for JSON: order, path or component count."""
        last = self.final_step()
        if last is None:
            return {}
        key = self._algo_info.key if self._algo_info else ""
        if key == "components":
            return {"components": last.component}
        if self._algo_info and self._algo_info.needs_target:
            return {"path": list(last.path), "distance": last.distance}
        return {"order": {str(nid): n for nid, n in last.order.items()}}

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "source":   self._source,
            "target":   self._target,
            "graph":    self._graph.to_dict() if self._graph else {},
            "metrics":  self.metrics.to_dict() if self.metrics else {},
            "result":   self.result(),
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.final_step()

        tally = last.metrics if last else {}
        path  = last.path if last else []

        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s)

        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            source=self._source,
            target=self._target,
            nodes_visited=tally.get("nodes_visited", 0),
            edges_examined=tally.get("edges_examined", 0),
            nodes_reached=sum(1 for n in last.order.values() if n) if last else 0,
            components=last.component if last else 0,
            path_length=len(path) - 1 if len(path) > 1 else 0,
            path_found=bool(path),
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
        )
