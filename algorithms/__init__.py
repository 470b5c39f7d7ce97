"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the engine can run by name.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, needs_target, tags, …),
        …
    }

Every `fn` is a generator taking (graph, source) or (graph, source, target)
and yielding Steps.  The Recorder and the HTTP layer both consume AlgoInfo,
so adding an algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from algorithms.bfs      import bfs as _bfs, components as _components
from algorithms.dfs      import dfs as _dfs
from algorithms.dijkstra import dijkstra as _dijkstra

from algorithms.bfs      import breadth_first_search, count_components, connected_components
from algorithms.dfs      import depth_first_search
from algorithms.dijkstra import shortest_path, shortest_path_by_label, hop_distance


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bfs"
    label:            str                    # human label, e.g. "Breadth-First Search"
    fn:               Callable               # the generator function
    needs_target:     bool      = False      # takes (graph, source, target)?
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "needs_target":     self.needs_target,
            "tags":             list(self.tags),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs,
        tags=["traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer. Visitation order by hop count from the start.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs,
        tags=["traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Marks nodes as they are pushed.",
    ),

    "components": AlgoInfo(
        key="components", label="Connected Components", fn=_components,
        tags=["traversal", "connectivity"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Repeated BFS sweeps over the remaining nodes. Counts components.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra,
        needs_target=True,
        tags=["shortest-path"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Finalises the closest node first. Every edge costs one hop.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "breadth_first_search",
    "count_components",
    "connected_components",
    "depth_first_search",
    "shortest_path",
    "shortest_path_by_label",
    "hop_distance",
]
