"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm (unit weights)
================================================================
Generator-based Dijkstra using a min-heap (heapq).  Every edge costs 1,
so the distances it finds are BFS hop counts.

Yields a Step at:
  1. Initialise distances / push source     →  "start"
  2. Pop minimum-distance node (finalise)   →  "visit"
  3. Successful relaxation                   →  "relax"
  4. Target finalised, path rebuilt          →  "done"

Heap entries are (distance, node_id), so equal distances pop in
ascending id order.

Parents are Optional[int]: the source's parent is None, which is what
ends path reconstruction.  No id (0 included) is ever used as a
"no parent" marker.
"""

import heapq
from typing import Dict, Generator, List, Optional, Set, Tuple

from wordgraph import Graph, NoPathError, UnknownNodeError
from algorithms.step import Step, StepBuilder, final_step


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(graph: Graph, source: int, target: int) -> Generator[Step, None, None]:
    """
    Raises:
        UnknownNodeError – source or target is not a live node.
        NoPathError      – target is not reachable from source.
    """
    for nid in (source, target):
        if not graph.node_exists(nid):
            raise UnknownNodeError(nid)

    sb = StepBuilder()
    dist:      Dict[int, int]           = {source: 0}
    parent:    Dict[int, Optional[int]] = {source: None}
    finalised: Set[int]                 = set()
    heap:      List[Tuple[int, int]]    = [(0, source)]

    yield sb.emit(
        "start", current_node=source, frontier_size=1, distance=0,
        explanation=f"Initialise: distance({source}) = 0, every other node = ∞.",
    )

    while heap:
        d, node = heapq.heappop(heap)
        if node in finalised:
            continue                      # stale entry
        finalised.add(node)
        sb.count("nodes_visited")
        yield sb.emit(
            "visit", current_node=node, frontier_size=len(heap), distance=d,
            explanation=f"Pop node {node} with distance {d}, now final.",
        )

        if node == target:
            path = _reconstruct(parent, target)
            yield sb.finish(
                current_node=target, distance=d, path=path,
                explanation=f"Target {target} reached in {d} hop(s): {' → '.join(map(str, path))}",
            )
            return

        for nbr in graph.neighbours(node):
            sb.count("edges_examined")
            if nbr in finalised:
                continue
            new_dist = d + 1
            if new_dist < dist.get(nbr, new_dist + 1):
                dist[nbr]   = new_dist
                parent[nbr] = node
                heapq.heappush(heap, (new_dist, nbr))
                sb.count("edges_relaxed")
                yield sb.emit(
                    "relax", current_node=node, neighbour=nbr,
                    frontier_size=len(heap), distance=new_dist,
                    explanation=f"Relax {node}→{nbr}: distance({nbr}) = {new_dist}.",
                )

    raise NoPathError(source, target)


# ---------------------------------------------------------------------------
# Plain-function API
# ---------------------------------------------------------------------------
def shortest_path(graph: Graph, source: int, target: int) -> List[int]:
    """Node ids from source to target inclusive; [source] when they are equal."""
    return final_step(dijkstra(graph, source, target)).path


def shortest_path_by_label(graph: Graph, from_label: str, to_label: str) -> List[int]:
    """
    Same as shortest_path, naming the endpoints by label.  When several
    nodes share a label the lowest id is used.

    Raises:
        UnknownLabelError – either label names no node.
    """
    source = graph.require_node(from_label)
    target = graph.require_node(to_label)
    return shortest_path(graph, source, target)


def hop_distance(graph: Graph, source: int, target: int) -> int:
    return len(shortest_path(graph, source, target)) - 1


# ---------------------------------------------------------------------------
def _reconstruct(parent: Dict[int, Optional[int]], target: int) -> List[int]:
    path: List[int] = []
    cur: Optional[int] = target
    while cur is not None:
        path.append(cur)
        cur = parent[cur]
    path.reverse()
    return path
