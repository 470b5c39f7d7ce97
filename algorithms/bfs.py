"""
bfs.py — Breadth-First Search & Connected Components
=====================================================
Generator-based BFS.  Yields a Step at every meaningful event:
  1. Seed the queue with the start node            →  "start"
  2. Dequeue a node, give it its order number      →  "visit"
  3. Mark & enqueue an unseen neighbour            →  "discover"
  4. Final step carrying {node_id: order}          →  "done"

Neighbours are scanned in ascending id order and marked when ENQUEUED,
never when dequeued, so no node enters the queue twice.

The component counter reuses the same sweep over a private working set
of "remaining" nodes and loops (no recursion) until the set is empty.
"""

from collections import deque
from typing import Dict, Generator, Iterable, List, Optional, Set

from wordgraph import Graph, UnknownNodeError
from algorithms.step import Step, StepBuilder, final_step


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(graph: Graph, start: int) -> Generator[Step, None, None]:
    """
    Yields Step events for a BFS from `start`.  The final step's `order`
    maps every live node to its visitation order (1-based, 0 if unreached).

    Raises:
        UnknownNodeError – start is not a live node.
    """
    if not graph.node_exists(start):
        raise UnknownNodeError(start)

    sb      = StepBuilder()
    order:  Dict[int, int] = {nid: 0 for nid in graph.node_ids()}
    visited: Set[int]      = {start}
    queue   = deque([start])
    counter = 1

    yield sb.emit(
        "start", current_node=start, frontier_size=1,
        explanation=f"Initialise: node {start} is marked visited and placed into the queue.",
    )

    while queue:
        node = queue.popleft()
        order[node] = counter
        counter += 1
        sb.count("nodes_visited")
        yield sb.emit(
            "visit", current_node=node, frontier_size=len(queue),
            explanation=f"Dequeue node {node}: visitation order {order[node]}.",
        )

        for nbr in graph.neighbours(node):
            sb.count("edges_examined")
            if nbr in visited:
                continue
            visited.add(nbr)
            queue.append(nbr)
            yield sb.emit(
                "discover", current_node=node, neighbour=nbr, frontier_size=len(queue),
                explanation=f"Neighbour {nbr} of {node} is new: mark visited and enqueue.",
            )

    yield sb.finish(
        current_node=start, order=order,
        explanation=f"Queue is empty. {counter - 1} node(s) reached from {start}.",
    )


def components(
    graph: Graph,
    start: int,
    remaining: Optional[Iterable[int]] = None,
) -> Generator[Step, None, None]:
    """
    Counts connected components by repeated BFS sweeps.

    The first sweep starts at `start`; each later sweep starts at the lowest
    id still in the working set.  A sweep only walks through nodes that are
    still in the working set and removes every node it reaches.  The final
    step's `component` is the number of sweeps performed.

    `remaining` defaults to every live node.  It is copied, never mutated.

    Raises:
        UnknownNodeError – start, or any id in `remaining`, is not live.
    """
    if not graph.node_exists(start):
        raise UnknownNodeError(start)

    working: Set[int] = set(graph.node_ids() if remaining is None else remaining)
    for nid in working:
        if not graph.node_exists(nid):
            raise UnknownNodeError(nid)

    sb         = StepBuilder()
    component  = 1
    sweep_from = start
    # next sweep start = lowest id still in the working set
    ascending  = sorted(working)
    cursor     = 0

    while True:
        working.discard(sweep_from)
        queue = deque([sweep_from])
        size  = 0
        yield sb.emit(
            "start", current_node=sweep_from, frontier_size=1, component=component,
            explanation=f"Component {component}: sweep from node {sweep_from}.",
        )

        while queue:
            node = queue.popleft()
            size += 1
            sb.count("nodes_visited")
            for nbr in graph.neighbours(node):
                sb.count("edges_examined")
                if nbr in working:
                    working.remove(nbr)
                    queue.append(nbr)

        yield sb.emit(
            "component", current_node=sweep_from, component=component,
            explanation=f"Component {component} holds {size} node(s); {len(working)} remaining.",
        )

        if not working:
            break
        while ascending[cursor] not in working:
            cursor += 1
        sweep_from = ascending[cursor]
        component += 1

    yield sb.finish(
        current_node=start, component=component,
        explanation=f"Working set exhausted: {component} component(s).",
    )


# ---------------------------------------------------------------------------
# Plain-function API
# ---------------------------------------------------------------------------
def breadth_first_search(graph: Graph, start: int) -> Dict[int, int]:
    """{node_id: visitation order}; 0 for nodes not reachable from start."""
    return final_step(bfs(graph, start)).order


def count_components(
    graph: Graph,
    start: int,
    remaining: Optional[Iterable[int]] = None,
) -> int:
    """Number of components found by the sweeps; see `components`."""
    return final_step(components(graph, start, remaining)).component


def connected_components(graph: Graph) -> List[List[int]]:
    """Every component as an ascending id list, ordered by lowest id."""
    seen:   Set[int]        = set()
    result: List[List[int]] = []
    for root in graph.node_ids():
        if root in seen:
            continue
        seen.add(root)
        members = [root]
        queue   = deque([root])
        while queue:
            node = queue.popleft()
            for nbr in graph.neighbours(node):
                if nbr not in seen:
                    seen.add(nbr)
                    members.append(nbr)
                    queue.append(nbr)
        result.append(sorted(members))
    return result
