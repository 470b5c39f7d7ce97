"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Yields a Step at:
  1. Push the start node onto the stack     →  "start"
  2. Pop a node, give it its order number   →  "visit"
  3. Mark & push an unseen neighbour        →  "discover"
  4. Final step carrying {node_id: order}   →  "done"

Marking happens on PUSH, not on pop: once a node is on the stack no other
node can push it again.  With several neighbours pushed before any is
popped this gives a valid DFS order that is not canonical preorder, e.g.
from 1 with neighbours 2 and 3, node 3 is visited second because it was
pushed last.
"""

from typing import Dict, Generator, List, Set

from wordgraph import Graph, UnknownNodeError
from algorithms.step import Step, StepBuilder, final_step


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(graph: Graph, start: int) -> Generator[Step, None, None]:
    """
    Iterative DFS from `start`.  The final step's `order` maps every live
    node to its visitation order (1-based, 0 if unreached).

    Raises:
        UnknownNodeError – start is not a live node.
    """
    if not graph.node_exists(start):
        raise UnknownNodeError(start)

    sb      = StepBuilder()
    order:   Dict[int, int] = {nid: 0 for nid in graph.node_ids()}
    marked:  Set[int]       = {start}
    stack:   List[int]      = [start]
    counter = 1

    yield sb.emit(
        "start", current_node=start, frontier_size=1,
        explanation=f"Initialise: push node {start} onto the stack and mark it.",
    )

    while stack:
        node = stack.pop()

        for nbr in graph.neighbours(node):
            sb.count("edges_examined")
            if nbr in marked:
                continue
            marked.add(nbr)
            stack.append(nbr)
            yield sb.emit(
                "discover", current_node=node, neighbour=nbr, frontier_size=len(stack),
                explanation=f"Neighbour {nbr} of {node} is unmarked: mark it and push.",
            )

        order[node] = counter
        counter += 1
        sb.count("nodes_visited")
        yield sb.emit(
            "visit", current_node=node, frontier_size=len(stack),
            explanation=f"Node {node} processed: visitation order {order[node]}.",
        )

    yield sb.finish(
        current_node=start, order=order,
        explanation=f"Stack empty. {counter - 1} node(s) reached from {start}.",
    )


# ---------------------------------------------------------------------------
def depth_first_search(graph: Graph, start: int) -> Dict[int, int]:
    """{node_id: visitation order}; 0 for nodes not reachable from start."""
    return final_step(dfs(graph, start)).order
