"""
step.py — Algorithm Step Events
================================
Every algorithm is a generator that yields Step objects.  A Step is one
event in the run:

    • "start"      – the start node was seeded into the frontier
    • "visit"      – a node was dequeued / popped and given its order number
    • "discover"   – an unseen neighbour was marked and put on the frontier
    • "component"  – a component sweep finished (component counting only)
    • "relax"      – a tentative distance improved (Dijkstra)
    • "done"       – final step; carries the result

Design decisions:
  - Steps are EVENTS, not snapshots.  They never copy the visited set or
    the frontier, so a run over 10^5 nodes stays linear in memory.
  - Only the final step holds the result (`order`, `path`, `component`).
    The plain-function wrappers in each algorithm module just drain the
    generator and read it.
  - `metrics` is a running tally (nodes_visited, edges_examined, …) copied
    into each step; it is a handful of ints, so the copy is cheap.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number   : 0-based index of this step in the run.
        event         : One of the event names listed in the module docstring.
        current_node  : Node being expanded / finalised right now.
        neighbour     : Neighbour involved in a "discover" / "relax" event.
        frontier_size : Length of the queue / stack / heap after the event.
        component     : Current component number (component counting).
        distance      : Tentative or final hop count (Dijkstra).
        explanation   : Human-readable description of the event.
        order         : {node_id: visitation order}; final step only.
        path          : Source → target ids; final Dijkstra step only.
        metrics       : Running tally: nodes_visited, edges_examined, …
        is_final      : True on the very last step.
    """

    step_number:   int                 = 0
    event:         str                 = ""
    current_node:  Optional[int]       = None
    neighbour:     Optional[int]       = None
    frontier_size: int                 = 0
    component:     int                 = 0
    distance:      Optional[int]       = None
    explanation:   str                 = ""
    order:         Dict[int, int]      = field(default_factory=dict)
    path:          List[int]           = field(default_factory=list)
    metrics:       Dict[str, Any]      = field(default_factory=dict)
    is_final:      bool                = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":   self.step_number,
            "event":         self.event,
            "current_node":  self.current_node,
            "neighbour":     self.neighbour,
            "frontier_size": self.frontier_size,
            "component":     self.component,
            "distance":      self.distance,
            "explanation":   self.explanation,
            "is_final":      self.is_final,
        }


# ---------------------------------------------------------------------------
# Builder so algorithms don't have to number steps or keep tallies by hand
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Numbers steps and keeps the running metrics.

    Usage inside an algorithm generator:
        sb = StepBuilder()
        yield sb.emit("visit", current_node=3, frontier_size=len(queue),
                      explanation="Dequeue 3")
        yield sb.finish(order=order)
    """

    def __init__(self):
        self.step_number: int            = 0
        self.metrics:     Dict[str, Any] = {"nodes_visited": 0, "edges_examined": 0}

    def count(self, key: str, amount: int = 1) -> None:
        self.metrics[key] = self.metrics.get(key, 0) + amount

    def emit(self, event: str, **kwargs) -> Step:
        step = Step(step_number=self.step_number, event=event, metrics=dict(self.metrics), **kwargs)
        self.step_number += 1
        return step

    def finish(self, **kwargs) -> Step:
        return self.emit("done", is_final=True, **kwargs)


def final_step(steps: Iterator[Step]) -> Step:
    """Exhaust an algorithm generator and return its last step."""
    last: Optional[Step] = None
    for last in steps:
        pass
    if last is None:
        raise RuntimeError("Algorithm produced no steps.")
    return last
