"""
errors.py — Graph Precondition Errors
======================================
Every failure the engine can signal.  All of them are precondition
violations on the id / label space: local, synchronous, never worth
retrying.  The engine raises them and never logs; reporting is the
caller's job.

Hierarchy:
    GraphError
      ├── DuplicateNodeError
      ├── UnknownNodeError
      ├── DuplicateEdgeError
      │     └── SelfLoopError
      ├── MissingEdgeError
      ├── UnknownLabelError
      └── NoPathError
"""

from typing import Optional


class GraphError(Exception):
    """Base class for all graph engine errors."""


class DuplicateNodeError(GraphError):
    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"Node #{node_id} already exists.")


class UnknownNodeError(GraphError):
    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"Node #{node_id} doesn't exist.")


class DuplicateEdgeError(GraphError):
    def __init__(self, a: int, b: int, message: Optional[str] = None):
        self.a = a
        self.b = b
        super().__init__(message or f"Edge already exists between nodes #{a} and #{b}.")


class SelfLoopError(DuplicateEdgeError):
    """An edge from a node to itself.  Rejected like a duplicate."""

    def __init__(self, node_id: int):
        super().__init__(node_id, node_id, f"Node #{node_id} cannot be linked to itself.")


class MissingEdgeError(GraphError):
    def __init__(self, a: int, b: int):
        self.a = a
        self.b = b
        super().__init__(f"Edge doesn't exist between nodes #{a} and #{b}.")


class UnknownLabelError(GraphError):
    def __init__(self, label: str):
        self.label = label
        super().__init__(f"No node called {label!r}.")


class NoPathError(GraphError):
    def __init__(self, source: int, target: int):
        self.source = source
        self.target = target
        super().__init__(f"Node #{target} is not reachable from node #{source}.")


__all__ = [
    "GraphError",
    "DuplicateNodeError",
    "UnknownNodeError",
    "DuplicateEdgeError",
    "SelfLoopError",
    "MissingEdgeError",
    "UnknownLabelError",
    "NoPathError",
]
