"""
wordgraph/
----------
Core data layer.  Public API:

    from wordgraph import Graph, build_from_lines, levenshtein
    from wordgraph import GraphError, UnknownNodeError, …
"""

from wordgraph.errors import (
    GraphError,
    DuplicateNodeError,
    UnknownNodeError,
    DuplicateEdgeError,
    SelfLoopError,
    MissingEdgeError,
    UnknownLabelError,
    NoPathError,
)
from wordgraph.graph   import Graph, graph_from_edges
from wordgraph.builder import STRATEGIES, levenshtein, build_from_lines, load_word_file

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "graph_from_edges",
    "STRATEGIES",
    "levenshtein",
    "build_from_lines",
    "load_word_file",
    "GraphError",
    "DuplicateNodeError",
    "UnknownNodeError",
    "DuplicateEdgeError",
    "SelfLoopError",
    "MissingEdgeError",
    "UnknownLabelError",
    "NoPathError",
]
