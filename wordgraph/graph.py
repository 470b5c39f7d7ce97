"""
graph.py — Graph Container
===========================
Single source of truth for the word graph.  Construction, the traversal
algorithms and the reporting layer all talk to this object.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / exists)
  2. Adjacency queries                      (neighbours, degree, …)
  3. Label lookups                          (get / set / find by label)
  4. Statistics                             (isolated nodes, degree histogram)
  5. Serialisation                          (GraphViz text, to_dict / from_dict)

Design decisions:
  - Node ids are plain ints; edges have no identity of their own, they are
    just the symmetric adjacency relation `_adj[node_id] → {neighbour_id}`.
  - `_edge_count` is cached and kept equal to  Σ degree / 2  by every mutator.
  - A reverse index `_by_label[label] → {node_id}` is maintained incrementally
    so label lookups don't rescan every node.  Labels are not unique; a
    lookup resolves to the lowest id carrying the label.
  - Nothing here logs or touches the filesystem.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Set

from wordgraph.errors import (
    DuplicateEdgeError,
    DuplicateNodeError,
    MissingEdgeError,
    SelfLoopError,
    UnknownLabelError,
    UnknownNodeError,
)


class Graph:
    """
    Attributes:
        name        : Optional display label (rendered as the DOT graph label).
        _labels     : {node_id: label or None}, doubles as the set of live nodes
        _adj        : {node_id: {neighbour_id, …}}
        _by_label   : {label: {node_id, …}}
        _edge_count : number of distinct undirected edges
    """

    def __init__(self, name: Optional[str] = None):
        self.name: Optional[str]                = name
        self._labels:     Dict[int, Optional[str]] = {}
        self._adj:        Dict[int, Set[int]]      = {}
        self._by_label:   Dict[str, Set[int]]      = {}
        self._edge_count: int                      = 0

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node_id: int, label: Optional[str] = None) -> None:
        if node_id in self._labels:
            raise DuplicateNodeError(node_id)
        self._labels[node_id] = label
        self._adj[node_id] = set()
        self._index_label(node_id, label)

    def remove_node(self, node_id: int) -> None:
        self._require(node_id)
        for nbr in self._adj[node_id]:
            self._adj[nbr].discard(node_id)
        self._edge_count -= len(self._adj[node_id])
        self._unindex_label(node_id, self._labels[node_id])
        del self._adj[node_id]
        del self._labels[node_id]

    def node_exists(self, node_id: int) -> bool:
        return node_id in self._labels

    def get_label(self, node_id: int) -> Optional[str]:
        self._require(node_id)
        return self._labels[node_id]

    def set_label(self, node_id: int, label: Optional[str]) -> None:
        self._require(node_id)
        self._unindex_label(node_id, self._labels[node_id])
        self._labels[node_id] = label
        self._index_label(node_id, label)

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, a: int, b: int) -> None:
        self._require(a)
        self._require(b)
        if a == b:
            raise SelfLoopError(a)
        if b in self._adj[a]:
            raise DuplicateEdgeError(a, b)
        self._adj[a].add(b)
        self._adj[b].add(a)
        self._edge_count += 1

    def remove_edge(self, a: int, b: int) -> None:
        self._require(a)
        self._require(b)
        if b not in self._adj[a]:
            raise MissingEdgeError(a, b)
        self._adj[a].discard(b)
        self._adj[b].discard(a)
        self._edge_count -= 1

    def edge_exists(self, a: int, b: int) -> bool:
        self._require(a)
        self._require(b)
        return b in self._adj[a]

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: int) -> List[int]:
        """Neighbour ids in ascending order, the tie-break every traversal uses."""
        self._require(node_id)
        return sorted(self._adj[node_id])

    def degree(self, node_id: int) -> int:
        self._require(node_id)
        return len(self._adj[node_id])

    # ==================================================================
    # LABEL LOOKUP
    # ==================================================================
    def find_node(self, label: str) -> Optional[int]:
        """Lowest id carrying `label`, or None."""
        ids = self._by_label.get(label)
        if not ids:
            return None
        return min(ids)

    def require_node(self, label: str) -> int:
        node_id = self.find_node(label)
        if node_id is None:
            raise UnknownLabelError(label)
        return node_id

    # ==================================================================
    # STATISTICS
    # ==================================================================
    def isolated_nodes(self) -> List[int]:
        return sorted(nid for nid, nbrs in self._adj.items() if not nbrs)

    def degree_histogram(self) -> Dict[int, int]:
        """{degree: number of nodes with that degree}, ordered by degree."""
        counts: Dict[int, int] = {}
        for nbrs in self._adj.values():
            counts[len(nbrs)] = counts.get(len(nbrs), 0) + 1
        return dict(sorted(counts.items()))

    def max_degree(self) -> int:
        return max((len(nbrs) for nbrs in self._adj.values()), default=0)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dot(self) -> str:
        """
        GraphViz rendering.  Each undirected edge is written once, grouped
        under its lower endpoint:

            graph {
                label="words";

                1 [label="cat"];
                2 [label="cot"];
                3;

                1 -- {2};
            }
        """
        lines = ["graph {"]
        if self.name is not None:
            lines.append(f'\tlabel="{_escape(self.name)}";')
            lines.append("")

        for nid in self.node_ids():
            label = self._labels[nid]
            if label is None:
                lines.append(f"\t{nid};")
            else:
                lines.append(f'\t{nid} [label="{_escape(label)}"];')
        lines.append("")

        for nid in self.node_ids():
            higher = [n for n in sorted(self._adj[nid]) if n >= nid]
            if higher:
                lines.append(f"\t{nid} -- {{{'; '.join(str(n) for n in higher)}}};")

        lines.append("}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "name":  self.name,
            "nodes": [{"id": nid, "label": self._labels[nid]} for nid in self.node_ids()],
            "edges": [[a, b] for a, b in self.edges()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls(name=data.get("name"))
        for nd in data.get("nodes", []):
            g.add_node(int(nd["id"]), nd.get("label"))
        for a, b in data.get("edges", []):
            g.add_edge(int(a), int(b))
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self._labels)

    def edge_count(self) -> int:
        return self._edge_count

    def node_ids(self) -> List[int]:
        return sorted(self._labels)

    def labels(self) -> Dict[int, Optional[str]]:
        return dict(self._labels)

    def edges(self) -> Iterator[tuple]:
        """Every undirected edge once, as (low, high), in ascending order."""
        for a in self.node_ids():
            for b in sorted(self._adj[a]):
                if a < b:
                    yield a, b

    def clear(self) -> None:
        self._labels.clear()
        self._adj.clear()
        self._by_label.clear()
        self._edge_count = 0

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._labels

    def __iter__(self) -> Iterator[int]:
        return iter(self.node_ids())

    def __repr__(self) -> str:
        return f"Graph(name={self.name!r}, nodes={self.node_count()}, edges={self.edge_count()})"

    # ------------------------------------------------------------------
    # internals
    # ------------------------------------------------------------------
    def _require(self, node_id: int) -> None:
        if node_id not in self._labels:
            raise UnknownNodeError(node_id)

    def _index_label(self, node_id: int, label: Optional[str]) -> None:
        if label is not None:
            self._by_label.setdefault(label, set()).add(node_id)

    def _unindex_label(self, node_id: int, label: Optional[str]) -> None:
        if label is None:
            return
        ids = self._by_label.get(label)
        if ids is not None:
            ids.discard(node_id)
            if not ids:
                del self._by_label[label]


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def graph_from_edges(
    nodes: Dict[int, Optional[str]],
    edges: Iterable[tuple],
    name: Optional[str] = None,
) -> Graph:
    """Convenience: build a graph from an id → label map and an edge list."""
    g = Graph(name=name)
    for nid, label in nodes.items():
        g.add_node(nid, label)
    for a, b in edges:
        g.add_edge(a, b)
    return g
