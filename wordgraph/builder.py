"""
builder.py — Word-Graph Construction
=====================================
Turns an ordered list of words into a Graph.  Word i (1-based, input
order) becomes node i, and every pair of words at Levenshtein distance
exactly 1 gets an edge.

Two strategies, same result:

    pairwise   each new word is compared against every earlier word
               → O(N² · L).  Fine for a few thousand words.
    indexed    each word is filed under its single-edit signatures
               (same-length wildcard per position, single deletions), so
               only words sharing a signature are compared
               → roughly O(N · L²).  Default.

Candidates from the index are still confirmed with `levenshtein() == 1`,
so both strategies produce identical graphs.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, Union

from wordgraph.graph import Graph


STRATEGIES = ("indexed", "pairwise")


# ---------------------------------------------------------------------------
# Edit distance
# ---------------------------------------------------------------------------
def levenshtein(s0: str, s1: str) -> int:
    """
    Classic dynamic-programming edit distance with two rolling rows of
    length len(s0) + 1.  Insertion, deletion and substitution all cost 1.
    """
    len0 = len(s0) + 1
    len1 = len(s1) + 1

    # cost of skipping a prefix of s0
    cost    = list(range(len0))
    newcost = [0] * len0

    for j in range(1, len1):
        newcost[0] = j
        for i in range(1, len0):
            match        = 0 if s0[i - 1] == s1[j - 1] else 1
            cost_replace = cost[i - 1] + match
            cost_insert  = cost[i] + 1
            cost_delete  = newcost[i - 1] + 1
            newcost[i]   = min(cost_insert, cost_delete, cost_replace)
        cost, newcost = newcost, cost

    return cost[len0 - 1]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------
def build_from_lines(
    lines: Iterable[str],
    name: Optional[str] = None,
    strategy: str = "indexed",
) -> Graph:
    """
    Build the edit-distance-1 graph from `lines`, one word per line.

    Only the trailing line break is stripped; a blank line is a node whose
    label is the empty string.

    Raises:
        ValueError – unknown strategy.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy {strategy!r}; expected one of {STRATEGIES}")

    g = Graph(name=name)
    index = _SignatureIndex() if strategy == "indexed" else None

    for node_id, raw in enumerate(lines, start=1):
        word = raw.rstrip("\r\n")
        g.add_node(node_id, word)

        if index is None:
            earlier = range(1, node_id)
        else:
            earlier = sorted(index.candidates(word))
            index.add(node_id, word)

        for other in earlier:
            if levenshtein(word, g.get_label(other)) == 1:
                g.add_edge(node_id, other)

    return g


def load_word_file(
    path: Union[str, Path],
    name: Optional[str] = None,
    strategy: str = "indexed",
    encoding: str = "utf-8",
) -> Graph:
    """Read a one-word-per-line file and build its graph.  Name defaults to the file stem."""
    path = Path(path)
    with open(path, encoding=encoding) as f:
        return build_from_lines(f, name=name if name is not None else path.stem, strategy=strategy)


# ---------------------------------------------------------------------------
# Signature index
# ---------------------------------------------------------------------------
class _SignatureIndex:
    """
    Words at distance 1 from `w` are exactly:
      - same length, differing at one position i   → share (i, w minus char i)
      - one shorter                                 → equal to some  w minus char i
      - one longer                                  → have w among their deletions
    Identical words also share every positional key; the levenshtein check
    in the caller throws those out.
    """

    def __init__(self):
        self._exact:      Dict[str, Set[int]]             = {}
        self._positional: Dict[Tuple[int, str], Set[int]] = {}
        self._deletions:  Dict[str, Set[int]]             = {}

    def add(self, node_id: int, word: str) -> None:
        self._exact.setdefault(word, set()).add(node_id)
        for i, deleted in enumerate(_deletions(word)):
            self._positional.setdefault((i, deleted), set()).add(node_id)
            self._deletions.setdefault(deleted, set()).add(node_id)

    def candidates(self, word: str) -> Set[int]:
        found: Set[int] = set(self._deletions.get(word, ()))
        for i, deleted in enumerate(_deletions(word)):
            found.update(self._positional.get((i, deleted), ()))
            found.update(self._exact.get(deleted, ()))
        return found


def _deletions(word: str) -> List[str]:
    return [word[:i] + word[i + 1:] for i in range(len(word))]


__all__ = [
    "STRATEGIES",
    "levenshtein",
    "build_from_lines",
    "load_word_file",
]
