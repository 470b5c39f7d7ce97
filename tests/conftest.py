"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import sys
from pathlib import Path

import pytest

# Make the flat top-level packages importable without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordgraph import Graph, graph_from_edges  # noqa: E402


@pytest.fixture
def chain() -> Graph:
    """1 - 2 - 3 labelled A, B, C."""
    return graph_from_edges({1: "A", 2: "B", 3: "C"}, [(1, 2), (2, 3)], name="chain")


@pytest.fixture
def two_components() -> Graph:
    """Nodes 1..4 with the single edge 1 - 2."""
    return graph_from_edges({1: None, 2: None, 3: None, 4: None}, [(1, 2)])


@pytest.fixture
def star() -> Graph:
    """Hub 1 linked to 2, 3 and 4; 5 isolated."""
    return graph_from_edges({i: str(i) for i in range(1, 6)}, [(1, 2), (1, 3), (1, 4)])


@pytest.fixture
def sample_words() -> list:
    """A small word list with a few ladders and an isolated word."""
    return [
        "cold",
        "cord",
        "card",
        "ward",
        "warm",
        "word",
        "worm",
        "zebra",
        "cat",
        "cot",
        "coat",
        "cost",
    ]


@pytest.fixture
def word_file(tmp_path: Path, sample_words: list) -> Path:
    path = tmp_path / "words.txt"
    path.write_text("\n".join(sample_words) + "\n", encoding="utf-8")
    return path
