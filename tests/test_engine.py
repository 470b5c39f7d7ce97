"""
Unit tests for the Recorder, the algorithm registry and the statistics report.
"""

import pytest

from wordgraph import NoPathError, build_from_lines
from algorithms import algorithms_by_tag, get_algorithm, list_algorithms
from engine import Recorder, format_report, summarize


class TestRegistry:
    """Algorithm metadata cards."""

    def test_keys(self):
        assert [a.key for a in list_algorithms()] == ["bfs", "dfs", "components", "dijkstra"]

    def test_lookup(self):
        assert get_algorithm("dijkstra").needs_target
        assert not get_algorithm("bfs").needs_target
        assert get_algorithm("astar") is None

    def test_by_tag(self):
        assert [a.key for a in algorithms_by_tag("shortest-path")] == ["dijkstra"]


class TestRecorder:
    """Running algorithms to completion."""

    def test_bfs_run(self, chain):
        rec = Recorder()
        rec.start("bfs", chain, 1)
        metrics = rec.run_to_completion()
        assert metrics.algo_label == "Breadth-First Search"
        assert metrics.nodes_visited == 3
        assert metrics.nodes_reached == 3
        assert metrics.total_steps == len(rec.steps)
        assert rec.result() == {"order": {"1": 1, "2": 2, "3": 3}}

    def test_components_run(self, two_components):
        rec = Recorder()
        rec.start("components", two_components, 1)
        metrics = rec.run_to_completion()
        assert metrics.components == 3
        assert rec.result() == {"components": 3}

    def test_dijkstra_run(self, chain):
        rec = Recorder()
        rec.start("dijkstra", chain, 1, 3)
        metrics = rec.run_to_completion()
        assert metrics.path_found
        assert metrics.path_length == 2
        assert rec.result() == {"path": [1, 2, 3], "distance": 2}

    def test_dijkstra_needs_target(self, chain):
        with pytest.raises(ValueError):
            Recorder().start("dijkstra", chain, 1)

    def test_unknown_algorithm(self, chain):
        with pytest.raises(ValueError):
            Recorder().start("astar", chain, 1)

    def test_run_before_start(self):
        with pytest.raises(RuntimeError):
            Recorder().run_to_completion()

    def test_no_path_propagates(self, two_components):
        rec = Recorder()
        rec.start("dijkstra", two_components, 1, 4)
        with pytest.raises(NoPathError):
            rec.run_to_completion()
        assert rec.steps
        assert rec.final_step() is None

    def test_export(self, chain):
        rec = Recorder()
        rec.start("dfs", chain, 1)
        rec.run_to_completion()
        data = rec.export()
        assert data["algo_key"] == "dfs"
        assert data["graph"]["edges"] == [[1, 2], [2, 3]]
        assert data["steps"][-1]["is_final"] is True
        assert data["metrics"]["nodes_visited"] == 3


class TestReport:
    """Whole-graph statistics."""

    def test_summarize(self, sample_words):
        report = summarize(build_from_lines(sample_words, name="sample"))
        assert report.node_count == 12
        assert report.edge_count == 13
        assert report.component_count == 3
        assert report.isolated_count == 1
        assert report.max_degree == 3
        assert report.degree_histogram == {0: 1, 1: 1, 2: 5, 3: 5}

    def test_empty_graph(self):
        report = summarize(build_from_lines([]))
        assert report.component_count == 0
        assert report.degree_histogram == {}

    def test_to_dict_uses_string_keys(self, star):
        assert summarize(star).to_dict()["degree_histogram"] == {"0": 1, "1": 3, "3": 1}

    def test_format(self, sample_words):
        lines = format_report(summarize(build_from_lines(sample_words, name="sample")))
        assert lines[0] == "Graph: sample"
        assert "Connected components: 3" in lines
        assert "Nodes with 1 neighbour: 1" in lines
        assert "Nodes with 2 neighbours: 5" in lines
        assert lines[-1] == "Maximum number of neighbours: 3"
