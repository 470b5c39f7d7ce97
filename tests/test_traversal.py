"""
Unit tests for BFS, DFS and component counting.
"""

import pytest

from wordgraph import UnknownNodeError, build_from_lines, graph_from_edges
from algorithms import (
    breadth_first_search,
    connected_components,
    count_components,
    depth_first_search,
)
from algorithms.bfs import bfs, components
from algorithms.dfs import dfs


class TestBreadthFirstSearch:
    """BFS visitation order."""

    def test_chain(self, chain):
        assert breadth_first_search(chain, 1) == {1: 1, 2: 2, 3: 3}

    def test_unreached_nodes_are_zero(self, two_components):
        assert breadth_first_search(two_components, 2) == {1: 2, 2: 1, 3: 0, 4: 0}

    def test_layers_in_ascending_id_order(self):
        # 1 → {4, 2} → 3 (child of 2) and 5 (child of 4)
        g = graph_from_edges({i: None for i in range(1, 6)}, [(1, 4), (1, 2), (2, 3), (4, 5)])
        assert breadth_first_search(g, 1) == {1: 1, 2: 2, 4: 3, 3: 4, 5: 5}

    def test_no_duplicate_enqueue(self):
        # square: both 2 and 3 see 4, it must be queued once
        g = graph_from_edges({i: None for i in range(1, 5)}, [(1, 2), (1, 3), (2, 4), (3, 4)])
        steps = list(bfs(g, 1))
        discovered = [s.neighbour for s in steps if s.event == "discover"]
        assert sorted(discovered) == [2, 3, 4]
        assert steps[-1].order == {1: 1, 2: 2, 3: 3, 4: 4}

    def test_unknown_start(self, chain):
        with pytest.raises(UnknownNodeError):
            breadth_first_search(chain, 9)

    def test_steps_are_numbered_and_final(self, chain):
        steps = list(bfs(chain, 1))
        assert [s.step_number for s in steps] == list(range(len(steps)))
        assert steps[0].event == "start"
        assert steps[-1].is_final
        assert steps[-1].metrics["nodes_visited"] == 3


class TestDepthFirstSearch:
    """DFS visitation order with mark-on-push."""

    def test_chain(self, chain):
        assert depth_first_search(chain, 1) == {1: 1, 2: 2, 3: 3}

    def test_mark_on_push_order(self):
        # 1 pushes 2 then 3; 3 is popped first.  3's neighbour 2 is already
        # marked, so 2 is not pushed again and comes last.
        g = graph_from_edges({1: None, 2: None, 3: None}, [(1, 2), (1, 3), (2, 3)])
        assert depth_first_search(g, 1) == {1: 1, 3: 2, 2: 3}

    def test_differs_from_preorder(self):
        # Recursive preorder from 1 would be 1, 2, 4, 3.  With mark-on-push
        # 1 pushes 2 and 3, pops 3, then 2, then 4.
        g = graph_from_edges({i: None for i in range(1, 5)}, [(1, 2), (1, 3), (2, 4)])
        assert depth_first_search(g, 1) == {1: 1, 3: 2, 2: 3, 4: 4}

    def test_unreached_nodes_are_zero(self, two_components):
        assert depth_first_search(two_components, 3) == {1: 0, 2: 0, 3: 1, 4: 0}

    def test_unknown_start(self, chain):
        with pytest.raises(UnknownNodeError):
            depth_first_search(chain, 0)

    def test_each_node_pushed_once(self, sample_words):
        g = build_from_lines(sample_words)
        steps = list(dfs(g, 1))
        pushed = [s.neighbour for s in steps if s.event == "discover"]
        assert len(pushed) == len(set(pushed)) == 6


class TestComponents:
    """Component counting."""

    def test_isolated_nodes_count_as_components(self, two_components):
        # {1, 2}, {3}, {4}
        assert count_components(two_components, 1) == 3
        assert count_components(two_components, 1, [1, 2, 3, 4]) == 3

    def test_start_outside_remaining(self, two_components):
        # sweep from 1 walks into 2; 3 and 4 are left as one sweep each
        assert count_components(two_components, 1, [2, 3, 4]) == 3
        assert count_components(two_components, 3, [1, 2]) == 2

    def test_single_edge_over_pair(self, two_components):
        assert count_components(two_components, 1, {1, 2}) == 1

    def test_remaining_is_not_mutated(self, two_components):
        remaining = [1, 2, 3, 4]
        count_components(two_components, 1, remaining)
        assert remaining == [1, 2, 3, 4]

    def test_sample_words(self, sample_words):
        g = build_from_lines(sample_words)
        assert count_components(g, 1) == 3
        assert count_components(g, 8) == 3

    def test_many_components_do_not_recurse(self):
        n = 5000
        g = graph_from_edges({i: None for i in range(n)}, [])
        assert count_components(g, 0) == n

    def test_unknown_start(self, chain):
        with pytest.raises(UnknownNodeError):
            count_components(chain, 4)

    def test_unknown_remaining_node(self, chain):
        with pytest.raises(UnknownNodeError):
            count_components(chain, 1, [1, 2, 3, 99])

    def test_component_events(self, two_components):
        steps = list(components(two_components, 1))
        finished = [s.component for s in steps if s.event == "component"]
        assert finished == [1, 2, 3]

    def test_connected_components(self, sample_words):
        g = build_from_lines(sample_words)
        assert connected_components(g) == [[1, 2, 3, 4, 5, 6, 7], [8], [9, 10, 11, 12]]
