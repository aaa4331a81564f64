"""
Tests for the graph model, the random generator and the adjacency views.
"""

from collections import deque

import pytest

import settings
from graph import (
    Edge,
    Graph,
    Node,
    build_adjacency,
    build_weighted_adjacency,
    clamp_node_count,
    edge_key,
)


def reachable_from_zero(graph):
    adj = build_adjacency(graph)
    seen = {0}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for nbr in adj[node]:
            if nbr not in seen:
                seen.add(nbr)
                queue.append(nbr)
    return seen


class TestGenerator:
    """Invariants every generated graph must satisfy."""

    def test_connected(self, random_graphs):
        """Every node is reachable from node 0 using generated edges only."""
        for g in random_graphs:
            assert reachable_from_zero(g) == set(g.node_ids())

    def test_no_duplicate_edges(self, random_graphs):
        """No unordered pair appears twice."""
        for g in random_graphs:
            keys = [e.key for e in g.edges]
            assert len(keys) == len(set(keys))

    def test_no_self_loops(self, random_graphs):
        for g in random_graphs:
            assert all(e.source != e.target for e in g.edges)

    def test_at_least_spanning_tree_edges(self, random_graphs):
        for g in random_graphs:
            assert g.edge_count() >= g.node_count() - 1

    def test_zero_density_is_exactly_a_tree(self):
        g = Graph.generate_random(12, edge_chance=0.0, with_weights=False, seed=3)
        assert g.edge_count() == 11
        assert reachable_from_zero(g) == set(range(12))

    def test_full_density_is_complete(self):
        g = Graph.generate_random(6, edge_chance=1.0, with_weights=False, seed=3)
        assert g.edge_count() == 6 * 5 // 2

    def test_backbone_attaches_to_earlier_node(self):
        """The first N-1 edges form a random recursive tree: i hangs off some j < i."""
        g = Graph.generate_random(10, edge_chance=0.0, with_weights=False, seed=11)
        for i, edge in enumerate(g.edges, start=1):
            assert edge.source == i
            assert 0 <= edge.target < i

    def test_weights_in_range(self):
        low, high = settings.WEIGHT_RANGE
        g = Graph.generate_random(15, edge_chance=0.5, with_weights=True, seed=7)
        assert g.show_weights is True
        assert all(low <= e.weight <= high for e in g.edges)

    def test_unweighted_edges_weigh_one(self):
        g = Graph.generate_random(15, edge_chance=0.5, with_weights=False, seed=7)
        assert g.show_weights is False
        assert all(e.weight == 1 for e in g.edges)

    def test_seed_is_reproducible(self):
        a = Graph.generate_random(10, 0.4, True, seed=123)
        b = Graph.generate_random(10, 0.4, True, seed=123)
        assert a.to_dict() == b.to_dict()

    def test_ids_labels_and_positions(self):
        g = Graph.generate_random(5, 0.3, False, seed=1)
        assert g.node_ids() == [0, 1, 2, 3, 4]
        assert [n.label for n in g.nodes] == ["A", "B", "C", "D", "E"]
        for n in g.nodes:
            assert 0.1 <= n.x <= 0.9
            assert 0.1 <= n.y <= 0.9

    @pytest.mark.parametrize("requested, expected", [(1, 2), (0, 2), (-5, 2), (30, 25), (25, 25), (7, 7)])
    def test_node_count_clamped(self, requested, expected):
        g = Graph.generate_random(requested, 0.3, False, seed=0)
        assert g.node_count() == expected


class TestClampNodeCount:

    def test_numeric_strings_are_parsed(self):
        assert clamp_node_count("12") == 12

    def test_garbage_falls_back_to_default(self):
        assert clamp_node_count("lots") == settings.DEFAULT_NODE_COUNT
        assert clamp_node_count(None) == settings.DEFAULT_NODE_COUNT

    def test_floats_truncate(self):
        assert clamp_node_count(4.9) == 4


class TestGraphLookup:

    def test_from_edges_drops_repeated_pair(self):
        g = Graph.from_edges(3, [(0, 1, 2), (1, 0, 7), (1, 2, 3)])
        assert g.edge_count() == 2
        assert g.edge_between(1, 0).weight == 2

    def test_edge_between_either_orientation(self, triangle):
        assert triangle.edge_between(2, 0).weight == 9
        assert triangle.has_edge(1, 2)
        assert triangle.edge_between(0, 5) is None

    def test_label_of_unknown_id_is_raw_id(self, triangle):
        assert triangle.label_of(1) == "B"
        assert triangle.label_of(42) == "42"

    def test_total_weight_ignores_unknown_keys(self, triangle):
        assert triangle.total_weight([(0, 1), (1, 2), (5, 6)]) == 5

    def test_dict_round_trip(self, diamond):
        again = Graph.from_dict(diamond.to_dict())
        assert again.to_dict() == diamond.to_dict()
        assert again.edge_between(2, 3).weight == 1


class TestEdge:

    def test_key_is_orientation_free(self):
        assert Edge(3, 1, 4).key == (1, 3) == edge_key(1, 3)

    def test_other_end(self):
        e = Edge(0, 2, 5)
        assert e.other_end(0) == 2
        assert e.other_end(2) == 0
        assert e.other_end(1) is None

    def test_connects(self):
        assert Edge(0, 2).connects(2, 0)
        assert not Edge(0, 2).connects(0, 1)


class TestNode:

    def test_label_defaults_past_alphabet(self):
        assert Node(25).label == "Z"
        assert Node(26).label == "26"


class TestAdjacency:

    def test_plain_adjacency_sorted(self):
        g = Graph.from_edges(4, [(3, 0, 1), (0, 2, 1), (1, 0, 1), (2, 3, 1)])
        adj = build_adjacency(g)
        assert adj[0] == [1, 2, 3]
        assert adj[2] == [0, 3]
        assert adj[1] == [0]

    def test_weighted_adjacency_sorted_by_neighbour(self, diamond):
        adj = build_weighted_adjacency(diamond)
        assert [(n.to, n.weight) for n in adj[2]] == [(0, 5), (1, 2), (3, 1)]
        assert [(n.to, n.weight) for n in adj[3]] == [(2, 1)]

    def test_every_node_has_an_entry(self):
        g = Graph.from_edges(3, [(0, 1, 1)])
        assert build_adjacency(g)[2] == []

    def test_rebuild_is_fresh(self, triangle):
        first = build_adjacency(triangle)
        first[0].append(99)
        assert build_adjacency(triangle)[0] == [1, 2]
