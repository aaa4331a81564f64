"""
Shared fixtures: small fixed graphs with known answers.
"""

import pytest

from graph import Graph


@pytest.fixture
def triangle():
    """A, B, C with edges 0-1 (2), 1-2 (3), 0-2 (9)."""
    return Graph.from_edges(3, [(0, 1, 2), (1, 2, 3), (0, 2, 9)])


@pytest.fixture
def diamond():
    """4 nodes: 0-1 (1), 1-2 (2), 0-2 (5), 2-3 (1)."""
    return Graph.from_edges(4, [(0, 1, 1), (1, 2, 2), (0, 2, 5), (2, 3, 1)])


@pytest.fixture
def square_with_diagonal():
    """
    0-1 (1), 1-2 (1), 2-3 (1), 0-3 (1), 0-2 (1): unit weights so every
    tie is broken by insertion order.
    """
    return Graph.from_edges(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (0, 3, 1), (0, 2, 1)])


@pytest.fixture
def random_graphs():
    """A spread of seeded random graphs, weighted and not, 2..25 nodes."""
    graphs = []
    for seed in range(20):
        n = 2 + seed
        graphs.append(Graph.generate_random(n, edge_chance=0.3, with_weights=seed % 2 == 0, seed=seed))
    return graphs


def run_to_end(state, limit=10_000):
    """Step until finished; returns the list of messages."""
    messages = []
    for _ in range(limit):
        if state.finished:
            return messages
        messages.append(state.step())
    raise AssertionError("traversal did not finish")


@pytest.fixture
def finish():
    return run_to_end


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
