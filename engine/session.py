"""
session.py — Visualizer Session
================================
The Session is the ONLY object the UI talks to.  It owns the current
graph, the traversal bound to it, the selected algorithm and the
auto-run handle, and keeps them consistent:

  - the graph and its traversal are always replaced together, in one
    assignment, so a traversal can never outlive the graph it walks;
  - every state-invalidating action (generate, algorithm switch, reset)
    cancels the auto-run BEFORE building anything new, so a stale timer
    can never step a discarded traversal.

Usage:
    session = Session()
    session.generate(node_count=8)
    session.step()                  # implicit start
    session.step()                  # one unit of work
    snap = session.snapshot()       # what to draw
"""

import logging
from typing import Callable, List, Optional

import settings
from graph import Graph, clamp_node_count
from algorithms import (
    AlgoInfo,
    FINISHED_MESSAGE,
    Snapshot,
    TraversalState,
    UnknownAlgorithmError,
    WorklistRow,
    build_snapshot,
    get_algorithm,
    project_worklist,
    start_traversal,
)
from engine.autorun import AutoRunner

logger = logging.getLogger(__name__)

NO_GRAPH_MESSAGE = "Generate a graph first."

RenderCallback = Callable[[Optional[Graph], Optional[Snapshot]], None]


class Session:
    """
    Attributes:
        graph     : current Graph, or None before the first generate / after reset.
        traversal : TraversalState bound to `graph`, or None.
        algorithm : selected registry key.
        runner    : AutoRunner driving "Run" mode.
        speed     : name of the auto-run speed preset in use.
        message   : latest status text.
        on_change : optional render callback(graph, snapshot) fired after every mutation.
    """

    def __init__(
        self,
        algorithm: str = settings.DEFAULT_ALGORITHM,
        runner: Optional[AutoRunner] = None,
        on_change: Optional[RenderCallback] = None,
    ):
        if get_algorithm(algorithm) is None:
            raise UnknownAlgorithmError(f"Unknown algorithm: {algorithm}")
        self.graph:     Optional[Graph]          = None
        self.traversal: Optional[TraversalState] = None
        self.algorithm: str                      = algorithm
        self.runner:    AutoRunner               = runner or AutoRunner()
        self.speed:     str                      = settings.DEFAULT_SPEED
        self.message:   str                      = "Generate a graph to get started."
        self.on_change: Optional[RenderCallback] = on_change

    @property
    def algo_info(self) -> AlgoInfo:
        return get_algorithm(self.algorithm)

    # ------------------------------------------------------------------
    # Graph lifecycle
    # ------------------------------------------------------------------
    def generate(
        self,
        node_count=settings.DEFAULT_NODE_COUNT,
        with_weights: bool = False,
        seed: Optional[int] = None,
    ) -> str:
        """New random graph shaped for the selected algorithm; drops any traversal."""
        self.runner.cancel()
        info = self.algo_info
        graph = Graph.generate_random(
            node_count=clamp_node_count(node_count),
            edge_chance=info.edge_chance,
            with_weights=with_weights or info.force_weights,
            seed=seed,
        )
        self._bind(graph, None)
        logger.info("Generated %r for %s", graph, info.key)
        return self._report(
            f"Generated {graph.node_count()} nodes and {graph.edge_count()} edges for {info.label}."
        )

    def load(self, graph: Graph) -> str:
        """Adopt an already-built graph (fixtures, replays); drops any traversal."""
        self.runner.cancel()
        self._bind(graph, None)
        return self._report(f"Loaded {graph.node_count()} nodes and {graph.edge_count()} edges.")

    def reset(self) -> str:
        self.runner.cancel()
        self._bind(None, None)
        logger.info("Session reset")
        return self._report("Cleared graph; click Generate to create a new one.")

    # ------------------------------------------------------------------
    # Algorithm selection
    # ------------------------------------------------------------------
    def select_algorithm(self, key: str) -> str:
        info = get_algorithm(key)
        if info is None:
            raise UnknownAlgorithmError(f"Unknown algorithm: {key}")
        self.runner.cancel()
        self.algorithm = key
        self._bind(self.graph, None)
        logger.info("Selected algorithm %s", key)
        return self._report(f"Selected {info.label}.")

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def start(self) -> str:
        if self.graph is None:
            return self._report(NO_GRAPH_MESSAGE)
        traversal = start_traversal(self.algorithm, self.graph)
        self._bind(self.graph, traversal)
        return self._report(traversal.message)

    def step(self) -> str:
        """
        One unit of work.  With no traversal, or one bound to an older
        graph, this (re)starts instead.  A finished traversal is a no-op.
        """
        if self.graph is None:
            return self._report(NO_GRAPH_MESSAGE)
        if self.traversal is None or not self.traversal.is_bound_to(self.graph):
            return self.start()
        if self.traversal.finished:
            self.runner.cancel()
            return self._report(FINISHED_MESSAGE)

        msg = self.traversal.step()
        logger.debug("%s step %d: %s", self.algorithm, self.traversal.steps_taken, msg)
        if self.traversal.finished:
            self.runner.cancel()
            logger.info("%s finished after %d steps", self.algorithm, self.traversal.steps_taken)
        return self._report(msg)

    # ------------------------------------------------------------------
    # Run / Stop
    # ------------------------------------------------------------------
    def run(self) -> str:
        if self.graph is None:
            return self._report(NO_GRAPH_MESSAGE)
        if self.is_finished:
            return self._report(FINISHED_MESSAGE)
        self.runner.start(self._auto_step)
        logger.info("Auto-run started for %s (every %.2fs)", self.algorithm, self.runner.interval)
        return self._report(f"Running {self.algo_info.label}.")

    def stop(self) -> str:
        self.runner.cancel()
        logger.info("Auto-run stopped")
        return self._report("Stopped.")

    def set_speed(self, preset: str) -> str:
        """Change the auto-run pace; takes effect from the next tick."""
        self.speed = self.runner.set_speed(preset)
        logger.info("Auto-run speed %s (every %.2fs)", self.speed, self.runner.interval)
        return self._report(f"Speed set to {self.speed}.")

    def tick(self, now: Optional[float] = None) -> bool:
        """Forward a scheduler tick to the runner.  True if a step happened."""
        return self.runner.tick(now)

    def _auto_step(self) -> bool:
        self.step()
        return self.traversal is not None and not self.traversal.finished

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    def snapshot(self) -> Optional[Snapshot]:
        if self.traversal is None or not self.traversal.is_bound_to(self.graph):
            return None
        return build_snapshot(self.traversal)

    def worklist(self) -> List[WorklistRow]:
        if self.traversal is None or not self.traversal.is_bound_to(self.graph):
            return []
        return project_worklist(self.traversal)

    @property
    def is_running(self) -> bool:
        return self.runner.is_running

    @property
    def is_finished(self) -> bool:
        return self.traversal is not None and self.traversal.finished

    def to_dict(self) -> dict:
        snap = self.snapshot()
        return {
            "algorithm":  self.algorithm,
            "message":    self.message,
            "is_running": self.is_running,
            "speed":      self.speed,
            "finished":   self.is_finished,
            "graph":      self.graph.to_dict() if self.graph else None,
            "snapshot":   snap.to_dict() if snap else None,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _bind(self, graph: Optional[Graph], traversal: Optional[TraversalState]) -> None:
        self.graph, self.traversal = graph, traversal

    def _report(self, message: str) -> str:
        self.message = message
        if self.on_change:
            self.on_change(self.graph, self.snapshot())
        return message
