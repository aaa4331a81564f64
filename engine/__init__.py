"""
engine/
-------
Session & playback layer.

    from engine import Session, AutoRunner
"""

from engine.autorun import AutoRunner, RunnerState
from engine.session import Session, NO_GRAPH_MESSAGE

__all__ = [
    "AutoRunner",
    "RunnerState",
    "Session",
    "NO_GRAPH_MESSAGE",
]
