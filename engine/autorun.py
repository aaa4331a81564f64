"""
autorun.py — Cancellable Fixed-Interval Runner
================================================
"Run" mode is a repeating step on a cooperative tick, not a thread.
The owner calls tick() from its event loop (or the browser polls it);
a step happens only when at least `interval` seconds have passed since
the previous one, so at most one step runs at any instant.

State machine:
    IDLE     →  start(step_fn)  →  RUNNING
    RUNNING  →  cancel()        →  IDLE
    RUNNING  →  step_fn() returns False  →  IDLE

cancel() is synchronous: once it returns, no further tick() will call
the old step function.

Thread safety:
  This class is NOT thread-safe.  Drive it from a single thread.
"""

import time
from enum import Enum
from typing import Callable, Optional

import settings


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunnerState(Enum):
    IDLE    = "idle"
    RUNNING = "running"


# ---------------------------------------------------------------------------
# AutoRunner
# ---------------------------------------------------------------------------
class AutoRunner:
    """
    Attributes:
        interval : seconds between steps.
        state    : current RunnerState.
        ticks    : number of steps this runner has triggered since start().
    """

    def __init__(
        self,
        interval: float = settings.RUN_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.interval: float       = interval
        self.state:    RunnerState = RunnerState.IDLE
        self.ticks:    int         = 0
        self._clock                = clock
        self._step_fn: Optional[Callable[[], bool]] = None
        self._last_tick: float     = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, step_fn: Callable[[], bool]) -> None:
        """
        Begin repeating `step_fn`.  It returns True to keep running and
        False once there is nothing left to do.  The first step happens
        one full interval after start().
        """
        self._step_fn   = step_fn
        self.state      = RunnerState.RUNNING
        self.ticks      = 0
        self._last_tick = self._clock()

    def cancel(self) -> None:
        self._step_fn = None
        self.state    = RunnerState.IDLE

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """Returns True if a step was taken."""
        if self.state != RunnerState.RUNNING or self._step_fn is None:
            return False
        now = self._clock() if now is None else now
        if now - self._last_tick < self.interval:
            return False

        self._last_tick = now
        self.ticks += 1
        step_fn = self._step_fn
        if not step_fn():
            self.cancel()
        return True

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> str:
        """Apply a named preset; unknown names fall back to "medium".  Returns the preset used."""
        if preset not in settings.SPEED_PRESETS:
            preset = settings.DEFAULT_SPEED
        self.interval = settings.SPEED_PRESETS[preset]
        return preset

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.state == RunnerState.RUNNING
