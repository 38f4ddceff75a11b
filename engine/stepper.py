"""
stepper.py — Step Cursor
========================
Walks a trace one step at a time.  The Stepper owns the generator, buffers
every step it has pulled (so rewinding never re-runs the algorithm) and
fetches lazily: stepping forward only advances the generator when the
buffer runs out.

State machine:
    IDLE    →  start()        →  READY
    READY   →  generator done →  FINISHED
    any     →  reset()        →  IDLE

Not thread-safe; drive it from one thread.
"""

from enum import Enum
from typing import Any, Callable, Iterable, Iterator, List, Optional


class StepperState(Enum):
    IDLE     = "idle"
    READY    = "ready"
    FINISHED = "finished"


class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : Every step pulled so far.
        current_idx : Index into `steps` of the step on display; -1 = none.
        on_step     : Optional callback(step) fired whenever the cursor moves.
    """

    def __init__(self, on_step: Optional[Callable[[Any], None]] = None):
        self._source:     Optional[Iterator[Any]] = None
        self.steps:       List[Any]    = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.on_step = on_step

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, trace: Iterable[Any]) -> None:
        """Attach a trace (generator or list) and show its first step."""
        self._source     = iter(trace)
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.READY
        if self._fetch_next():
            self._goto(0)
        else:
            self.state = StepperState.FINISHED

    def reset(self) -> None:
        self._source     = None
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step.  False when already on the last step."""
        target = self.current_idx + 1
        if target >= len(self.steps) and not self._fetch_next():
            self.state = StepperState.FINISHED
            return False
        self._goto(target)
        return True

    def prev_step(self) -> bool:
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to step `idx`, pulling from the generator as far as needed."""
        while idx >= len(self.steps):
            if not self._fetch_next():
                self.state = StepperState.FINISHED
                break
        if 0 <= idx < len(self.steps):
            self._goto(idx)
            return True
        return False

    def rewind(self) -> None:
        if self.steps:
            self._goto(0)

    def jump_to_end(self) -> None:
        while self._fetch_next():
            pass
        if self.steps:
            self._goto(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Any]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps_fetched(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fetch_next(self) -> bool:
        if self._source is None:
            return False
        try:
            self.steps.append(next(self._source))
        except StopIteration:
            self._source = None
            return False
        return True

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.steps[idx])
