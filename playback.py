# playback.py
"""
Playback controller for a finished simulation.

Holds the cursor and play state that the UI needs to step through, play or
scrub a SimulationResult. The result itself is never modified; moving the
cursor backwards simply reads an earlier StepRecord.
"""

from typing import List, Optional, Tuple

from engine import ReplacementPolicy, SimulationResult, StepRecord


class PlaybackState:
    """
    Enumeration of controller states.

    IDLE:    a history is loaded and nothing has been played yet
    RUNNING: tick() advances the cursor
    PAUSED:  playback halted mid-history, cursor kept
    STOPPED: playback finished or was stopped
    """
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"


class PlaybackController:
    """
    Cursor over the steps of one SimulationResult.

    Attributes:
        result (Optional[SimulationResult]): History being replayed
        position (int): Index of the current step, -1 before the first step
        state (str): One of the PlaybackState values
        event_log (List[str]): Transitions and visited steps, newest last
    """

    def __init__(self, result: Optional[SimulationResult] = None):
        self.result = None
        self.position = -1
        self.state = PlaybackState.IDLE
        self.event_log: List[str] = []
        if result is not None:
            self.load(result)

    # =========================================================================
    # LOADING
    # =========================================================================

    def load(self, result: SimulationResult):
        """Replace the history and rewind to before the first step."""
        self.result = result
        self.position = -1
        self.state = PlaybackState.IDLE
        self.event_log = [
            f"Simulated {len(result)} accesses with "
            f"{ReplacementPolicy.LABELS[result.algorithm]} on {result.capacity} frames: "
            f"{result.total_faults} faults, {result.total_hits} hits"
        ]

    # =========================================================================
    # PLAY STATE TRANSITIONS
    # =========================================================================

    def play(self):
        """
        Start or resume playback.

        Restarts from the beginning when the cursor is already at the last
        step. An empty history goes straight to STOPPED.
        """
        if self.state == PlaybackState.RUNNING:
            return
        if self.total_steps == 0:
            self._set_state(PlaybackState.STOPPED)
            return
        if self.at_end:
            self.position = -1
        self._set_state(PlaybackState.RUNNING)

    def pause(self):
        if self.state == PlaybackState.RUNNING:
            self._set_state(PlaybackState.PAUSED)

    def stop(self):
        """Halt playback and rewind."""
        self.position = -1
        self._set_state(PlaybackState.STOPPED)

    def tick(self) -> Optional[StepRecord]:
        """
        Advance one step while running.

        Returns:
            Optional[StepRecord]: The step moved to, or None if not running
        """
        if self.state != PlaybackState.RUNNING:
            return None
        step = self._move_to(self.position + 1)
        if self.at_end:
            self._set_state(PlaybackState.STOPPED)
        return step

    # =========================================================================
    # MANUAL NAVIGATION
    # =========================================================================

    def step_forward(self) -> Optional[StepRecord]:
        self.pause()
        if self.at_end:
            return self.current
        return self._move_to(self.position + 1)

    def step_back(self) -> Optional[StepRecord]:
        self.pause()
        if self.position < 0:
            return None
        return self._move_to(self.position - 1)

    def seek(self, position: int) -> Optional[StepRecord]:
        """
        Jump to ``position`` on the timeline (-1 rewinds to before step 0).

        Raises:
            IndexError: If position is outside -1 .. total_steps - 1
        """
        if position < -1 or position >= self.total_steps:
            raise IndexError(f"Step {position} out of range (0..{self.total_steps - 1})")
        self.pause()
        return self._move_to(position)

    # =========================================================================
    # CURSOR VIEWS
    # =========================================================================

    @property
    def total_steps(self) -> int:
        return len(self.result) if self.result is not None else 0

    @property
    def at_end(self) -> bool:
        return self.position >= self.total_steps - 1

    @property
    def current(self) -> Optional[StepRecord]:
        if self.position < 0:
            return None
        return self.result.steps[self.position]

    @property
    def frames(self) -> Tuple:
        """Frame contents at the cursor (empty before the first step)."""
        step = self.current
        return step.frames if step is not None else ()

    @property
    def faults_so_far(self) -> int:
        return self._count(hit=False)

    @property
    def hits_so_far(self) -> int:
        return self._count(hit=True)

    def history(self) -> Tuple[StepRecord, ...]:
        """Steps up to and including the cursor."""
        if self.result is None:
            return ()
        return self.result.steps[:self.position + 1]

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _count(self, hit: bool) -> int:
        return sum(1 for s in self.history() if s.hit == hit)

    def _move_to(self, position: int) -> Optional[StepRecord]:
        self.position = position
        step = self.current
        if step is not None:
            self.event_log.append(f"Step {step.index}: {step.note}")
        else:
            self.event_log.append("Rewound to start")
        return step

    def _set_state(self, state: str):
        if state != self.state:
            self.event_log.append(f"Playback {self.state} -> {state}")
        self.state = state
