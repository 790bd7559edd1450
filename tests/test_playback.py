"""Tests for the playback controller.

The controller walks an already computed SimulationResult; it must never
recompute, and its state moves between idle, running, paused and stopped.
"""

import pytest

from engine import simulate
from playback import PlaybackController, PlaybackState

TEXTBOOK = [7, 0, 1, 2, 0, 3, 0, 4]


@pytest.fixture
def controller():
    return PlaybackController(simulate(TEXTBOOK, 3, "lru"))


class TestLoading:
    """Verify a freshly loaded history."""

    def test_starts_idle_before_first_step(self, controller) -> None:
        assert controller.state == PlaybackState.IDLE
        assert controller.position == -1
        assert controller.current is None
        assert controller.frames == ()
        assert controller.total_steps == 8

    def test_load_logs_summary(self, controller) -> None:
        assert controller.event_log == [
            "Simulated 8 accesses with LRU on 3 frames: 6 faults, 2 hits"
        ]

    def test_reload_rewinds(self, controller) -> None:
        controller.seek(4)
        controller.load(simulate([1, 2], 1, "fifo"))
        assert controller.position == -1
        assert controller.state == PlaybackState.IDLE
        assert controller.total_steps == 2

    def test_empty_controller(self) -> None:
        controller = PlaybackController()
        assert controller.result is None
        assert controller.total_steps == 0
        assert controller.step_forward() is None
        assert controller.history() == ()


class TestPlay:
    """Verify the running state machine."""

    def test_tick_requires_running(self, controller) -> None:
        assert controller.tick() is None
        assert controller.position == -1

    def test_play_runs_to_end_then_stops(self, controller) -> None:
        controller.play()
        assert controller.state == PlaybackState.RUNNING
        visited = []
        while controller.state == PlaybackState.RUNNING:
            visited.append(controller.tick().index)
        assert visited == list(range(8))
        assert controller.state == PlaybackState.STOPPED
        assert controller.position == 7
        assert controller.frames == (4, 0, 3)

    def test_pause_keeps_position(self, controller) -> None:
        controller.play()
        controller.tick()
        controller.tick()
        controller.pause()
        assert controller.state == PlaybackState.PAUSED
        assert controller.tick() is None
        assert controller.position == 1
        controller.play()
        assert controller.tick().index == 2

    def test_pause_when_not_running_is_noop(self, controller) -> None:
        controller.pause()
        assert controller.state == PlaybackState.IDLE

    def test_stop_rewinds(self, controller) -> None:
        controller.play()
        controller.tick()
        controller.stop()
        assert controller.state == PlaybackState.STOPPED
        assert controller.position == -1

    def test_play_at_end_restarts(self, controller) -> None:
        controller.seek(7)
        controller.play()
        assert controller.position == -1
        assert controller.tick().index == 0

    def test_play_empty_history_stops(self) -> None:
        controller = PlaybackController(simulate([], 2, "fifo"))
        controller.play()
        assert controller.state == PlaybackState.STOPPED

    def test_transitions_logged(self, controller) -> None:
        controller.play()
        controller.pause()
        assert "Playback idle -> running" in controller.event_log
        assert controller.event_log[-1] == "Playback running -> paused"


class TestNavigation:
    """Verify manual stepping and scrubbing."""

    def test_step_forward_and_back(self, controller) -> None:
        assert controller.step_forward().index == 0
        assert controller.step_forward().index == 1
        assert controller.step_back().index == 0
        assert controller.step_back() is None
        assert controller.position == -1
        assert controller.step_back() is None

    def test_step_forward_clamped_at_end(self, controller) -> None:
        controller.seek(7)
        assert controller.step_forward().index == 7
        assert controller.position == 7

    def test_stepping_pauses_playback(self, controller) -> None:
        controller.play()
        controller.step_forward()
        assert controller.state == PlaybackState.PAUSED

    def test_seek(self, controller) -> None:
        step = controller.seek(3)
        assert step.page == 2
        assert controller.frames == (2, 0, 1)
        assert controller.seek(-1) is None

    @pytest.mark.parametrize("position", [-2, 8, 100])
    def test_seek_out_of_range(self, controller, position) -> None:
        with pytest.raises(IndexError):
            controller.seek(position)

    def test_backwards_reads_same_records(self, controller) -> None:
        """Stepping back returns the stored records, not recomputed ones."""
        forward = [controller.step_forward() for _ in range(5)]
        backward = [controller.step_back() for _ in range(4)]
        assert backward == forward[:4][::-1]
        assert all(a is b for a, b in zip(backward, forward[:4][::-1]))

    def test_running_counts(self, controller) -> None:
        controller.seek(4)
        assert controller.faults_so_far == 4
        assert controller.hits_so_far == 1
        controller.seek(7)
        assert controller.faults_so_far == 6
        assert controller.hits_so_far == 2

    def test_visited_steps_logged(self, controller) -> None:
        controller.step_forward()
        assert controller.event_log[-1] == "Step 0: Fault: Loaded: Page 7 -> Frame 0"
