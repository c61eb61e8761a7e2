"""Tests for cliptrim.playhead — following, scrubbing, pinning, snapping."""

import pytest

from cliptrim.models import MODE_FOLLOWING, MODE_PINNED, MODE_SCRUBBING
from cliptrim.playhead import PlayheadController


# ── following playback ──────────────────────────────────────────────


class TestPlaybackTick:
    def test_initial_state(self, playhead: PlayheadController) -> None:
        assert playhead.mode == MODE_FOLLOWING
        assert playhead.current_time == 0
        assert playhead.indicator_px == 0
        assert playhead.progress == 0

    def test_follows_time(self, playhead: PlayheadController) -> None:
        pause = playhead.on_playback_tick(300, 0, 0, 600)
        assert not pause
        assert playhead.current_time == pytest.approx(300)
        assert playhead.indicator_px == pytest.approx(280)
        assert playhead.progress == pytest.approx(0.5)

    def test_clamped_to_trim_window(self, playhead: PlayheadController) -> None:
        playhead.on_playback_tick(50, 120, 0, 600)
        assert playhead.current_time == pytest.approx(120)
        playhead.on_playback_tick(590, 120, 100, 600)
        assert playhead.current_time == pytest.approx(500)

    def test_pause_at_trimmed_tail(self, playhead: PlayheadController) -> None:
        """600 - 590 = 10 <= 236 trimmed off the end → pause."""
        assert playhead.on_playback_tick(590, 300, 236, 600)

    def test_no_pause_before_tail(self, playhead: PlayheadController) -> None:
        assert not playhead.on_playback_tick(300, 0, 236, 600)

    def test_pause_at_untrimmed_end(self, playhead: PlayheadController) -> None:
        assert playhead.on_playback_tick(600, 0, 0, 600)

    def test_ticks_ignored_while_scrubbing(self, playhead: PlayheadController) -> None:
        playhead.on_scrub_start()
        playhead.on_scrub_drag(100, 0, 0)
        assert not playhead.on_playback_tick(599, 0, 0, 600)
        assert playhead.indicator_px == 100
        assert playhead.mode == MODE_SCRUBBING


# ── scrubbing ───────────────────────────────────────────────────────


class TestScrub:
    def test_drag_clamped_to_trim_bounds(self, playhead: PlayheadController) -> None:
        playhead.on_scrub_start()
        assert playhead.on_scrub_drag(10, 56, 112) == 56
        assert playhead.on_scrub_drag(550, 56, 112) == pytest.approx(448)

    def test_drag_does_not_change_time(self, playhead: PlayheadController) -> None:
        playhead.on_scrub_start()
        playhead.on_scrub_drag(280, 0, 0)
        assert playhead.current_time == 0

    def test_end_returns_seek_time_and_pins(self, playhead: PlayheadController) -> None:
        playhead.on_scrub_start()
        t = playhead.on_scrub_end(280, 0, 0)
        assert t == pytest.approx(300)
        assert playhead.mode == MODE_PINNED
        assert playhead.pinned_time == pytest.approx(300)

    def test_end_at_tail_boundary_does_not_pin(self, playhead: PlayheadController) -> None:
        playhead.on_scrub_start()
        t = playhead.on_scrub_end(9999, 0, 112)
        assert t == pytest.approx(480)
        assert playhead.mode == MODE_FOLLOWING
        assert playhead.pinned_time is None

    def test_cancel_restores_previous_position(self, playhead: PlayheadController) -> None:
        playhead.on_playback_tick(120, 0, 0, 600)
        before = (playhead.mode, playhead.indicator_px, playhead.current_time)
        playhead.on_scrub_start()
        playhead.on_scrub_drag(400, 0, 0)
        playhead.on_scrub_cancel()
        assert (playhead.mode, playhead.indicator_px, playhead.current_time) == before


class TestPinning:
    def test_ticks_at_or_before_pin_ignored(self, playhead: PlayheadController) -> None:
        playhead.on_scrub_start()
        playhead.on_scrub_end(280, 0, 0)
        for t in (0, 100, 299.9, 300):
            assert not playhead.on_playback_tick(t, 0, 0, 600)
            assert playhead.indicator_px == pytest.approx(280)
            assert playhead.mode == MODE_PINNED

    def test_first_tick_past_pin_resumes(self, playhead: PlayheadController) -> None:
        playhead.on_scrub_start()
        playhead.on_scrub_end(280, 0, 0)
        playhead.on_playback_tick(310, 0, 0, 600)
        assert playhead.mode == MODE_FOLLOWING
        assert playhead.pinned_time is None
        assert playhead.current_time == pytest.approx(310)

    def test_after_resume_earlier_ticks_apply(self, playhead: PlayheadController) -> None:
        playhead.on_scrub_start()
        playhead.on_scrub_end(280, 0, 0)
        playhead.on_playback_tick(310, 0, 0, 600)
        playhead.on_playback_tick(50, 0, 0, 600)
        assert playhead.current_time == pytest.approx(50)


# ── snapping / resize ───────────────────────────────────────────────


class TestSnap:
    def test_snap_to_head(self, playhead: PlayheadController) -> None:
        assert playhead.snap_to_head(56) == pytest.approx(60)
        assert playhead.indicator_px == 56

    def test_snap_to_tail(self, playhead: PlayheadController) -> None:
        assert playhead.snap_to_tail(112) == pytest.approx(480)
        assert playhead.indicator_px == pytest.approx(448)

    def test_snap_clears_pin(self, playhead: PlayheadController) -> None:
        playhead.on_scrub_start()
        playhead.on_scrub_end(280, 0, 0)
        playhead.snap_to_head(0)
        assert playhead.mode == MODE_FOLLOWING
        assert playhead.pinned_time is None

    def test_at_tail_boundary(self, playhead: PlayheadController) -> None:
        playhead.snap_to_tail(112)
        assert playhead.at_tail_boundary(120)
        playhead.snap_to_head(0)
        assert not playhead.at_tail_boundary(120)


class TestReset:
    def test_reset(self, playhead: PlayheadController) -> None:
        playhead.on_scrub_start()
        playhead.on_scrub_end(280, 0, 0)
        playhead.reset()
        assert playhead.mode == MODE_FOLLOWING
        assert playhead.current_time == 0
        assert playhead.indicator_px == 0
        assert playhead.pinned_time is None

    def test_resize_keeps_time(self, playhead: PlayheadController) -> None:
        playhead.on_playback_tick(300, 0, 0, 600)
        playhead.resize(1120)
        assert playhead.indicator_px == pytest.approx(560)
        assert playhead.current_time == pytest.approx(300)
