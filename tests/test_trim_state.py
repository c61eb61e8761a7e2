"""Tests for cliptrim.trim_state — clamping, invariants, resize."""

import random

import pytest

from cliptrim.errors import DegenerateRange, InvalidMinDuration
from cliptrim.trim_state import TrimState

USABLE_PX = 560.0
TOTAL_TICKS = 600
MIN_TRIM_TICKS = 60

EPS = 1e-9


def _invariant_holds(ts: TrimState) -> bool:
    return ts.head_offset_px + ts.tail_offset_px <= ts.usable_width - ts.min_selection_px + EPS


# ── construction ────────────────────────────────────────────────────


class TestTrimStateInit:
    def test_initial_offsets(self, trim_state: TrimState) -> None:
        assert trim_state.head_offset_px == 0
        assert trim_state.tail_offset_px == 0
        assert trim_state.head_time == 0
        assert trim_state.tail_time == 0
        assert not trim_state.is_trimmed

    def test_min_selection_px(self, trim_state: TrimState) -> None:
        assert trim_state.min_selection_px == pytest.approx(56)

    def test_zero_width_raises(self) -> None:
        with pytest.raises(DegenerateRange):
            TrimState(0, TOTAL_TICKS, MIN_TRIM_TICKS)

    def test_zero_duration_raises(self) -> None:
        with pytest.raises(DegenerateRange):
            TrimState(USABLE_PX, 0, 0)

    def test_min_not_shorter_than_asset_raises(self) -> None:
        with pytest.raises(InvalidMinDuration):
            TrimState(USABLE_PX, 600, 600)

    def test_negative_min_raises(self) -> None:
        with pytest.raises(InvalidMinDuration):
            TrimState(USABLE_PX, 600, -1)


# ── set_head / set_tail ─────────────────────────────────────────────


class TestSetHandles:
    def test_set_head_midpoint(self, trim_state: TrimState) -> None:
        trim_state.set_head(280)
        assert trim_state.head_offset_px == 280
        assert trim_state.head_time == pytest.approx(300)

    def test_set_tail_clamped_by_head_and_minimum(self, trim_state: TrimState) -> None:
        """Head at 280px leaves 560 - 280 - 56 = 224px for the tail."""
        trim_state.set_head(280)
        trim_state.set_tail(300)
        assert trim_state.tail_offset_px == pytest.approx(224)
        assert trim_state.tail_time == pytest.approx(240)

    def test_window_keeps_minimum_duration(self, trim_state: TrimState) -> None:
        trim_state.set_head(280)
        trim_state.set_tail(300)
        start, end = trim_state.trim_window()
        assert end - start == pytest.approx(MIN_TRIM_TICKS)

    def test_negative_input_clamps_to_zero(self, trim_state: TrimState) -> None:
        trim_state.set_head(-40)
        trim_state.set_tail(-1)
        assert trim_state.head_offset_px == 0
        assert trim_state.tail_offset_px == 0

    def test_head_alone_stops_at_minimum(self, trim_state: TrimState) -> None:
        assert trim_state.set_head(10_000) == pytest.approx(USABLE_PX - 56)

    def test_setter_never_moves_other_handle(self, trim_state: TrimState) -> None:
        trim_state.set_tail(400)
        trim_state.set_head(500)
        assert trim_state.tail_offset_px == 400
        assert trim_state.head_offset_px == pytest.approx(560 - 400 - 56)

    def test_blocked_handle_stays_at_zero(self, trim_state: TrimState) -> None:
        """With the tail at its max, the head has no room left to move."""
        trim_state.set_tail(10_000)
        assert trim_state.set_head(100) == 0

    def test_is_trimmed(self, trim_state: TrimState) -> None:
        trim_state.set_tail(1)
        assert trim_state.is_trimmed

    def test_reset(self, trim_state: TrimState) -> None:
        trim_state.set_head(100)
        trim_state.set_tail(100)
        trim_state.reset()
        assert trim_state.export_range() == (0, 0)


class TestInvariants:
    def test_random_sequences_respect_minimum(self, trim_state: TrimState) -> None:
        rng = random.Random(1234)
        for _ in range(2000):
            px = rng.uniform(-100, 700)
            if rng.random() < 0.5:
                trim_state.set_head(px)
            else:
                trim_state.set_tail(px)
            assert _invariant_holds(trim_state)
            assert 0 <= trim_state.head_offset_px <= trim_state.usable_width
            assert 0 <= trim_state.tail_offset_px <= trim_state.usable_width

    def test_head_monotonic(self, trim_state: TrimState) -> None:
        """Dragging the head further right never moves head_time backwards
        and never past total - tail - minimum."""
        trim_state.set_tail(150)
        limit = TOTAL_TICKS - trim_state.tail_time - MIN_TRIM_TICKS
        prev = -1.0
        for px in range(-20, 600, 5):
            trim_state.set_head(px)
            assert trim_state.head_time >= prev
            assert trim_state.head_time <= limit + 1e-6
            prev = trim_state.head_time


# ── resize / export ─────────────────────────────────────────────────


class TestResize:
    def test_keeps_times(self, trim_state: TrimState) -> None:
        trim_state.set_head(140)
        trim_state.set_tail(70)
        head_t, tail_t = trim_state.export_range()
        trim_state.resize(1120)
        assert trim_state.head_offset_px == pytest.approx(280)
        assert trim_state.tail_offset_px == pytest.approx(140)
        assert trim_state.head_time == pytest.approx(head_t)
        assert trim_state.tail_time == pytest.approx(tail_t)
        assert trim_state.min_selection_px == pytest.approx(112)

    def test_shrink_preserves_invariant(self, trim_state: TrimState) -> None:
        trim_state.set_head(280)
        trim_state.set_tail(300)
        trim_state.resize(57)
        assert _invariant_holds(trim_state)

    def test_invalid_width_raises(self, trim_state: TrimState) -> None:
        with pytest.raises(DegenerateRange):
            trim_state.resize(0)


class TestExportRange:
    def test_untrimmed(self, trim_state: TrimState) -> None:
        assert trim_state.export_range() == (0, 0)
        assert trim_state.trim_window() == (0, TOTAL_TICKS)

    def test_trimmed(self, trim_state: TrimState) -> None:
        trim_state.set_head(56)
        trim_state.set_tail(112)
        head, tail = trim_state.export_range()
        assert head == pytest.approx(60)
        assert tail == pytest.approx(120)
