"""Playhead controller — indicator position vs. live playback position.

The indicator either follows the player's clock (``"following"``), is
being dragged by the user (``"scrubbing"``), or is held at the point
where a scrub ended (``"pinned"``).  While pinned, playback ticks at or
before the pinned time are ignored so the indicator does not jump back
to a stale player position after a seek; the first tick past the pinned
time resumes following.

Indicator positions are offsets on the usable axis, the same axis the
trim handles use.
"""

import logging
from typing import Optional

from .models import (
    BOUNDARY_EPSILON_PX,
    BOUNDARY_EPSILON_TICKS,
    MODE_FOLLOWING,
    MODE_PINNED,
    MODE_SCRUBBING,
)
from .time_space import clamp, pixel_to_time, time_to_pixel

logger = logging.getLogger(__name__)


class PlayheadController:
    """Tracks the playhead indicator for one asset."""

    def __init__(self, usable_width: float, total_duration: float) -> None:
        self.usable_width: float = usable_width
        self.total_duration: float = total_duration
        self.mode: str = MODE_FOLLOWING
        self.current_time: float = 0.0
        self.indicator_px: float = 0.0
        self.pinned_time: Optional[float] = None
        # (mode, pinned_time, indicator_px, current_time) before a scrub
        self._scrub_origin: Optional[tuple] = None

    @property
    def progress(self) -> float:
        """Playback position as a 0–1 fraction of the whole asset."""
        if self.total_duration <= 0:
            return 0.0
        return clamp(self.current_time / self.total_duration, 0.0, 1.0)

    def reset(self) -> None:
        self.mode = MODE_FOLLOWING
        self.current_time = 0.0
        self.indicator_px = 0.0
        self.pinned_time = None
        self._scrub_origin = None

    def resize(self, usable_width: float) -> None:
        self.usable_width = usable_width
        self.indicator_px = time_to_pixel(self.current_time, usable_width, self.total_duration)

    # ── playback ────────────────────────────────────────────────────

    def on_playback_tick(self, current_time: float, head_time: float,
                         tail_time: float, total_duration: float) -> bool:
        """Follow the player clock.  Returns True when playback should pause.

        *tail_time* is the amount trimmed off the end, so the clip ends at
        ``total_duration - tail_time``.
        """
        if self.mode == MODE_SCRUBBING:
            return False
        if self.mode == MODE_PINNED:
            if self.pinned_time is not None and current_time <= self.pinned_time:
                return False
            logger.debug("Playback passed pinned time %.1f; following again", self.pinned_time)
            self.mode = MODE_FOLLOWING
            self.pinned_time = None

        end_time = total_duration - tail_time
        self.current_time = clamp(current_time, head_time, end_time)
        self.indicator_px = time_to_pixel(self.current_time, self.usable_width, total_duration)
        return total_duration - current_time <= tail_time + BOUNDARY_EPSILON_TICKS

    # ── scrubbing ───────────────────────────────────────────────────

    def _clamp_to_bounds(self, px: float, head_px: float, tail_px: float) -> float:
        return clamp(px, head_px, self.usable_width - tail_px)

    def on_scrub_start(self) -> None:
        self._scrub_origin = (self.mode, self.pinned_time, self.indicator_px, self.current_time)
        self.mode = MODE_SCRUBBING

    def on_scrub_drag(self, px: float, head_px: float, tail_px: float) -> float:
        """Move the indicator visually (no seek).  Returns the clamped offset."""
        self.mode = MODE_SCRUBBING
        self.indicator_px = self._clamp_to_bounds(px, head_px, tail_px)
        return self.indicator_px

    def on_scrub_end(self, px: float, head_px: float, tail_px: float) -> float:
        """Finish a scrub and return the time the player should seek to."""
        self.indicator_px = self._clamp_to_bounds(px, head_px, tail_px)
        self.current_time = pixel_to_time(self.indicator_px, self.usable_width, self.total_duration)
        self._scrub_origin = None
        max_px = self.usable_width - tail_px
        if self.indicator_px >= max_px - BOUNDARY_EPSILON_PX:
            # At the tail boundary playback cannot regress past it anyway
            self.mode = MODE_FOLLOWING
            self.pinned_time = None
        else:
            self.mode = MODE_PINNED
            self.pinned_time = self.current_time
            logger.debug("Indicator pinned at %.1f ticks", self.current_time)
        return self.current_time

    def on_scrub_cancel(self) -> None:
        """Abandon a scrub and put the indicator back where it was."""
        if self._scrub_origin is None:
            if self.mode == MODE_SCRUBBING:
                self.mode = MODE_FOLLOWING
            return
        self.mode, self.pinned_time, self.indicator_px, self.current_time = self._scrub_origin
        self._scrub_origin = None

    # ── trim boundaries ─────────────────────────────────────────────

    def _snap(self, px: float) -> float:
        self.mode = MODE_FOLLOWING
        self.pinned_time = None
        self.indicator_px = clamp(px, 0.0, self.usable_width)
        self.current_time = pixel_to_time(self.indicator_px, self.usable_width, self.total_duration)
        return self.current_time

    def snap_to_head(self, head_px: float) -> float:
        """Put the indicator on the head boundary; returns the seek time."""
        return self._snap(head_px)

    def snap_to_tail(self, tail_px: float) -> float:
        """Put the indicator on the tail boundary; returns the seek time."""
        return self._snap(self.usable_width - tail_px)

    def at_tail_boundary(self, tail_time: float) -> bool:
        return self.total_duration - self.current_time <= tail_time + BOUNDARY_EPSILON_TICKS
