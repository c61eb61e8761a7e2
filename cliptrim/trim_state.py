"""Trim state — head/tail handle offsets and their clamping rules.

Offsets are measured inward from each end of the usable axis: the head
offset from the left, the tail offset from the right.  Each setter
clamps against the *other* handle's current value and never moves the
other handle, so the selection can never shrink below the minimum trim
duration.
"""

import logging
from typing import Tuple

from .errors import DegenerateRange, InvalidMinDuration
from .time_space import clamp, min_selection_px, pixel_to_time, time_to_pixel

logger = logging.getLogger(__name__)


class TrimState:
    """Head/tail trim offsets for one asset on one strip width."""

    def __init__(self, usable_width: float, total_duration: float,
                 min_trim_duration: float = 0.0) -> None:
        if usable_width <= 0 or total_duration <= 0:
            raise DegenerateRange(
                f"Cannot trim: usable_width={usable_width} total_duration={total_duration}"
            )
        if min_trim_duration < 0 or min_trim_duration >= total_duration:
            raise InvalidMinDuration(
                f"Minimum trim duration {min_trim_duration} must be in "
                f"[0, {total_duration})"
            )
        self.usable_width: float = usable_width
        self.total_duration: float = total_duration
        self.min_trim_duration: float = min_trim_duration
        self.min_selection_px: float = min_selection_px(
            min_trim_duration, usable_width, total_duration
        )
        self.head_offset_px: float = 0.0
        self.tail_offset_px: float = 0.0

    # ── derived ─────────────────────────────────────────────────────

    @property
    def head_time(self) -> float:
        return pixel_to_time(self.head_offset_px, self.usable_width, self.total_duration)

    @property
    def tail_time(self) -> float:
        """Time trimmed off the end (not the end position itself)."""
        return pixel_to_time(self.tail_offset_px, self.usable_width, self.total_duration)

    @property
    def selection_px(self) -> float:
        return self.usable_width - self.head_offset_px - self.tail_offset_px

    @property
    def is_trimmed(self) -> bool:
        return self.head_offset_px > 0 or self.tail_offset_px > 0

    def max_head_px(self) -> float:
        return self.usable_width - self.tail_offset_px - self.min_selection_px

    def max_tail_px(self) -> float:
        return self.usable_width - self.head_offset_px - self.min_selection_px

    # ── mutation ────────────────────────────────────────────────────

    def set_head(self, px: float) -> float:
        """Move the head handle; returns the clamped offset."""
        self.head_offset_px = clamp(px, 0.0, self.max_head_px())
        return self.head_offset_px

    def set_tail(self, px: float) -> float:
        """Move the tail handle; returns the clamped offset."""
        self.tail_offset_px = clamp(px, 0.0, self.max_tail_px())
        return self.tail_offset_px

    def reset(self) -> None:
        self.head_offset_px = 0.0
        self.tail_offset_px = 0.0

    def resize(self, usable_width: float) -> None:
        """Re-scale offsets to a new strip width, keeping the trimmed times."""
        if usable_width <= 0:
            raise DegenerateRange(f"Usable width must be > 0 (got {usable_width})")
        head_time, tail_time = self.head_time, self.tail_time
        self.usable_width = usable_width
        self.min_selection_px = min_selection_px(
            self.min_trim_duration, usable_width, self.total_duration
        )
        self.head_offset_px = 0.0
        self.tail_offset_px = clamp(
            time_to_pixel(tail_time, usable_width, self.total_duration),
            0.0, self.max_tail_px(),
        )
        self.set_head(time_to_pixel(head_time, usable_width, self.total_duration))
        logger.debug("Trim resized to %.1fpx (head=%.1fpx tail=%.1fpx)",
                     usable_width, self.head_offset_px, self.tail_offset_px)

    # ── export ──────────────────────────────────────────────────────

    def export_range(self) -> Tuple[float, float]:
        """Returns (head_time, tail_time); the clip is ``[head, total - tail]``."""
        return self.head_time, self.tail_time

    def trim_window(self) -> Tuple[float, float]:
        """Returns the surviving ``(start, end)`` times in ticks."""
        return self.head_time, self.total_duration - self.tail_time
