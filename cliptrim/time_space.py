"""Time space — conversions between the scrub strip's pixel axis and time.

The pixel axis is the *usable* width of the strip: the track width minus
both handle caps and the playhead indicator.  Time is measured in ticks
at a fixed timescale (see :data:`~cliptrim.models.DEFAULT_TIMESCALE`).
Every function here is pure.
"""

from typing import List

import numpy as np

from .errors import DegenerateRange
from .models import DEFAULT_THUMBNAIL_COUNT, DEFAULT_TIMESCALE


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* into ``[lo, hi]``; ``lo`` wins when the range is empty."""
    return max(lo, min(value, hi))


def usable_width(track_width: float, handle_width: float, indicator_width: float) -> float:
    """Pixel travel available to the handles on a strip of *track_width*."""
    return track_width - 2 * handle_width - indicator_width


def _check_range(usable: float, total_duration: float) -> None:
    if usable <= 0:
        raise DegenerateRange(f"Usable width must be > 0 (got {usable})")
    if total_duration <= 0:
        raise DegenerateRange(f"Total duration must be > 0 (got {total_duration})")


def pixel_to_time(px: float, usable: float, total_duration: float) -> float:
    """Map a pixel offset on the usable axis to a time in ticks.

    *px* is clamped to ``[0, usable]`` first.  Raises
    :class:`DegenerateRange` when either axis is empty.
    """
    _check_range(usable, total_duration)
    return clamp(px, 0.0, usable) / usable * total_duration


def time_to_pixel(time: float, usable: float, total_duration: float) -> float:
    """Inverse of :func:`pixel_to_time`; *time* is clamped to the asset."""
    _check_range(usable, total_duration)
    return clamp(time, 0.0, total_duration) / total_duration * usable


def min_selection_px(min_trim_duration: float, usable: float, total_duration: float) -> float:
    """Pixel width that corresponds to the minimum trim duration."""
    _check_range(usable, total_duration)
    return usable * min_trim_duration / total_duration


def seconds_to_ticks(seconds: float, timescale: int = DEFAULT_TIMESCALE) -> int:
    """Convert seconds to the nearest whole tick."""
    return int(round(seconds * timescale))


def ticks_to_seconds(ticks: float, timescale: int = DEFAULT_TIMESCALE) -> float:
    return ticks / timescale


def thumbnail_times(
    total_duration: float, count: int = DEFAULT_THUMBNAIL_COUNT,
) -> List[float]:
    """Sample times (ticks) for the preview frames under the strip.

    The strip is split into *count* equal slots and each slot is sampled
    at its centre, so the first and last frames never sit exactly on the
    asset's edges (where decoders often return nothing).
    """
    if total_duration <= 0:
        raise DegenerateRange(f"Total duration must be > 0 (got {total_duration})")
    if count <= 0:
        return []
    centres = (np.arange(count, dtype=np.float64) + 0.5) / count * total_duration
    return centres.tolist()
