"""Shared utilities used by the core and the Qt host."""

import logging

import cv2

from .models import DEFAULT_TIMESCALE
from .time_space import seconds_to_ticks

logger = logging.getLogger(__name__)


def fmt_time(ticks: float, timescale: int = DEFAULT_TIMESCALE) -> str:
    """Format ticks as m:ss."""
    s = int(ticks / timescale)
    m = s // 60
    return f"{m}:{s % 60:02d}"


def fmt_precise(ticks: float, timescale: int = DEFAULT_TIMESCALE) -> str:
    """Format ticks as m:ss.cc (centiseconds)."""
    total_s = max(0.0, ticks / timescale)
    m = int(total_s) // 60
    s = int(total_s) % 60
    cs = int((total_s - int(total_s)) * 100)
    return f"{m}:{s:02d}.{cs:02d}"


def probe_duration_ticks(path: str, timescale: int = DEFAULT_TIMESCALE) -> int:
    """Read a video's duration from its container metadata.

    Uses the frame count and FPS reported by OpenCV; no frames are
    decoded.  Raises ``ValueError`` if the file cannot be opened or
    reports no usable duration.
    """
    cap = cv2.VideoCapture(path)
    try:
        if not cap.isOpened():
            raise ValueError(f"Cannot open video: {path}")
        fps = cap.get(cv2.CAP_PROP_FPS)
        frame_count = cap.get(cv2.CAP_PROP_FRAME_COUNT)
    finally:
        cap.release()

    if fps <= 0 or frame_count <= 0:
        logger.warning("No duration metadata in %s (fps=%.2f frames=%.0f)",
                       path, fps, frame_count)
        raise ValueError(f"Video reports no duration: {path}")
    ticks = seconds_to_ticks(frame_count / fps, timescale)
    logger.info("probe: %s | frames=%d fps=%.2f duration=%d ticks",
                path, int(frame_count), fps, ticks)
    return ticks
