"""Core data models for ClipTrim.

Defines the configuration, the value objects the trimming core hands
back to its host (player actions, visual state, export range) and the
string constants used for gesture phases, playhead modes and session
states.  All models support JSON-friendly serialization via
``to_dict()`` (and ``from_dict()`` where the host needs to rebuild one).
"""

from dataclasses import dataclass
from typing import Optional


DEFAULT_TIMESCALE = 600  # ticks per second, matches common media timescales
DEFAULT_THUMBNAIL_COUNT = 15

# Sub-pixel / sub-tick tolerances for "reached the boundary" checks
BOUNDARY_EPSILON_PX = 0.5
BOUNDARY_EPSILON_TICKS = 0.5

# Gesture phases reported by the host
PHASE_BEGIN = "begin"
PHASE_CHANGED = "changed"
PHASE_END = "end"
PHASE_CANCELLED = "cancelled"
GESTURE_PHASES = (PHASE_BEGIN, PHASE_CHANGED, PHASE_END, PHASE_CANCELLED)

# Playhead modes
MODE_FOLLOWING = "following"
MODE_SCRUBBING = "scrubbing"
MODE_PINNED = "pinned"

# Session states
STATE_EMPTY = "empty"
STATE_LOADED = "loaded"
STATE_TRIMMING = "trimming"
STATE_EXPORTING = "exporting"


@dataclass
class TrimConfig:
    """Geometry and constraint settings for one trim control.

    Widths are in pixels; ``min_trim_seconds`` is converted to ticks at
    ``timescale`` when an asset is loaded.
    """
    handle_width: float = 20.0     # px, one cap on each side
    indicator_width: float = 3.0   # px
    min_trim_seconds: float = 1.0
    timescale: int = DEFAULT_TIMESCALE
    thumbnail_count: int = DEFAULT_THUMBNAIL_COUNT

    @property
    def min_trim_ticks(self) -> float:
        return self.min_trim_seconds * self.timescale

    def to_dict(self) -> dict:
        return {
            "handle_width": self.handle_width,
            "indicator_width": self.indicator_width,
            "min_trim_seconds": self.min_trim_seconds,
            "timescale": self.timescale,
            "thumbnail_count": self.thumbnail_count,
        }

    @staticmethod
    def from_dict(d: dict) -> "TrimConfig":
        """Build a config, ignoring unknown keys for forward compat."""
        known = {"handle_width", "indicator_width", "min_trim_seconds",
                 "timescale", "thumbnail_count"}
        filtered = {k: v for k, v in d.items() if k in known}
        cfg = TrimConfig(**filtered)
        if cfg.handle_width < 0 or cfg.indicator_width < 0:
            raise ValueError("Handle and indicator widths must be >= 0")
        if cfg.min_trim_seconds < 0:
            raise ValueError("Minimum trim duration must be >= 0")
        if cfg.timescale <= 0:
            raise ValueError(f"Invalid timescale: {cfg.timescale}")
        return cfg


DEFAULT_CONFIG = TrimConfig()


@dataclass(frozen=True)
class PlayerAction:
    """A side-effect request the host's player must execute."""
    kind: str                      # "seek" | "pause" | "play"
    time: Optional[float] = None   # ticks, only for "seek"

    @staticmethod
    def seek(time: float) -> "PlayerAction":
        return PlayerAction(kind="seek", time=time)

    @staticmethod
    def pause() -> "PlayerAction":
        return PlayerAction(kind="pause")

    @staticmethod
    def play() -> "PlayerAction":
        return PlayerAction(kind="play")

    def to_dict(self) -> dict:
        d: dict = {"kind": self.kind}
        if self.time is not None:
            d["time"] = self.time
        return d


@dataclass(frozen=True)
class VisualState:
    """Projection of the trim/playhead state for re-rendering.

    ``indicator_x_px`` is in track coordinates, i.e. it already includes
    the leading handle cap.
    """
    head_mask_width_px: float = 0.0
    tail_mask_width_px: float = 0.0
    indicator_x_px: float = 0.0
    highlighted: bool = False
    indicator_visible: bool = True

    def to_dict(self) -> dict:
        return {
            "headMaskWidthPx": self.head_mask_width_px,
            "tailMaskWidthPx": self.tail_mask_width_px,
            "indicatorXPx": self.indicator_x_px,
            "highlighted": self.highlighted,
            "indicatorVisible": self.indicator_visible,
        }


@dataclass(frozen=True)
class ExportRange:
    """Trim window to hand to the exporter.

    ``head_time`` is trimmed off the start and ``tail_trim_time`` off the
    end, so the surviving clip is ``[start_time, end_time]``.
    """
    head_time: float
    tail_trim_time: float
    total_duration: float
    timescale: int = DEFAULT_TIMESCALE

    @property
    def start_time(self) -> float:
        return self.head_time

    @property
    def end_time(self) -> float:
        return self.total_duration - self.tail_trim_time

    @property
    def duration(self) -> float:
        return max(0.0, self.end_time - self.start_time)

    @property
    def start_seconds(self) -> float:
        return self.start_time / self.timescale

    @property
    def end_seconds(self) -> float:
        return self.end_time / self.timescale

    def to_dict(self) -> dict:
        return {
            "headTime": self.head_time,
            "tailTrimTime": self.tail_trim_time,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "timescale": self.timescale,
        }
