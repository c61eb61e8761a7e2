"""Trim session — the coordinator the host UI and player talk to.

One session owns one :class:`TrimState` and one
:class:`PlayheadController` for the loaded asset.  Every inbound event
(handle drags, scrubs, playback ticks, play/pause, reset, export) is a
method call; each returns the list of :class:`PlayerAction` requests the
host must execute, in order.  The session never schedules anything on
its own.

State machine::

    empty ──load_asset──▶ loaded ──drag──▶ trimming
                            ▲                 │
                            └────reset────────┘
    loaded/trimming ──request_export──▶ exporting ──finish_export──▶ loaded
"""

import logging
from typing import List, Optional

from .errors import DegenerateRange, InvalidMinDuration, NoAssetLoaded
from .models import (
    DEFAULT_CONFIG,
    GESTURE_PHASES,
    PHASE_BEGIN,
    PHASE_CANCELLED,
    PHASE_CHANGED,
    PHASE_END,
    STATE_EMPTY,
    STATE_EXPORTING,
    STATE_LOADED,
    STATE_TRIMMING,
    ExportRange,
    PlayerAction,
    TrimConfig,
    VisualState,
)
from .playhead import PlayheadController
from .time_space import thumbnail_times, usable_width
from .trim_state import TrimState

logger = logging.getLogger(__name__)


class TrimSession:
    """Trim/playhead state machine for a single asset at a time."""

    def __init__(self, config: Optional[TrimConfig] = None, track_width: float = 0.0) -> None:
        self.config: TrimConfig = config or DEFAULT_CONFIG
        self.track_width: float = track_width
        self.state: str = STATE_EMPTY
        self.total_duration: float = 0.0
        self.trim: Optional[TrimState] = None
        self.playhead: Optional[PlayheadController] = None
        self.is_playing: bool = False
        self._active_handle: str = ""  # "" | "head" | "tail"
        self._handle_origin: Optional[float] = None

    # ── geometry ────────────────────────────────────────────────────

    @property
    def usable_width(self) -> float:
        return usable_width(self.track_width, self.config.handle_width, self.config.indicator_width)

    def set_track_width(self, track_width: float) -> None:
        """Apply a new strip width, keeping trimmed times and playhead time."""
        if self.trim is None or self.playhead is None:
            self.track_width = track_width
            return
        usable = usable_width(track_width, self.config.handle_width, self.config.indicator_width)
        if usable <= 0:
            raise DegenerateRange(f"Track width {track_width}px leaves no usable width")
        self.track_width = track_width
        self.trim.resize(usable)
        self.playhead.resize(usable)

    # ── lifecycle ───────────────────────────────────────────────────

    def load_asset(self, total_duration: float) -> None:
        """Start trimming a new asset of *total_duration* ticks."""
        if total_duration <= 0:
            raise DegenerateRange(f"Asset duration must be > 0 (got {total_duration})")
        min_ticks = self.config.min_trim_ticks
        if min_ticks >= total_duration:
            raise InvalidMinDuration(
                f"Minimum trim duration {min_ticks} ticks is not shorter than "
                f"the asset ({total_duration} ticks)"
            )
        usable = self.usable_width
        if usable <= 0:
            raise DegenerateRange(f"Track width {self.track_width}px leaves no usable width")

        self.total_duration = total_duration
        self.trim = TrimState(usable, total_duration, min_ticks)
        self.playhead = PlayheadController(usable, total_duration)
        self.state = STATE_LOADED
        self.is_playing = False
        self._active_handle = ""
        self._handle_origin = None
        logger.info(
            "Asset loaded | duration=%.0f ticks (%.2fs) | usable=%.1fpx | min_selection=%.1fpx",
            total_duration, total_duration / self.config.timescale,
            usable, self.trim.min_selection_px,
        )

    def reset(self) -> List[PlayerAction]:
        """Clear both trims and the playhead; the player goes back to 0."""
        trim, playhead = self._require_asset()
        trim.reset()
        playhead.reset()
        self.state = STATE_LOADED
        self._active_handle = ""
        self._handle_origin = None
        logger.info("Trim reset")
        return [PlayerAction.seek(0.0)]

    def _require_asset(self):
        if self.state == STATE_EMPTY or self.trim is None or self.playhead is None:
            raise NoAssetLoaded("No asset loaded")
        return self.trim, self.playhead

    @staticmethod
    def _check_phase(phase: str) -> None:
        if phase not in GESTURE_PHASES:
            raise ValueError(f"Unknown gesture phase: {phase!r}")

    def _pause(self) -> PlayerAction:
        self.is_playing = False
        return PlayerAction.pause()

    # ── handle drags ────────────────────────────────────────────────

    def on_head_drag(self, px: float, phase: str) -> List[PlayerAction]:
        """Head handle moved to offset *px* from the strip's left edge."""
        return self._on_handle_drag("head", px, phase)

    def on_tail_drag(self, px: float, phase: str) -> List[PlayerAction]:
        """Tail handle moved to offset *px* from the strip's right edge."""
        return self._on_handle_drag("tail", px, phase)

    def _on_handle_drag(self, which: str, px: float, phase: str) -> List[PlayerAction]:
        trim, playhead = self._require_asset()
        self._check_phase(phase)
        setter = trim.set_head if which == "head" else trim.set_tail

        if phase == PHASE_CANCELLED:
            if self._active_handle == which and self._handle_origin is not None:
                setter(self._handle_origin)
            self._active_handle = ""
            self._handle_origin = None
            return []

        if phase == PHASE_BEGIN or self._active_handle != which:
            self._handle_origin = (
                trim.head_offset_px if which == "head" else trim.tail_offset_px
            )
        self.state = STATE_TRIMMING

        if phase in (PHASE_BEGIN, PHASE_CHANGED):
            self._active_handle = which
            setter(px)
            return [self._pause()]

        # end: commit and bring the playhead to the new boundary
        setter(px)
        self._active_handle = ""
        self._handle_origin = None
        if which == "head":
            seek_time = playhead.snap_to_head(trim.head_offset_px)
        else:
            seek_time = playhead.snap_to_tail(trim.tail_offset_px)
        logger.debug("%s trim committed | head=%.1f tail=%.1f ticks",
                     which, trim.head_time, trim.tail_time)
        return [PlayerAction.seek(seek_time)]

    # ── scrubbing ───────────────────────────────────────────────────

    def on_scrub(self, px: float, phase: str) -> List[PlayerAction]:
        """Indicator dragged to offset *px* on the usable axis."""
        trim, playhead = self._require_asset()
        self._check_phase(phase)
        head_px, tail_px = trim.head_offset_px, trim.tail_offset_px

        if phase == PHASE_BEGIN:
            playhead.on_scrub_start()
            playhead.on_scrub_drag(px, head_px, tail_px)
        elif phase == PHASE_CHANGED:
            playhead.on_scrub_drag(px, head_px, tail_px)
        elif phase == PHASE_END:
            return [PlayerAction.seek(playhead.on_scrub_end(px, head_px, tail_px))]
        else:
            playhead.on_scrub_cancel()
        return []

    # ── playback ────────────────────────────────────────────────────

    def on_playback_tick(self, time: float) -> List[PlayerAction]:
        """Player clock reported *time* ticks."""
        trim, playhead = self._require_asset()
        if playhead.on_playback_tick(time, trim.head_time, trim.tail_time, self.total_duration):
            logger.debug("Reached trimmed tail at %.1f ticks", time)
            return [self._pause()]
        return []

    def on_playback_stopped(self) -> None:
        """The player stopped by itself (end of media, error, ...)."""
        self.is_playing = False

    def toggle_play_pause(self, currently_at_tail_boundary: Optional[bool] = None) -> List[PlayerAction]:
        """Play/pause button.

        Resuming at the tail boundary restarts the clip from the head
        instead of playing into the trimmed-off tail.  When the host does
        not say whether it is at the boundary, the playhead's own time is
        used.
        """
        trim, playhead = self._require_asset()
        if self.is_playing:
            return [self._pause()]
        at_tail = currently_at_tail_boundary
        if at_tail is None:
            at_tail = playhead.at_tail_boundary(trim.tail_time)
        self.is_playing = True
        if at_tail:
            return [PlayerAction.seek(playhead.snap_to_head(trim.head_offset_px)),
                    PlayerAction.play()]
        return [PlayerAction.play()]

    # ── export ──────────────────────────────────────────────────────

    def request_export(self) -> ExportRange:
        """Snapshot the trim window for the exporter."""
        trim, _ = self._require_asset()
        head_time, tail_time = trim.export_range()
        self.state = STATE_EXPORTING
        export = ExportRange(
            head_time=head_time,
            tail_trim_time=tail_time,
            total_duration=self.total_duration,
            timescale=self.config.timescale,
        )
        logger.info("Export requested | %.3fs → %.3fs",
                    export.start_seconds, export.end_seconds)
        return export

    def finish_export(self) -> None:
        if self.state == STATE_EXPORTING:
            self.state = STATE_LOADED

    # ── rendering ───────────────────────────────────────────────────

    def visual_state(self) -> VisualState:
        """Project the current state into strip geometry for painting."""
        if self.trim is None or self.playhead is None:
            return VisualState(indicator_x_px=self.config.handle_width)
        return VisualState(
            head_mask_width_px=self.trim.head_offset_px,
            tail_mask_width_px=self.trim.tail_offset_px,
            indicator_x_px=self.config.handle_width + self.playhead.indicator_px,
            highlighted=self.trim.is_trimmed,
            indicator_visible=self._active_handle == "",
        )

    def thumbnail_times(self) -> List[float]:
        self._require_asset()
        return thumbnail_times(self.total_duration, self.config.thumbnail_count)

    @property
    def head_time(self) -> float:
        trim, _ = self._require_asset()
        return trim.head_time

    @property
    def tail_time(self) -> float:
        trim, _ = self._require_asset()
        return trim.tail_time
