"""Playback clock — stands in for the media player's time base.

Executes the seek / pause / play requests a :class:`TrimSession` emits
and reports the playback position back as periodic ticks.  Position is
derived from wall-clock time since the last play/seek so QTimer jitter
never accumulates into drift.
"""

import logging
import time as _time
from typing import Iterable

from PySide6.QtCore import QObject, QTimer, Signal

from .models import DEFAULT_TIMESCALE, PlayerAction

logger = logging.getLogger(__name__)


class PlaybackClock(QObject):
    """Wall-clock anchored playback position, in ticks."""

    position_changed = Signal(float)  # ticks
    playing_changed = Signal(bool)

    TICK_INTERVAL_MS = 16

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._timer = QTimer(self)
        self._timer.timeout.connect(self._advance)
        self._timescale: int = DEFAULT_TIMESCALE
        self._duration: float = 0.0
        self._position: float = 0.0
        self._playing: bool = False
        self._anchor_wall: float = 0.0
        self._anchor_pos: float = 0.0

    # ── public API ──────────────────────────────────────────────────

    def load(self, duration_ticks: float, timescale: int = DEFAULT_TIMESCALE) -> None:
        self.pause()
        self._duration = duration_ticks
        self._timescale = timescale
        self._position = 0.0
        self.position_changed.emit(0.0)

    def seek(self, ticks: float) -> None:
        self._position = max(0.0, min(ticks, self._duration))
        self._anchor_wall = _time.perf_counter()
        self._anchor_pos = self._position
        self.position_changed.emit(self._position)

    def play(self) -> None:
        if self._playing or self._duration <= 0:
            return
        self._anchor_wall = _time.perf_counter()
        self._anchor_pos = self._position
        self._playing = True
        self._timer.start(self.TICK_INTERVAL_MS)
        self.playing_changed.emit(True)

    def pause(self) -> None:
        if not self._playing:
            return
        self._playing = False
        self._timer.stop()
        self.playing_changed.emit(False)

    def execute(self, actions: Iterable[PlayerAction]) -> None:
        """Run session-emitted actions in order."""
        for action in actions:
            if action.kind == "seek" and action.time is not None:
                self.seek(action.time)
            elif action.kind == "pause":
                self.pause()
            elif action.kind == "play":
                self.play()
            else:
                logger.warning("Ignoring unknown player action: %s", action)

    @property
    def position(self) -> float:
        return self._position

    @property
    def is_playing(self) -> bool:
        return self._playing

    # ── internal ────────────────────────────────────────────────────

    def _advance(self) -> None:
        elapsed_s = _time.perf_counter() - self._anchor_wall
        target = self._anchor_pos + elapsed_s * self._timescale
        if target >= self._duration:
            self._position = self._duration
            self.position_changed.emit(self._position)
            self.pause()
            return
        self._position = target
        self.position_changed.emit(self._position)
