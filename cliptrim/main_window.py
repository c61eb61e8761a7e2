"""Main window — open a video, trim it, and hand the range to export."""

import logging
import os

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .errors import TrimError
from .models import TrimConfig
from .playback_clock import PlaybackClock
from .theme import DARK_THEME
from .trim_session import TrimSession
from .utils import fmt_precise, probe_duration_ticks
from .widgets.trim_control import TrimControlWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Hosts one :class:`TrimSession`, its trim strip and a playback clock.

    The clock plays the part of the media player: session actions are
    executed on it and its position ticks are fed back into the session.
    """

    def __init__(self, config: TrimConfig | None = None) -> None:
        super().__init__()
        self.setWindowTitle("ClipTrim")
        self.setMinimumSize(640, 220)
        self.resize(900, 260)
        self.setStyleSheet(DARK_THEME)

        self._session = TrimSession(config)
        self._clock = PlaybackClock(self)
        self._last_dir: str = ""

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 12, 16, 8)
        layout.setSpacing(8)

        # ── top row: file + actions ─────────────────────────────
        top_row = QHBoxLayout()
        self._open_btn = QPushButton("Open video…")
        self._open_btn.setObjectName("CtrlBtn")
        self._open_btn.clicked.connect(self._open_dialog)
        top_row.addWidget(self._open_btn)

        self._reset_btn = QPushButton("Reset")
        self._reset_btn.setObjectName("CtrlBtn")
        self._reset_btn.clicked.connect(self._on_reset)
        top_row.addWidget(self._reset_btn)

        top_row.addStretch()

        self._time_current = QLabel("0:00.00")
        self._time_current.setObjectName("TimeDisplay")
        top_row.addWidget(self._time_current)
        sep = QLabel(" / ")
        sep.setObjectName("TimeDisplayDim")
        top_row.addWidget(sep)
        self._time_total = QLabel("0:00.00")
        self._time_total.setObjectName("TimeDisplayDim")
        top_row.addWidget(self._time_total)

        top_row.addStretch()

        self._export_btn = QPushButton("⬆  Export")
        self._export_btn.setObjectName("ExportBtn")
        self._export_btn.clicked.connect(self._on_export)
        top_row.addWidget(self._export_btn)
        layout.addLayout(top_row)

        # ── trim strip ──────────────────────────────────────────
        trim_area = QWidget()
        trim_area.setObjectName("TrimArea")
        trim_layout = QVBoxLayout(trim_area)
        trim_layout.setContentsMargins(0, 8, 0, 8)
        self._control = TrimControlWidget(self._session)
        self._control.actions_emitted.connect(self._clock.execute)
        trim_layout.addWidget(self._control)
        layout.addWidget(trim_area)

        hint = QLabel("Drag the handles to trim · Drag inside to scrub · Esc cancels a drag")
        hint.setObjectName("Muted")
        layout.addWidget(hint)

        self._status_text = QLabel("Open a video to start trimming")
        self._status_text.setObjectName("StatusLabel")
        self._status_text.setAlignment(Qt.AlignmentFlag.AlignLeft)
        layout.addWidget(self._status_text)

        self._clock.position_changed.connect(self._on_position)
        self._clock.playing_changed.connect(self._on_playing_changed)
        self._update_enabled()

    # ── asset loading ───────────────────────────────────────────────

    def _open_dialog(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self, "Open Video", self._last_dir,
            "Videos (*.mp4 *.mov *.m4v *.avi *.mkv);;All files (*)",
        )
        if path:
            self._last_dir = os.path.dirname(path)
            self.open_video(path)

    def open_video(self, path: str) -> bool:
        """Probe *path* and start a new trim session on it."""
        timescale = self._session.config.timescale
        try:
            duration = probe_duration_ticks(path, timescale)
            self._session.load_asset(duration)
        except ValueError as exc:
            logger.warning("Cannot trim %s: %s", path, exc)
            self._status_text.setText(f"Cannot open {os.path.basename(path)}: {exc}")
            self._update_enabled()
            return False

        self._clock.load(duration, timescale)
        self._time_total.setText(fmt_precise(duration, timescale))
        self._status_text.setText(os.path.basename(path))
        self.setWindowTitle(f"ClipTrim — {os.path.basename(path)}")
        self._update_enabled()
        self._control.refresh()
        return True

    def _update_enabled(self) -> None:
        loaded = self._session.trim is not None
        self._reset_btn.setEnabled(loaded)
        self._export_btn.setEnabled(loaded)

    # ── player plumbing ─────────────────────────────────────────────

    def _on_position(self, ticks: float) -> None:
        if self._session.trim is None:
            return
        self._clock.execute(self._session.on_playback_tick(ticks))
        self._time_current.setText(fmt_precise(ticks, self._session.config.timescale))
        self._control.refresh()

    def _on_playing_changed(self, playing: bool) -> None:
        if not playing:
            self._session.on_playback_stopped()
        self._control.set_playing(playing)

    # ── actions ─────────────────────────────────────────────────────

    def _on_reset(self) -> None:
        if self._session.trim is None:
            return
        self._clock.execute(self._session.reset())
        self._control.refresh()

    def _on_export(self) -> None:
        """Compute the trim window; muxing is left to an external exporter."""
        try:
            export = self._session.request_export()
        except TrimError:
            logger.exception("Failed to compute export range")
            self._status_text.setText("Export failed")
            return
        timescale = export.timescale
        self._status_text.setText(
            f"Export range {fmt_precise(export.start_time, timescale)} → "
            f"{fmt_precise(export.end_time, timescale)} "
            f"({export.duration / timescale:.2f}s)"
        )
        logger.info("Export range: %s", export.to_dict())
        self._session.finish_export()
