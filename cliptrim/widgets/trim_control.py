"""Trim control — play button plus a custom-painted trim strip.

The widget is a thin host for :class:`TrimSession`: mouse gestures on the
head handle, tail handle and strip body become ``on_head_drag`` /
``on_tail_drag`` / ``on_scrub`` calls with gesture phases, and painting
is driven entirely by ``session.visual_state()``.  Player actions the
session emits are forwarded through :attr:`TrimControlWidget.actions_emitted`.
"""

import logging

from PySide6.QtCore import Qt, Signal, QRectF, QPointF
from PySide6.QtGui import QPainter, QColor, QPen, QBrush, QMouseEvent, QPainterPath
from PySide6.QtWidgets import QWidget, QHBoxLayout, QPushButton

from ..errors import TrimError
from ..models import PHASE_BEGIN, PHASE_CHANGED, PHASE_END, PHASE_CANCELLED
from ..trim_session import TrimSession

logger = logging.getLogger(__name__)


class _TrimStrip(QWidget):
    """Strip with head/tail masks, handle caps and the playhead indicator."""

    actions_emitted = Signal(list)  # List[PlayerAction]

    VERTICAL_MARGIN = 5  # px above/below the indicator

    def __init__(self, session: TrimSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._session = session
        self.setMinimumHeight(56)
        self.setMaximumHeight(56)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.ClickFocus)

        self._drag_mode: str = ""   # "head" | "tail" | "scrub"
        self._grab_dx: float = 0.0  # pointer offset from the handle edge at press

    # ── geometry ────────────────────────────────────────────────────

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        try:
            self._session.set_track_width(float(self.width()))
        except TrimError as exc:
            logger.warning("Strip too narrow to trim: %s", exc)
        super().resizeEvent(event)

    def _hit_test(self, x: float) -> str:
        vs = self._session.visual_state()
        hw = self._session.config.handle_width
        w = self.width()
        head_edge = vs.head_mask_width_px
        tail_edge = w - vs.tail_mask_width_px
        if head_edge <= x <= head_edge + hw:
            return "head"
        if tail_edge - hw <= x <= tail_edge:
            return "tail"
        if head_edge + hw < x < tail_edge - hw:
            return "scrub"
        return ""

    def _drag_px(self, x: float) -> float:
        if self._drag_mode == "head":
            return x - self._grab_dx
        if self._drag_mode == "tail":
            return (self.width() - x) - self._grab_dx
        return x - self._session.config.handle_width

    def _dispatch(self, phase: str, x: float) -> None:
        px = self._drag_px(x)
        if self._drag_mode == "head":
            actions = self._session.on_head_drag(px, phase)
        elif self._drag_mode == "tail":
            actions = self._session.on_tail_drag(px, phase)
        else:
            actions = self._session.on_scrub(px, phase)
        if actions:
            self.actions_emitted.emit(actions)
        self.update()

    # ── mouse ───────────────────────────────────────────────────────

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton or self._session.trim is None:
            return
        x = event.position().x()
        mode = self._hit_test(x)
        if not mode:
            return
        vs = self._session.visual_state()
        if mode == "head":
            self._grab_dx = x - vs.head_mask_width_px
        elif mode == "tail":
            self._grab_dx = (self.width() - x) - vs.tail_mask_width_px
        else:
            self._grab_dx = 0.0
        self._drag_mode = mode
        self._dispatch(PHASE_BEGIN, x)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        x = event.position().x()
        if self._drag_mode:
            self._dispatch(PHASE_CHANGED, x)
            return
        if self._session.trim is None:
            return
        hit = self._hit_test(x)
        if hit in ("head", "tail"):
            self.setCursor(Qt.CursorShape.SizeHorCursor)
        elif hit == "scrub":
            self.setCursor(Qt.CursorShape.PointingHandCursor)
        else:
            self.setCursor(Qt.CursorShape.ArrowCursor)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton and self._drag_mode:
            self._dispatch(PHASE_END, event.position().x())
            self._drag_mode = ""

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        # Escape abandons the drag in progress
        if event.key() == Qt.Key.Key_Escape and self._drag_mode:
            self._dispatch(PHASE_CANCELLED, 0.0)
            self._drag_mode = ""
            return
        super().keyPressEvent(event)

    # ── painting ────────────────────────────────────────────────────

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        w = self.width()
        h = self.height()
        hw = self._session.config.handle_width
        vs = self._session.visual_state()

        painter.fillRect(QRectF(0, 0, w, h), QColor("#201f34"))

        # Trimmed-out regions
        dim = QColor(0, 0, 0, 110)
        if vs.head_mask_width_px > 0:
            painter.fillRect(QRectF(0, 0, vs.head_mask_width_px, h), dim)
        if vs.tail_mask_width_px > 0:
            painter.fillRect(QRectF(w - vs.tail_mask_width_px, 0, vs.tail_mask_width_px, h), dim)

        # Selection frame: outer rect minus the inner preview window
        left = vs.head_mask_width_px
        right = w - vs.tail_mask_width_px
        outer = QPainterPath()
        outer.addRoundedRect(QRectF(left, 0, right - left, h), 10, 10)
        inner = QPainterPath()
        inner.addRect(QRectF(left + hw, self.VERTICAL_MARGIN,
                             max(0.0, right - left - 2 * hw), h - 2 * self.VERTICAL_MARGIN))
        frame_color = QColor("#facc15") if vs.highlighted else QColor("#28263e")
        painter.fillPath(outer.subtracted(inner), QBrush(frame_color))

        # Chevrons on the handle caps
        chevron = QColor("#000000") if vs.highlighted else QColor("#e4e4ed")
        painter.setPen(QPen(chevron, 2))
        mid = h / 2.0
        lx = left + hw / 2.0
        rx = right - hw / 2.0
        painter.drawLine(QPointF(lx + 3, mid - 8), QPointF(lx - 3, mid))
        painter.drawLine(QPointF(lx - 3, mid), QPointF(lx + 3, mid + 8))
        painter.drawLine(QPointF(rx - 3, mid - 8), QPointF(rx + 3, mid))
        painter.drawLine(QPointF(rx + 3, mid), QPointF(rx - 3, mid + 8))

        # Playhead indicator (hidden while a handle is dragged)
        if vs.indicator_visible and self._session.trim is not None:
            iw = self._session.config.indicator_width
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QColor("#ffffff"))
            painter.drawRoundedRect(
                QRectF(vs.indicator_x_px, self.VERTICAL_MARGIN, iw, h - 2 * self.VERTICAL_MARGIN),
                iw / 2.0, iw / 2.0,
            )
        painter.end()


class TrimControlWidget(QWidget):
    """Play/pause button next to the trim strip."""

    actions_emitted = Signal(list)  # List[PlayerAction]

    def __init__(self, session: TrimSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("TrimControl")
        self._session = session

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self._play_btn = QPushButton("▶")
        self._play_btn.setObjectName("PlayBtn")
        self._play_btn.setToolTip("Play / Pause")
        self._play_btn.clicked.connect(self._on_play_pause)
        layout.addWidget(self._play_btn)

        self._strip = _TrimStrip(session)
        self._strip.actions_emitted.connect(self.actions_emitted)
        layout.addWidget(self._strip, 1)

    def set_playing(self, playing: bool) -> None:
        self._play_btn.setText("⏸" if playing else "▶")
        self._play_btn.setToolTip("Pause" if playing else "Play")

    def refresh(self) -> None:
        self._strip.update()

    def _on_play_pause(self) -> None:
        if self._session.trim is None:
            return
        self.actions_emitted.emit(self._session.toggle_play_pause())
