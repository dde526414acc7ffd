"""Frameless always-on-top overlay window implementing OverlayView."""

from __future__ import annotations

from PySide6.QtCore import QRectF, Qt, Signal
from PySide6.QtGui import QColor, QFont, QPainter
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from poker_overlay.config import WindowConfig
from poker_overlay.core.game_state import OverlayGameState
from poker_overlay.hints.data_structures import Recommendation
from poker_overlay.utils.card import format_card_input
from poker_overlay.utils.constants import Position

_BAR_COLORS = {
    "raise": "#22c55e",
    "bet": "#22c55e",
    "call": "#3b82f6",
    "check": "#6b7280",
    "fold": "#ef4444",
}


class FrequencyBars(QWidget):
    """Custom-painted horizontal bars for the frequency breakdown."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._rows: list[tuple[str, int]] = []
        self.setMinimumHeight(40)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)

    def set_rows(self, rows: list[tuple[str, int]]) -> None:
        self._rows = rows
        self.update()

    def paintEvent(self, event) -> None:
        if not self._rows:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        row_h = 22
        margin_left = 60
        bar_max_w = self.width() - margin_left - 50
        y = 2
        font = QFont("Segoe UI", 10, QFont.Bold)
        painter.setFont(font)

        for label, pct in self._rows:
            painter.setPen(QColor("#e5e7eb"))
            painter.drawText(
                QRectF(0, y, margin_left - 6, row_h),
                Qt.AlignVCenter | Qt.AlignRight,
                f"{label}:",
            )
            bar_w = max(4, int(bar_max_w * pct / 100))
            painter.setBrush(QColor(_BAR_COLORS.get(label.lower(), "#9ca3af")))
            painter.setPen(Qt.NoPen)
            painter.drawRoundedRect(QRectF(margin_left, y + 3, bar_w, row_h - 6), 3, 3)
            painter.setPen(QColor("#d1d5db"))
            painter.drawText(
                QRectF(margin_left + bar_w + 6, y, 44, row_h),
                Qt.AlignVCenter | Qt.AlignLeft,
                f"{pct}%",
            )
            y += row_h

        painter.end()
        self.setMinimumHeight(y + 2)


class OverlayWindow(QWidget):
    """Transparent hint overlay docked to the right screen edge.

    Emits signals for user input; the presenter is wired to them in
    main(). Lock toggles click-through so clicks reach the poker client.
    """

    minimize_requested = Signal()
    close_requested = Signal()
    lock_toggled = Signal()
    manual_input_submitted = Signal(str, str, str)  # cards, position, stack
    board_submitted = Signal(str)

    def __init__(self, geometry: WindowConfig | None = None) -> None:
        super().__init__()
        geometry = geometry or WindowConfig()
        self.setWindowFlags(
            Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint | Qt.Tool
        )
        self.setAttribute(Qt.WA_TranslucentBackground)
        self.resize(geometry.width, geometry.height)
        self._margin = geometry.margin
        self._build_ui()

    def dock_right(self) -> None:
        screen = self.screen().availableGeometry()
        self.move(screen.right() - self.width() - self._margin, self._margin)

    def _build_ui(self) -> None:
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        root = QWidget()
        root.setObjectName("overlayRoot")
        outer.addWidget(root)

        layout = QVBoxLayout(root)
        layout.setContentsMargins(12, 8, 12, 10)
        layout.setSpacing(6)

        # Title bar
        title = QHBoxLayout()
        title.addWidget(QLabel("GTO Hints"))
        title.addStretch(1)
        self._lock_btn = self._title_button("🔓", self.lock_toggled)
        title.addWidget(self._lock_btn)
        title.addWidget(self._title_button("–", self.minimize_requested))
        title.addWidget(self._title_button("✕", self.close_requested))
        layout.addLayout(title)

        # Game state
        state_row = QHBoxLayout()
        self._position_label = QLabel()
        self._stack_label = QLabel()
        self._street_label = QLabel()
        for w in (self._position_label, self._stack_label, self._street_label):
            state_row.addWidget(w)
        layout.addLayout(state_row)

        cards_row = QHBoxLayout()
        self._card_labels = [self._card_label(), self._card_label()]
        for lbl in self._card_labels:
            cards_row.addWidget(lbl)
        cards_row.addSpacing(12)
        self._board_row = QHBoxLayout()
        cards_row.addLayout(self._board_row)
        cards_row.addStretch(1)
        layout.addLayout(cards_row)

        # Recommendation
        self._action_label = QLabel()
        self._action_label.setObjectName("primaryAction")
        layout.addWidget(self._action_label)
        self._bars = FrequencyBars()
        layout.addWidget(self._bars)
        self._reasoning_label = QLabel()
        self._reasoning_label.setObjectName("reasoning")
        self._reasoning_label.setWordWrap(True)
        layout.addWidget(self._reasoning_label)

        # Manual input
        form = QHBoxLayout()
        self._cards_edit = QLineEdit()
        self._cards_edit.setPlaceholderText("AsKh")
        self._cards_edit.textEdited.connect(self._on_cards_edited)
        self._position_combo = QComboBox()
        self._position_combo.addItems([p.value for p in Position])
        self._stack_edit = QLineEdit("100")
        self._stack_edit.setMaximumWidth(50)
        update_btn = QPushButton("Update")
        update_btn.clicked.connect(self._submit_manual)
        self._position_combo.currentTextChanged.connect(self._submit_manual)
        self._stack_edit.editingFinished.connect(self._submit_manual)
        for w in (self._cards_edit, self._position_combo, self._stack_edit, update_btn):
            form.addWidget(w)
        layout.addLayout(form)

        self._board_edit = QLineEdit()
        self._board_edit.setPlaceholderText("Board: Ah Kd 2c")
        self._board_edit.returnPressed.connect(
            lambda: self.board_submitted.emit(self._board_edit.text())
        )
        layout.addWidget(self._board_edit)

        self._status_label = QLabel()
        self._status_label.setObjectName("statusLine")
        layout.addWidget(self._status_label)
        layout.addStretch(1)

    def _title_button(self, text: str, signal) -> QPushButton:
        btn = QPushButton(text)
        btn.setObjectName("titleButton")
        btn.clicked.connect(lambda checked=False: signal.emit())
        return btn

    @staticmethod
    def _card_label() -> QLabel:
        lbl = QLabel("?")
        lbl.setProperty("class", "card")
        return lbl

    def _on_cards_edited(self, text: str) -> None:
        self._cards_edit.setText(format_card_input(text))

    def _submit_manual(self, *_args) -> None:
        self.manual_input_submitted.emit(
            self._cards_edit.text(),
            self._position_combo.currentText(),
            self._stack_edit.text(),
        )

    # --- OverlayView protocol implementation ---

    def show_game_state(self, state: OverlayGameState) -> None:
        self._position_label.setText(str(state.position))
        self._stack_label.setText(f"{state.stack_bb}BB")
        self._street_label.setText(str(state.street))
        for lbl, card in zip(self._card_labels, [*state.hole_cards, None, None]):
            lbl.setText(card.symbol if card is not None else "?")

        while self._board_row.count():
            item = self._board_row.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        for card in state.board:
            lbl = self._card_label()
            lbl.setText(card.symbol)
            self._board_row.addWidget(lbl)

    def show_recommendation(
        self,
        recommendation: Recommendation,
        rows: list[tuple[str, int]],
    ) -> None:
        self._action_label.setText(recommendation.action)
        color = _BAR_COLORS.get(recommendation.primary_kind or "", "#f9fafb")
        self._action_label.setStyleSheet(f"color: {color};")
        self._bars.set_rows(rows)
        self._reasoning_label.setText(recommendation.reasoning or "")

    def show_status(self, status: dict[str, object]) -> None:
        path = status.get("path") or "not found"
        self._status_label.setText(f"Source: {status['type']}  ·  Tool: {path}")

    def show_error(self, message: str) -> None:
        self._reasoning_label.setText(f"⚠ {message}")

    def set_click_through(self, enabled: bool) -> None:
        self.setAttribute(Qt.WA_TransparentForMouseEvents, enabled)
        self._lock_btn.setText("🔒" if enabled else "🔓")
        self._lock_btn.setToolTip(
            "Unlock (Enable Interaction)" if enabled else "Lock (Click Through)"
        )
