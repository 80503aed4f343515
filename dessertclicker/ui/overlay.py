"""Custom in-window overlays (toast notice)."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QGraphicsDropShadowEffect, QLabel, QWidget

from dessertclicker.ui.colors import LightColors


class ToastOverlay(QLabel):
    """Short message pinned to the bottom of the parent, hidden after a timeout."""

    LONG_MS = 3500

    def __init__(self, parent: QWidget) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.hide)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(20)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(0, 0, 0, 60))
        self.setGraphicsEffect(shadow)

        self.apply_palette(LightColors)
        self.hide()

    def apply_palette(self, palette: type) -> None:
        self.setStyleSheet(
            f"""
            QLabel {{
                background: {palette.TOAST_BG};
                color: {palette.TOAST_TEXT};
                padding: 12px 20px;
                border-radius: 18px;
                font-size: 14px;
                font-weight: 600;
            }}
            """
        )

    def show_message(self, text: str, duration_ms: Optional[int] = None) -> None:
        self.setText(text)
        self.reposition()
        self.raise_()
        self.show()
        self._timer.start(duration_ms or self.LONG_MS)

    def reposition(self) -> None:
        """Keep the toast centred above the bottom edge of the parent."""
        parent = self.parentWidget()
        if parent is None:
            return
        width = min(420, max(200, parent.width() - 48))
        self.setFixedWidth(width)
        self.adjustSize()
        x = (parent.width() - self.width()) // 2
        y = parent.height() - self.height() - 32
        self.move(max(0, x), max(0, y))
