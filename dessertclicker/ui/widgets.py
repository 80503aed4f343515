"""Dessert screen widgets: background, app bar, dessert button, level and sales cards."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QColor, QLinearGradient, QPainter, QPixmap
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from dessertclicker.ui.colors import LightColors, blend_hex

logger = logging.getLogger(__name__)

_ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets" / "desserts"


class BakeryBackground(QWidget):
    """Vertical gradient painted behind the dessert screen."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._palette = LightColors

    def set_palette(self, palette: type) -> None:
        self._palette = palette
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        gradient = QLinearGradient(0, 0, 0, self.height())
        gradient.setColorAt(0, QColor(self._palette.BACKGROUND_TOP))
        gradient.setColorAt(1, QColor(self._palette.BACKGROUND_BOTTOM))
        painter.fillRect(self.rect(), gradient)


class AppBar(QFrame):
    """Title row with the theme toggle and share buttons."""

    def __init__(
        self,
        title: str,
        *,
        share_label: str,
        toggle_label: str,
        on_share: Callable[[], None],
        on_toggle_theme: Callable[[], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("appBar")
        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 8, 16, 8)
        layout.setSpacing(8)

        self._title = QLabel(title)
        self._title.setObjectName("appBarTitle")
        layout.addWidget(self._title, 1)

        self._theme_button = QPushButton("🌙")
        self._theme_button.setObjectName("appBarButton")
        self._theme_button.setToolTip(toggle_label)
        self._theme_button.setCursor(Qt.PointingHandCursor)
        self._theme_button.clicked.connect(on_toggle_theme)
        layout.addWidget(self._theme_button, 0)

        self._share_button = QPushButton("⇪")
        self._share_button.setObjectName("appBarButton")
        self._share_button.setToolTip(share_label)
        self._share_button.setCursor(Qt.PointingHandCursor)
        self._share_button.clicked.connect(on_share)
        layout.addWidget(self._share_button, 0)

    def set_dark_mode(self, dark_mode: bool) -> None:
        # Show the theme the button switches to.
        self._theme_button.setText("☀" if dark_mode else "🌙")

    def apply_palette(self, palette: type) -> None:
        hover = blend_hex(palette.PRIMARY, palette.ON_PRIMARY, 0.15)
        self.setStyleSheet(
            f"""
            QFrame#appBar {{ background: {palette.PRIMARY}; }}
            QLabel#appBarTitle {{
                color: {palette.ON_PRIMARY};
                font-size: 20px;
                font-weight: 700;
            }}
            QPushButton#appBarButton {{
                background: transparent;
                color: {palette.ON_PRIMARY};
                border: none;
                border-radius: 18px;
                font-size: 20px;
                min-width: 36px;
                min-height: 36px;
            }}
            QPushButton#appBarButton:hover {{ background: {hover}; }}
            """
        )


class DessertButton(QLabel):
    """Clickable dessert picture that pulses briefly when pressed."""

    clicked = Signal()

    _BASE_SIZE = 200
    _PRESSED_SCALE = 1.2

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumSize(int(self._BASE_SIZE * self._PRESSED_SCALE), int(self._BASE_SIZE * self._PRESSED_SCALE))
        self._display_ref: str = ""
        self._glyph: str = ""
        self._pixmap: Optional[QPixmap] = None
        self._scale: float = 1.0

    def set_dessert(self, display_ref: str, glyph: str, name: str) -> None:
        if display_ref == self._display_ref:
            return
        self._display_ref = display_ref
        self._glyph = glyph
        self.setToolTip(name)
        image_path = _ASSETS_DIR / f"{display_ref}.png"
        if image_path.exists():
            self._pixmap = QPixmap(str(image_path))
        else:
            logger.warning("Dessert image not found: %s", image_path)
            self._pixmap = None
        self._render()

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self._scale = self._PRESSED_SCALE
            self._render()
            self.clicked.emit()
            QTimer.singleShot(200, self._release)
        super().mousePressEvent(event)

    def _release(self) -> None:
        self._scale = 1.0
        self._render()

    def _render(self) -> None:
        size = int(self._BASE_SIZE * self._scale)
        if self._pixmap is not None and not self._pixmap.isNull():
            self.setPixmap(
                self._pixmap.scaled(size, size, Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation)
            )
        else:
            self.setText(self._glyph)
            self.setStyleSheet(f"QLabel {{ font-size: {size // 2}px; background: transparent; }}")


class LevelProgressBar(QWidget):
    """Rounded gradient progress bar for the within-level fraction."""

    def __init__(self, parent: Optional[QWidget] = None, *, height: int = 8) -> None:
        super().__init__(parent)
        self._percent = 0
        self._track_color = LightColors.PROGRESS_TRACK
        self._color_start = LightColors.PRIMARY_LIGHT
        self._color_end = LightColors.PROGRESS_FILL
        self.setFixedHeight(height)
        self.setMinimumWidth(100)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)

    def set_percent(self, percent: int) -> None:
        self._percent = max(0, min(100, int(percent)))
        self.update()

    def set_colors(self, track_color: str, color_start: str, color_end: str) -> None:
        self._track_color = track_color
        self._color_start = color_start
        self._color_end = color_end
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setPen(Qt.NoPen)
        radius = min(8, self.height() // 2)

        painter.setBrush(QColor(self._track_color))
        painter.drawRoundedRect(0, 0, self.width(), self.height(), radius, radius)

        fill_width = int(self._percent / 100 * self.width())
        if fill_width > 0:
            gradient = QLinearGradient(0, 0, fill_width, 0)
            gradient.setColorAt(0, QColor(self._color_start))
            gradient.setColorAt(1, QColor(self._color_end))
            painter.setBrush(gradient)
            painter.drawRoundedRect(0, 0, fill_width, self.height(), radius, radius)


class LevelInfoCard(QFrame):
    """Level caption above the level progress bar."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("levelInfo")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)
        self._label = QLabel("")
        self._label.setObjectName("levelInfoLabel")
        layout.addWidget(self._label)
        self._bar = LevelProgressBar(self)
        layout.addWidget(self._bar)

    def set_level(self, text: str, percent: int) -> None:
        self._label.setText(text)
        self._bar.set_percent(percent)

    def apply_palette(self, palette: type) -> None:
        self._label.setStyleSheet(f"color: {palette.TEXT_PRIMARY}; font-size: 16px; font-weight: 600;")
        self._bar.set_colors(palette.PROGRESS_TRACK, palette.PRIMARY_LIGHT, palette.PROGRESS_FILL)


class TransactionInfoCard(QFrame):
    """Desserts sold and total revenue rows."""

    def __init__(self, sold_label: str, revenue_label: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("transactionInfo")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(6)
        self._sold_value = self._add_row(layout, sold_label)
        self._revenue_value = self._add_row(layout, revenue_label)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(16)
        shadow.setOffset(0, -2)
        shadow.setColor(QColor(0, 0, 0, 40))
        self.setGraphicsEffect(shadow)

    @staticmethod
    def _add_row(layout: QVBoxLayout, caption: str) -> QLabel:
        row = QHBoxLayout()
        caption_label = QLabel(caption)
        caption_label.setObjectName("transactionCaption")
        value_label = QLabel("")
        value_label.setObjectName("transactionValue")
        value_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        row.addWidget(caption_label)
        row.addStretch(1)
        row.addWidget(value_label)
        layout.addLayout(row)
        return value_label

    def set_totals(self, sold_text: str, revenue_text: str) -> None:
        self._sold_value.setText(sold_text)
        self._revenue_value.setText(revenue_text)

    def apply_palette(self, palette: type) -> None:
        self.setStyleSheet(
            f"""
            QFrame#transactionInfo {{ background: {palette.SECONDARY_CONTAINER}; }}
            QLabel#transactionCaption {{ color: {palette.TEXT_MUTED}; font-size: 15px; }}
            QLabel#transactionValue {{
                color: {palette.ON_SECONDARY_CONTAINER};
                font-size: 15px;
                font-weight: 700;
            }}
            """
        )
