from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtGui import QResizeEvent
from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from dessertclicker.core.progression import ProgressionState
from dessertclicker.core.session import ClickerSession
from dessertclicker.core.share import ShareService, ShareUnavailableError
from dessertclicker.core.strings import StringRepository
from dessertclicker.ui.colors import palette_for
from dessertclicker.ui.models import ScreenState
from dessertclicker.ui.overlay import ToastOverlay
from dessertclicker.ui.widgets import (
    AppBar,
    BakeryBackground,
    DessertButton,
    LevelInfoCard,
    TransactionInfoCard,
)

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single dessert screen.

    The window never changes counters itself: clicks go to the
    :class:`ClickerSession`, and the window re-renders from the state the
    session hands to its observers.
    """

    def __init__(
        self,
        session: ClickerSession,
        strings: StringRepository,
        share_service: ShareService,
        *,
        dark_mode: bool = False,
    ) -> None:
        super().__init__()
        self._session = session
        self._strings = strings
        self._share_service = share_service
        self._dark_mode = dark_mode

        self._background: Optional[BakeryBackground] = None
        self._app_bar: Optional[AppBar] = None
        self._dessert_button: Optional[DessertButton] = None
        self._level_info: Optional[LevelInfoCard] = None
        self._transaction_info: Optional[TransactionInfoCard] = None
        self._toast: Optional[ToastOverlay] = None

        self.setWindowTitle(strings.get("app_name"))
        self._build_ui()
        self._apply_theme()
        self._session.subscribe(self._render)
        self._render(self._session.state)

    def _build_ui(self) -> None:
        self._background = BakeryBackground()
        root = QVBoxLayout(self._background)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self._app_bar = AppBar(
            self._strings.get("app_name"),
            share_label=self._strings.get("share"),
            toggle_label=self._strings.get("toggle_theme"),
            on_share=self._on_share_clicked,
            on_toggle_theme=self._on_toggle_theme,
        )
        root.addWidget(self._app_bar)

        dessert_area = QWidget()
        dessert_layout = QVBoxLayout(dessert_area)
        dessert_layout.setContentsMargins(16, 16, 16, 16)
        self._dessert_button = DessertButton()
        self._dessert_button.clicked.connect(self._on_dessert_clicked)
        dessert_layout.addStretch(1)
        dessert_layout.addWidget(self._dessert_button)
        dessert_layout.addStretch(1)
        root.addWidget(dessert_area, 1)

        self._level_info = LevelInfoCard()
        root.addWidget(self._level_info)

        self._transaction_info = TransactionInfoCard(
            self._strings.get("dessert_sold"),
            self._strings.get("total_revenue"),
        )
        root.addWidget(self._transaction_info)

        self.setCentralWidget(self._background)
        self._toast = ToastOverlay(self._background)
        self.resize(420, 760)

    def _render(self, state: ProgressionState) -> None:
        screen = ScreenState.from_progression(state, self._session.catalog, self._strings)
        self._dessert_button.set_dessert(screen.display_ref, screen.glyph, screen.dessert_name)
        self._level_info.set_level(screen.level_text, screen.progress_percent)
        self._transaction_info.set_totals(screen.desserts_sold_text, screen.revenue_text)

    def _apply_theme(self) -> None:
        palette = palette_for(self._dark_mode)
        self._background.set_palette(palette)
        self._app_bar.apply_palette(palette)
        self._app_bar.set_dark_mode(self._dark_mode)
        self._level_info.apply_palette(palette)
        self._transaction_info.apply_palette(palette)
        self._toast.apply_palette(palette)

    def _on_dessert_clicked(self) -> None:
        self._session.click()

    def _on_toggle_theme(self) -> None:
        self._dark_mode = not self._dark_mode
        logger.info("Switched to %s theme", "dark" if self._dark_mode else "light")
        self._apply_theme()

    def _on_share_clicked(self) -> None:
        try:
            self._share_service.share(self._session.state)
        except ShareUnavailableError as e:
            self._toast.show_message(str(e))

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        if self._toast is not None and self._toast.isVisible():
            self._toast.reposition()

    def closeEvent(self, event) -> None:
        self._session.unsubscribe(self._render)
        super().closeEvent(event)
