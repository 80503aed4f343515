"""Application entry point and setup for Dessert Clicker."""

import logging
import sys
from pathlib import Path

from PySide6.QtGui import QFont, QGuiApplication, QIcon
from PySide6.QtWidgets import QApplication

from dessertclicker.core.catalog import default_catalog
from dessertclicker.core.session import ClickerSession
from dessertclicker.core.settings import Settings
from dessertclicker.core.share import ShareService
from dessertclicker.core.strings import StringRepository
from dessertclicker.ui.main_window import MainWindow
from dessertclicker.ui.share import desktop_share_opener


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def load_application_font(app: QApplication) -> None:
    """Use the platform UI font with emoji fallbacks for the dessert glyphs."""
    app_font = QFont(app.font())
    app_font.setFamilies(
        [
            app_font.family(),
            "Noto Color Emoji",  # Linux (common)
            "Noto Emoji",
            "Segoe UI Emoji",  # Windows
            "Apple Color Emoji",  # macOS
        ]
    )
    app_font.setPointSize(11)
    app.setFont(app_font)
    logging.info("Using application font: %s", app_font.family())


def run() -> None:
    """Initialize the application and start the main window."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = QApplication(sys.argv)

    strings = StringRepository()
    app.setApplicationName(strings.get("app_name"))
    app.setApplicationDisplayName(strings.get("app_name"))
    load_application_font(app)

    icon_path = Path(__file__).parent / "assets" / "desserts" / "cupcake.png"
    if icon_path.exists():
        app.setWindowIcon(QIcon(str(icon_path)))

    session = ClickerSession(default_catalog())
    share_service = ShareService(strings, desktop_share_opener)

    window = MainWindow(
        session=session,
        strings=strings,
        share_service=share_service,
        dark_mode=settings.dark_mode,
    )
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.move(geometry.center() - window.rect().center())
    window.show()

    sys.exit(app.exec())
