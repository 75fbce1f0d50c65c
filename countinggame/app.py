"""Application entry point and setup for the counting game."""

import logging
import sys
from functools import partial

from PySide6.QtWidgets import QApplication

from countinggame.core.assets import AssetResolver
from countinggame.core.game import GameController
from countinggame.core.settings import load_settings
from countinggame.ui.main_window import MainWindow
from countinggame.ui.sound import open_sound


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Build the window and controller, show number 1 and run the event loop."""
    configure_logging()
    app = QApplication(sys.argv[:1])
    app.setApplicationName("Counting Game")

    settings = load_settings()
    resolver = AssetResolver()
    logging.info(f"Looking for assets under {resolver.root}")

    window = MainWindow(settings=settings, resolver=resolver)
    controller = GameController(
        resolver=resolver,
        view=window,
        open_sound=partial(open_sound, parent=app),
        quit_app=partial(QApplication.exit, 0),
    )
    window.attach_controller(controller)
    controller.start()
    window.show()

    with controller.audio:
        code = app.exec()
    sys.exit(code)
