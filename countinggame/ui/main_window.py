from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QAbstractAnimation, Qt
from PySide6.QtGui import QCloseEvent, QColor, QPixmap
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsPixmapItem,
    QGraphicsScene,
    QGraphicsView,
    QLabel,
    QMainWindow,
    QPushButton,
    QWidget,
)

from countinggame.core.assets import AssetResolver
from countinggame.core.game import (
    CONGRATULATIONS_TEXT,
    COUNT_LABEL,
    EXIT_LABEL,
    REPLAY_PROMPT_TEXT,
    ButtonRole,
    GameController,
    Presentation,
)
from countinggame.core.settings import Settings
from countinggame.ui.colors import GameColors, button_style, label_style
from countinggame.ui.number_widgets import NumberPixmapItem, build_twirl

logger = logging.getLogger(__name__)

STATUS_X = 50
PRIMARY_SIZE = (180, 40)
EXIT_SIZE = (120, 40)
PROMPT_GAP = 28


class MainWindow(QMainWindow):
    """Fixed-size counting screen.

    A graphics view paints the background and the twirling number picture;
    the status line, messages and buttons sit on top of it at fixed
    positions. The window only displays what the controller tells it to.
    """

    def __init__(self, settings: Settings, resolver: AssetResolver) -> None:
        super().__init__()
        self._settings = settings
        self._resolver = resolver
        self._controller: Optional[GameController] = None

        self._canvas: Optional[QWidget] = None
        self._scene: Optional[QGraphicsScene] = None
        self._number_item: Optional[NumberPixmapItem] = None
        self._status_label: Optional[QLabel] = None
        self._good_job_label: Optional[QLabel] = None
        self._play_again_prompt: Optional[QLabel] = None
        self._primary_button: Optional[QPushButton] = None
        self._exit_button: Optional[QPushButton] = None

        self._build_ui()

    def attach_controller(self, controller: GameController) -> None:
        """Connect the buttons to *controller*. Called once, before start."""
        if self._controller is not None:
            raise RuntimeError("controller already attached")
        self._controller = controller
        self._primary_button.clicked.connect(controller.on_primary)
        self._exit_button.clicked.connect(controller.exit)

    def _build_ui(self) -> None:
        """Create the canvas, the overlaid labels and both buttons."""
        window = self._settings.window
        width, height, size = window.width, window.height, window.image_size

        self.setWindowTitle(window.title)
        self._canvas = QWidget(self)
        self._canvas.setFixedSize(width, height)
        self.setCentralWidget(self._canvas)
        self.setFixedSize(width, height)

        self._scene = QGraphicsScene(0, 0, width, height, self)
        self._scene.setBackgroundBrush(QColor(GameColors.CANVAS_BG))
        background = self._load_background(width, height)
        if background is not None:
            self._scene.addItem(background)

        self._number_item = NumberPixmapItem(size)
        self._number_item.setPos((width - size) / 2.0, (height - size) / 2.0)
        self._scene.addItem(self._number_item)

        view = QGraphicsView(self._scene, self._canvas)
        view.setGeometry(0, 0, width, height)
        view.setFrameShape(QFrame.Shape.NoFrame)
        view.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        view.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        view.setSceneRect(0, 0, width, height)

        button_y = height - 46
        primary_x = width // 2 - 108

        self._status_label = QLabel(self._canvas)
        self._status_label.setStyleSheet(label_style(26))
        self._status_label.move(STATUS_X, height - 76)

        self._primary_button = QPushButton(COUNT_LABEL, self._canvas)
        self._primary_button.setGeometry(primary_x, button_y, *PRIMARY_SIZE)
        self._primary_button.setStyleSheet(button_style(ButtonRole.NEUTRAL))

        self._exit_button = QPushButton(EXIT_LABEL, self._canvas)
        self._exit_button.setGeometry(primary_x + PRIMARY_SIZE[0] + 20, button_y, *EXIT_SIZE)
        self._exit_button.setStyleSheet(button_style(ButtonRole.SECONDARY))

        self._play_again_prompt = QLabel(REPLAY_PROMPT_TEXT, self._canvas)
        self._play_again_prompt.setStyleSheet(label_style(18))
        self._play_again_prompt.adjustSize()
        self._play_again_prompt.move(primary_x, button_y - PROMPT_GAP)
        self._play_again_prompt.hide()

        self._good_job_label = QLabel(CONGRATULATIONS_TEXT, self._canvas)
        self._good_job_label.setStyleSheet(label_style(48))
        self._good_job_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._good_job_label.adjustSize()
        self._good_job_label.move(
            (width - self._good_job_label.width()) // 2,
            (height - self._good_job_label.height()) // 2,
        )
        self._good_job_label.hide()

    def _load_background(self, width: int, height: int) -> Optional[QGraphicsPixmapItem]:
        name = self._settings.background
        path = self._resolver.resolve(name)
        if path is None:
            logger.warning("Background image not found: %s", name)
            return None
        pixmap = QPixmap(str(path))
        if pixmap.isNull():
            logger.warning("Could not load background image: %s", path)
            return None
        item = QGraphicsPixmapItem(
            pixmap.scaled(
                width,
                height,
                Qt.AspectRatioMode.IgnoreAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        )
        item.setZValue(-1)
        return item

    def show_image(self, path: Optional[Path]) -> None:
        """Show the picture at *path*, or clear the picture slot when None."""
        if path is None:
            self._number_item.set_pixmap(None)
            return
        pixmap = QPixmap(str(path))
        if pixmap.isNull():
            logger.warning("Could not load image: %s", path)
            self._number_item.set_pixmap(None)
            return
        self._number_item.set_pixmap(pixmap)

    def apply_presentation(self, presentation: Presentation) -> None:
        """Apply the presentation to the labels and the primary button."""
        self._status_label.setText(presentation.status_text)
        self._status_label.adjustSize()
        self._status_label.setVisible(presentation.status_visible)

        self._good_job_label.setVisible(presentation.completion_visible)
        self._play_again_prompt.setVisible(presentation.completion_visible)
        if presentation.completion_visible:
            self._good_job_label.raise_()
            self._play_again_prompt.raise_()

        self._primary_button.setText(presentation.primary_label)
        self._primary_button.setStyleSheet(button_style(presentation.primary_role))
        self._exit_button.setVisible(True)

    def twirl(self) -> None:
        """Start a twirl on the number picture and forget about it."""
        item = self._number_item
        group = build_twirl(item, self._settings.twirl, self)
        group.finished.connect(lambda: item.setRotation(item.rotation() % 360))
        group.start(QAbstractAnimation.DeletionPolicy.DeleteWhenStopped)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Release the playing sound before the window goes away."""
        if self._controller is not None:
            self._controller.release_audio()
        super().closeEvent(event)
