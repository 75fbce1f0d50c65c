"""Graphics item for the number picture and its twirl animation."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QEasingCurve, QObject, QParallelAnimationGroup, QPropertyAnimation, QRectF, Qt
from PySide6.QtGui import QPainter, QPixmap
from PySide6.QtWidgets import QGraphicsItem, QGraphicsObject, QStyleOptionGraphicsItem, QWidget

from countinggame.core.settings import TwirlSettings


class NumberPixmapItem(QGraphicsObject):
    """Square slot that draws the current number picture, centred and unstretched.

    Rotation and scale pivot around the centre of the slot, so the twirl
    spins the picture in place.
    """

    def __init__(self, size: int, parent: Optional[QGraphicsItem] = None) -> None:
        super().__init__(parent)
        self._size = size
        self._pixmap: Optional[QPixmap] = None
        self.setTransformOriginPoint(size / 2.0, size / 2.0)

    def boundingRect(self) -> QRectF:
        return QRectF(0, 0, self._size, self._size)

    def has_pixmap(self) -> bool:
        return self._pixmap is not None

    def set_pixmap(self, pixmap: Optional[QPixmap]) -> None:
        """Show *pixmap* scaled into the slot, or nothing when None/null."""
        if pixmap is not None and not pixmap.isNull():
            self._pixmap = pixmap.scaled(
                self._size,
                self._size,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
        else:
            self._pixmap = None
        self.update()

    def paint(
        self,
        painter: QPainter,
        option: QStyleOptionGraphicsItem,
        widget: Optional[QWidget] = None,
    ) -> None:
        if self._pixmap is None:
            return
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, True)
        x = (self._size - self._pixmap.width()) / 2.0
        y = (self._size - self._pixmap.height()) / 2.0
        painter.drawPixmap(int(x), int(y), self._pixmap)


def build_twirl(
    item: NumberPixmapItem,
    settings: TwirlSettings,
    parent: Optional[QObject] = None,
) -> QParallelAnimationGroup:
    """Spin *item* once while its scale pulses up and back down.

    The rotation starts from the item's current angle, so a twirl started
    while another is still running simply overlaps with it.
    """
    duration = settings.duration_ms

    rotate = QPropertyAnimation(item, b"rotation")
    rotate.setDuration(duration)
    start_angle = item.rotation()
    rotate.setStartValue(start_angle)
    rotate.setEndValue(start_angle + settings.rotation_degrees)

    # Up to the peak and back down again, one duration each way.
    scale = QPropertyAnimation(item, b"scale")
    scale.setDuration(duration * 2)
    scale.setEasingCurve(QEasingCurve.Type.Linear)
    scale.setKeyValueAt(0.0, 1.0)
    scale.setKeyValueAt(0.5, settings.peak_scale)
    scale.setKeyValueAt(1.0, 1.0)

    group = QParallelAnimationGroup(parent)
    group.addAnimation(rotate)
    group.addAnimation(scale)
    return group
