from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer

from countinggame.core.errors import PlaybackError

logger = logging.getLogger(__name__)


class QtSoundHandle:
    """A QMediaPlayer and its audio output, playing one file."""

    def __init__(self, player: QMediaPlayer, output: QAudioOutput, source: Path) -> None:
        self._player: Optional[QMediaPlayer] = player
        self._output: Optional[QAudioOutput] = output
        self._source = source

    @property
    def source(self) -> Path:
        return self._source

    def stop(self) -> None:
        if self._player is not None:
            self._player.stop()

    def dispose(self) -> None:
        """Detach and schedule deletion of the Qt objects. Safe to call twice."""
        player, self._player = self._player, None
        output, self._output = self._output, None
        if player is not None:
            player.setSource(QUrl())
            player.deleteLater()
        if output is not None:
            output.deleteLater()

    def __repr__(self) -> str:
        return f"QtSoundHandle({self.source.name!r})"


def open_sound(path: Path, parent: Optional[QObject] = None) -> QtSoundHandle:
    """Start playing *path* and return the handle that owns the player."""
    if not path.is_file():
        raise PlaybackError(f"{path} is not a readable file")

    player = QMediaPlayer(parent)
    output = QAudioOutput(parent)
    player.setAudioOutput(output)
    handle = QtSoundHandle(player, output, path)

    name = path.name
    player.errorOccurred.connect(
        lambda error, message: logger.warning("Playback of '%s' failed: %s (%s)", name, message, error)
    )
    player.setSource(QUrl.fromLocalFile(str(path)))
    player.play()

    if player.error() != QMediaPlayer.Error.NoError:
        detail = player.errorString() or str(player.error())
        handle.dispose()
        raise PlaybackError(detail)
    if player.mediaStatus() == QMediaPlayer.MediaStatus.InvalidMedia:
        handle.dispose()
        raise PlaybackError(f"{name} is not a playable media file")
    return handle
