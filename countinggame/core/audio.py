from __future__ import annotations

import logging
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class SoundHandle(Protocol):
    def stop(self) -> None: ...

    def dispose(self) -> None: ...


class AudioSlot:
    """Owns at most one playing sound.

    The held handle is always stopped and disposed before it is replaced and
    when the slot is released. Releasing an empty slot does nothing, so every
    exit path can call ``release`` without tracking whether another one
    already did. Used as a context manager the slot is released on leaving
    the ``with`` block, whatever the reason.
    """

    def __init__(self) -> None:
        self._handle: Optional[SoundHandle] = None

    @property
    def active(self) -> bool:
        """True while a sound handle is held."""
        return self._handle is not None

    def replace(self, handle: SoundHandle) -> None:
        """Release the current handle, then take ownership of *handle*."""
        self.release()
        self._handle = handle

    def release(self) -> bool:
        """Stop and dispose the held handle. Returns True if there was one."""
        handle, self._handle = self._handle, None
        if handle is None:
            return False
        try:
            handle.stop()
        finally:
            handle.dispose()
        logger.debug("Released sound handle %r", handle)
        return True

    def __enter__(self) -> "AudioSlot":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
