from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

ASSET_ROOT_ENV = "COUNTINGGAME_ASSET_ROOT"

# Most specific first; the first existing file wins.
SEARCH_BASES: Tuple[Tuple[str, ...], ...] = (
    ("countinggame", "resources"),
    ("countinggame",),
    ("resources",),
    (),
)


def default_asset_root() -> Path:
    """Return the directory the search bases are relative to.

    ``COUNTINGGAME_ASSET_ROOT`` wins when set; otherwise the directory holding
    the ``countinggame`` package is used.
    """
    env = os.environ.get(ASSET_ROOT_ENV, "").strip()
    if env:
        return Path(env).expanduser()
    return Path(__file__).resolve().parents[2]


class AssetResolver:
    """Finds image and sound files by logical name."""

    def __init__(self, root: Optional[Path] = None) -> None:
        self._root = Path(root) if root is not None else default_asset_root()

    @property
    def root(self) -> Path:
        return self._root

    def candidates(self, name: str) -> List[Path]:
        """Return every path ``resolve`` would try for *name*, in order."""
        return [self._root.joinpath(*base, name) for base in SEARCH_BASES]

    def resolve(self, name: str) -> Optional[Path]:
        """Return the first existing file for *name*, or None."""
        if not name or Path(name).name != name:
            logger.debug("Refusing to resolve asset name %r", name)
            return None
        for candidate in self.candidates(name):
            try:
                if candidate.is_file():
                    return candidate
            except OSError as e:
                logger.debug("Could not inspect %s: %s", candidate, e)
        return None
