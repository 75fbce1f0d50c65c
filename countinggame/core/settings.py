from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from countinggame.core.errors import SettingsError
from countinggame.core.game import BACKGROUND_NAME

logger = logging.getLogger(__name__)

SETTINGS_ENV = "COUNTINGGAME_SETTINGS"

# The scale leg runs for twice this, and Qt durations are 32-bit ints.
MAX_TWIRL_MS = 60_000


@dataclass(frozen=True)
class WindowSettings:
    title: str = "Toddler Counting Game"
    width: int = 576
    height: int = 576
    image_size: int = 300


@dataclass(frozen=True)
class TwirlSettings:
    duration_ms: int = 1000
    rotation_degrees: float = 360.0
    peak_scale: float = 1.2


@dataclass(frozen=True)
class Settings:
    window: WindowSettings = field(default_factory=WindowSettings)
    twirl: TwirlSettings = field(default_factory=TwirlSettings)
    background: str = BACKGROUND_NAME


def default_settings_path() -> Path:
    """Settings file: ``COUNTINGGAME_SETTINGS`` if set, else the packaged one."""
    env = os.environ.get(SETTINGS_ENV, "").strip()
    if env:
        return Path(env).expanduser()
    return Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings from YAML; absent keys keep their defaults."""
    settings_path = Path(path) if path is not None else default_settings_path()
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")
    try:
        raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as e:
        raise SettingsError(f"{settings_path.name}: could not read settings: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise SettingsError(f"{settings_path.name}: expected a mapping at the top level")

    name = settings_path.name
    window_raw = _section(raw, "window", name)
    twirl_raw = _section(raw, "twirl", name)

    defaults_window = WindowSettings()
    window = WindowSettings(
        title=_string(window_raw, "title", defaults_window.title, f"{name}: window"),
        width=_positive_int(window_raw, "width", defaults_window.width, f"{name}: window"),
        height=_positive_int(window_raw, "height", defaults_window.height, f"{name}: window"),
        image_size=_positive_int(window_raw, "image_size", defaults_window.image_size, f"{name}: window"),
    )
    if window.image_size > min(window.width, window.height):
        raise SettingsError(f"{name}: window.image_size must fit inside the window")

    defaults_twirl = TwirlSettings()
    twirl = TwirlSettings(
        duration_ms=_positive_int(
            twirl_raw, "duration_ms", defaults_twirl.duration_ms, f"{name}: twirl", maximum=MAX_TWIRL_MS
        ),
        rotation_degrees=_number(
            twirl_raw, "rotation_degrees", defaults_twirl.rotation_degrees, f"{name}: twirl"
        ),
        peak_scale=_number(twirl_raw, "peak_scale", defaults_twirl.peak_scale, f"{name}: twirl"),
    )
    if twirl.peak_scale <= 0:
        raise SettingsError(f"{name}: twirl.peak_scale must be positive")

    background = _string(raw, "background", BACKGROUND_NAME, name)
    logger.debug("Loaded settings from %s", settings_path)
    return Settings(window=window, twirl=twirl, background=background)


def _section(raw: Dict[str, Any], key: str, where: str) -> Dict[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SettingsError(f"{where}: '{key}' must be a mapping")
    return value


def _string(raw: Dict[str, Any], key: str, default: str, where: str) -> str:
    value = raw.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise SettingsError(f"{where}: '{key}' must be a non-empty string")
    return value.strip()


def _positive_int(
    raw: Dict[str, Any],
    key: str,
    default: int,
    where: str,
    maximum: Optional[int] = None,
) -> int:
    value = raw.get(key, default)
    # bool is an int subclass; "width: yes" is a typo, not a size.
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise SettingsError(f"{where}: '{key}' must be a positive integer")
    if maximum is not None and value > maximum:
        raise SettingsError(f"{where}: '{key}' must be at most {maximum}")
    return value


def _number(raw: Dict[str, Any], key: str, default: float, where: str) -> float:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SettingsError(f"{where}: '{key}' must be a number")
    if not math.isfinite(value):
        raise SettingsError(f"{where}: '{key}' must be a finite number")
    return float(value)
