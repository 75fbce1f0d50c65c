"""Exceptions raised by the counting game core."""


class CountingGameError(Exception):
    """Base class for counting game errors."""


class InvalidTransitionError(CountingGameError):
    """An event arrived that the current phase does not accept."""


class PlaybackError(CountingGameError):
    """The audio backend could not start playing a sound."""


class SettingsError(CountingGameError, ValueError):
    """The settings file is present but malformed."""
