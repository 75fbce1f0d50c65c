"""Counting game state machine.

The controller owns a single :class:`GameState` and is driven by three
events: advance, replay and exit. Everything shown on screen is derived from
``current_number`` by :func:`present`, so the view never has to remember
which phase it is in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Protocol

from countinggame.core.assets import AssetResolver
from countinggame.core.audio import AudioSlot, SoundHandle
from countinggame.core.errors import InvalidTransitionError, PlaybackError

logger = logging.getLogger(__name__)

FIRST_NUMBER = 1
LAST_NUMBER = 10
COMPLETE_NUMBER = LAST_NUMBER + 1

BACKGROUND_NAME = "bluesparklesbackground.png"

COUNT_LABEL = "Click to Count"
PLAY_AGAIN_LABEL = "Play Again"
EXIT_LABEL = "Exit Game"
CONGRATULATIONS_TEXT = "GOOD JOB !"
REPLAY_PROMPT_TEXT = "Let's Play Again:"
STATUS_TEMPLATE = "This is number {number}"


def image_name(number: int) -> str:
    return f"{number}.png"


def sound_name(number: int) -> str:
    return f"{number}.mp3"


class Phase(Enum):
    COUNTING = "counting"
    COMPLETE = "complete"


class ButtonRole(Enum):
    """Visual treatment of a button; the UI maps each role to a style."""

    NEUTRAL = "neutral"
    AFFIRMATIVE = "affirmative"
    SECONDARY = "secondary"


@dataclass
class GameState:
    """Mutable state of one game: the counter and the playing sound."""

    current_number: int = FIRST_NUMBER
    audio: AudioSlot = field(default_factory=AudioSlot)

    @property
    def phase(self) -> Phase:
        if self.current_number > LAST_NUMBER:
            return Phase.COMPLETE
        return Phase.COUNTING


@dataclass(frozen=True)
class Presentation:
    """What the screen shows for one value of the counter."""

    number: int
    image_name: Optional[str]
    status_text: str
    status_visible: bool
    completion_visible: bool
    primary_label: str
    primary_role: ButtonRole


def present(number: int) -> Presentation:
    """Derive the presentation for *number* (1..10 counting, 11 complete)."""
    if not FIRST_NUMBER <= number <= COMPLETE_NUMBER:
        raise ValueError(f"number must be in {FIRST_NUMBER}..{COMPLETE_NUMBER}, got {number}")
    if number > LAST_NUMBER:
        return Presentation(
            number=number,
            image_name=None,
            status_text="",
            status_visible=False,
            completion_visible=True,
            primary_label=PLAY_AGAIN_LABEL,
            primary_role=ButtonRole.AFFIRMATIVE,
        )
    return Presentation(
        number=number,
        image_name=image_name(number),
        status_text=STATUS_TEMPLATE.format(number=number),
        status_visible=True,
        completion_visible=False,
        primary_label=COUNT_LABEL,
        primary_role=ButtonRole.NEUTRAL,
    )


class GameView(Protocol):
    def show_image(self, path: Optional[Path]) -> None: ...

    def apply_presentation(self, presentation: Presentation) -> None: ...

    def twirl(self) -> None: ...


class GameController:
    """Drives the view and the audio slot from the counter.

    ``open_sound`` starts playing a file and returns its handle, raising
    :class:`PlaybackError` when it cannot. ``quit_app`` ends the application.
    """

    def __init__(
        self,
        resolver: AssetResolver,
        view: GameView,
        open_sound: Callable[[Path], SoundHandle],
        quit_app: Callable[[], None],
        state: Optional[GameState] = None,
    ) -> None:
        self._resolver = resolver
        self._view = view
        self._open_sound = open_sound
        self._quit_app = quit_app
        self._state = state if state is not None else GameState()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def audio(self) -> AudioSlot:
        return self._state.audio

    @property
    def phase(self) -> Phase:
        return self._state.phase

    def start(self) -> None:
        """Show the current number (1 for a new game)."""
        self._enter(self._state.current_number)

    def on_primary(self) -> None:
        """Handle a click on the primary button in whatever phase we are."""
        if self._state.phase is Phase.COMPLETE:
            self.replay()
        else:
            self.advance()

    def advance(self) -> None:
        if self._state.phase is Phase.COMPLETE:
            raise InvalidTransitionError("advance is not valid once counting is complete")
        self._state.current_number += 1
        self._enter(self._state.current_number)

    def replay(self) -> None:
        if self._state.phase is not Phase.COMPLETE:
            raise InvalidTransitionError(
                f"replay is only valid after {LAST_NUMBER}, current number is {self._state.current_number}"
            )
        self._state.current_number = FIRST_NUMBER
        logger.info("Starting a new round")
        self._enter(FIRST_NUMBER)

    def release_audio(self) -> bool:
        """Stop and dispose the playing sound, if any."""
        return self._state.audio.release()

    def exit(self) -> None:
        """Release audio and end the application, from any phase."""
        self.release_audio()
        logger.info("Exiting at number %d", self._state.current_number)
        self._quit_app()

    def _enter(self, number: int) -> None:
        if number > LAST_NUMBER:
            self._enter_complete()
        else:
            self._enter_counting(number)

    def _enter_counting(self, number: int) -> None:
        self._show_number_image(number)
        self._view.apply_presentation(present(number))
        self._play_sound(number)
        self._view.twirl()

    def _enter_complete(self) -> None:
        logger.info("Counted to %d", LAST_NUMBER)
        self._view.show_image(None)
        self._view.apply_presentation(present(COMPLETE_NUMBER))

    def _show_number_image(self, number: int) -> None:
        path = self._resolver.resolve(image_name(number))
        if path is None:
            logger.warning("Image not found for number %d", number)
        self._view.show_image(path)

    def _play_sound(self, number: int) -> None:
        self._state.audio.release()
        name = sound_name(number)
        path = self._resolver.resolve(name)
        if path is None:
            logger.warning("Sound not found: %s", name)
            return
        try:
            handle = self._open_sound(path)
        except PlaybackError as e:
            logger.warning("Failed to play sound '%s': %s", name, e)
            return
        self._state.audio.replace(handle)
