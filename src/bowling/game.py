"""
The Game class is the entrypoint into the domain layer for the service layer.
It owns the frames: routes every roll to the current frame, opens the next frame once the current one completes,
detects the end of the game, and adds up the score.
"""

import logging
from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable, Optional, Self

from src.bowling.frame import FRAMES_PER_GAME, PINS_PER_FRAME, Frame
from src.core import config
from src.core.exceptions import GameStateError, InvalidRollError, TooManyRollsError
from src.core.models import GameModel
from src.core.shared_types import Status

logger = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    frames: list[Frame]
    strict: bool = True

    @classmethod
    def new_game(cls, strict: Optional[bool] = None) -> Self:
        """Start with the first frame open. `strict` falls back to the configured default."""
        if strict is None:
            strict = config.STRICT_PIN_VALIDATION
        return cls(frames=[Frame(1)], strict=strict)

    @classmethod
    def from_rolls(cls, rolls: Iterable[int], strict: Optional[bool] = None) -> Self:
        """Replay a history of rolls on a new game."""
        game = cls.new_game(strict=strict)
        for pins in rolls:
            game.roll(pins)
        return game

    @classmethod
    def from_model(cls, model: GameModel, strict: Optional[bool] = None) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in [status.value for status in Status]:
            raise GameStateError(
                f"Invalid status: {model.status!r}. \nPick one from {','.join([status.value for status in Status])}"
            )

        game = cls.from_rolls(model.rolls, strict=strict)
        if game.status != Status(model.status):
            raise GameStateError(
                f"Stored status {model.status!r} does not match the rolls, which give {game.status.value!r}."
            )
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(rolls=self.rolls, status=self.status.value)

    @property
    def current_frame(self) -> Frame:
        return self.frames[-1]

    @property
    def rolls(self) -> list[int]:
        """All rolls made so far, in order."""
        return [pins for frame in self.frames for pins in frame.rolls]

    @property
    def status(self) -> Status:
        return Status.GAME_OVER if self.is_over() else Status.IN_PROGRESS

    def roll(self, pins: int) -> None:
        """
        Record a roll
        -----

        1. refuse the roll when the game is over
        2. (strict only) refuse pins that are not standing
        3. let the current frame record it
        4. open the next frame if the current one is done
        """
        if self.is_over():
            logger.warning("Roll of %s pins refused: game is over.", pins)
            raise TooManyRollsError(
                f"Game is over. All {FRAMES_PER_GAME} frames have been played."
            )

        if self.strict:
            self._assert_valid_roll(pins)

        self.current_frame.roll(pins)

        if self.current_frame.is_completed():
            if self.is_over():
                logger.info("Game over with a score of %s.", self.score())
            else:
                self._advance_frame()

    def score(self) -> int:
        """
        Sum of the frame scores so far.
        NOTE mid-game, bonuses whose rolls have not been made yet are simply not counted (yet).
        """
        return sum(self.frame_scores())

    def frame_scores(self) -> list[int]:
        return [frame.score(self.frames) for frame in self.frames]

    def running_totals(self) -> list[int]:
        """Cumulative score after each frame, as written on a score sheet."""
        return list(accumulate(self.frame_scores()))

    def is_over(self) -> bool:
        return self.current_frame.is_tenth() and self.current_frame.is_completed()

    # -- PRIVATE HELPERS ---
    def _advance_frame(self) -> None:
        new_frame = Frame(self.current_frame.frame_number + 1)
        self.frames.append(new_frame)
        logger.debug("Advanced to frame %s.", new_frame.frame_number)

    def _assert_valid_roll(self, pins: int) -> None:
        """You cannot knock down pins that are not standing."""
        if not 0 <= pins <= PINS_PER_FRAME:
            logger.warning("Roll of %s pins refused: out of range.", pins)
            raise InvalidRollError(
                f"Pins must be between 0 and {PINS_PER_FRAME}, got {pins}."
            )

        standing = self.current_frame.remaining_pins()
        if pins > standing:
            logger.warning(
                "Roll of %s pins refused: only %s standing in frame %s.",
                pins,
                standing,
                self.current_frame.frame_number,
            )
            raise InvalidRollError(
                f"Only {standing} pins standing in frame {self.current_frame.frame_number}, cannot knock down {pins}."
            )
