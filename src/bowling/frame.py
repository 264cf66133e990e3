"""
A single frame of a bowling game.

The frame only knows its own rolls. Bonuses for strikes and spares need rolls from later frames,
those are looked up by index in the Game's sequence of frames (passed in as `frames`), so a Frame never holds on to its neighbours.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

PINS_PER_FRAME = 10
FRAMES_PER_GAME = 10


@dataclass
class Frame:
    frame_number: int
    rolls: list[int] = field(default_factory=list)

    @property
    def roll_count(self) -> int:
        return len(self.rolls)

    @property
    def pins(self) -> int:
        """Total pins knocked down in this frame (up to 30 in the tenth frame)."""
        return sum(self.rolls)

    @property
    def first_roll(self) -> int:
        # NOTE: a roll that has not happened (yet) counts as 0 pins
        return self.rolls[0] if self.roll_count > 0 else 0

    @property
    def second_roll(self) -> int:
        return self.rolls[1] if self.roll_count > 1 else 0

    def roll(self, pins: int) -> None:
        """Record a roll. Checking whether the roll is allowed is up to the Game."""
        self.rolls.append(pins)

    def is_completed(self) -> bool:
        """
        No more rolls can be recorded in this frame
        ----

        * Frames 1-9: a strike, or two rolls.
        * Frame 10: three rolls, or two rolls that did not clear the pins. A strike or spare earns the third roll.
        """
        if self.is_tenth():
            return self.roll_count == 3 or (
                self.roll_count == 2 and self.pins < PINS_PER_FRAME
            )
        return self.pins == PINS_PER_FRAME or self.roll_count == 2

    def is_strike(self) -> bool:
        return self.roll_count == 1 and self.pins == PINS_PER_FRAME

    def is_spare(self) -> bool:
        return self.roll_count == 2 and self.pins == PINS_PER_FRAME

    def is_tenth(self) -> bool:
        return self.frame_number == FRAMES_PER_GAME

    def remaining_pins(self) -> int:
        """Pins standing for the next roll in this frame.

        In the tenth frame the pins get reset after a strike, or after clearing them with two rolls.
        """
        if not self.is_tenth():
            return PINS_PER_FRAME - self.pins

        standing = PINS_PER_FRAME
        for pins in self.rolls:
            standing -= pins
            if standing <= 0:
                standing = PINS_PER_FRAME
        return standing

    # --- SCORING ---
    def score(self, frames: Sequence[Frame]) -> int:
        """The tenth frame scores its pins. Other frames add their strike or spare bonus."""
        if self.is_tenth():
            return self.pins
        return self.pins + self.spare_bonus(frames) + self.strike_bonus(frames)

    def spare_bonus(self, frames: Sequence[Frame]) -> int:
        """A spare earns the next roll."""
        if not self.is_spare():
            return 0
        next_frame = self._next_frame(frames)
        return next_frame.first_roll if next_frame else 0

    def strike_bonus(self, frames: Sequence[Frame]) -> int:
        """
        A strike earns the next two rolls
        ----

        If the next frame is a strike as well, its frame holds only one roll, so reach one more frame ahead.
        Unless that next frame is the tenth: its own rolls supply both bonus rolls.
        """
        if not self.is_strike():
            return 0

        next_frame = self._next_frame(frames)
        if next_frame is None:
            return 0

        if next_frame.is_strike():
            if next_frame.is_tenth():
                return next_frame.first_roll
            frame_after = next_frame._next_frame(frames)
            return next_frame.first_roll + (
                frame_after.first_roll if frame_after else 0
            )

        return next_frame.first_roll + next_frame.second_roll

    def _next_frame(self, frames: Sequence[Frame]) -> Optional[Frame]:
        """Frame numbers start at 1, so the next frame sits at list index `frame_number`."""
        if self.is_tenth() or self.frame_number >= len(frames):
            return None
        return frames[self.frame_number]
