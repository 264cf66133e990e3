"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.bowling.frame import PINS_PER_FRAME
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Status


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    strict: Optional[bool] = None


class RollRequest(BaseModel):
    pins: int

    @field_validator("pins")
    @classmethod
    def validate_pins(cls, value: int) -> int:
        if not 0 <= value <= PINS_PER_FRAME:
            raise InvalidRequestError(
                f"Cannot knock down {value} pins. Pick a number between 0 and {PINS_PER_FRAME}."
            )
        return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    rolls: list[int]
    frames: list[list[int]]
    frame_scores: list[int]
    running_totals: list[int]
    score: int
    status: Status
    current_frame: int
