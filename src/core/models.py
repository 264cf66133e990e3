"""
Boundary layer data model(s).

The Service talks to the domain layer (Game) through the model(s) defined here.
(Decouples whatever the caller of the Service needs from the Frame objects the domain layer works with)
"""

from dataclasses import dataclass, field


@dataclass
class GameModel:
    """Transport-safe representation of a bowling game: the rolls made so far + the status they lead to."""

    rolls: list[int] = field(default_factory=list)
    status: str = "in progress"
