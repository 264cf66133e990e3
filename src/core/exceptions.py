"""Custom exceptions shared by all layers. Catch GameError to handle any of them."""


class GameError(Exception):
    """Base class for all bowling game errors."""


class GameStateError(GameError):
    """The game is not in a state that allows the requested operation."""


class TooManyRollsError(GameStateError):
    """A roll was attempted after the tenth frame used up all of its rolls."""


class InvalidRollError(GameError):
    """Pins outside 0-10, or more pins than are standing in the frame."""


class InvalidRequestError(GameError):
    """Request data could not be validated at the boundary."""
