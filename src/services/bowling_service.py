"""Orchestration of communication from the caller to the business logic (and the reverse direction)."""

from typing import Optional

from src.api.models import GameResponse, NewGameRequest, RollRequest
from src.bowling.game import Game
from src.core.models import GameModel


class BowlingService:
    """
    Orchestration of layers for a single bowling game.

    Only the GameModel is kept between requests. Every request rebuilds the Game from it.
    """

    def __init__(self, strict: Optional[bool] = None) -> None:
        game = Game.new_game(strict=strict)
        self.strict = game.strict
        self._model: GameModel = game.to_model()

    # -- caller facing logic ---
    def new_game(self, request: NewGameRequest) -> GameResponse:
        """Throw away the current game and start over."""
        strict = self.strict if request.strict is None else request.strict
        new_game = Game.new_game(strict=strict)
        self.strict = new_game.strict
        self._model = new_game.to_model()
        return self._create_game_response(new_game)

    def roll(self, request: RollRequest) -> GameResponse:
        """Make a roll. Exceptions from the domain layer are passed on to the caller."""

        # Create a Game instance from the stored GameModel
        game = Game.from_model(self._model, strict=self.strict)

        # Attempt the roll
        game.roll(request.pins)

        # Capture updated state in GameModel
        self._model = game.to_model()

        return self._create_game_response(game)

    def get_game_state(self) -> GameResponse:
        """Retrieve current game state (e.g. for a UI to redraw the score sheet)."""
        game = Game.from_model(self._model, strict=self.strict)
        return self._create_game_response(game)

    def score(self) -> int:
        return Game.from_model(self._model, strict=self.strict).score()

    # -- Internal helpers --
    def _create_game_response(self, game: Game) -> GameResponse:
        """Convert the Game's state into a GameResponse."""
        return GameResponse(
            rolls=game.rolls,
            frames=[list(frame.rolls) for frame in game.frames],
            frame_scores=game.frame_scores(),
            running_totals=game.running_totals(),
            score=game.score(),
            status=game.status,
            current_frame=game.current_frame.frame_number,
        )
