from .game import FieldError, Game, GameRequest, validate_game
from .response import HealthResponse, ValidationProblem, WelcomeResponse

__all__ = [
    'FieldError',
    'Game',
    'GameRequest',
    'validate_game',
    'HealthResponse',
    'ValidationProblem',
    'WelcomeResponse',
]
