from datetime import date
from decimal import Decimal

from ..models.game import GameRequest

SEED_GAMES = [
    GameRequest(
        name="Street Fighter II",
        genre="Fighting",
        price=Decimal("19.99"),
        release_date=date(1992, 7, 15),
    ),
    GameRequest(
        name="Final Fantasy XIV",
        genre="Roleplaying",
        price=Decimal("59.99"),
        release_date=date(2010, 9, 30),
    ),
    GameRequest(
        name="FIFA 23",
        genre="Sports",
        price=Decimal("69.99"),
        release_date=date(2022, 9, 27),
    ),
]
