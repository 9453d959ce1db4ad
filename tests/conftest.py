from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from gamestore.config import AppConfig
from gamestore.database import GameStore
from gamestore.main import create_app
from gamestore.models.game import GameRequest


@pytest.fixture
def store():
    return GameStore()


@pytest.fixture
def doom() -> GameRequest:
    return GameRequest(
        name="Doom",
        genre="Shooter",
        price=Decimal("9.99"),
        release_date=date(1993, 12, 10),
    )


@pytest.fixture
def doom_json():
    return {"name": "Doom", "genre": "Shooter", "price": 9.99, "releaseDate": "1993-12-10"}


@pytest.fixture
def app():
    return create_app(AppConfig(SEED_DATA=True, LOG_LEVEL="DEBUG"))


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
