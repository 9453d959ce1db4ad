from datetime import date
from decimal import Decimal
from typing import Annotated, List, NamedTuple, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

NAME_MIN_LENGTH, NAME_MAX_LENGTH = 3, 50
GENRE_MIN_LENGTH, GENRE_MAX_LENGTH = 3, 20
PRICE_MIN, PRICE_MAX = Decimal(1), Decimal(100)

# Currency: at most two decimal places so the JSON number always equals the stored Decimal
Price = Annotated[
    Decimal,
    Field(decimal_places=2),
    PlainSerializer(float, return_type=float, when_used='json'),
]


class FieldError(NamedTuple):
    field: str
    message: str


class GameRequest(BaseModel):
    """Create/update payload. Only types are checked here, constraints live in validate_game"""
    model_config = ConfigDict(populate_by_name=True)

    # Accepted so clients can echo a fetched record back, never used for addressing
    id: Optional[UUID] = None
    name: str
    genre: str
    price: Price
    release_date: date = Field(..., alias='releaseDate')


class Game(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    name: str
    genre: str
    price: Price
    release_date: date = Field(..., alias='releaseDate')


def _check_text(field: str, value: str, min_length: int, max_length: int) -> List[FieldError]:
    # a blank value reports only the required message
    if not value or not value.strip():
        return [FieldError(field, f"The {field} field is required.")]
    if not min_length <= len(value) <= max_length:
        return [FieldError(
            field,
            f"The {field} must be between {min_length} and {max_length} characters long."
        )]
    return []


def validate_game(payload: GameRequest) -> List[FieldError]:
    """
    Check a payload against the catalog constraints.

    Returns one FieldError per violated constraint; an empty list means the
    payload may be stored. ``id`` and ``releaseDate`` are not constrained.
    """
    errors = []
    errors.extend(_check_text('name', payload.name, NAME_MIN_LENGTH, NAME_MAX_LENGTH))
    errors.extend(_check_text('genre', payload.genre, GENRE_MIN_LENGTH, GENRE_MAX_LENGTH))
    if not PRICE_MIN <= payload.price <= PRICE_MAX:
        errors.append(FieldError('price', f"The price must be between ${PRICE_MIN} and ${PRICE_MAX}."))
    return errors
