from typing import Dict, List
from uuid import UUID

from ..models.game import FieldError


class GameStoreError(Exception):
    """Base class for catalog errors"""


class ValidationError(GameStoreError):
    """One or more field constraints were violated by a create/update payload"""

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        fields = ', '.join(sorted({e.field for e in self.errors}))
        super().__init__(f"Invalid game payload: {fields}")

    def to_dict(self) -> Dict[str, List[str]]:
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


class NotFoundError(GameStoreError):
    def __init__(self, game_id: UUID):
        self.game_id = game_id
        super().__init__(f"Game {game_id} not found")
