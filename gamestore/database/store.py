import threading
from typing import Iterable, List, Optional
from uuid import UUID, uuid4

from ..core.exceptions import NotFoundError, ValidationError
from ..logger import get_logger
from ..models.game import Game, GameRequest, validate_game

logger = get_logger()


class GameStore:
    """
    Process-local catalog of games.

    Records are kept in insertion order. Every operation holds one store-wide
    lock, so mutations never interleave; nothing is persisted. Callers always
    receive copies, the stored records change only through this class.
    """

    def __init__(self):
        self._games: List[Game] = []
        self._lock = threading.RLock()

    def list(self) -> List[Game]:
        """Get every game in insertion order"""
        with self._lock:
            return [game.model_copy() for game in self._games]

    def get(self, game_id: UUID) -> Game:
        """Get a game by id, raising NotFoundError if there is none"""
        with self._lock:
            return self._find(game_id).model_copy()

    def create(self, payload: GameRequest) -> Game:
        """Validate and store a new game under a freshly generated id"""
        self._validate(payload)
        with self._lock:
            game = Game(
                id=self._new_id(),
                name=payload.name,
                genre=payload.genre,
                price=payload.price,
                release_date=payload.release_date,
            )
            self._games.append(game)
            logger.info(f"Created game {game.id} ({game.name})")
            return game.model_copy()

    def update(self, game_id: UUID, payload: GameRequest) -> None:
        """Replace every field but the id; the id in the payload is ignored"""
        self._validate(payload)
        with self._lock:
            game = self._find(game_id)
            game.name = payload.name
            game.genre = payload.genre
            game.price = payload.price
            game.release_date = payload.release_date
            logger.info(f"Updated game {game_id}")

    def delete(self, game_id: UUID) -> None:
        with self._lock:
            game = self._find(game_id)
            self._games.remove(game)
            logger.info(f"Deleted game {game_id}")

    def count(self) -> int:
        with self._lock:
            return len(self._games)

    def seed(self, payloads: Iterable[GameRequest]) -> List[Game]:
        """Create each payload in order, stopping at the first invalid one"""
        created = [self.create(payload) for payload in payloads]
        logger.info(f"Seeded store with {len(created)} games")
        return created

    def clear(self):
        with self._lock:
            self._games.clear()
        logger.debug("Store cleared")

    def _find(self, game_id: UUID) -> Game:
        game: Optional[Game] = next((g for g in self._games if g.id == game_id), None)
        if game is None:
            raise NotFoundError(game_id)
        return game

    def _new_id(self) -> UUID:
        # ids must stay unique for the lifetime of the store
        while True:
            game_id = uuid4()
            if all(g.id != game_id for g in self._games):
                return game_id

    @staticmethod
    def _validate(payload: GameRequest):
        errors = validate_game(payload)
        if errors:
            logger.warning(f"Rejected game payload: {[tuple(e) for e in errors]}")
            raise ValidationError(errors)
