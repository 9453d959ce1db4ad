from .seed import SEED_GAMES
from .store import GameStore

__all__ = ['GameStore', 'SEED_GAMES']
