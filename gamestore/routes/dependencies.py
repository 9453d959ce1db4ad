from fastapi import Request

from ..database import GameStore


def get_store(request: Request) -> GameStore:
    """The store owned by the running application"""
    return request.app.state.store
