from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import ORJSONResponse

from ..core.exceptions import NotFoundError, ValidationError
from ..database import GameStore
from ..logger import get_logger
from ..models.game import Game, GameRequest
from ..models.response import ValidationProblem
from .dependencies import get_store

logger = get_logger()
router = APIRouter(prefix="/games", tags=["Games"])

NOT_FOUND = {404: {"description": "Game not found"}}
BAD_REQUEST = {400: {"model": ValidationProblem, "description": "Validation failed"}}
SERVER_ERROR = {500: {"description": "Internal server error"}}


def validation_problem(error: ValidationError) -> ORJSONResponse:
    problem = ValidationProblem(errors=error.to_dict())
    return ORJSONResponse(status_code=400, content=problem.model_dump())


@router.get(
    "",
    response_model=List[Game],
    name="GetAllGames",
    operation_id="GetAllGames",
    responses={**SERVER_ERROR},
)
async def get_all_games(store: GameStore = Depends(get_store)):
    """List every game in the catalog"""
    try:
        games = store.list()
        logger.info(f"Listing {len(games)} games")
        return games
    except Exception as e:
        logger.error(f"Error listing games: {e}")
        raise HTTPException(status_code=500, detail="Failed to list games")


@router.get(
    "/{game_id}",
    response_model=Game,
    name="GetGameById",
    operation_id="GetGameById",
    responses={**NOT_FOUND, **SERVER_ERROR},
)
async def get_game_by_id(game_id: UUID, store: GameStore = Depends(get_store)):
    """
    Get a single game.

    - **game_id**: identifier assigned when the game was created
    """
    try:
        return store.get(game_id)
    except NotFoundError as e:
        logger.warning(str(e))
        return Response(status_code=404)
    except Exception as e:
        logger.error(f"Error getting game {game_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to get game")


@router.post(
    "",
    response_model=Game,
    status_code=201,
    name="CreateGame",
    operation_id="CreateGame",
    responses={**BAD_REQUEST, **SERVER_ERROR},
)
async def create_game(
    payload: GameRequest,
    request: Request,
    response: Response,
    store: GameStore = Depends(get_store),
):
    """
    Add a game to the catalog.

    - **name**: 3 to 50 characters
    - **genre**: 3 to 20 characters
    - **price**: between 1 and 100 inclusive
    - **releaseDate**: ISO date

    Any **id** in the body is ignored; the new id is returned in the body and
    in the Location header.
    """
    try:
        game = store.create(payload)
        response.headers["Location"] = str(request.url_for("GetGameById", game_id=str(game.id)))
        return game
    except ValidationError as e:
        return validation_problem(e)
    except Exception as e:
        logger.error(f"Error creating game: {e}")
        raise HTTPException(status_code=500, detail="Failed to create game")


@router.put(
    "/{game_id}",
    status_code=204,
    response_class=Response,
    name="UpdateGame",
    operation_id="UpdateGame",
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
)
async def update_game(game_id: UUID, payload: GameRequest, store: GameStore = Depends(get_store)):
    """Replace every field of a game except its id"""
    try:
        store.update(game_id, payload)
        return Response(status_code=204)
    except ValidationError as e:
        return validation_problem(e)
    except NotFoundError as e:
        logger.warning(str(e))
        return Response(status_code=404)
    except Exception as e:
        logger.error(f"Error updating game {game_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update game")


@router.delete(
    "/{game_id}",
    status_code=204,
    response_class=Response,
    name="DeleteGame",
    operation_id="DeleteGame",
    responses={**NOT_FOUND, **SERVER_ERROR},
)
async def delete_game(game_id: UUID, store: GameStore = Depends(get_store)):
    try:
        store.delete(game_id)
        return Response(status_code=204)
    except NotFoundError as e:
        logger.warning(str(e))
        return Response(status_code=404)
    except Exception as e:
        logger.error(f"Error deleting game {game_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete game")
