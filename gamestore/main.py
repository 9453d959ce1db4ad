from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse, Response

from .config import AppConfig, settings
from .core.events import lifespan
from .database import GameStore
from .logger import get_logger, setup_logging
from .models.response import ValidationProblem
from .routes import games, health, root

logger = get_logger()


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """
    Path parameters that fail to parse are treated like an unmatched route
    (404, no body); body problems become a 400 validation problem.
    """
    errors = exc.errors()
    if any(error["loc"][0] == "path" for error in errors):
        logger.warning(f"Malformed path in {request.method} {request.url.path}")
        return Response(status_code=404)

    grouped = {}
    for error in errors:
        loc = [part for part in error["loc"] if part != "body"]
        # undecodable JSON reports a character offset, not a field
        if error["type"] == "json_invalid" or not loc or not isinstance(loc[-1], str):
            field = "body"
        else:
            field = loc[-1]
        grouped.setdefault(field, []).append(error["msg"])
    logger.warning(f"Malformed body in {request.method} {request.url.path}: {grouped}")
    problem = ValidationProblem(errors=grouped)
    return ORJSONResponse(status_code=400, content=problem.model_dump())


def create_app(config: Optional[AppConfig] = None, store: Optional[GameStore] = None) -> FastAPI:
    """Build the application together with the store it owns"""
    config = config or settings
    setup_logging(config.LOG_LEVEL)

    app = FastAPI(
        default_response_class=ORJSONResponse,
        title=config.APP_TITLE,
        description=config.APP_DESCRIPTION,
        version=config.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.store = store if store is not None else GameStore()

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(root.router)
    app.include_router(health.router)
    app.include_router(games.router)
    return app


app = create_app()
