import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..database import SEED_GAMES
from ..logger import get_logger

logger = get_logger()


async def startup_event(app: FastAPI):
    """Fill the store with the seed catalog and start the uptime clock"""
    config = app.state.config
    store = app.state.store
    try:
        if config.SEED_DATA:
            store.seed(SEED_GAMES)
        app.state.started_at = time.monotonic()
        logger.info(f"{config.APP_TITLE} started with {store.count()} games")
    except Exception as e:
        logger.error(f"Failed to seed store: {e}")
        raise


async def shutdown_event(app: FastAPI):
    """Drop the in-memory catalog"""
    app.state.store.clear()
    logger.info("Store discarded")


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_event(app)
    try:
        yield
    finally:
        await shutdown_event(app)
