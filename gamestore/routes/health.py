import time

from fastapi import APIRouter, Depends, HTTPException, Request

from ..database import GameStore
from ..logger import get_logger
from ..models.response import HealthResponse
from .dependencies import get_store

logger = get_logger()
router = APIRouter(tags=["Health"])


def uptime(request: Request) -> float:
    """Seconds since the application finished starting up"""
    started_at = getattr(request.app.state, "started_at", None)
    if started_at is None:
        return 0.0
    return time.monotonic() - started_at


@router.get("/health", response_model=HealthResponse)
@router.head("/health", include_in_schema=False)
async def health_check(request: Request, store: GameStore = Depends(get_store)):
    """Liveness plus the size of the catalog"""
    try:
        return HealthResponse(uptime=uptime(request), games=store.count())
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(status_code=500, detail="Health check failed")
