from datetime import datetime, timezone
from uuid import uuid4

from fastapi import APIRouter

from ..models.response import WelcomeResponse

router = APIRouter()


@router.get("/", response_model=WelcomeResponse)
async def welcome():
    """Service banner with a fresh request id and the current UTC time"""
    return WelcomeResponse(request_id=uuid4(), date_time=datetime.now(timezone.utc))
