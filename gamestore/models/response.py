from datetime import datetime
from typing import Dict, List, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class WelcomeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Welcome to the Games API"
    request_id: UUID = Field(..., alias='requestId')
    date_time: datetime = Field(..., alias='dateTime')

class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    uptime: float
    games: int

class ValidationProblem(BaseModel):
    type: str = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
    title: str = "One or more validation errors occurred."
    status: Literal[400] = 400
    errors: Dict[str, List[str]]
