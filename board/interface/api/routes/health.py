"""Liveness probe."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from board.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    checked_at: datetime
    environment: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up and which build it runs."""
    return HealthResponse(
        status="ok",
        checked_at=datetime.now(timezone.utc),
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
