"""Health check routes."""

from datetime import datetime

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from remark.config import Settings
from remark.domain.repository import CommentRepository

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str


class ReadinessResponse(BaseModel):
    """Readiness probe response."""

    ready: bool
    message: str


class LivenessResponse(BaseModel):
    """Liveness probe response."""

    alive: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness(comment_repository: FromDishka[CommentRepository]):
    """Ready once the database answers."""
    try:
        await comment_repository.ping()
    except Exception as e:
        logfire.error("Readiness check failed", error=str(e))
        return JSONResponse(
            status_code=503,
            content=ReadinessResponse(
                ready=False, message=f"Database not ready: {e}"
            ).model_dump(),
        )
    return ReadinessResponse(ready=True, message="Service is ready")


@router.get("/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    """Process is up."""
    return LivenessResponse(alive=True)
