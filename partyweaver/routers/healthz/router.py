from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()

API_VERSION = "0.1.0"


class HealthCheckResponse(BaseModel):
    status: str
    version: str = API_VERSION


@router.get("/", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Liveness probe. Does not touch the database."""
    return HealthCheckResponse(status="healthy")
