"""Health check endpoint."""

import time
from fastapi import APIRouter, Request

from formrules.models.responses import HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Service health with the size of the loaded rule table."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        return HealthResponse(
            status="unhealthy",
            uptime_seconds=round(time.time() - _start_time, 2),
            registered_fields=0,
            strict_fields=False,
        )

    return HealthResponse(
        status="healthy",
        uptime_seconds=round(time.time() - _start_time, 2),
        registered_fields=len(engine.registry.fields()),
        strict_fields=engine.strict,
    )
