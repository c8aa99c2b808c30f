"""Health check endpoint."""
from __future__ import annotations

import platform
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from storefront.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Liveness check; never touches the database."""

    return HealthResponse(
        status="Server is running",
        runtime_version=platform.python_version(),
        time=datetime.now(timezone.utc).isoformat(),
        environment=request.app.state.settings.ENVIRONMENT,
    )
