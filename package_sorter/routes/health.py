"""
Package Sorter — Health Check Route
=====================================

What:  Liveness endpoint for load balancers and container probes.
Why:   The service has no database or upstream dependency, so "answers at
       all" is the whole health story: the status is always UP.
"""

import time

from fastapi import APIRouter

from package_sorter import __version__
from package_sorter.config import settings
from package_sorter.schemas.package import HealthResponse

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service liveness check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="UP",
        service=settings.app_name,
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
