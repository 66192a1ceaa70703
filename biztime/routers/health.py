"""Health check endpoint."""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from biztime.config import get_settings
from biztime.models import HealthResponse
from biztime.services import LedgerStore, get_store

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Check health status of the API and its store."
)
async def health_check(store: LedgerStore = Depends(get_store)):
    """
    Check health of the relational store.

    Returns 200 if healthy, 503 otherwise.
    """
    settings = get_settings()
    dependencies: dict[str, str] = {}

    store_healthy, store_error = await store.health_check()
    dependencies["database"] = "healthy" if store_healthy else f"unhealthy: {store_error}"

    overall_status = "healthy" if store_healthy else "degraded"

    response = HealthResponse(
        status=overall_status,
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
        dependencies=dependencies
    )

    # Return 503 if degraded
    if not store_healthy:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=response.model_dump()
        )

    return response
