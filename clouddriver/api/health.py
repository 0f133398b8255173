"""Health check endpoints for liveness and readiness probes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from clouddriver.domain.exceptions import BackendUnavailableException
from clouddriver.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database unreachable", "model": ReadinessErrorResponse}},
)
def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 when the catalog database answers a ping; 503 otherwise."""
    database = getattr(request.app.state, "database", None)
    try:
        if database is None:
            raise BackendUnavailableException("ping", "database not initialized")
        database.ping()
    except BackendUnavailableException as exc:
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message=exc.message).model_dump(),
        )
    return ReadinessResponse()
