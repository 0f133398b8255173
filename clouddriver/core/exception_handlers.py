"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps catalog exceptions to
HTTP responses.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from clouddriver.core.config import get_settings
from clouddriver.domain.exceptions import ClouddriverException

logger = logging.getLogger(__name__)

_ERROR_CODE_STATUS: dict[str, int] = {
    "NOT_FOUND": 404,
    "CONSTRAINT_VIOLATION": 409,
    "INVALID_ARGUMENT": 400,
    "BACKEND_UNAVAILABLE": 503,
}


def _clouddriver_exception_handler(
    request: Request, exc: ClouddriverException
) -> JSONResponse:
    """Return JSON from ClouddriverException.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    detail: Any = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the FastAPI app. Call once after creating it."""
    app.add_exception_handler(ClouddriverException, _clouddriver_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
