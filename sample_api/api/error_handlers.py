"""Error Handlers — global exception handlers for the sample API.

Invariants:
    - SampleApiError → its http_status with the flat {"error": message} envelope
    - 4xx logged as WARNING, 5xx as ERROR
    - Unexpected exceptions are handled in api/middleware.py, not here

Design Decisions:
    - Domain errors are rendered by ExceptionMiddleware, inside the CORS layer
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sample_api.core.errors import SampleApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_sample_api_error_handler(app)


def _register_sample_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SampleApiError)
    async def sample_api_error_handler(request: Request, exc: SampleApiError):
        """Handle all domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"SampleApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )
