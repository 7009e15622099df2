"""HTTP Middleware — outermost request layer around CORS and the routers.

Invariants:
    - Registered after CORSMiddleware, so it wraps it
    - Every response carries Access-Control-Allow-Origin when origins are "*",
      whether or not the request sent an Origin header
    - Unhandled exceptions become a JSON 500 here, inside the CORS guarantee;
      internal details are logged, never returned
    - A trailing slash is ignored when matching routes ("/api/" serves "/api")

Design Decisions:
    - CORSMiddleware still owns preflight and Origin-echo; this layer only
      fills the header in when CORSMiddleware left it out
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

ALLOW_ORIGIN_HEADER = "access-control-allow-origin"


def register_response_middleware(app: FastAPI, cors_origins: list[str]) -> None:
    """Register the outermost middleware. Call after adding CORSMiddleware."""
    allow_any_origin = "*" in cors_origins

    @app.middleware("http")
    async def response_middleware(request: Request, call_next):
        _strip_trailing_slash(request)
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                exc_info=True,
            )
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal Server Error"},
            )
        if allow_any_origin and ALLOW_ORIGIN_HEADER not in response.headers:
            response.headers[ALLOW_ORIGIN_HEADER] = "*"
        return response


def _strip_trailing_slash(request: Request) -> None:
    path = request.scope["path"]
    if path != "/" and path.endswith("/"):
        request.scope["path"] = path.rstrip("/") or "/"
        raw_path = request.scope.get("raw_path")
        if raw_path:
            request.scope["raw_path"] = raw_path.rstrip(b"/") or b"/"
