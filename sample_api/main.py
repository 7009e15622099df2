"""Sample API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - CORS applied to every response, configured from settings
    - Outermost middleware turns unexpected exceptions into a JSON 500
    - Global error handlers map SampleApiError → {"error": ...} JSON responses
    - Logging configured once on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event
    - run() hands the listener to uvicorn; bind failures exit the process there
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sample_api.api.error_handlers import register_error_handlers
from sample_api.api.middleware import register_response_middleware
from sample_api.api.routes import auth, inspection, methods, responses
from sample_api.config import get_settings
from sample_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Server is running on port {settings.port}")
    yield
    logger.info("Sample API shutting down")


app = FastAPI(title="Sample API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_response_middleware(app, settings.cors_origins)

app.include_router(methods.router)
app.include_router(inspection.router)
app.include_router(responses.router)
app.include_router(auth.router)

register_error_handlers(app)


def run() -> None:
    """Serve the app on the configured host/port until the process is stopped."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
