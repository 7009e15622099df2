"""Response Shapes — error, timeout, redirect, raw, binary, and cookie samples.

Invariants:
    - GET /api/error always fails with 400 (simulated client error)
    - GET /api/timeout is the only guarded route; guard < handler delay
    - GET /api/binary emits exactly BINARY_SAMPLE as application/octet-stream
    - Binary source read failures surface as PayloadStreamError (500)

Design Decisions:
    - Binary payload buffered before the response starts: a read failure can
      still become a JSON 500 instead of a truncated body
"""

import asyncio
import io
import shutil
from typing import BinaryIO

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import RedirectResponse

from sample_api.config import Settings, get_settings
from sample_api.core.deadline import race_against_deadline
from sample_api.core.errors import PayloadStreamError, SimulatedBadRequestError

router = APIRouter(prefix="/api", tags=["responses"])

# JPEG/JFIF header magic
BINARY_SAMPLE = bytes([0xFF, 0xD8, 0xFF, 0xE0, 0x00, 0x10, 0x4A, 0x46, 0x49, 0x46])

SESSION_COOKIE_NAME = "session_id"
SESSION_COOKIE_VALUE = "12345"
SESSION_COOKIE_MAX_AGE = 900_000


@router.get("/error")
async def error_example():
    raise SimulatedBadRequestError()


async def _delayed_message(delay_seconds: float) -> dict:
    await asyncio.sleep(delay_seconds)
    return {"message": f"This response was delayed by {delay_seconds:g} seconds"}


@router.get("/timeout")
async def timeout_example(settings: Settings = Depends(get_settings)):
    """Slow handler raced against the guard; the guard fires first."""
    return await race_against_deadline(
        _delayed_message(settings.slow_response_delay_seconds),
        settings.timeout_guard_seconds,
        route="/api/timeout",
    )


@router.get("/redirect")
async def redirect_example(settings: Settings = Depends(get_settings)):
    return RedirectResponse(settings.redirect_url, status_code=status.HTTP_302_FOUND)


@router.get("/large-response")
async def large_response_example(settings: Settings = Depends(get_settings)):
    return Response(content=b"a" * settings.large_response_size, media_type="text/plain")


def _binary_source() -> BinaryIO:
    return io.BytesIO(BINARY_SAMPLE)


@router.get("/binary")
async def binary_example():
    buffer = io.BytesIO()
    try:
        shutil.copyfileobj(_binary_source(), buffer)
    except OSError as exc:
        raise PayloadStreamError(str(exc)) from exc
    return Response(content=buffer.getvalue(), media_type="application/octet-stream")


@router.get("/cookies")
async def cookies_example(response: Response):
    response.set_cookie(
        SESSION_COOKIE_NAME, SESSION_COOKIE_VALUE,
        max_age=SESSION_COOKIE_MAX_AGE, httponly=True,
    )
    return {"message": "Cookie set"}
