"""Deadline Guard — races a handler coroutine against a wall-clock deadline.

Invariants:
    - The handler runs as its own task; the guard only observes it
    - Deadline elapsed first → HandlerTimeoutError, handler task NOT cancelled
    - A late result (or exception) is discarded; it never reaches the client
    - Orphaned tasks are strongly referenced until they finish, then released

Design Decisions:
    - asyncio.wait(timeout=...) over asyncio.wait_for: wait_for cancels the
      awaitable on timeout, the guard must let it run to completion
"""

import asyncio
import logging
from typing import Any, Awaitable, TypeVar

from sample_api.core.errors import HandlerTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_orphaned: set[asyncio.Task] = set()


def _release_orphan(task: asyncio.Task) -> None:
    """Drop the reference and log how the unobserved handler ended."""
    _orphaned.discard(task)
    if task.cancelled():
        logger.debug("Orphaned handler task cancelled: %s", task.get_name())
        return
    exc = task.exception()
    if exc is not None:
        logger.debug(
            "Orphaned handler task failed after deadline: %s", exc,
        )
    else:
        logger.debug(
            "Orphaned handler task finished after deadline; result discarded",
        )


def pending_orphans() -> int:
    """Number of handler tasks still running after their deadline."""
    return len(_orphaned)


async def race_against_deadline(
    handler: Awaitable[T], timeout_seconds: float, route: str | None = None,
) -> T:
    """Return the handler's result, or raise HandlerTimeoutError if the deadline wins."""
    task: asyncio.Task[Any] = asyncio.ensure_future(handler)
    done, _ = await asyncio.wait({task}, timeout=timeout_seconds)
    if task in done:
        return task.result()

    _orphaned.add(task)
    task.add_done_callback(_release_orphan)
    logger.warning(
        "Handler exceeded %.2fs deadline", timeout_seconds,
        extra={"route": route, "error_code": "REQUEST_TIMEOUT"},
    )
    raise HandlerTimeoutError(timeout_seconds, route=route)
