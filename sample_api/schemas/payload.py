"""Payload Schemas — generic JSON-object bodies for the write-method echo routes.

Invariants:
    - Only JSON media types (ending in "json", e.g. application/vnd.api+json) are decoded
    - Only "is a JSON object" is checked; no field-level schema
    - Key order of the decoded object matches the request body
    - Any decode failure surfaces as InvalidRequestBodyError (400)
"""

from typing import Any

from fastapi import Request
from pydantic import TypeAdapter, ValidationError

from sample_api.core.errors import InvalidRequestBodyError

JsonObject = dict[str, Any]

_json_object_adapter = TypeAdapter(JsonObject)


def is_json_media_type(content_type: str | None) -> bool:
    """application/json; charset=utf-8 → True, text/plain → False."""
    if not content_type:
        return False
    return content_type.split(";", 1)[0].strip().lower().endswith("json")


def parse_json_object(raw: bytes) -> JsonObject:
    """Decode raw bytes into a JSON object or raise InvalidRequestBodyError."""
    try:
        return _json_object_adapter.validate_json(raw)
    except ValidationError as exc:
        raise InvalidRequestBodyError(reason=exc.errors()[0]["type"]) from exc


async def json_object_body(request: Request) -> JsonObject:
    """FastAPI dependency: the request body as a JSON object."""
    if not is_json_media_type(request.headers.get("content-type")):
        raise InvalidRequestBodyError(reason="unsupported_media_type")
    return parse_json_object(await request.body())
