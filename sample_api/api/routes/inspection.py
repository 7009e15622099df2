"""Request Inspection — reflects query string, path parameters, and headers.

Invariants:
    - A repeated query key reports its last value
    - Header names are reported in canonical Title-Case; values are lists
"""

from fastapi import APIRouter, Request

router = APIRouter(prefix="/api", tags=["inspection"])


def canonical_header_name(name: str) -> str:
    """content-type → Content-Type."""
    return "-".join(part.capitalize() for part in name.split("-"))


@router.get("/query")
async def query_example(request: Request):
    return {
        "message": "Query parameters received",
        "query": dict(request.query_params),
    }


@router.get("/params/{id}")
async def params_example(id: str):
    return {"message": "Route parameters received", "params": id}


@router.get("/headers")
async def headers_example(request: Request):
    headers: dict[str, list[str]] = {}
    for name, value in request.headers.items():
        headers.setdefault(canonical_header_name(name), []).append(value)
    return {"message": "Headers received", "headers": headers}
