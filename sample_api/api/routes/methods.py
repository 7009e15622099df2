"""Method Echo — one route per HTTP method on /api.

Invariants:
    - GET and DELETE ignore any body
    - POST/PUT/PATCH echo the decoded JSON object back under "data"
    - Non-object bodies never reach the handler (json_object_body raises 400)
"""

from fastapi import APIRouter, Depends

from sample_api.schemas.payload import JsonObject, json_object_body

router = APIRouter(prefix="/api", tags=["methods"])


def _echo(method: str, body: JsonObject) -> dict:
    return {"message": f"{method} request successful", "data": body}


@router.get("")
async def get_example():
    return {"message": "GET request successful"}


@router.post("")
async def post_example(body: JsonObject = Depends(json_object_body)):
    return _echo("POST", body)


@router.put("")
async def put_example(body: JsonObject = Depends(json_object_body)):
    return _echo("PUT", body)


@router.patch("")
async def patch_example(body: JsonObject = Depends(json_object_body)):
    return _echo("PATCH", body)


@router.delete("")
async def delete_example():
    return {"message": "DELETE request successful"}
