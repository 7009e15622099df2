"""Bearer Check — static token comparison against the Authorization header."""

from fastapi import APIRouter, Depends, Header

from sample_api.config import Settings, get_settings
from sample_api.core.errors import UnauthorizedError

router = APIRouter(prefix="/api", tags=["auth"])


@router.get("/auth")
async def auth_example(
    authorization: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
):
    """Authenticated only when the header is exactly 'Bearer <token>'."""
    if authorization != f"Bearer {settings.auth_token}":
        raise UnauthorizedError()
    return {"message": "Authenticated"}
