"""Session endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from storefront.infrastructure.auth import passport_call

router = APIRouter(tags=["sessions"])


@router.get(
    "/current",
    summary="Current user",
    description="Return the user carried by the request's bearer token.",
)
async def current_session(user: Any = Depends(passport_call("jwt"))) -> dict[str, Any]:
    return {"status": "success", "payload": user}
