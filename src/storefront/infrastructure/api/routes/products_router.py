"""Mock product catalog endpoint."""

from typing import Any

from fastapi import APIRouter, Query

from storefront.core.config import get_settings
from storefront.domain.services import generate_products

router = APIRouter(tags=["products"])


@router.get(
    "",
    summary="Mock products",
    description="Return freshly generated fake products.",
)
async def mocking_products(
    count: int | None = Query(default=None, ge=0, le=1000),
) -> dict[str, Any]:
    if count is None:
        count = get_settings().mock_products_count
    return {"status": "success", "payload": generate_products(count)}
