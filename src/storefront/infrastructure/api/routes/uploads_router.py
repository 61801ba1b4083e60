"""Image upload endpoint."""

from typing import Any

from fastapi import APIRouter, Depends, File, UploadFile, status

from storefront.core.logging import get_logger
from storefront.infrastructure.auth import passport_call
from storefront.infrastructure.storage import Uploader, get_uploader

logger = get_logger(__name__)

router = APIRouter(tags=["uploads"])


def get_request_uploader() -> Uploader:
    """Uploader dependency bound to the configured upload directory."""
    return get_uploader()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Upload a file",
    description="Store a file in the upload directory as {epoch-millis}-{original-name}.",
)
async def upload_file(
    file: UploadFile = File(..., description="File to upload"),
    user: Any = Depends(passport_call("jwt")),
    uploader: Uploader = Depends(get_request_uploader),
) -> dict[str, Any]:
    stored = await uploader.save(file)
    if stored is None:
        return {"status": "success", "payload": None}

    logger.info("Upload stored", filename=stored.filename, size=stored.size)
    return {"status": "success", "payload": stored.to_dict()}
