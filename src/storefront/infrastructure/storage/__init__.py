"""Upload storage."""

from storefront.infrastructure.storage.uploader import (
    DiskStorage,
    StoredUpload,
    UploadError,
    Uploader,
    get_uploader,
    timestamped_filename,
)

__all__ = [
    "DiskStorage",
    "StoredUpload",
    "UploadError",
    "Uploader",
    "get_uploader",
    "timestamped_filename",
]
