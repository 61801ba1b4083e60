"""Local disk storage for uploaded images.

Files land in a single configured directory under the name
``{epoch-millis}-{original-name}``.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile

from storefront.core.config import Settings, get_settings
from storefront.core.logging import get_logger

logger = get_logger(__name__)


class UploadError(Exception):
    """Raised when an uploaded file cannot be written to disk."""

    pass


@dataclass(slots=True)
class StoredUpload:
    """Metadata for a file written by the uploader."""

    filename: str
    original_name: str
    path: Path
    size: int
    mime_type: str

    def to_dict(self) -> dict[str, str | int]:
        return {
            "filename": self.filename,
            "original_name": self.original_name,
            "path": str(self.path),
            "size": self.size,
            "mime_type": self.mime_type,
        }


def timestamped_filename(upload: UploadFile) -> str:
    original = Path(upload.filename or "unnamed").name
    return f"{int(time.time() * 1000)}-{original}"


class DiskStorage:
    """Resolves where an upload is written and under which name."""

    def __init__(
        self,
        destination: str | Path,
        filename: Callable[[UploadFile], str] = timestamped_filename,
    ) -> None:
        self.destination = Path(destination)
        self._filename = filename

    def destination_for(self, upload: UploadFile) -> Path:
        return self.destination

    def filename_for(self, upload: UploadFile) -> str:
        return self._filename(upload)

    def write(self, upload: UploadFile, content: bytes) -> Path:
        directory = self.destination_for(upload)
        file_path = directory / self.filename_for(upload)
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with open(file_path, "wb") as f:
                f.write(content)
        except OSError as e:
            raise UploadError(f"Could not write {file_path}: {e}") from e
        return file_path


class Uploader:
    """Stores uploaded files on disk.

    A failed write is logged and reported as ``None`` so the request can
    continue without the file.
    """

    def __init__(self, storage: DiskStorage) -> None:
        self.storage = storage

    async def save(self, upload: UploadFile) -> StoredUpload | None:
        content = await upload.read()
        try:
            path = self.storage.write(upload, content)
        except UploadError as e:
            logger.error("File upload failed", filename=upload.filename, error=str(e))
            return None

        stored = StoredUpload(
            filename=path.name,
            original_name=upload.filename or "unnamed",
            path=path,
            size=len(content),
            mime_type=upload.content_type or "application/octet-stream",
        )
        logger.info("File uploaded successfully", filename=stored.filename, size=stored.size)
        return stored


def get_uploader(settings: Settings | None = None) -> Uploader:
    """Uploader writing to the configured upload directory."""
    settings = settings or get_settings()
    return Uploader(DiskStorage(settings.upload_dir))
