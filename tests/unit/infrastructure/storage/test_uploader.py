"""Unit tests for the disk uploader."""

import io
import re
import time
from pathlib import Path

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from storefront.core.config import Settings
from storefront.infrastructure.storage import (
    DiskStorage,
    UploadError,
    Uploader,
    get_uploader,
    timestamped_filename,
)


def make_upload(name: str = "producto.png", content: bytes = b"\x89PNG", content_type: str = "image/png") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(content),
        filename=name,
        headers=Headers({"content-type": content_type}),
    )


class TestTimestampedFilename:

    def test_prefixes_epoch_millis(self):
        before = int(time.time() * 1000)
        name = timestamped_filename(make_upload("foto.jpg"))
        after = int(time.time() * 1000)

        match = re.fullmatch(r"(\d+)-foto\.jpg", name)
        assert match is not None
        assert before <= int(match.group(1)) <= after

    def test_strips_directories_from_original_name(self):
        name = timestamped_filename(make_upload("../../etc/passwd"))

        assert name.endswith("-passwd")
        assert "/" not in name


class TestUploader:

    @pytest.mark.asyncio
    async def test_save_writes_file(self, tmp_path: Path):
        uploader = Uploader(DiskStorage(tmp_path))

        stored = await uploader.save(make_upload("producto.png", b"image-bytes"))

        assert stored is not None
        assert stored.path.parent == tmp_path
        assert stored.path.read_bytes() == b"image-bytes"
        assert stored.original_name == "producto.png"
        assert stored.filename.endswith("-producto.png")
        assert stored.size == len(b"image-bytes")
        assert stored.mime_type == "image/png"

    @pytest.mark.asyncio
    async def test_save_creates_destination(self, tmp_path: Path):
        destination = tmp_path / "public" / "img"
        uploader = Uploader(DiskStorage(destination))

        stored = await uploader.save(make_upload())

        assert stored is not None
        assert destination.is_dir()

    @pytest.mark.asyncio
    async def test_custom_filename(self, tmp_path: Path):
        uploader = Uploader(DiskStorage(tmp_path, filename=lambda upload: "fijo.png"))

        stored = await uploader.save(make_upload())

        assert stored.path == tmp_path / "fijo.png"

    @pytest.mark.asyncio
    async def test_write_failure_is_logged_and_skipped(self, tmp_path: Path, monkeypatch):
        storage = DiskStorage(tmp_path)

        def fail(upload, content):
            raise UploadError("disk full")

        monkeypatch.setattr(storage, "write", fail)

        assert await Uploader(storage).save(make_upload()) is None


class TestDiskStorageWrite:

    def test_occupied_destination_raises_upload_error(self, tmp_path: Path):
        occupied = tmp_path / "img"
        occupied.write_text("not a directory")

        with pytest.raises(UploadError):
            DiskStorage(occupied).write(make_upload(), b"image-bytes")

    @pytest.mark.asyncio
    async def test_save_returns_none_when_destination_unusable(self, tmp_path: Path):
        occupied = tmp_path / "img"
        occupied.write_text("not a directory")

        stored = await Uploader(DiskStorage(occupied)).save(make_upload())

        assert stored is None
        assert occupied.read_text() == "not a directory"


def test_get_uploader_uses_configured_directory():
    uploader = get_uploader(Settings(upload_dir="media/uploads"))

    assert uploader.storage.destination == Path("media/uploads")
