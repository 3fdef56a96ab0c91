"""Tests for the file-backed image sink."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from tvspot.config import StorageSettings
from tvspot.domain.entities import ImageType, LiveTvProgram, ProgramInfo
from tvspot.domain.exceptions import ValidationError
from tvspot.infrastructure.persistence import FileImageStore, extension_for_content_type
from tvspot.infrastructure.streams import BytesImageStream


@pytest.fixture
def store(tmp_path: Path) -> FileImageStore:
    return FileImageStore(StorageSettings(image_path=tmp_path / "images"))


@pytest.fixture
def program() -> LiveTvProgram:
    return LiveTvProgram(
        id="abc123",
        service_name="ServiceX",
        program_info=ProgramInfo(id="prog123", channel_id="ch1"),
    )


class TestExtensionForContentType:
    """MIME type → file extension."""

    @pytest.mark.parametrize(
        ("content_type", "expected"),
        [
            ("image/jpeg", ".jpg"),
            ("image/jpg", ".jpg"),
            ("IMAGE/JPEG; charset=binary", ".jpg"),
            ("image/png", ".png"),
            ("image/gif", ".gif"),
            ("image/webp", ".webp"),
            ("image/heic-custom", ".heic-custom"),
        ],
    )
    def test_known_and_fallback_types(self, content_type: str, expected: str) -> None:
        assert extension_for_content_type(content_type) == expected

    @pytest.mark.parametrize("content_type", ["image/", "image/../etc", ""])
    def test_unusable_types_raise(self, content_type: str) -> None:
        with pytest.raises(ValidationError):
            extension_for_content_type(content_type)


class TestFileImageStore:
    """Saving images to disk."""

    async def test_save_writes_file_and_records_path(
        self, store: FileImageStore, program: LiveTvProgram, tmp_path: Path
    ) -> None:
        stream = BytesImageStream(b"jpeg-bytes")

        await store.save_image(
            program, stream, "image/jpeg", ImageType.PRIMARY, None, "ServiceXprog123"
        )

        expected = tmp_path / "images" / "ab" / "abc123" / "primary.jpg"
        assert expected.read_bytes() == b"jpeg-bytes"
        assert program.get_image_path(ImageType.PRIMARY) == str(expected)
        assert program.image_sources[ImageType.PRIMARY] == "ServiceXprog123"
        assert program.has_image(ImageType.PRIMARY) is True
        assert stream.closed is True

    async def test_image_index_in_file_name(
        self, store: FileImageStore, program: LiveTvProgram, tmp_path: Path
    ) -> None:
        await store.save_image(
            program, BytesImageStream(b"b"), "image/png", ImageType.BACKDROP, 2, None
        )

        assert (tmp_path / "images" / "ab" / "abc123" / "backdrop2.png").exists()
        assert ImageType.BACKDROP not in program.image_sources

    async def test_stream_closed_when_content_type_is_unusable(
        self, store: FileImageStore, program: LiveTvProgram
    ) -> None:
        stream = BytesImageStream(b"x")

        with pytest.raises(ValidationError):
            await store.save_image(program, stream, "image/", ImageType.PRIMARY, None, None)

        assert stream.closed is True
        assert program.has_image(ImageType.PRIMARY) is False

    async def test_stream_closed_when_read_fails(
        self, store: FileImageStore, program: LiveTvProgram
    ) -> None:
        stream = AsyncMock()
        stream.read.side_effect = OSError("read failed")

        with pytest.raises(OSError, match="read failed"):
            await store.save_image(program, stream, "image/png", ImageType.PRIMARY, None, None)

        stream.aclose.assert_awaited_once()

    def test_short_ids_use_default_shard(self, store: FileImageStore, tmp_path: Path) -> None:
        program = LiveTvProgram(
            id="7", program_info=ProgramInfo(id="p", channel_id="c")
        )

        path = store.build_path(program, ImageType.PRIMARY, ".jpg")

        assert path == tmp_path / "images" / "00" / "7" / "primary.jpg"
