"""File-backed image sink.

Hey future me - this is the simplest IImageSink that actually persists
something: bytes go to disk, the path goes onto the item. The catalog's
real persistence (indexing, DB rows) hooks in behind IImageSink too.

Path structure: {image_path}/{id[:2]}/{id}/{image_type}[{index}]{ext}
Sharding by the first 2 chars keeps directories small.
"""

from __future__ import annotations

import asyncio
import logging
import mimetypes
from pathlib import Path

from tvspot.config import StorageSettings
from tvspot.domain.entities import BaseItem, ImageType
from tvspot.domain.exceptions import ValidationError
from tvspot.domain.ports import IImageSink, ImageStream

logger = logging.getLogger(__name__)

# mimetypes doesn't know these non-standard (but common) spellings
_EXTENSION_ALIASES: dict[str, str] = {
    "image/jpg": ".jpg",
    "image/jpeg": ".jpg",
    "image/pjpeg": ".jpg",
    "image/x-png": ".png",
    "image/webp": ".webp",
}


def extension_for_content_type(content_type: str) -> str:
    """Map a MIME type to a file extension ("image/jpeg" -> ".jpg")."""
    mime = content_type.split(";", 1)[0].strip().lower()
    if mime in _EXTENSION_ALIASES:
        return _EXTENSION_ALIASES[mime]

    guessed = mimetypes.guess_extension(mime)
    if guessed:
        return guessed

    _, _, subtype = mime.partition("/")
    subtype = subtype.lstrip(".")
    if not subtype or not subtype.replace("-", "").replace("+", "").isalnum():
        raise ValidationError(
            f"Cannot derive a file extension from content type '{content_type}'"
        )
    return f".{subtype}"


class FileImageStore(IImageSink):
    """Writes images below StorageSettings.image_path."""

    def __init__(self, settings: StorageSettings | None = None) -> None:
        self._settings = settings or StorageSettings()

    @property
    def base_path(self) -> Path:
        return Path(self._settings.image_path)

    def build_path(
        self,
        item: BaseItem,
        image_type: ImageType,
        extension: str,
        image_index: int | None = None,
    ) -> Path:
        """Build the target path for an item's image."""
        shard = item.id[:2] if len(item.id) >= 2 else "00"
        suffix = "" if image_index is None else str(image_index)
        return self.base_path / shard / item.id / f"{image_type.value}{suffix}{extension}"

    async def save_image(
        self,
        item: BaseItem,
        stream: ImageStream,
        content_type: str,
        image_type: ImageType,
        image_index: int | None,
        source_url: str | None,
    ) -> None:
        try:
            extension = extension_for_content_type(content_type)
            data = await stream.read()
        finally:
            await stream.aclose()

        target = self.build_path(item, image_type, extension, image_index)
        await asyncio.to_thread(_write_file, target, data)

        item.set_image_path(image_type, str(target), source_url)
        logger.debug(
            "Saved %s image for item %s: %s (%d bytes)",
            image_type.value,
            item.id,
            target,
            len(data),
        )


def _write_file(target: Path, data: bytes) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)


__all__ = ["FileImageStore", "extension_for_content_type"]
