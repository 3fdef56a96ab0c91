"""Image sink port - persists image bytes for a catalog item."""

from abc import ABC, abstractmethod

from tvspot.domain.entities import BaseItem, ImageType
from tvspot.domain.ports.image_stream import ImageStream


class IImageSink(ABC):
    """Writes an image to storage and records it on the item."""

    @abstractmethod
    async def save_image(
        self,
        item: BaseItem,
        stream: ImageStream,
        content_type: str,
        image_type: ImageType,
        image_index: int | None,
        source_url: str | None,
    ) -> None:
        """Save an image.

        Takes ownership of the stream: implementations consume it and close it,
        whether saving succeeds or not.

        Args:
            item: Item the image belongs to
            stream: Image bytes
            content_type: MIME type, e.g. "image/jpeg"
            image_type: Slot on the item
            image_index: Position for multi-image slots (None for single slots)
            source_url: Opaque provenance tag, stored as-is
        """
        ...


__all__ = ["IImageSink"]
