"""Persistence adapters."""

from tvspot.infrastructure.persistence.image_store import (
    FileImageStore,
    extension_for_content_type,
)

__all__ = ["FileImageStore", "extension_for_content_type"]
