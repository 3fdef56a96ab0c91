"""Live TV metadata services."""

from tvspot.application.services.livetv.image_source import (
    FetchResult,
    ImageSource,
    ImageSourceKind,
    select_image_source,
)
from tvspot.application.services.livetv.program_image_provider import (
    ProgramImageProvider,
)

__all__ = [
    "FetchResult",
    "ImageSource",
    "ImageSourceKind",
    "ProgramImageProvider",
    "select_image_source",
]
