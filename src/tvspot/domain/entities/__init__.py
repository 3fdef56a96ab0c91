"""Domain entities."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


# Hey future me, ImageType is the SLOT an image fills on an item. A program has at most one image
# per slot. Only PRIMARY is written by the program image provider - the others exist because the
# catalog stores channel logos, backdrops etc. in the same map. Stored as string, not int!
class ImageType(str, Enum):
    """Kind of image attached to a catalog item."""

    PRIMARY = "primary"
    ART = "art"
    BACKDROP = "backdrop"
    BANNER = "banner"
    LOGO = "logo"
    THUMB = "thumb"


class ProviderRefreshStatus(str, Enum):
    """Outcome of the last refresh a metadata provider ran for an item."""

    SUCCESS = "success"
    COMPLETED_WITH_ERRORS = "completed_with_errors"
    FAILURE = "failure"


@dataclass
class ProviderInfo:
    """Per-provider refresh record stored on an item.

    Future me note:
    The refresh scheduler reads last_refreshed to decide when to run a
    provider again. Providers only ever write it through
    BaseMetadataProvider.set_last_refreshed().
    """

    last_refreshed: datetime | None = None
    last_refresh_status: ProviderRefreshStatus = ProviderRefreshStatus.SUCCESS
    provider_version: str | None = None


@dataclass(frozen=True)
class ProgramInfo:
    """Source snapshot of a program as the live TV backend delivered it.

    Zero, one or both of image_path/image_url may be set. When both are
    empty the backend service itself is asked for the image.
    """

    id: str
    channel_id: str
    name: str = ""
    image_path: str | None = None  # Local file on this machine
    image_url: str | None = None  # Remote URL (guide data CDN etc.)

    def __post_init__(self) -> None:
        """Validate program info."""
        if not self.id or not self.id.strip():
            raise ValueError("Program id cannot be empty")


@dataclass
class BaseItem:
    """Any item in the catalog that can carry images and provider data."""

    id: str
    name: str = ""
    image_paths: dict[ImageType, str] = field(default_factory=dict)
    # Hey future me - image_sources keeps the provenance tag per slot. It's opaque, never parse it!
    image_sources: dict[ImageType, str] = field(default_factory=dict)
    provider_data: dict[str, ProviderInfo] = field(default_factory=dict)
    date_last_saved: datetime | None = None

    def __post_init__(self) -> None:
        """Validate item data."""
        if not self.id or not self.id.strip():
            raise ValueError("Item id cannot be empty")

    def has_image(self, image_type: ImageType) -> bool:
        """Check if an image is recorded for the given slot."""
        return bool(self.image_paths.get(image_type))

    def get_image_path(self, image_type: ImageType) -> str | None:
        """Get the recorded path for the given slot, if any."""
        return self.image_paths.get(image_type) or None

    def set_image_path(
        self,
        image_type: ImageType,
        path: str,
        source_url: str | None = None,
    ) -> None:
        """Record a stored image for the given slot."""
        if not path:
            raise ValueError("Image path cannot be empty")
        self.image_paths[image_type] = path
        if source_url:
            self.image_sources[image_type] = source_url
        else:
            self.image_sources.pop(image_type, None)
        self.date_last_saved = datetime.now(UTC)


@dataclass
class LiveTvChannel(BaseItem):
    """A live TV channel."""

    service_name: str = ""


# Listen, a program is a schedule entry (one airing). service_name is the backend that produced it -
# the program image provider uses it both to find the backend service and to build the provenance tag.
@dataclass
class LiveTvProgram(BaseItem):
    """A live TV program (guide/schedule entry)."""

    service_name: str = ""
    program_info: ProgramInfo | None = None

    def __post_init__(self) -> None:
        """Validate program data."""
        super().__post_init__()
        if self.program_info is None:
            raise ValueError("LiveTvProgram requires program_info")


__all__ = [
    "BaseItem",
    "ImageType",
    "LiveTvChannel",
    "LiveTvProgram",
    "ProgramInfo",
    "ProviderInfo",
    "ProviderRefreshStatus",
]
