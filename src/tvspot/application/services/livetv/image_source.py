"""Image source selection for live TV programs.

Hey future me - the priority chain lives HERE and only here:

    1. LOCAL_FILE   program_info.image_path set
    2. REMOTE_URL   program_info.image_url set
    3. SERVICE      backend service named like program.service_name (case-insensitive)
    4. NONE         nothing to fetch

The first configured option wins and is the ONLY one tried. No fallthrough if
it fails later (missing file, 500, ...). A lower option is only reached when
the higher one is entirely absent.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath

from tvspot.domain.entities import LiveTvProgram
from tvspot.domain.ports import ILiveTvManager, ILiveTvService, ImageStream


class ImageSourceKind(Enum):
    """Where a program image comes from."""

    LOCAL_FILE = "local_file"
    REMOTE_URL = "remote_url"
    SERVICE = "service"
    NONE = "none"


@dataclass(frozen=True)
class ImageSource:
    """The one source chosen for a program.

    location is the file path or URL; service is set for SERVICE only.
    """

    kind: ImageSourceKind
    location: str | None = None
    service: ILiveTvService | None = None

    @classmethod
    def none(cls) -> ImageSource:
        """No source configured."""
        return cls(kind=ImageSourceKind.NONE)

    @property
    def found(self) -> bool:
        """Check if there is anything to fetch."""
        return self.kind is not ImageSourceKind.NONE


@dataclass(frozen=True)
class FetchResult:
    """Image bytes plus content type, owned by whoever holds it."""

    stream: ImageStream
    content_type: str


def select_image_source(
    program: LiveTvProgram,
    live_tv_manager: ILiveTvManager,
) -> ImageSource:
    """Pick the image source for a program."""
    info = program.program_info
    if info is None:
        return ImageSource.none()

    if info.image_path:
        return ImageSource(kind=ImageSourceKind.LOCAL_FILE, location=info.image_path)

    if info.image_url:
        return ImageSource(kind=ImageSourceKind.REMOTE_URL, location=info.image_url)

    service = find_service(live_tv_manager, program.service_name)
    if service is not None:
        return ImageSource(kind=ImageSourceKind.SERVICE, service=service)

    return ImageSource.none()


def find_service(
    live_tv_manager: ILiveTvManager,
    service_name: str | None,
) -> ILiveTvService | None:
    """First registered service whose name matches, ignoring case.

    Plain str.lower(), not casefold(): "Straße" must not match "STRASSE".
    """
    if not service_name:
        return None
    wanted = service_name.lower()
    return next(
        (service for service in live_tv_manager.services if service.name.lower() == wanted),
        None,
    )


def content_type_from_path(path: str) -> str:
    """Derive "image/<ext>" from a file name ("/media/img.JPG" -> "image/jpg")."""
    return "image/" + PurePath(path).suffix.lstrip(".").lower()


def is_image_content_type(content_type: str | None) -> bool:
    """Check for an image/* MIME type, case-insensitive."""
    return bool(content_type) and content_type.lower().startswith("image/")
