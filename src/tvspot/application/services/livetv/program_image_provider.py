"""Program Image Provider - fetches the primary image for live TV programs.

Hey future me - this runs inside the per-item metadata refresh, right after
the FIRST-priority providers filled in the program data.

FLOW:
    fetch(program)
        │
        ├─► already has a primary image? → stamp last_refreshed, done
        │
        └─► download_image(program)
                │
                ├─► select_image_source()  (local file > URL > backend service > none)
                ├─► open that ONE source → FetchResult(stream, content_type)
                └─► IImageSink.save_image(..., PRIMARY, source_url=service_name + program id)

ERRORS:
- 404 from the image URL → swallowed, refresh still counts as done
- everything else (bad content type, missing local file, backend error,
  cancellation) → propagates, no last_refreshed stamp

STREAMS:
Until save_image() is called, WE own the stream and close it on any error.
From save_image() on, the sink owns it.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from tvspot.application.services.livetv.image_source import (
    FetchResult,
    ImageSource,
    ImageSourceKind,
    content_type_from_path,
    is_image_content_type,
    select_image_source,
)
from tvspot.domain.entities import BaseItem, ImageType, LiveTvProgram, ProviderInfo
from tvspot.domain.exceptions import (
    HttpError,
    InvalidImageResponseError,
    ValidationError,
)
from tvspot.domain.ports import (
    BaseMetadataProvider,
    IFileSystem,
    IHttpClient,
    IImageSink,
    ILiveTvManager,
    ItemUpdateType,
    MetadataProviderPriority,
)

logger = logging.getLogger(__name__)


class ProgramImageProvider(BaseMetadataProvider):
    """Downloads the primary image of a LiveTvProgram.

    Stateless apart from its injected collaborators, so one instance can
    serve concurrent refreshes of different programs.
    """

    def __init__(
        self,
        live_tv_manager: ILiveTvManager,
        image_sink: IImageSink,
        file_system: IFileSystem,
        http_client: IHttpClient,
    ) -> None:
        self._live_tv_manager = live_tv_manager
        self._image_sink = image_sink
        self._file_system = file_system
        self._http_client = http_client

    # === Provider metadata ===

    @property
    def priority(self) -> MetadataProviderPriority:
        """Runs after the FIRST-priority providers."""
        return MetadataProviderPriority.SECOND

    @property
    def item_update_type(self) -> ItemUpdateType:
        return ItemUpdateType.IMAGE_UPDATE

    def supports(self, item: BaseItem) -> bool:
        return isinstance(item, LiveTvProgram)

    def _needs_refresh_internal(
        self, item: BaseItem, provider_info: ProviderInfo | None
    ) -> bool:
        return not item.has_image(ImageType.PRIMARY)

    # === Refresh ===

    async def fetch(
        self,
        item: BaseItem,
        force: bool,
        provider_info: ProviderInfo,
    ) -> bool:
        """Fetch the primary image if the program has none yet.

        Hey future me - force does NOT bypass the has-image check! Any primary
        image, wherever it came from, means we're done here.

        Args:
            item: The program
            force: Ignored for the has-image check (see above)
            provider_info: This provider's refresh record for the item

        Returns:
            True - failures other than "image not found" raise instead
        """
        if item.has_image(ImageType.PRIMARY):
            self.set_last_refreshed(item, datetime.now(UTC), provider_info)
            return True

        if not isinstance(item, LiveTvProgram):
            raise ValidationError(
                f"{type(self).__name__} only handles live TV programs, got {type(item).__name__}"
            )

        try:
            await self.download_image(item)
        except HttpError as e:
            # Don't fail the provider on a 404
            if not e.is_not_found:
                raise
            logger.info(
                "No image available for program %s (%s): %s",
                item.id,
                item.service_name,
                e.url,
            )

        self.set_last_refreshed(item, datetime.now(UTC), provider_info)
        return True

    def select_image_source(self, item: LiveTvProgram) -> ImageSource:
        """Pick the single source this program's image will come from."""
        return select_image_source(item, self._live_tv_manager)

    async def download_image(self, item: LiveTvProgram) -> bool:
        """Fetch the program image from its source and hand it to the sink.

        Returns:
            True if an image was saved, False if no source was configured
        """
        source = self.select_image_source(item)
        logger.debug(
            "Image source for program %s: %s", item.id, source.kind.value
        )

        result = await self._open_source(item, source)
        if result is None:
            logger.debug(
                "No image source for program %s (service=%s)",
                item.id,
                item.service_name,
            )
            return False

        program_info = item.program_info
        assert program_info is not None
        # No real URL for every source kind, so tag by backend + program
        source_url = f"{item.service_name}{program_info.id}"

        await self._image_sink.save_image(
            item,
            result.stream,
            result.content_type,
            ImageType.PRIMARY,
            None,
            source_url,
        )
        logger.info(
            "Saved primary image for program %s (%s, %s)",
            item.id,
            result.content_type,
            source.kind.value,
        )
        return True

    async def _open_source(
        self, item: LiveTvProgram, source: ImageSource
    ) -> FetchResult | None:
        """Open the chosen source. Caller owns the returned stream."""
        program_info = item.program_info
        assert program_info is not None

        if source.kind is ImageSourceKind.LOCAL_FILE:
            assert source.location is not None
            content_type = content_type_from_path(source.location)
            stream = await self._file_system.open_read(source.location)
            return FetchResult(stream=stream, content_type=content_type)

        if source.kind is ImageSourceKind.REMOTE_URL:
            assert source.location is not None
            response = await self._http_client.get_response(source.location)
            if not is_image_content_type(response.content_type):
                await response.content.aclose()
                raise InvalidImageResponseError(response.content_type, source.location)
            return FetchResult(stream=response.content, content_type=response.content_type)

        if source.kind is ImageSourceKind.SERVICE:
            assert source.service is not None
            service_response = await source.service.get_program_image(
                program_info.id, program_info.channel_id
            )
            return FetchResult(
                stream=service_response.stream,
                content_type=service_response.mime_type,
            )

        return None


__all__ = ["ProgramImageProvider"]
