"""Startup and shutdown for hosts that embed the program image provider.

Hey future me - the host (refresh scheduler) does:

    async with program_image_lifespan(services=[my_backend]) as provider:
        await provider.refresh(program)

Everything before `yield` is startup (logging, storage dir), everything
after is shutdown (HTTP pool). The finally ensures the pool is closed even
when the host crashes mid-refresh.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager

from tvspot.application.services.livetv import ProgramImageProvider
from tvspot.config import Settings, get_settings
from tvspot.domain.exceptions import ConfigurationError
from tvspot.domain.ports import IImageSink, ILiveTvService
from tvspot.infrastructure.filesystem import LocalFileSystem
from tvspot.infrastructure.integrations import HttpClientPool, HttpImageClient
from tvspot.infrastructure.observability import configure_logging
from tvspot.infrastructure.persistence import FileImageStore
from tvspot.infrastructure.providers import LiveTvServiceRegistry

logger = logging.getLogger(__name__)


def _ensure_image_directory(settings: Settings) -> None:
    """Create the image directory or fail with a clear message."""
    image_path = settings.storage.image_path
    if image_path.exists() and not image_path.is_dir():
        raise ConfigurationError(
            f"Image storage path '{image_path}' exists but is not a directory. "
            "Update STORAGE_IMAGE_PATH."
        )
    try:
        image_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigurationError(
            f"Unable to create image storage directory '{image_path}': {exc}"
        ) from exc


def create_program_image_provider(
    settings: Settings,
    services: Sequence[ILiveTvService] = (),
    image_sink: IImageSink | None = None,
) -> ProgramImageProvider:
    """Wire a ProgramImageProvider with the default adapters."""
    return ProgramImageProvider(
        live_tv_manager=LiveTvServiceRegistry(services),
        image_sink=image_sink or FileImageStore(settings.storage),
        file_system=LocalFileSystem(),
        http_client=HttpImageClient(settings=settings.http),
    )


@asynccontextmanager
async def program_image_lifespan(
    settings: Settings | None = None,
    services: Sequence[ILiveTvService] = (),
    image_sink: IImageSink | None = None,
) -> AsyncGenerator[ProgramImageProvider, None]:
    """Configure logging and storage, yield a provider, close the HTTP pool."""
    settings = settings or get_settings()

    configure_logging(
        log_level=settings.log_level,
        json_format=settings.observability.log_json_format,
        app_name=settings.app_name,
    )
    logger.info("Starting %s", settings.app_name)

    if image_sink is None:
        _ensure_image_directory(settings)

    try:
        yield create_program_image_provider(settings, services, image_sink)
    finally:
        await HttpClientPool.close()
        logger.info("Stopped %s", settings.app_name)


__all__ = ["create_program_image_provider", "program_image_lifespan"]
