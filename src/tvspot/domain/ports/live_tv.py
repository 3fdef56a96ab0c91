"""Live TV backend service ports.

Hey future me - a "service" is a pluggable live TV backend (tuner software,
guide provider, ...). Each one knows how to hand out an image for a
program it produced. The manager is just the registry of those services.

FLOW:
    ProgramImageProvider
        │
        └─► first of ILiveTvManager.services named like program.service_name
            (matched in select_image_source with str.lower, not casefold)
                │
                └─► ILiveTvService.get_program_image(program_id, channel_id)
                        └─► StreamResponseInfo(stream, mime_type)
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from tvspot.domain.ports.image_stream import StreamResponseInfo


class ILiveTvService(ABC):
    """A pluggable live TV backend."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this service - matched against LiveTvProgram.service_name."""
        ...

    @abstractmethod
    async def get_program_image(
        self,
        program_id: str,
        channel_id: str,
    ) -> StreamResponseInfo:
        """Fetch the image for a program.

        Args:
            program_id: Backend-specific program ID
            channel_id: Backend-specific channel ID

        Returns:
            StreamResponseInfo - the caller owns the stream
        """
        ...


class ILiveTvManager(ABC):
    """Registry of live TV backend services."""

    @property
    @abstractmethod
    def services(self) -> Sequence[ILiveTvService]:
        """All registered services in registration order."""
        ...


__all__ = ["ILiveTvService", "ILiveTvManager"]
