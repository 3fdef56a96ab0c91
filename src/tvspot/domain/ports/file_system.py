"""File system port."""

from abc import ABC, abstractmethod

from tvspot.domain.ports.image_stream import ImageStream


class IFileSystem(ABC):
    """Read access to files on this machine."""

    @abstractmethod
    async def open_read(self, path: str) -> ImageStream:
        """Open a file for shared read access.

        Raises:
            OSError: File missing, unreadable, is a directory, etc.
        """
        ...


__all__ = ["IFileSystem"]
