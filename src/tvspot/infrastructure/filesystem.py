"""Local file system adapter."""

from __future__ import annotations

import asyncio
import logging
from typing import BinaryIO

from tvspot.domain.ports import IFileSystem
from tvspot.infrastructure.streams import FileImageStream

logger = logging.getLogger(__name__)


def _close_orphaned_file(task: asyncio.Future[BinaryIO]) -> None:
    """Close a file whose opener was cancelled before receiving it."""
    if task.cancelled() or task.exception() is not None:
        return
    task.result().close()


class LocalFileSystem(IFileSystem):
    """Opens files on this machine, off the event loop."""

    async def open_read(self, path: str) -> FileImageStream:
        """Open a file read-only.

        Hey future me - open() runs in a worker thread. If our task gets
        cancelled while the thread is still opening, the thread finishes anyway
        and the handle would leak. The done-callback closes it in that case.

        Raises:
            OSError: FileNotFoundError, PermissionError, IsADirectoryError, ...
        """
        opener = asyncio.ensure_future(asyncio.to_thread(open, path, "rb"))
        try:
            file = await asyncio.shield(opener)
        except asyncio.CancelledError:
            opener.add_done_callback(_close_orphaned_file)
            raise
        logger.debug("Opened local image file: %s", path)
        return FileImageStream(file, path)


__all__ = ["LocalFileSystem"]
