"""ImageStream implementations.

Hey future me - all three are read-once. read() after aclose() raises
ValueError (same as reading a closed file). aclose() is idempotent so error
paths can call it without checking first.
"""

from __future__ import annotations

import asyncio
from typing import BinaryIO

import httpx

from tvspot.domain.exceptions import HttpError


class BytesImageStream:
    """In-memory image stream (live TV backends that already hold the bytes)."""

    def __init__(self, data: bytes) -> None:
        self._data: bytes | None = data
        self.closed = False

    async def read(self) -> bytes:
        if self.closed or self._data is None:
            raise ValueError("I/O operation on closed stream")
        data, self._data = self._data, b""
        return data

    async def aclose(self) -> None:
        self._data = None
        self.closed = True


class FileImageStream:
    """Local file opened read-only. Reads run off the event loop."""

    def __init__(self, file: BinaryIO, path: str) -> None:
        self._file = file
        self.path = path

    @property
    def closed(self) -> bool:
        return self._file.closed

    async def read(self) -> bytes:
        if self._file.closed:
            raise ValueError(f"I/O operation on closed file: {self.path}")
        return await asyncio.to_thread(self._file.read)

    async def aclose(self) -> None:
        if not self._file.closed:
            self._file.close()


class HttpResponseImageStream:
    """Body of a streamed httpx response.

    Closing it returns the connection to the pool - never forget aclose()!
    """

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        self._consumed = False
        self.closed = False

    async def read(self) -> bytes:
        # httpx keeps the body cached after aread(), so read-once is tracked here
        if self.closed:
            raise ValueError(f"I/O operation on closed response: {self._response.url}")
        if self._consumed:
            return b""
        try:
            data = await self._response.aread()
        except httpx.HTTPError as e:
            raise HttpError(
                f"Failed reading image body from {self._response.url}: {e}",
                url=str(self._response.url),
            ) from e
        self._consumed = True
        return data

    async def aclose(self) -> None:
        self.closed = True
        if not self._response.is_closed:
            await self._response.aclose()


__all__ = ["BytesImageStream", "FileImageStream", "HttpResponseImageStream"]
