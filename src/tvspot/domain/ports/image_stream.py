"""Image stream port - the byte stream that travels from a source to the image sink.

Hey future me - every image source (local file, HTTP response body, live TV
backend) hands out an ImageStream. Whoever holds it last MUST call aclose().
The program image provider closes streams on its own error paths; once a
stream is passed to IImageSink.save_image() the sink owns it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class ImageStream(Protocol):
    """Async, read-once byte stream."""

    async def read(self) -> bytes:
        """Read the remaining bytes of the stream."""
        ...

    async def aclose(self) -> None:
        """Release the underlying resource. Safe to call more than once."""
        ...


@dataclass
class HttpImageResponse:
    """Response of an HTTP GET whose body has not been read yet."""

    content_type: str
    content: ImageStream
    status_code: int = 200


@dataclass
class StreamResponseInfo:
    """Image returned by a live TV backend service."""

    stream: ImageStream
    mime_type: str


__all__ = ["ImageStream", "HttpImageResponse", "StreamResponseInfo"]
