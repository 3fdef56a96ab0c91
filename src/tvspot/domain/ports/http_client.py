"""HTTP client port."""

from abc import ABC, abstractmethod

from tvspot.domain.ports.image_stream import HttpImageResponse


class IHttpClient(ABC):
    """Streaming HTTP GET used to pull images from remote URLs.

    Future me note:
    Implementations must translate transport errors into the domain
    exceptions - ImageNotFoundError for 404, HttpError for everything
    else - so callers never see library-specific exceptions.
    """

    @abstractmethod
    async def get_response(self, url: str) -> HttpImageResponse:
        """GET the URL without reading the body.

        The caller owns HttpImageResponse.content and must close it.

        Raises:
            ImageNotFoundError: The server answered 404
            HttpError: Any other failed status or transport error
        """
        ...


__all__ = ["IHttpClient"]
