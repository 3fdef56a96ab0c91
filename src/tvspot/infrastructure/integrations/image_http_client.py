"""httpx-backed IHttpClient for downloading images.

Hey future me - we use send(stream=True) so the body is NOT read here. The
program image provider checks the content type first and the image sink
reads the body later. Whoever ends up holding the response must close it,
otherwise the pooled connection never comes back!

Error mapping (so nobody upstream needs to know httpx):
    404                      → ImageNotFoundError
    other 4xx/5xx            → HttpError(status_code=...)
    timeout / connect / DNS  → HttpError(status_code=None)
"""

from __future__ import annotations

import logging

import httpx

from tvspot.config import HttpSettings
from tvspot.domain.exceptions import HttpError, ImageNotFoundError
from tvspot.domain.ports import HttpImageResponse, IHttpClient
from tvspot.infrastructure.integrations.http_pool import HttpClientPool
from tvspot.infrastructure.streams import HttpResponseImageStream

logger = logging.getLogger(__name__)


class HttpImageClient(IHttpClient):
    """Streaming GET over the shared HTTP client pool."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        settings: HttpSettings | None = None,
    ) -> None:
        """Initialize.

        Args:
            client: Explicit client (tests); defaults to the shared pool
            settings: Pool settings used if the pool isn't initialized yet
        """
        self._client = client
        self._settings = settings

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client
        return await HttpClientPool.get_client(self._settings)

    async def get_response(self, url: str) -> HttpImageResponse:
        client = await self._get_client()

        try:
            request = client.build_request("GET", url)
            response = await client.send(request, stream=True)
        except httpx.TimeoutException as e:
            logger.warning("Timeout fetching image %s: %s", url, e)
            raise HttpError(f"Timeout fetching {url}", url=url) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning("Request failed for image %s: %s", url, e)
            raise HttpError(f"Request failed for {url}: {e}", url=url) from e

        if response.is_error:
            await response.aclose()
            if response.status_code == 404:
                raise ImageNotFoundError(url)
            raise HttpError(
                f"HTTP {response.status_code} fetching {url}",
                status_code=response.status_code,
                url=url,
            )

        return HttpImageResponse(
            content_type=response.headers.get("content-type", ""),
            content=HttpResponseImageStream(response),
            status_code=response.status_code,
        )


__all__ = ["HttpImageClient"]
