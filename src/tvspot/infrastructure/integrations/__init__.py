"""External integrations (HTTP)."""

from tvspot.infrastructure.integrations.http_pool import HttpClientPool
from tvspot.infrastructure.integrations.image_http_client import HttpImageClient

__all__ = ["HttpClientPool", "HttpImageClient"]
