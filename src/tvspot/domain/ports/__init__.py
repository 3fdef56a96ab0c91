"""Domain ports (interfaces) for tvspot.

Infrastructure implements these, application services depend only on them.
"""

from tvspot.domain.ports.file_system import IFileSystem
from tvspot.domain.ports.http_client import IHttpClient
from tvspot.domain.ports.image_sink import IImageSink
from tvspot.domain.ports.image_stream import (
    HttpImageResponse,
    ImageStream,
    StreamResponseInfo,
)
from tvspot.domain.ports.live_tv import ILiveTvManager, ILiveTvService
from tvspot.domain.ports.metadata_provider import (
    BaseMetadataProvider,
    ItemUpdateType,
    MetadataProviderPriority,
)

__all__ = [
    "BaseMetadataProvider",
    "HttpImageResponse",
    "IFileSystem",
    "IHttpClient",
    "IImageSink",
    "ILiveTvManager",
    "ILiveTvService",
    "ImageStream",
    "ItemUpdateType",
    "MetadataProviderPriority",
    "StreamResponseInfo",
]
