"""Metadata Provider Interface - base class for per-item refresh steps.

Hey future me - this is the PORT every metadata provider plugs into!

The refresh scheduler (not part of this package) walks its providers for an
item in priority order:

    for provider in sorted(providers, key=lambda p: p.priority):
        if provider.supports(item) and (force or provider.needs_refresh(item)):
            info = provider.get_provider_info(item)
            await provider.fetch(item, force, info)
            notify(provider.item_update_type)

Providers never touch the scheduler. The only thing they record is the
per-provider refresh stamp via set_last_refreshed().
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Flag, IntEnum, auto

from tvspot.domain.entities import BaseItem, ProviderInfo, ProviderRefreshStatus


class MetadataProviderPriority(IntEnum):
    """When a provider runs relative to the others (lower = earlier)."""

    FIRST = 0
    SECOND = 1
    THIRD = 2
    LAST = 3


class ItemUpdateType(Flag):
    """What kind of change a provider applies - drives downstream notifications."""

    NONE = 0
    METADATA_IMPORT = auto()
    METADATA_DOWNLOAD = auto()
    IMAGE_UPDATE = auto()


class BaseMetadataProvider(ABC):
    """Base class for metadata providers."""

    provider_version: str | None = None

    @property
    def provider_id(self) -> str:
        """Key under which this provider's ProviderInfo lives on an item."""
        return type(self).__name__

    @abstractmethod
    def supports(self, item: BaseItem) -> bool:
        """Check if this provider applies to the item."""
        ...

    def needs_refresh(
        self, item: BaseItem, provider_info: ProviderInfo | None = None
    ) -> bool:
        """Check if the item needs this provider to run."""
        return self._needs_refresh_internal(item, provider_info)

    @abstractmethod
    def _needs_refresh_internal(
        self, item: BaseItem, provider_info: ProviderInfo | None
    ) -> bool:
        ...

    @abstractmethod
    async def fetch(
        self,
        item: BaseItem,
        force: bool,
        provider_info: ProviderInfo,
    ) -> bool:
        """Run the provider for an item.

        Returns:
            True when the provider completed. Failures raise.
        """
        ...

    @property
    @abstractmethod
    def priority(self) -> MetadataProviderPriority:
        ...

    @property
    @abstractmethod
    def item_update_type(self) -> ItemUpdateType:
        ...

    async def refresh(self, item: BaseItem, force: bool = False) -> bool:
        """Run fetch() with the item's stored refresh record."""
        return await self.fetch(item, force, self.get_provider_info(item))

    def get_provider_info(self, item: BaseItem) -> ProviderInfo:
        """Get this provider's stored refresh record for the item (or a new one)."""
        return item.provider_data.get(self.provider_id) or ProviderInfo()

    def set_last_refreshed(
        self,
        item: BaseItem,
        value: datetime,
        provider_info: ProviderInfo,
        status: ProviderRefreshStatus = ProviderRefreshStatus.SUCCESS,
    ) -> None:
        """Stamp the refresh record and store it on the item."""
        provider_info.last_refreshed = value
        provider_info.last_refresh_status = status
        provider_info.provider_version = self.provider_version
        item.provider_data[self.provider_id] = provider_info


__all__ = [
    "BaseMetadataProvider",
    "ItemUpdateType",
    "MetadataProviderPriority",
]
