"""Tests for the BaseMetadataProvider port."""

from datetime import UTC, datetime

import pytest

from tvspot.domain.entities import (
    BaseItem,
    ProviderInfo,
    ProviderRefreshStatus,
)
from tvspot.domain.ports import (
    BaseMetadataProvider,
    ItemUpdateType,
    MetadataProviderPriority,
)


class _RecordingProvider(BaseMetadataProvider):
    provider_version = "2"

    def __init__(self) -> None:
        self.fetched: list[tuple[BaseItem, bool, ProviderInfo]] = []

    def supports(self, item: BaseItem) -> bool:
        return True

    def _needs_refresh_internal(
        self, item: BaseItem, provider_info: ProviderInfo | None
    ) -> bool:
        return provider_info is None

    async def fetch(self, item: BaseItem, force: bool, provider_info: ProviderInfo) -> bool:
        self.fetched.append((item, force, provider_info))
        return True

    @property
    def priority(self) -> MetadataProviderPriority:
        return MetadataProviderPriority.THIRD

    @property
    def item_update_type(self) -> ItemUpdateType:
        return ItemUpdateType.METADATA_DOWNLOAD


@pytest.fixture
def provider() -> _RecordingProvider:
    return _RecordingProvider()


class TestBaseMetadataProvider:
    """Shared provider behavior."""

    def test_provider_id_is_class_name(self, provider: _RecordingProvider) -> None:
        assert provider.provider_id == "_RecordingProvider"

    def test_needs_refresh_delegates(self, provider: _RecordingProvider) -> None:
        item = BaseItem(id="item-1")

        assert provider.needs_refresh(item) is True
        assert provider.needs_refresh(item, ProviderInfo()) is False

    def test_get_provider_info_defaults_to_new_record(
        self, provider: _RecordingProvider
    ) -> None:
        info = provider.get_provider_info(BaseItem(id="item-1"))

        assert info.last_refreshed is None
        assert info.last_refresh_status is ProviderRefreshStatus.SUCCESS

    def test_set_last_refreshed_stores_record(self, provider: _RecordingProvider) -> None:
        item = BaseItem(id="item-1")
        info = ProviderInfo()
        now = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)

        provider.set_last_refreshed(item, now, info)

        assert info.last_refreshed == now
        assert info.provider_version == "2"
        assert provider.get_provider_info(item) is info

    def test_set_last_refreshed_with_status(self, provider: _RecordingProvider) -> None:
        item = BaseItem(id="item-1")
        info = ProviderInfo()

        provider.set_last_refreshed(
            item, datetime.now(UTC), info, ProviderRefreshStatus.COMPLETED_WITH_ERRORS
        )

        assert info.last_refresh_status is ProviderRefreshStatus.COMPLETED_WITH_ERRORS

    async def test_refresh_passes_stored_info(self, provider: _RecordingProvider) -> None:
        item = BaseItem(id="item-1")
        stored = ProviderInfo()
        item.provider_data[provider.provider_id] = stored

        assert await provider.refresh(item, force=True) is True
        assert provider.fetched == [(item, True, stored)]

    def test_priorities_are_ordered(self) -> None:
        assert (
            MetadataProviderPriority.FIRST
            < MetadataProviderPriority.SECOND
            < MetadataProviderPriority.THIRD
            < MetadataProviderPriority.LAST
        )

    def test_update_types_combine(self) -> None:
        combined = ItemUpdateType.IMAGE_UPDATE | ItemUpdateType.METADATA_IMPORT

        assert ItemUpdateType.IMAGE_UPDATE in combined
        assert ItemUpdateType.METADATA_DOWNLOAD not in combined
