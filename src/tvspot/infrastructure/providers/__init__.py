"""Provider infrastructure."""

from tvspot.infrastructure.providers.live_tv_registry import LiveTvServiceRegistry

__all__ = ["LiveTvServiceRegistry"]
