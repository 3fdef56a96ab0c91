"""Live TV Service Registry - the set of pluggable live TV backends.

Hey future me - this is where every live TV backend gets registered at
startup. Programs carry the name of the backend that produced them
(service_name); lookups here are case-insensitive because backends and
stored programs don't always agree on casing ("HDHomeRun" vs "hdhomerun").

Registration order is kept. If two services share a name (ignoring case),
the newer registration replaces the older one.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tvspot.domain.ports import ILiveTvManager, ILiveTvService

logger = logging.getLogger(__name__)


class LiveTvServiceRegistry(ILiveTvManager):
    """In-memory registry of live TV services."""

    def __init__(self, services: Sequence[ILiveTvService] = ()) -> None:
        self._services: list[ILiveTvService] = []
        for service in services:
            self.register(service)

    # === Registration ===

    def register(self, service: ILiveTvService) -> None:
        """Register a service, replacing one with the same name."""
        for index, existing in enumerate(self._services):
            if existing.name.lower() == service.name.lower():
                logger.warning(
                    "Live TV service %s already registered, replacing it", service.name
                )
                self._services[index] = service
                return

        self._services.append(service)
        logger.info("Registered live TV service: %s", service.name)

    def unregister(self, name: str) -> bool:
        """Remove a service by name.

        Returns:
            True if removed, False if not found
        """
        service = self.get_service(name)
        if service is None:
            return False
        self._services.remove(service)
        logger.info("Unregistered live TV service: %s", service.name)
        return True

    # === Lookup ===

    @property
    def services(self) -> Sequence[ILiveTvService]:
        return tuple(self._services)

    def get_service(self, name: str | None) -> ILiveTvService | None:
        if not name:
            return None
        wanted = name.lower()
        return next(
            (service for service in self._services if service.name.lower() == wanted),
            None,
        )

    def __len__(self) -> int:
        """Number of registered services."""
        return len(self._services)

    def __repr__(self) -> str:
        names = ", ".join(service.name for service in self._services)
        return f"LiveTvServiceRegistry([{names}])"


__all__ = ["LiveTvServiceRegistry"]
