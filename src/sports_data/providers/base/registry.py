from __future__ import annotations

from sports_data.domain.enums import Sport

from .adapter import SportAdapter


class AdapterRegistry:
    """Sport -> adapter map. Registering a sport twice replaces the earlier adapter."""

    def __init__(self) -> None:
        self._adapters: dict[Sport, SportAdapter] = {}

    def register(self, adapter: SportAdapter) -> None:
        self._adapters[adapter.sport] = adapter

    def get(self, sport: Sport) -> SportAdapter | None:
        return self._adapters.get(sport)

    def registered_sports(self) -> list[Sport]:
        return list(self._adapters)

    def available_sports(self) -> list[Sport]:
        """Registered sports whose adapter is configured, in registration order."""
        return [sport for sport, adapter in self._adapters.items() if adapter.is_available()]
