from __future__ import annotations

from dataclasses import dataclass

from sports_data.core.config import Settings, settings


@dataclass(frozen=True)
class DataLayerConfig:
    enable_caching: bool = True
    cache_ttl_s: int = 300
    log_requests: bool = False

    @classmethod
    def from_settings(cls, cfg: Settings = settings) -> DataLayerConfig:
        return cls(
            enable_caching=cfg.cache_enabled,
            cache_ttl_s=cfg.cache_ttl_s,
            log_requests=cfg.log_requests,
        )
