from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # api-sports (one key covers every sport host)
    api_sports_key: str | None = Field(
        default=None,
        repr=False,
        validation_alias=AliasChoices("API_SPORTS_KEY", "API_FOOTBALL_KEY"),
    )
    api_sports_football_base_url: str = "https://v3.football.api-sports.io"
    api_sports_basketball_base_url: str = "https://v1.basketball.api-sports.io"
    api_sports_hockey_base_url: str = "https://v1.hockey.api-sports.io"
    api_sports_american_football_base_url: str = "https://v1.american-football.api-sports.io"

    # odds-api
    odds_api_key: str | None = Field(default=None, repr=False)
    odds_api_base_url: str = "https://api.the-odds-api.com/v4"

    # espn (public, keyless)
    espn_base_url: str = "https://site.api.espn.com/apis/site/v2/sports"

    # http
    http_timeout_s: float = 30.0
    http_connect_timeout_s: float = 10.0

    # data layer
    cache_enabled: bool = True
    cache_ttl_s: int = 300
    injury_cache_ttl_s: int = 1800
    log_requests: bool = False
    log_level: str = "INFO"

    # -----------------------------
    # Required-key helpers
    # -----------------------------

    def require_odds_api_key(self) -> str:
        if not self.odds_api_key:
            raise RuntimeError("ODDS_API_KEY is not set. Set it in the environment or .env file.")
        return self.odds_api_key


settings = Settings()
