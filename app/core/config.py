# app/core/config.py
from __future__ import annotations

import json
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


EnvType = Literal["local", "dev", "staging", "prod"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # App
    APP_NAME: str = "PickemLiveRankingsAPI"
    APP_ENV: EnvType = "local"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str | List[str] = Field(
        default='["http://localhost:3000","http://127.0.0.1:3000"]',
        description='JSON list or comma-separated origins',
    )

    # ESPN scoreboard feed
    ESPN_SCOREBOARD_URL: str = "https://site.api.espn.com/apis/site/v2/sports/football/nfl/scoreboard"
    # ESPN_TIMEOUT_SECONDS applies per attempt; one request makes up to ESPN_MAX_RETRIES + 1 attempts.
    # espn_worst_case_seconds must stay within ESPN_MAX_WAIT_SECONDS.
    ESPN_TIMEOUT_SECONDS: float = 5
    ESPN_MAX_RETRIES: int = 2
    ESPN_RETRY_BACKOFF: float = 0.2
    ESPN_MAX_WAIT_SECONDS: float = 20

    # Cache TTLs (seconds)
    LIVE_SCORES_TTL_SECONDS: int = 10
    WEEK_GAMES_TTL_SECONDS: int = 5 * 60
    CURRENT_WEEK_TTL_SECONDS: int = 24 * 60 * 60

    # Per-entrant scoring fan-out
    SCORING_MAX_WORKERS: int = 4

    @property
    def IS_LOCAL(self) -> bool:
        return self.APP_ENV == "local"

    @property
    def espn_worst_case_seconds(self) -> float:
        """Upper bound for one ESPN fetch: every attempt times out, plus the retry sleeps."""
        # urllib3 skips the sleep before the first retry, then doubles from backoff_factor
        sleeps = sum(self.ESPN_RETRY_BACKOFF * (2 ** n) for n in range(1, self.ESPN_MAX_RETRIES))
        return (self.ESPN_MAX_RETRIES + 1) * self.ESPN_TIMEOUT_SECONDS + sleeps

    # ---------- Validators ----------

    @field_validator("CORS_ORIGINS")
    @classmethod
    def _parse_cors(cls, v):
        # Accept JSON list or comma-separated string
        if isinstance(v, list):
            return v
        s = str(v).strip()
        if not s:
            return []
        try:
            parsed = json.loads(s)
            if isinstance(parsed, list):
                return parsed
        except ValueError:
            pass
        # fallback: comma-separated
        return [p.strip() for p in s.split(",") if p.strip()]

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return (v or "INFO").strip().upper()

    # ---------- Runtime validations ----------

    def validate_at_startup(self) -> None:
        """Fail fast with clear messages for misconfigurations."""
        problems: list[str] = []

        if self.ESPN_TIMEOUT_SECONDS <= 0:
            problems.append("ESPN_TIMEOUT_SECONDS must be positive.")
        if self.ESPN_MAX_RETRIES < 0:
            problems.append("ESPN_MAX_RETRIES must not be negative.")
        elif self.espn_worst_case_seconds > self.ESPN_MAX_WAIT_SECONDS:
            problems.append(
                f"ESPN fetch can block for {self.espn_worst_case_seconds:g}s "
                f"(ESPN_MAX_WAIT_SECONDS={self.ESPN_MAX_WAIT_SECONDS:g}); lower ESPN_TIMEOUT_SECONDS or ESPN_MAX_RETRIES."
            )

        for name in ("LIVE_SCORES_TTL_SECONDS", "WEEK_GAMES_TTL_SECONDS", "CURRENT_WEEK_TTL_SECONDS"):
            if getattr(self, name) < 0:
                problems.append(f"{name} must not be negative.")

        if self.SCORING_MAX_WORKERS < 0:
            problems.append("SCORING_MAX_WORKERS must not be negative.")

        # CORS must not be empty outside local
        if not self.IS_LOCAL and not self.CORS_ORIGINS:
            problems.append("CORS_ORIGINS must contain at least one allowed origin in non-local env.")

        if problems:
            # Collapse to one helpful error line
            raise RuntimeError("Config validation failed: " + " ".join(problems))


settings = Settings()
