from typing import Callable, List

from app.core.config import settings
from app.schemas.leaderboard import RawGame
from app.services.espn import fetch_scoreboard

# (year, season_type, week_number) -> full scoreboard snapshot
TelemetrySource = Callable[[int, int, int], List[RawGame]]


def get_telemetry_source() -> TelemetrySource:
    """Scoreboard fetcher used by the live-rankings route; overridden in tests."""
    return fetch_scoreboard


def get_scoring_workers() -> int:
    return settings.SCORING_MAX_WORKERS
