from __future__ import annotations
from typing import List

from app.core.config import settings
from app.schemas.game import CurrentWeek, GameInfo
from app.schemas.leaderboard import RawGame
from app.services.cache import key_tuple, ttl_cache
from app.services.espn.client import espn_get
from app.services.espn.parsers import parse_current_week, parse_scoreboard, parse_week_games


def _week_params(year: int, season_type: int, week_number: int) -> dict:
    return {"dates": year, "seasontype": season_type, "week": week_number}


@ttl_cache(
    namespace="espn_live_scores",
    ttl_seconds=lambda: settings.LIVE_SCORES_TTL_SECONDS,
    key_builder=lambda year, season_type, week_number: key_tuple("live", year, season_type, week_number),
)
def fetch_scoreboard(year: int, season_type: int, week_number: int) -> List[RawGame]:
    """
    Full scoreboard snapshot for one (year, season type, week).
    Raises UpstreamUnavailable on any fetch/decode failure.
    """
    payload = espn_get(settings.ESPN_SCOREBOARD_URL, _week_params(year, season_type, week_number))
    return parse_scoreboard(payload)


def get_week_games(year: int, season_type: int, week_number: int) -> List[GameInfo]:
    payload = espn_get(settings.ESPN_SCOREBOARD_URL, _week_params(year, season_type, week_number))
    return parse_week_games(payload)


def get_current_week() -> CurrentWeek:
    payload = espn_get(settings.ESPN_SCOREBOARD_URL)
    return parse_current_week(payload)
