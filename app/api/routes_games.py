# app/api/routes_games.py
from typing import List

from fastapi import APIRouter, Query, Response

from app.core.config import settings
from app.schemas.game import CurrentWeek, GameInfo
from app.services.cache import cache_route, key_tuple
from app.services.espn import get_current_week, get_week_games

router = APIRouter(prefix="/api", tags=["games"])


# ---------------- WEEK GAMES (cache 5m) ----------------
@router.get("/week-games", response_model=List[GameInfo])
@cache_route(
    namespace="week_games",
    ttl_seconds=settings.WEEK_GAMES_TTL_SECONDS,
    key_builder=lambda *args, **kwargs: key_tuple(
        "week_games", kwargs["year"], kwargs["season_type"], kwargs["week"]
    ),
)
def week_games(
    year: int = Query(..., ge=1),
    season_type: int = Query(..., alias="seasonType", ge=1),
    week: int = Query(..., ge=1),
    response: Response = None,
):
    """
    Games for one NFL week, with teams, records, kickoff and odds, for building a contest.
    """
    return get_week_games(year, season_type, week)


# ---------------- CURRENT WEEK (cache 24h) ----------------
@router.get("/games/current", response_model=CurrentWeek)
@cache_route(
    namespace="current_week",
    ttl_seconds=settings.CURRENT_WEEK_TTL_SECONDS,
    key_builder=lambda *args, **kwargs: key_tuple("current_week"),
)
def current_week(response: Response = None):
    return get_current_week()
