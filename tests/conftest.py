from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from app.schemas.leaderboard import RawGame
from app.services.cache import clear_caches


def espn_event(
    game_id: str,
    home: Optional[str] = "0",
    away: Optional[str] = "0",
    *,
    status: str = "SCHEDULED",
    completed: bool = False,
) -> Dict[str, Any]:
    home_c: Dict[str, Any] = {"id": "1", "homeAway": "home"}
    away_c: Dict[str, Any] = {"id": "2", "homeAway": "away"}
    if home is not None:
        home_c["score"] = home
    if away is not None:
        away_c["score"] = away
    return {
        "id": game_id,
        "competitions": [
            {
                "competitors": [home_c, away_c],
                "status": {"type": {"name": status, "completed": completed}},
            }
        ],
    }


def raw(game_id: str, home: Any = 0, away: Any = 0, status: str = "STATUS_IN_PROGRESS", completed: bool = False) -> RawGame:
    return RawGame(game_id=game_id, home_score=home, away_score=away, status=status, completed=completed)


@pytest.fixture(autouse=True)
def _fresh_caches():
    clear_caches()
    yield
    clear_caches()


@pytest.fixture
def week_payload() -> Dict[str, Any]:
    return {
        "week": {"number": 7},
        "season": {"year": 2025, "type": 2},
        "events": [
            espn_event("401", "10", "0", status="STATUS_IN_PROGRESS"),
            espn_event("402", "0", "7", status="STATUS_IN_PROGRESS"),
            espn_event("403", "0", "0", status="SCHEDULED"),
        ],
    }


@pytest.fixture
def raw_games() -> List[RawGame]:
    return [
        raw("401", 10, 0),
        raw("402", 0, 7),
        raw("403", 0, 0, status="SCHEDULED"),
    ]
