# app/services/leaderboard/telemetry.py
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from app.schemas.leaderboard import GameTelemetry, RawGame, Side

SCHEDULED = "SCHEDULED"


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_score(value: Any) -> int:
    """
    Missing, non-numeric or negative scores count as 0.
    Strings read their leading integer, so "7.5" and "12 (OT)" give 7 and 12.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        return max(int(value), 0)
    m = _LEADING_INT.match(str(value))
    return max(int(m.group(1)), 0) if m else 0


def winner_of(home_score: int, away_score: int) -> Optional[Side]:
    if home_score > away_score:
        return Side.HOME
    if away_score > home_score:
        return Side.AWAY
    return None


def has_started(home_score: int, away_score: int, status: str) -> bool:
    return home_score > 0 or away_score > 0 or status != SCHEDULED


def evaluate(raw: RawGame) -> GameTelemetry:
    home = parse_score(raw.home_score)
    away = parse_score(raw.away_score)
    status = raw.status or SCHEDULED
    return GameTelemetry(
        game_id=raw.game_id,
        home_score=home,
        away_score=away,
        winner=winner_of(home, away),
        started=has_started(home, away, status),
        completed=raw.completed,
        status=status,
    )


def build_telemetry_map(raw_games: Iterable[RawGame]) -> Mapping[str, GameTelemetry]:
    """
    gameId -> GameTelemetry, read-only.
    Duplicate ids: the later entry's values win, the id keeps its first position.
    """
    table: Dict[str, GameTelemetry] = {}
    for raw in raw_games:
        table[raw.game_id] = evaluate(raw)
    return MappingProxyType(table)
