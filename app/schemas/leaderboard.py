from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Side(IntEnum):
    """Pick / winner encoding shared with the contract: 0 = away, 1 = home."""
    AWAY = 0
    HOME = 1


class RawGame(BaseModel):
    """One scoreboard event after the decode boundary; scores are still untrusted."""
    model_config = ConfigDict(frozen=True)

    game_id: str
    home_score: Any = None
    away_score: Any = None
    completed: bool = False
    status: str = "SCHEDULED"


class GameTelemetry(BaseModel):
    model_config = ConfigDict(frozen=True)

    game_id: str
    home_score: int = Field(ge=0)
    away_score: int = Field(ge=0)
    winner: Optional[Side] = None
    started: bool = False
    completed: bool = False
    status: str = "SCHEDULED"

    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score


class ContestConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    ordered_game_ids: Tuple[str, ...] = ()
    tiebreaker_game_id: Optional[str] = None

    @model_validator(mode="after")
    def _unique_game_ids(self) -> "ContestConfig":
        seen = set()
        dupes = []
        for gid in self.ordered_game_ids:
            if gid in seen:
                dupes.append(gid)
            seen.add(gid)
        if dupes:
            raise ValueError(f"duplicate game ids: {', '.join(dupes)}")
        return self

    @property
    def effective_tiebreaker_game_id(self) -> Optional[str]:
        if self.tiebreaker_game_id:
            return self.tiebreaker_game_id
        return self.ordered_game_ids[-1] if self.ordered_game_ids else None


class Entrant(BaseModel):
    model_config = ConfigDict(frozen=True)

    entrant_id: int | str
    owner: str
    picks: Tuple[Side, ...] = ()
    tiebreaker_prediction: int = Field(ge=0)
    settled_correct_picks: int = 0  # on-chain value, echoed back untouched


class ScoredEntrant(BaseModel):
    model_config = ConfigDict(frozen=True)

    entrant: Entrant
    correct_picks: int = Field(ge=0)
    scored_game_count: int = Field(ge=0)
    tiebreak_distance: int = Field(ge=0)


class RankedEntrant(ScoredEntrant):
    rank: int = Field(ge=1)


class Leaderboard(BaseModel):
    model_config = ConfigDict(frozen=True)

    ranked: Tuple[RankedEntrant, ...] = ()
    game_scores: Tuple[GameTelemetry, ...] = ()
    tiebreaker_total: int = 0
