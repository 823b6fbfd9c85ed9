from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContestPick(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token_id: int | str = Field(alias="tokenId")
    owner: str
    picks: List[Literal[0, 1]]                 # 0 = away, 1 = home
    correct_picks: int = Field(default=0, alias="correctPicks", ge=0)   # settled on-chain
    tiebreaker_points: int = Field(alias="tiebreakerPoints", ge=0)


class RankedPick(ContestPick):
    live_correct_picks: int = Field(alias="liveCorrectPicks")
    live_total_scored_games: int = Field(alias="liveTotalScoredGames")
    live_rank: int = Field(alias="liveRank")


class LiveRankingsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_ids: List[str] = Field(alias="gameIds")
    tiebreaker_game_id: Optional[str] = Field(default=None, alias="tiebreakerGameId")
    picks: List[ContestPick]
    year: int = Field(ge=1)
    season_type: int = Field(alias="seasonType", ge=1)
    week_number: int = Field(alias="weekNumber", ge=1)

    @field_validator("game_ids", mode="before")
    @classmethod
    def _ids_as_strings(cls, v):
        # ESPN event ids are strings; tolerate numeric ids from older clients
        if isinstance(v, list):
            return [str(x) if isinstance(x, int) and not isinstance(x, bool) else x for x in v]
        return v

    @field_validator("tiebreaker_game_id", mode="before")
    @classmethod
    def _tiebreaker_as_string(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("game_ids")
    @classmethod
    def _unique_ids(cls, v: List[str]) -> List[str]:
        if len(set(v)) != len(v):
            raise ValueError("gameIds must be unique")
        return v


class LiveGameScore(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_id: str = Field(alias="gameId")
    home_score: int = Field(alias="homeScore")
    away_score: int = Field(alias="awayScore")
    winner: Optional[int] = None   # 0 = away, 1 = home, null = tied or not started
    completed: bool
    status: str


class LiveRankingsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    picks: List[RankedPick]
    game_scores: List[LiveGameScore] = Field(alias="gameScores")
