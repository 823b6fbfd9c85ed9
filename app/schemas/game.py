from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TeamOdds(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    favorite: bool = False
    underdog: bool = False
    money_line: Optional[float] = Field(default=None, alias="moneyLine")
    spread_odds: Optional[float] = Field(default=None, alias="spreadOdds")


class GameOdds(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    details: Optional[str] = None
    over_under: Optional[float] = Field(default=None, alias="overUnder")
    spread: Optional[float] = None
    home_team_odds: Optional[TeamOdds] = Field(default=None, alias="homeTeamOdds")
    away_team_odds: Optional[TeamOdds] = Field(default=None, alias="awayTeamOdds")


class GameInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_id: str = Field(alias="gameId")
    home_team: str = Field(alias="homeTeam")
    away_team: str = Field(alias="awayTeam")
    home_abbreviation: Optional[str] = Field(default=None, alias="homeAbbreviation")
    away_abbreviation: Optional[str] = Field(default=None, alias="awayAbbreviation")
    home_record: str = Field(default="(0-0)", alias="homeRecord")
    away_record: str = Field(default="(0-0)", alias="awayRecord")
    kickoff: Optional[str] = None          # ISO 8601, UTC
    home_logo: Optional[str] = Field(default=None, alias="homeLogo")
    away_logo: Optional[str] = Field(default=None, alias="awayLogo")
    home_score: Optional[int] = Field(default=None, alias="homeScore")
    away_score: Optional[int] = Field(default=None, alias="awayScore")
    status: Optional[str] = None
    odds: Optional[GameOdds] = None


class CurrentWeek(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    week: int
    season: int                            # ESPN season type: 1 pre, 2 regular, 3 post
    season_year: int = Field(alias="seasonYear")
