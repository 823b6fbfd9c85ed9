# app/api/routes_contest.py
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends
from pydantic import ValidationError

from app.core.errors import InvalidRequest
from app.deps import TelemetrySource, get_scoring_workers, get_telemetry_source
from app.schemas.contest import (
    ContestPick,
    LiveGameScore,
    LiveRankingsRequest,
    LiveRankingsResponse,
    RankedPick,
)
from app.schemas.leaderboard import ContestConfig, Entrant, GameTelemetry, RankedEntrant
from app.services.leaderboard import compute_leaderboard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contest", tags=["contest"])


def _to_entrant(p: ContestPick) -> Entrant:
    return Entrant(
        entrant_id=p.token_id,
        owner=p.owner,
        picks=tuple(p.picks),
        tiebreaker_prediction=p.tiebreaker_points,
        settled_correct_picks=p.correct_picks,
    )


def _to_ranked_pick(r: RankedEntrant) -> RankedPick:
    e = r.entrant
    return RankedPick(
        token_id=e.entrant_id,
        owner=e.owner,
        picks=[int(p) for p in e.picks],
        correct_picks=e.settled_correct_picks,
        tiebreaker_points=e.tiebreaker_prediction,
        live_correct_picks=r.correct_picks,
        live_total_scored_games=r.scored_game_count,
        live_rank=r.rank,
    )


def _to_game_score(g: GameTelemetry) -> LiveGameScore:
    return LiveGameScore(
        game_id=g.game_id,
        home_score=g.home_score,
        away_score=g.away_score,
        winner=int(g.winner) if g.winner is not None else None,
        completed=g.completed,
        status=g.status,
    )


# ---------------- LIVE RANKINGS (polled; upstream fetch cached ~10s) ----------------
@router.post("/{contest_id}/live-rankings", response_model=LiveRankingsResponse)
def live_rankings(
    contest_id: str,
    body: LiveRankingsRequest,
    fetch: TelemetrySource = Depends(get_telemetry_source),
    max_workers: int = Depends(get_scoring_workers),
):
    """
    Rank a contest's entrants against the current ESPN scoreboard.
    Either the whole leaderboard comes back or an error does; never a partial one.
    """
    try:
        config = ContestConfig(
            ordered_game_ids=tuple(body.game_ids),
            tiebreaker_game_id=body.tiebreaker_game_id,
        )
        entrants: List[Entrant] = [_to_entrant(p) for p in body.picks]
    except ValidationError as ve:
        raise InvalidRequest(f"Invalid contest payload: {ve.errors()[0].get('msg')}") from ve

    raw_games = fetch(body.year, body.season_type, body.week_number)
    board = compute_leaderboard(config, entrants, raw_games, max_workers=max_workers)

    logger.info(
        "live-rankings contest=%s entrants=%d games=%d tiebreaker_total=%d",
        contest_id, len(board.ranked), len(board.game_scores), board.tiebreaker_total,
    )
    return LiveRankingsResponse(
        picks=[_to_ranked_pick(r) for r in board.ranked],
        game_scores=[_to_game_score(g) for g in board.game_scores],
    )
