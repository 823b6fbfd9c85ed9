# app/services/leaderboard/scoring.py
from __future__ import annotations

from typing import Mapping, NamedTuple, Optional, Sequence

from app.schemas.leaderboard import Entrant, GameTelemetry, ScoredEntrant, Side


class PickScore(NamedTuple):
    correct_picks: int
    scored_game_count: int


def score_picks(
    picks: Sequence[Side],
    game_order: Sequence[str],
    telemetry: Mapping[str, GameTelemetry],
) -> PickScore:
    """
    Count correct picks and started games for one entrant.

    Picks are positional: picks[i] is a prediction for game_order[i]. A position
    with no game id, or whose game is not in the snapshot, is skipped entirely.
    A started game without a winner yet (0-0, tied) counts as scored but never
    as correct.
    """
    correct = 0
    scored = 0
    for i, pick in enumerate(picks):
        if i >= len(game_order):
            break
        game = telemetry.get(game_order[i])
        if game is None or not game.started:
            continue
        scored += 1
        if game.winner is not None and pick == game.winner:
            correct += 1
    return PickScore(correct, scored)


def tiebreaker_total(tiebreaker_game_id: Optional[str], telemetry: Mapping[str, GameTelemetry]) -> int:
    # absent game reads as unplayed
    game = telemetry.get(tiebreaker_game_id) if tiebreaker_game_id else None
    return game.total_score if game is not None else 0


def resolve_tiebreak(
    prediction: int,
    tiebreaker_game_id: Optional[str],
    telemetry: Mapping[str, GameTelemetry],
) -> int:
    return abs(prediction - tiebreaker_total(tiebreaker_game_id, telemetry))


def score_entrant(
    entrant: Entrant,
    game_order: Sequence[str],
    tiebreaker_game_id: Optional[str],
    telemetry: Mapping[str, GameTelemetry],
) -> ScoredEntrant:
    result = score_picks(entrant.picks, game_order, telemetry)
    return ScoredEntrant(
        entrant=entrant,
        correct_picks=result.correct_picks,
        scored_game_count=result.scored_game_count,
        tiebreak_distance=resolve_tiebreak(entrant.tiebreaker_prediction, tiebreaker_game_id, telemetry),
    )
