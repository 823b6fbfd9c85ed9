# app/services/leaderboard/ranking.py
from __future__ import annotations

from typing import Iterable, List

from app.schemas.leaderboard import RankedEntrant, ScoredEntrant


def assemble_ranking(scored: Iterable[ScoredEntrant], tiebreaker_total: int) -> List[RankedEntrant]:
    """
    Order by correct picks (desc), then tiebreak distance (asc) once the
    tiebreaker game has any score. Until then ties keep input order.

    Ranks are finishing positions 1..N; equal entrants are not given a shared rank.
    """
    if tiebreaker_total > 0:
        def sort_key(s: ScoredEntrant):
            return (-s.correct_picks, s.tiebreak_distance)
    else:
        def sort_key(s: ScoredEntrant):
            return -s.correct_picks

    ordered = sorted(scored, key=sort_key)  # stable
    return [
        RankedEntrant(
            entrant=s.entrant,
            correct_picks=s.correct_picks,
            scored_game_count=s.scored_game_count,
            tiebreak_distance=s.tiebreak_distance,
            rank=pos,
        )
        for pos, s in enumerate(ordered, start=1)
    ]
