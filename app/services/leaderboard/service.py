# app/services/leaderboard/service.py
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Iterable, List, Optional, Sequence

from app.schemas.leaderboard import ContestConfig, Entrant, Leaderboard, RawGame, ScoredEntrant
from app.services.leaderboard.ranking import assemble_ranking
from app.services.leaderboard.scoring import score_entrant, tiebreaker_total
from app.services.leaderboard.telemetry import build_telemetry_map

logger = logging.getLogger(__name__)


def compute_leaderboard(
    config: ContestConfig,
    entrants: Sequence[Entrant],
    raw_games: Iterable[RawGame],
    *,
    max_workers: Optional[int] = None,
) -> Leaderboard:
    """
    Live leaderboard for one telemetry snapshot.

    Pure in its three inputs: the telemetry map is built once and shared
    read-only with every scoring task; ranking runs after all tasks join.
    """
    telemetry = build_telemetry_map(raw_games)
    game_order = config.ordered_game_ids
    tb_game_id = config.effective_tiebreaker_game_id

    score = partial(
        score_entrant,
        game_order=game_order,
        tiebreaker_game_id=tb_game_id,
        telemetry=telemetry,
    )

    if (max_workers is not None and max_workers <= 1) or len(entrants) <= 1:
        scored: List[ScoredEntrant] = [score(e) for e in entrants]
    else:
        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="leaderboard") as pool:
            # map() yields in submission order
            scored = list(pool.map(score, entrants))

    tb_total = tiebreaker_total(tb_game_id, telemetry)
    if tb_game_id and tb_game_id not in telemetry:
        logger.debug("Tiebreaker game %s missing from snapshot; treating total as 0", tb_game_id)

    ranked = assemble_ranking(scored, tb_total)
    return Leaderboard(
        ranked=tuple(ranked),
        game_scores=tuple(telemetry.values()),
        tiebreaker_total=tb_total,
    )
