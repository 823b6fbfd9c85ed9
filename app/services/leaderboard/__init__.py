"""
Live contest leaderboard: score evaluation, pick scoring, tiebreaks and ranking.
"""

from .telemetry import evaluate, build_telemetry_map
from .scoring import PickScore, score_picks, resolve_tiebreak, tiebreaker_total, score_entrant
from .ranking import assemble_ranking
from .service import compute_leaderboard
