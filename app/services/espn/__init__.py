"""
ESPN site API: pooled client, payload decoders and scoreboard lookups.
"""

from .client import espn_get
from .parsers import parse_scoreboard, parse_week_games, parse_current_week
from .scoreboard import fetch_scoreboard, get_week_games, get_current_week
