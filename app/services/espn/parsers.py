from __future__ import annotations
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from app.core.errors import UpstreamUnavailable
from app.schemas.game import CurrentWeek, GameInfo, GameOdds, TeamOdds
from app.schemas.leaderboard import RawGame

logger = logging.getLogger(__name__)

# ---------------- Small utils ----------------
def _get(d: Any, *keys) -> Any:
    cur = d
    for k in keys:
        if isinstance(cur, dict) and k in cur:
            cur = cur[k]
        elif isinstance(cur, list) and isinstance(k, int) and -len(cur) <= k < len(cur):
            cur = cur[k]
        else:
            return None
    return cur

def _as_list(x: Any) -> List:
    if x is None:
        return []
    if isinstance(x, list):
        return x
    return [x]

def _to_int(v: Any) -> Optional[int]:
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        return int(v)
    if isinstance(v, str):
        try:
            return int(v.strip())
        except ValueError:
            return None
    return None

def _events(payload: Any) -> List[Dict[str, Any]]:
    """Validate the top-level shape; a scoreboard without 'events' just has no games."""
    if not isinstance(payload, dict):
        raise UpstreamUnavailable("Malformed scoreboard payload from ESPN")
    events = payload.get("events")
    if events is None:
        return []
    if not isinstance(events, list):
        raise UpstreamUnavailable("Malformed scoreboard payload from ESPN: 'events' is not a list")
    return [e for e in events if isinstance(e, dict)]

def _as_dict(x: Any) -> Dict[str, Any]:
    return x if isinstance(x, dict) else {}

def _home_away(competition: Dict[str, Any]):
    competitors = [c for c in _as_list(competition.get("competitors")) if isinstance(c, dict)]
    home = next((c for c in competitors if c.get("homeAway") == "home"), None)
    away = next((c for c in competitors if c.get("homeAway") == "away"), None)
    return home, away

def _malformed_event(gid: Any, err: Exception) -> UpstreamUnavailable:
    logger.warning("ESPN event %r failed to decode: %s", gid, err)
    return UpstreamUnavailable(f"Malformed scoreboard payload from ESPN: event {gid}")

# ---------------- Live scores ----------------
def parse_scoreboard(payload: Any) -> List[RawGame]:
    """
    ESPN scoreboard → RawGame list, in feed order.
    Events without an id, a first competition, or both home/away competitors are skipped.
    A present field of the wrong type fails the whole snapshot.
    """
    out: List[RawGame] = []
    for ev in _events(payload):
        gid = ev.get("id")
        comp = _get(ev, "competitions", 0)
        if gid is None or not isinstance(comp, dict):
            continue
        home, away = _home_away(comp)
        if not home or not away:
            continue
        try:
            out.append(RawGame(
                game_id=str(gid),
                home_score=home.get("score"),
                away_score=away.get("score"),
                completed=_get(comp, "status", "type", "completed") or False,
                status=_get(comp, "status", "type", "name") or "SCHEDULED",
            ))
        except ValidationError as e:
            raise _malformed_event(gid, e) from e
    return out

# ---------------- Week games (contest builder) ----------------
def _team_odds(node: Any) -> Optional[TeamOdds]:
    if not isinstance(node, dict):
        return None
    return TeamOdds(
        favorite=bool(node.get("favorite")),
        underdog=bool(node.get("underdog")),
        money_line=node.get("moneyLine"),
        spread_odds=node.get("spreadOdds"),
    )

def _odds(comp: Dict[str, Any]) -> Optional[GameOdds]:
    # first provider is typically ESPN BET
    primary = _get(comp, "odds", 0)
    if not isinstance(primary, dict):
        return None
    return GameOdds(
        details=primary.get("details"),
        over_under=primary.get("overUnder"),
        spread=primary.get("spread"),
        home_team_odds=_team_odds(primary.get("homeTeamOdds")),
        away_team_odds=_team_odds(primary.get("awayTeamOdds")),
    )

def _placeholder(gid: str, kickoff: Optional[str]) -> GameInfo:
    return GameInfo(game_id=gid, home_team="TBD", away_team="TBD", kickoff=kickoff, status="SCHEDULED")

def _week_game(gid: str, ev: Dict[str, Any]) -> GameInfo:
    comp = _get(ev, "competitions", 0)
    if not isinstance(comp, dict):
        return _placeholder(gid, ev.get("date"))
    kickoff = comp.get("date") or ev.get("date")
    home, away = _home_away(comp)
    if not home or not away:
        return _placeholder(gid, kickoff)

    ht = _as_dict(home.get("team"))
    at = _as_dict(away.get("team"))
    return GameInfo(
        game_id=gid,
        home_team=ht.get("displayName") or "TBD",
        away_team=at.get("displayName") or "TBD",
        home_abbreviation=ht.get("abbreviation"),
        away_abbreviation=at.get("abbreviation"),
        home_record=_get(home, "records", 0, "summary") or "(0-0)",
        away_record=_get(away, "records", 0, "summary") or "(0-0)",
        kickoff=kickoff,
        home_logo=ht.get("logo"),
        away_logo=at.get("logo"),
        home_score=_to_int(home.get("score")) if home.get("score") else None,
        away_score=_to_int(away.get("score")) if away.get("score") else None,
        status=_get(comp, "status", "type", "name"),
        odds=_odds(comp),
    )

def parse_week_games(payload: Any) -> List[GameInfo]:
    out: List[GameInfo] = []
    for ev in _events(payload):
        if ev.get("id") is None:
            continue
        gid = str(ev["id"])
        try:
            out.append(_week_game(gid, ev))
        except ValidationError as e:
            raise _malformed_event(gid, e) from e
    return out

# ---------------- Current week ----------------
def parse_current_week(payload: Any, *, today: Optional[date] = None) -> CurrentWeek:
    """Season/week from the first event, falling back to the top-level scoreboard fields."""
    events = _events(payload)
    src = events[0] if events else payload
    year_default = (today or date.today()).year
    return CurrentWeek(
        week=_to_int(_get(src, "week", "number")) or 1,
        season=_to_int(_get(src, "season", "type")) or 2,  # regular season
        season_year=_to_int(_get(src, "season", "year")) or year_default,
    )
