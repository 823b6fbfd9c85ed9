from __future__ import annotations

from datetime import date

import pytest

from app.core.errors import UpstreamUnavailable
from app.services.espn.parsers import parse_current_week, parse_scoreboard, parse_week_games

from tests.conftest import espn_event


def test_parse_scoreboard_keeps_feed_order(week_payload) -> None:
    games = parse_scoreboard(week_payload)
    assert [g.game_id for g in games] == ["401", "402", "403"]
    assert games[0].home_score == "10"
    assert games[2].status == "SCHEDULED"


def test_parse_scoreboard_skips_incomplete_events() -> None:
    no_comp = {"id": "1"}
    one_side = espn_event("2", "3", "0")
    one_side["competitions"][0]["competitors"] = one_side["competitions"][0]["competitors"][:1]
    no_id = espn_event("x", "0", "0")
    del no_id["id"]
    payload = {"events": [no_comp, one_side, no_id, espn_event("4", "1", "2")]}
    assert [g.game_id for g in parse_scoreboard(payload)] == ["4"]


def test_parse_scoreboard_defaults_status_and_completed() -> None:
    ev = espn_event("9", None, None)
    ev["competitions"][0].pop("status")
    (g,) = parse_scoreboard({"events": [ev]})
    assert g.status == "SCHEDULED"
    assert g.completed is False
    assert g.home_score is None


def test_parse_scoreboard_without_events_is_empty() -> None:
    assert parse_scoreboard({"leagues": []}) == []


@pytest.mark.parametrize("payload", [None, [], "nope", {"events": {"id": "1"}}])
def test_parse_scoreboard_rejects_malformed(payload) -> None:
    with pytest.raises(UpstreamUnavailable):
        parse_scoreboard(payload)


def test_parse_week_games_full_event() -> None:
    ev = espn_event("501", "24", "17", status="STATUS_FINAL", completed=True)
    comp = ev["competitions"][0]
    comp["date"] = "2025-10-19T17:00Z"
    home, away = comp["competitors"]
    home["team"] = {"displayName": "Green Bay Packers", "abbreviation": "GB", "logo": "gb.png"}
    home["records"] = [{"summary": "4-2"}]
    away["team"] = {"displayName": "Chicago Bears", "abbreviation": "CHI", "logo": "chi.png"}
    comp["odds"] = [{
        "details": "GB -3.5",
        "overUnder": 44.5,
        "spread": -3.5,
        "homeTeamOdds": {"favorite": True, "underdog": False, "moneyLine": -180},
    }]

    (g,) = parse_week_games({"events": [ev]})
    assert g.game_id == "501"
    assert g.home_team == "Green Bay Packers" and g.away_abbreviation == "CHI"
    assert g.home_record == "4-2" and g.away_record == "(0-0)"
    assert g.kickoff == "2025-10-19T17:00Z"
    assert (g.home_score, g.away_score) == (24, 17)
    assert g.status == "STATUS_FINAL"
    assert g.odds.over_under == 44.5
    assert g.odds.home_team_odds.favorite is True
    assert g.odds.away_team_odds is None


def test_parse_week_games_placeholder_for_missing_competitors() -> None:
    ev = {"id": "7", "date": "2025-10-20T00:15Z", "competitions": [{"competitors": []}]}
    (g,) = parse_week_games({"events": [ev]})
    assert (g.home_team, g.away_team, g.status) == ("TBD", "TBD", "SCHEDULED")
    assert g.kickoff == "2025-10-20T00:15Z"


def test_parse_current_week_prefers_first_event() -> None:
    payload = {
        "week": {"number": 3},
        "season": {"year": 2024, "type": 2},
        "events": [{"id": "1", "week": {"number": 8}, "season": {"year": 2025, "type": 2}}],
    }
    cw = parse_current_week(payload)
    assert (cw.week, cw.season, cw.season_year) == (8, 2, 2025)


def test_parse_current_week_defaults() -> None:
    cw = parse_current_week({"events": []}, today=date(2026, 9, 10))
    assert (cw.week, cw.season, cw.season_year) == (1, 2, 2026)


def _status_name_not_string():
    ev = espn_event("11", "7", "3", status="STATUS_IN_PROGRESS")
    ev["competitions"][0]["status"]["type"]["name"] = 5
    return ev


def _completed_not_bool():
    ev = espn_event("12", "7", "3", status="STATUS_FINAL")
    ev["competitions"][0]["status"]["type"]["completed"] = {"yes": True}
    return ev


@pytest.mark.parametrize("bad_event", [_status_name_not_string, _completed_not_bool])
def test_parse_scoreboard_rejects_wrongly_typed_event_fields(bad_event) -> None:
    bad = bad_event()
    payload = {"events": [espn_event("10", "0", "0"), bad]}
    with pytest.raises(UpstreamUnavailable) as ei:
        parse_scoreboard(payload)
    assert ei.value.message.endswith(f"event {bad['id']}")


def test_parse_scoreboard_skips_event_with_non_list_competitors() -> None:
    ev = espn_event("13", "7", "3")
    ev["competitions"][0]["competitors"] = "home,away"
    payload = {"events": [ev, espn_event("14", "1", "0")]}
    assert [g.game_id for g in parse_scoreboard(payload)] == ["14"]


def test_parse_scoreboard_ignores_team_shape() -> None:
    ev = espn_event("15", "7", "3")
    ev["competitions"][0]["competitors"][0]["team"] = "NE"
    (g,) = parse_scoreboard({"events": [ev]})
    assert g.home_score == "7"


def test_parse_week_games_tolerates_non_dict_team() -> None:
    ev = espn_event("20", "7", "3")
    ev["competitions"][0]["competitors"][0]["team"] = "NE"
    (g,) = parse_week_games({"events": [ev]})
    assert g.home_team == "TBD"
    assert g.home_abbreviation is None
    assert g.home_score == 7


def test_parse_week_games_non_list_competitors_is_placeholder() -> None:
    ev = espn_event("21", "7", "3")
    ev["competitions"][0]["competitors"] = "home,away"
    (g,) = parse_week_games({"events": [ev]})
    assert (g.home_team, g.status) == ("TBD", "SCHEDULED")


@pytest.mark.parametrize(
    "path, value",
    [
        (("status", "type", "name"), 5),
        (("date",), ["2025-10-19"]),
        (("odds",), [{"overUnder": "a lot"}]),
    ],
)
def test_parse_week_games_rejects_wrongly_typed_fields(path, value) -> None:
    ev = espn_event("22", "7", "3")
    node = ev["competitions"][0]
    for key in path[:-1]:
        node = node[key]
    node[path[-1]] = value
    with pytest.raises(UpstreamUnavailable):
        parse_week_games({"events": [ev]})
