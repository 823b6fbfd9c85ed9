from __future__ import annotations

from types import MappingProxyType

import pytest

from app.schemas.leaderboard import Side
from app.services.leaderboard.telemetry import build_telemetry_map, evaluate, parse_score

from tests.conftest import raw


@pytest.mark.parametrize(
    "value, expected",
    [("14", 14), (" 3 ", 3), (None, 0), ("", 0), ("abc", 0), (21, 21), (-4, 0), ("-2", 0), (7.0, 7)],
)
def test_parse_score_tolerates_junk(value, expected) -> None:
    assert parse_score(value) == expected


@pytest.mark.parametrize("value", ["7.5", 7.5, "7 (OT)", "+7"])
def test_parse_score_string_and_float_forms_agree(value) -> None:
    assert parse_score(value) == 7


def test_evaluate_home_winner_and_started() -> None:
    g = evaluate(raw("1", "10", "0"))
    assert g.home_score == 10 and g.away_score == 0
    assert g.winner is Side.HOME
    assert g.started is True


def test_evaluate_tied_in_progress_has_no_winner_but_started() -> None:
    g = evaluate(raw("1", "7", "7"))
    assert g.winner is None
    assert g.started is True


def test_evaluate_zero_zero_scheduled_not_started() -> None:
    g = evaluate(raw("1", "0", "0", status="SCHEDULED"))
    assert g.winner is None
    assert g.started is False


def test_evaluate_zero_zero_kicked_off_counts_as_started() -> None:
    # any status other than SCHEDULED means the game is under way
    g = evaluate(raw("1", None, None, status="STATUS_IN_PROGRESS"))
    assert g.home_score == 0 and g.away_score == 0
    assert g.started is True


def test_build_map_last_write_wins_keeps_first_position() -> None:
    table = build_telemetry_map([raw("a", 1, 0), raw("b", 0, 0), raw("a", 0, 3)])
    assert isinstance(table, MappingProxyType)
    assert list(table) == ["a", "b"]
    assert table["a"].away_score == 3
    assert table["a"].winner is Side.AWAY


def test_map_is_read_only() -> None:
    table = build_telemetry_map([raw("a", 1, 0)])
    with pytest.raises(TypeError):
        table["b"] = table["a"]  # type: ignore[index]
