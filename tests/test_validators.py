from __future__ import annotations

import copy
import logging

import pytest

from lottery_sim.persistence import is_draw_history, is_draw_result, is_game_state

from factories import make_draw_history, make_draw_result, make_game_state


# --- is_draw_result ---


@pytest.mark.parametrize(
    "result",
    [
        {"prizeLevel": "6th", "amount": 300},
        {"prizeLevel": None, "amount": 0},
        {"prizeLevel": "1st", "amount": 700_000_000},
        {"prizeLevel": "6th", "amount": 0.5},
    ],
)
def test_valid_draw_results(result):
    assert is_draw_result(result) is True


def test_null_prize_with_positive_amount_is_accepted():
    assert is_draw_result({"prizeLevel": None, "amount": 300}) is True


@pytest.mark.parametrize(
    "result",
    [
        make_draw_result(amount=-100),
        make_draw_result(amount=float("inf")),
        make_draw_result(amount=float("nan")),
        make_draw_result(amount="300"),
        make_draw_result(amount=True),
        make_draw_result(prizeLevel=6),
        make_draw_result(prizeLevel=""),
        {"prizeLevel": "1st"},
        {"amount": 300},
        None,
        [1, 2],
        "6th",
    ],
)
def test_invalid_draw_results(result):
    assert is_draw_result(result) is False


# --- is_draw_history ---


def test_valid_draw_history():
    assert is_draw_history(make_draw_history()) is True


def test_draw_history_with_winning_result():
    entry = make_draw_history(
        totalWin=300,
        results=[make_draw_result(prizeLevel="6th", amount=300)] + [make_draw_result() for _ in range(9)],
    )
    assert is_draw_history(entry) is True


@pytest.mark.parametrize(
    "overrides",
    [
        {"id": ""},
        {"id": 123},
        {"timestamp": "not-a-date"},
        {"timestamp": 1234567890},
        {"cost": -1},
        {"cost": float("inf")},
        {"cost": float("nan")},
        {"cost": "3000"},
        {"totalWin": -1},
        {"totalWin": float("inf")},
        {"results": []},
        {"results": "none"},
        {"results": {"0": {"prizeLevel": None, "amount": 0}}},
        {"results": [make_draw_result(), make_draw_result(amount=-1)]},
        {"results": [make_draw_result(), None]},
    ],
)
def test_invalid_draw_history_fields(overrides):
    assert is_draw_history(make_draw_history(**overrides)) is False


@pytest.mark.parametrize("field", ["id", "timestamp", "cost", "totalWin", "results"])
def test_draw_history_missing_field(field):
    entry = make_draw_history()
    del entry[field]
    assert is_draw_history(entry) is False


@pytest.mark.parametrize("value", [None, [], "entry", 42, [make_draw_history()]])
def test_draw_history_rejects_non_objects(value):
    assert is_draw_history(value) is False


# --- is_game_state ---


def test_valid_game_state():
    assert is_game_state(make_game_state()) is True


def test_game_state_with_win_counts():
    assert is_game_state(make_game_state(winCountByLevel={"1st": 0, "6th": 5})) is True


def test_game_state_accepts_integral_floats_for_counts():
    assert is_game_state(make_game_state(totalTickets=10.0, totalDraws=1.0)) is True


@pytest.mark.parametrize(
    "overrides",
    [
        {"balance": -1},
        {"balance": "100"},
        {"balance": float("inf")},
        {"balance": float("nan")},
        {"balance": True},
        {"totalSpent": -1},
        {"totalSpent": float("inf")},
        {"totalWon": -1},
        {"totalWon": float("inf")},
        {"totalTickets": -1},
        {"totalTickets": 1.5},
        {"totalDraws": -1},
        {"totalDraws": 0.5},
        {"winCountByLevel": None},
        {"winCountByLevel": []},
        {"winCountByLevel": {"6th": -1}},
        {"winCountByLevel": {"6th": "5"}},
        {"winCountByLevel": {"6th": float("nan")}},
        {"lastRefillDate": "2026/01/01"},
        {"lastRefillDate": "2026-01-01T00:00:00.000Z"},
        {"lastRefillDate": "2026-01-01\n"},
        {"lastRefillDate": 20260101},
        {"isFirstVisit": "true"},
        {"isFirstVisit": 1},
        {"createdAt": "not-a-date"},
        {"createdAt": 1234567890},
        {"updatedAt": "not-a-date"},
        {"updatedAt": 1234567890},
    ],
)
def test_invalid_game_state_fields(overrides):
    assert is_game_state(make_game_state(**overrides)) is False


@pytest.mark.parametrize(
    "field",
    [
        "balance",
        "totalSpent",
        "totalWon",
        "totalTickets",
        "totalDraws",
        "winCountByLevel",
        "lastRefillDate",
        "isFirstVisit",
        "createdAt",
        "updatedAt",
    ],
)
def test_game_state_missing_field(field):
    state = make_game_state()
    del state[field]
    assert is_game_state(state) is False


@pytest.mark.parametrize("value", [None, "state", 42, [], [make_game_state()]])
def test_game_state_rejects_non_objects(value):
    assert is_game_state(value) is False


def test_validators_have_no_side_effects(caplog):
    caplog.set_level(logging.DEBUG)
    state = make_game_state(balance=-1)
    entry = make_draw_history(cost=-1)
    before = (copy.deepcopy(state), copy.deepcopy(entry))

    is_game_state(state)
    is_draw_history(entry)
    is_draw_result(entry["results"][0])

    assert caplog.records == []
    assert (state, entry) == before


@pytest.mark.parametrize(
    "timestamp",
    ["2026-01-01T00:00:00.1Z", "2026-01-01T00:00:00Z", "2026-01-01T09:00:00.123+09:00", "2026-01-01"],
)
def test_draw_history_accepts_iso_timestamp_variants(timestamp):
    assert is_draw_history(make_draw_history(timestamp=timestamp)) is True
