"""Parlay settlement tests."""

from __future__ import annotations

import pytest

from slipstats.errors import OddsError
from slipstats.slips import settlement
from slipstats.slips.types import Leg, ParlaySlip, ResultKind, SingleSlip


def _leg(odds: float | str = -110, fmt: str = "american") -> settlement.PricedLeg:
    return settlement.PricedLeg(odd_value=odds, odd_format=fmt)


def test_parlay_odds_multiply_leg_decimals() -> None:
    odds = settlement.calculate_parlay_odds([_leg(100), _leg(2.5, "decimal"), _leg("1/2", "fractional")])
    assert odds == pytest.approx(2.0 * 2.5 * 1.5)


def test_parlay_odds_empty_is_even() -> None:
    assert settlement.calculate_parlay_odds([]) == 1.0


def test_parlay_odds_reject_bad_leg() -> None:
    with pytest.raises(OddsError):
        settlement.calculate_parlay_odds([_leg(0)])


@pytest.mark.parametrize(
    ("legs", "expected"),
    [
        ([], ResultKind.PENDING),
        (["win", "lose", "pending"], ResultKind.LOSE),
        (["returned", "returned"], ResultKind.RETURNED),
        (["win", "pending"], ResultKind.PENDING),
        (["win", "returned", "win"], ResultKind.WIN),
        (["win", "push"], ResultKind.PENDING),
        ([ResultKind.WIN, ResultKind.WIN], ResultKind.WIN),
    ],
)
def test_parlay_result(legs: list, expected: ResultKind) -> None:
    assert settlement.calculate_parlay_result(legs) is expected


def test_validate_parlay_legs() -> None:
    assert settlement.validate_parlay_legs([1, 2]).valid
    too_few = settlement.validate_parlay_legs([1])
    assert not too_few.valid
    assert too_few.error == "Parlay must have at least 2 legs"
    too_many = settlement.validate_parlay_legs(list(range(4)), max_legs=3)
    assert too_many.error == "Parlay cannot have more than 3 legs"


def test_format_parlay_name() -> None:
    assert settlement.format_parlay_name("Sunday Special", 4) == "Sunday Special (4-Leg Parlay)"


def test_settle_slip() -> None:
    assert settlement.settle_slip(SingleSlip("nfl", "win")) is ResultKind.WIN
    assert settlement.settle_slip(SingleSlip("nfl", "void")) is ResultKind.PENDING
    parlay = ParlaySlip(legs=(Leg("nba", "win"), Leg("nfl", "lose")))
    assert settlement.settle_slip(parlay) is ResultKind.LOSE
