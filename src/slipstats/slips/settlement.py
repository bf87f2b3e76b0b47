"""Parlay settlement logic."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from slipstats.slips.odds import OddFormat, to_decimal
from slipstats.slips.types import ParlaySlip, ResultKind, Slip

MIN_PARLAY_LEGS = 2
MAX_PARLAY_LEGS = 10


@dataclass(frozen=True)
class PricedLeg:
    odd_value: float | str
    odd_format: OddFormat | str = OddFormat.AMERICAN


@dataclass(frozen=True)
class LegValidation:
    valid: bool
    error: str | None = None


def calculate_parlay_odds(legs: Iterable[PricedLeg]) -> float:
    """Combined decimal odds of a parlay (product of leg decimals)."""

    decimal = 1.0
    for leg in legs:
        decimal *= to_decimal(leg.odd_value, leg.odd_format)
    return decimal


def calculate_parlay_result(leg_results: Iterable[ResultKind | str]) -> ResultKind:
    """Settle a parlay from its legs.

    Any losing leg loses the parlay. A parlay whose legs were all returned is
    returned; otherwise any pending leg keeps it pending. Returned legs among
    winners drop out and the parlay wins. Unrecognized results count as pending.
    """

    results = [ResultKind.parse(value) or ResultKind.PENDING for value in leg_results]
    if not results:
        return ResultKind.PENDING
    if ResultKind.LOSE in results:
        return ResultKind.LOSE
    if all(result is ResultKind.RETURNED for result in results):
        return ResultKind.RETURNED
    if ResultKind.PENDING in results:
        return ResultKind.PENDING
    return ResultKind.WIN


def validate_parlay_legs(
    legs: Sequence[object],
    min_legs: int = MIN_PARLAY_LEGS,
    max_legs: int = MAX_PARLAY_LEGS,
) -> LegValidation:
    if len(legs) < min_legs:
        return LegValidation(False, f"Parlay must have at least {min_legs} legs")
    if len(legs) > max_legs:
        return LegValidation(False, f"Parlay cannot have more than {max_legs} legs")
    return LegValidation(True)


def format_parlay_name(name: str, leg_count: int) -> str:
    return f"{name} ({leg_count}-Leg Parlay)"


def settle_slip(slip: Slip) -> ResultKind:
    """Slip-level result: a single's own result, a parlay's settled legs."""

    if isinstance(slip, ParlaySlip):
        return calculate_parlay_result(leg.result for leg in slip.legs)
    return ResultKind.parse(slip.result) or ResultKind.PENDING
