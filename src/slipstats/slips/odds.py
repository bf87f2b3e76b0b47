"""Odds conversion and return calculations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from slipstats.errors import OddsError

# (numerator, denominator) pairs tried before falling back to a /100 approximation
COMMON_FRACTIONS: tuple[tuple[int, int], ...] = (
    (1, 2), (1, 3), (2, 3), (3, 2), (1, 4), (3, 4),
    (2, 5), (3, 5), (4, 5), (5, 4), (1, 5), (4, 1),
)


class OddFormat(str, Enum):
    AMERICAN = "american"
    DECIMAL = "decimal"
    FRACTIONAL = "fractional"


def _odd_format(value: OddFormat | str) -> OddFormat:
    try:
        return OddFormat(value)
    except ValueError as exc:
        raise OddsError(f"Unsupported odds format {value!r}") from exc


def american_to_decimal(odds: float) -> float:
    if odds == 0:
        raise OddsError("American odds cannot be zero")
    return 1 + (odds / 100) if odds > 0 else 1 + (100 / abs(odds))


def decimal_to_american(decimal: float) -> float:
    if decimal <= 1:
        raise OddsError(f"Decimal odds must exceed 1.0, got {decimal}")
    return (decimal - 1) * 100 if decimal > 2 else -100 / (decimal - 1)


def _parse_number(value: object, label: str) -> float:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise OddsError(f"Cannot parse {label} odds {value!r}") from exc
    if not math.isfinite(number):
        raise OddsError(f"{label.capitalize()} odds must be finite, got {value!r}")
    return number


def _finite(number: float) -> float:
    if not math.isfinite(number):
        raise OddsError(f"Odds out of range: {number!r}")
    return number


def _fraction_parts(value: float | str) -> tuple[float, float]:
    text = str(value).strip()
    if "/" in text:
        num_text, den_text = text.split("/", 1)
        num = _parse_number(num_text, "fractional")
        den = _parse_number(den_text, "fractional")
    else:
        num, den = _parse_number(text, "fractional"), 1.0
    if den == 0:
        raise OddsError(f"Fractional odds {value!r} have a zero denominator")
    return num, den


def to_decimal(value: float | str, from_format: OddFormat | str) -> float:
    """Convert odds in any supported format to decimal odds."""

    fmt = _odd_format(from_format)
    if fmt is OddFormat.FRACTIONAL:
        num, den = _fraction_parts(value)
        return num / den + 1
    number = _parse_number(value, fmt.value)
    if fmt is OddFormat.AMERICAN:
        return american_to_decimal(number)
    return number


def from_decimal(decimal: float, to_format: OddFormat | str) -> str:
    """Render decimal odds in the requested display format."""

    fmt = _odd_format(to_format)
    if not math.isfinite(decimal):
        raise OddsError(f"Decimal odds must be finite, got {decimal!r}")
    if fmt is OddFormat.DECIMAL:
        return f"{decimal:.2f}"
    if fmt is OddFormat.AMERICAN:
        american = round(_finite(decimal_to_american(decimal)))
        return f"+{american}" if american > 0 else f"{american}"
    profit = decimal - 1
    for num, den in COMMON_FRACTIONS:
        if abs(profit - num / den) < 0.1:
            return f"{num}/{den}"
    num = round(_finite(profit * 100))
    divisor = math.gcd(num, 100) or 1
    return f"{num // divisor}/{100 // divisor}"


def format_odds(value: float | str, odd_format: OddFormat | str) -> str:
    fmt = _odd_format(odd_format)
    if fmt is OddFormat.AMERICAN:
        number = _parse_number(value, fmt.value)
        shown = int(number) if number.is_integer() else number
        return f"+{shown}" if number > 0 else f"{shown}"
    if fmt is OddFormat.DECIMAL:
        return f"{_parse_number(value, fmt.value):.2f}"
    _fraction_parts(value)
    text = str(value).strip()
    if "/" in text:
        num, den = text.split("/", 1)
        return f"{num.strip()}/{den.strip()}"
    return f"{text}/1"


def display_odds(value: float | str, stored: OddFormat | str, display: OddFormat | str) -> str:
    """Show stored odds in a user's preferred format."""

    return from_decimal(to_decimal(value, stored), display)


@dataclass(frozen=True)
class Winnings:
    units_won: float
    dollars_won: float


def calculate_winnings(
    units_invested: float | None,
    dollars_invested: float | None,
    odd_value: float | str,
    odd_format: OddFormat | str,
) -> Winnings:
    """Return the gross payout (stake included) for units and dollars."""

    decimal = to_decimal(odd_value, odd_format)
    return Winnings(
        units_won=units_invested * decimal if units_invested else 0.0,
        dollars_won=dollars_invested * decimal if dollars_invested else 0.0,
    )


def calculate_win_rate(total_bets: int, won_bets: int) -> float:
    """Win rate as a percentage."""

    if total_bets == 0:
        return 0.0
    return won_bets / total_bets * 100


def calculate_roi(invested: float, won: float) -> float:
    """Return on investment as a percentage of the amount invested."""

    if invested == 0:
        return 0.0
    return (won - invested) / invested * 100


def calculate_betting_roi(average_odds: float, win_ratio: float, as_percentage: bool = False) -> float:
    """Expected ROI per unit staked at ``average_odds`` (decimal) and ``win_ratio``."""

    roi = win_ratio * (average_odds - 1) - (1 - win_ratio)
    return roi * 100 if as_percentage else roi
