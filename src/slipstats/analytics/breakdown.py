"""Per-sport and per-league outcome breakdowns for betting slips."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import asdict, dataclass, field
from typing import Any

from slipstats.analytics.normalization import DEFAULT_NORMALIZER, SportNormalizer
from slipstats.errors import MalformedSlipError
from slipstats.slips.schemas import coerce_slip
from slipstats.slips.types import Leg, ParlaySlip, ResultKind, SingleSlip, Slip

logger = logging.getLogger(__name__)


@dataclass
class SportTally:
    """Outcome counters for one sport.

    ``total`` counts settled observations only (wins and losses); pending and
    returned observations are tracked in their own counters. A pick whose
    result is unrecognized (e.g. ``push``) is skipped before its sport is
    looked up, so a sport seen only with such results gets no tally at all
    rather than a zeroed row.
    """

    label: str
    total: int = 0
    wins: int = 0
    losses: int = 0
    pending: int = 0
    returned: int = 0

    def record(self, result: ResultKind) -> None:
        if result.settled:
            self.total += 1
        if result is ResultKind.WIN:
            self.wins += 1
        elif result is ResultKind.LOSE:
            self.losses += 1
        elif result is ResultKind.PENDING:
            self.pending += 1
        else:
            self.returned += 1

    @property
    def observations(self) -> int:
        return self.wins + self.losses + self.pending + self.returned


@dataclass
class LeagueTally(SportTally):
    sport: str = ""


@dataclass
class BreakdownResult:
    sport_breakdown: dict[str, SportTally] = field(default_factory=dict)
    league_breakdown: dict[str, LeagueTally] = field(default_factory=dict)

    def to_dict(self) -> dict[str, dict[str, dict[str, Any]]]:
        return {
            "sportBreakdown": {key: asdict(tally) for key, tally in self.sport_breakdown.items()},
            "leagueBreakdown": {key: asdict(tally) for key, tally in self.league_breakdown.items()},
        }


def iter_observations(slip: Slip) -> Iterator[Leg | SingleSlip]:
    """Yield each countable pick on a slip; parlays yield their legs."""

    if isinstance(slip, SingleSlip):
        yield slip
    elif isinstance(slip, ParlaySlip):
        yield from slip.legs
    else:  # pragma: no cover - guarded by coerce_slip
        raise MalformedSlipError(f"Unsupported slip: {slip!r}")


class BreakdownAggregator:
    """Accumulate sport and league tallies from betting slips."""

    def __init__(self, normalizer: SportNormalizer | None = None) -> None:
        self.normalizer = normalizer or DEFAULT_NORMALIZER
        self._sports: dict[str, SportTally] = {}
        self._leagues: dict[str, LeagueTally] = {}

    def observe(self, sport: object, result: object, league: object = None) -> bool:
        """Count a single pick; return ``False`` when it was skipped."""

        normalized = self.normalizer.normalize(sport)
        if normalized is None:
            logger.debug("Skipping pick with unusable sport %r", sport)
            return False
        kind = ResultKind.parse(result)
        if kind is None:
            logger.debug("Skipping %s pick with unrecognized result %r", normalized.key, result)
            return False

        tally = self._sports.get(normalized.key)
        if tally is None:
            tally = self._sports[normalized.key] = SportTally(label=normalized.label)
        tally.record(kind)

        resolved_league = self.normalizer.resolve_league(normalized, league)
        if resolved_league:
            league_key = f"{normalized.label}:{resolved_league}".lower()
            league_tally = self._leagues.get(league_key)
            if league_tally is None:
                league_tally = self._leagues[league_key] = LeagueTally(
                    label=resolved_league, sport=normalized.label
                )
            league_tally.record(kind)
        return True

    def add(self, slip: Slip | Mapping[str, Any]) -> int:
        """Count every pick on a slip and return how many were counted."""

        try:
            typed = coerce_slip(slip)
        except MalformedSlipError as exc:
            logger.warning("Skipping malformed slip: %s", exc)
            return 0
        counted = 0
        for pick in iter_observations(typed):
            if self.observe(pick.sport, pick.result, pick.league):
                counted += 1
        return counted

    def add_all(self, slips: Iterable[Slip | Mapping[str, Any]]) -> int:
        return sum(self.add(slip) for slip in slips)

    def result(self) -> BreakdownResult:
        return BreakdownResult(
            sport_breakdown={key: _copy(tally) for key, tally in self._sports.items()},
            league_breakdown={key: _copy(tally) for key, tally in self._leagues.items()},
        )


def _copy(tally: SportTally) -> Any:
    return type(tally)(**asdict(tally))


def build_sport_breakdown(
    slips: Iterable[Slip | Mapping[str, Any]],
    normalizer: SportNormalizer | None = None,
) -> BreakdownResult:
    """Summarize slip outcomes per sport, counting parlay legs individually."""

    aggregator = BreakdownAggregator(normalizer)
    aggregator.add_all(slips)
    return aggregator.result()
