"""Tabular summaries of breakdown results for dashboards."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import asdict
from typing import Any

import pandas as pd

from slipstats.analytics.breakdown import LeagueTally, SportTally
from slipstats.errors import MalformedSlipError
from slipstats.slips.odds import calculate_win_rate
from slipstats.slips.schemas import coerce_slip
from slipstats.slips.settlement import settle_slip
from slipstats.slips.types import ResultKind, Slip

logger = logging.getLogger(__name__)

TALLY_COLUMNS = ["key", "label", "total", "wins", "losses", "pending", "returned", "win_rate"]


def breakdown_frame(tallies: Mapping[str, SportTally]) -> pd.DataFrame:
    """Return one row per tally, busiest first."""

    columns = list(TALLY_COLUMNS)
    if any(isinstance(tally, LeagueTally) for tally in tallies.values()):
        columns.append("sport")
    rows = []
    for key, tally in tallies.items():
        row = {"key": key, **asdict(tally)}
        row["win_rate"] = calculate_win_rate(tally.total, tally.wins)
        rows.append(row)
    if not rows:
        return pd.DataFrame(columns=columns)
    df = pd.DataFrame(rows, columns=columns)
    return df.sort_values(["total", "key"], ascending=[False, True], kind="mergesort").reset_index(drop=True)


def slip_summary(slips: Iterable[Slip | Mapping[str, Any]]) -> dict[str, int | float]:
    """Count slips (not legs) by their settled result."""

    summary: dict[str, int | float] = {kind.value: 0 for kind in ResultKind}
    for record in slips:
        try:
            slip = coerce_slip(record)
        except MalformedSlipError as exc:
            logger.warning("Skipping malformed slip: %s", exc)
            continue
        summary[settle_slip(slip).value] += 1
    settled = summary[ResultKind.WIN.value] + summary[ResultKind.LOSE.value]
    summary["total"] = settled
    summary["win_rate"] = calculate_win_rate(int(settled), int(summary[ResultKind.WIN.value]))
    return summary
