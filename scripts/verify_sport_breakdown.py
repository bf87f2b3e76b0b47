#!/usr/bin/env python3
"""Check that parlay legs count toward sport totals individually."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from slipstats.analytics.breakdown import build_sport_breakdown
from slipstats.analytics.normalization import normalizer_from_settings
from slipstats.config import get_settings

logger = logging.getLogger("verify_sport_breakdown")

SAMPLE = [
    {"slipType": "single", "sport": "nfl", "result": "win"},
    {
        "slipType": "parlay",
        "legs": [
            {"sport": "nba", "result": "win"},
            {"sport": "nfl", "result": "lose"},
            {"sport": "nfl", "result": "pending"},
        ],
    },
]

EXPECTED = {
    "football": {"total": 2, "wins": 1, "losses": 1, "pending": 1},
    "basketball": {"total": 1, "wins": 1, "losses": 0, "pending": 0},
}


def verify() -> bool:
    result = build_sport_breakdown(SAMPLE, normalizer=normalizer_from_settings())
    ok = True
    for sport, expected in EXPECTED.items():
        tally = result.sport_breakdown.get(sport)
        actual = {name: getattr(tally, name) for name in expected} if tally else None
        if actual != expected:
            logger.error("[FAIL] %s totals incorrect: %s", sport, actual)
            ok = False
    if ok:
        logger.info("[PASS] build_sport_breakdown counts parlay legs correctly.")
    logger.debug("Breakdown: %s", json.dumps(result.to_dict(), indent=2))
    return ok


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (e.g. DEBUG).")
    args = parser.parse_args()
    logging.basicConfig(
        level=(args.log_level or get_settings().log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(0 if verify() else 1)


if __name__ == "__main__":  # pragma: no cover
    main()
