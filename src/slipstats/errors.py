"""Error types for SlipStats."""

from __future__ import annotations


class SlipStatsError(RuntimeError):
    """Base error for SlipStats operations."""


class MalformedSlipError(SlipStatsError, ValueError):
    """A betting record is missing fields required to count it."""


class UnknownSlipTypeError(MalformedSlipError):
    """A betting record is neither a single nor a parlay."""


class OddsError(SlipStatsError, ValueError):
    """Odds could not be parsed or converted."""
