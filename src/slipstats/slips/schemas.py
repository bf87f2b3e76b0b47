"""Pydantic schemas for raw betting records and their coercion into slips."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from slipstats.errors import MalformedSlipError, UnknownSlipTypeError
from slipstats.slips.types import Leg, ParlaySlip, SingleSlip, Slip

logger = logging.getLogger(__name__)

SLIP_TYPE_KEYS: tuple[str, ...] = ("slipType", "slip_type", "type")


class LegSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    sport: str = Field(min_length=1)
    result: str = Field(min_length=1)
    league: str | None = None

    @field_validator("league", mode="before")
    @classmethod
    def _ignore_non_string_league(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None

    def to_leg(self) -> Leg:
        return Leg(sport=self.sport, result=self.result, league=self.league or None)


class SingleSlipSchema(LegSchema):
    def to_slip(self) -> SingleSlip:
        return SingleSlip(sport=self.sport, result=self.result, league=self.league or None)


class ParlaySlipSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    legs: list[Any] | None = None


def slip_type_of(record: Mapping[str, Any]) -> str | None:
    """Return the lowercased slip kind declared by a raw record."""

    for key in SLIP_TYPE_KEYS:
        value = record.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip().lower()
    return None


def _coerce_legs(raw_legs: list[Any] | None) -> tuple[Leg, ...]:
    legs: list[Leg] = []
    for position, raw in enumerate(raw_legs or []):
        if isinstance(raw, Leg):
            legs.append(raw)
            continue
        try:
            legs.append(LegSchema.model_validate(raw).to_leg())
        except ValidationError as exc:
            logger.warning("Dropping malformed parlay leg %s: %s", position, exc.errors())
    return tuple(legs)


def coerce_slip(record: Slip | Mapping[str, Any]) -> Slip:
    """Convert a raw record into a typed slip.

    Typed slips are returned unchanged. Mappings must declare ``slipType``
    (or ``slip_type`` / ``type``) as ``single`` or ``parlay``. Parlay legs are
    validated individually and invalid legs are dropped.
    """

    if isinstance(record, (SingleSlip, ParlaySlip)):
        return record
    if not isinstance(record, Mapping):
        raise MalformedSlipError(f"Expected a mapping, got {type(record).__name__}")

    slip_type = slip_type_of(record)
    if slip_type == SingleSlip.slip_type:
        try:
            return SingleSlipSchema.model_validate(dict(record)).to_slip()
        except ValidationError as exc:
            raise MalformedSlipError(f"Invalid single slip: {exc.errors()}") from exc
    if slip_type == ParlaySlip.slip_type:
        try:
            schema = ParlaySlipSchema.model_validate(dict(record))
        except ValidationError as exc:
            raise MalformedSlipError(f"Invalid parlay slip: {exc.errors()}") from exc
        return ParlaySlip(legs=_coerce_legs(schema.legs))
    raise UnknownSlipTypeError(f"Unrecognized slip type: {slip_type!r}")
