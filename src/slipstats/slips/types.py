"""Dataclasses for betting slips and their legs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class ResultKind(str, Enum):
    WIN = "win"
    LOSE = "lose"
    PENDING = "pending"
    RETURNED = "returned"

    @classmethod
    def parse(cls, value: object) -> ResultKind | None:
        """Return the matching result kind, or ``None`` when unrecognized."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @property
    def settled(self) -> bool:
        return self in (ResultKind.WIN, ResultKind.LOSE)


@dataclass(frozen=True)
class Leg:
    sport: str
    result: str
    league: str | None = None


@dataclass(frozen=True)
class SingleSlip:
    slip_type: ClassVar[str] = "single"

    sport: str
    result: str
    league: str | None = None


@dataclass(frozen=True)
class ParlaySlip:
    slip_type: ClassVar[str] = "parlay"

    legs: tuple[Leg, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "legs", tuple(self.legs or ()))


Slip = Union[SingleSlip, ParlaySlip]
