"""Sport-name normalization used by the analytics breakdowns."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from slipstats.config import Settings, get_settings

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class SportAlias:
    sport: str
    league: str | None = None


@dataclass(frozen=True)
class NormalizedSport:
    key: str
    label: str
    league: str | None = None


DEFAULT_SPORT_ALIASES: Mapping[str, SportAlias] = MappingProxyType(
    {
        "nba": SportAlias("Basketball", "NBA"),
        "basketball": SportAlias("Basketball"),
        "ncaab": SportAlias("Basketball", "NCAAB"),
        "cbb": SportAlias("Basketball", "NCAAB"),
        "nfl": SportAlias("Football", "NFL"),
        "football": SportAlias("Football"),
        "ncaaf": SportAlias("Football", "NCAAF"),
        "cfb": SportAlias("Football", "NCAAF"),
        "mlb": SportAlias("Baseball", "MLB"),
        "baseball": SportAlias("Baseball"),
        "nhl": SportAlias("Hockey", "NHL"),
        "hockey": SportAlias("Hockey"),
        "tennis": SportAlias("Tennis"),
        "atp": SportAlias("Tennis", "ATP"),
        "wta": SportAlias("Tennis", "WTA"),
        "itf": SportAlias("Tennis", "ITF"),
        "soccer": SportAlias("Soccer"),
        "futbol": SportAlias("Soccer"),
    }
)


def clean_text(raw: object) -> str | None:
    """Collapse whitespace and trim; ``None`` for non-strings and blanks."""

    if not isinstance(raw, str):
        return None
    cleaned = _WHITESPACE.sub(" ", raw).strip()
    return cleaned or None


def capitalize_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" ") if word)


class SportNormalizer:
    """Map raw sport identifiers onto canonical keys and display labels.

    The alias table is copied into a read-only mapping on construction, so a
    normalizer never changes after it is built. Use :meth:`with_aliases` to
    derive an extended table.
    """

    def __init__(self, aliases: Mapping[str, SportAlias] = DEFAULT_SPORT_ALIASES) -> None:
        self._aliases: Mapping[str, SportAlias] = MappingProxyType(
            {code.strip().lower(): alias for code, alias in aliases.items()}
        )

    @property
    def aliases(self) -> Mapping[str, SportAlias]:
        return self._aliases

    def with_aliases(self, extra: Mapping[str, SportAlias | str]) -> SportNormalizer:
        merged = dict(self._aliases)
        for code, alias in extra.items():
            merged[code] = alias if isinstance(alias, SportAlias) else SportAlias(alias)
        return SportNormalizer(merged)

    def lookup(self, raw: object) -> SportAlias | None:
        cleaned = clean_text(raw)
        return self._aliases.get(cleaned.lower()) if cleaned else None

    def normalize(self, raw: object) -> NormalizedSport | None:
        cleaned = clean_text(raw)
        if cleaned is None:
            return None
        alias = self._aliases.get(cleaned.lower())
        if alias:
            return NormalizedSport(key=alias.sport.lower(), label=alias.sport, league=alias.league)
        label = capitalize_words(cleaned)
        return NormalizedSport(key=label.lower(), label=label)

    def resolve_league(self, normalized: NormalizedSport, explicit: object = None) -> str | None:
        """Pick the league for an observation.

        An explicit league wins; it is mapped through the alias table when it
        names a known league code (``nba`` -> ``NBA``).
        """

        cleaned = clean_text(explicit)
        if cleaned:
            alias = self._aliases.get(cleaned.lower())
            return alias.league if alias and alias.league else cleaned
        return normalized.league


DEFAULT_NORMALIZER = SportNormalizer()


def normalize_sport_key(raw: object) -> NormalizedSport | None:
    return DEFAULT_NORMALIZER.normalize(raw)


def normalizer_from_settings(settings: Settings | None = None) -> SportNormalizer:
    """Return the default normalizer extended with configured aliases."""

    settings = settings or get_settings()
    if not settings.sport_aliases:
        return DEFAULT_NORMALIZER
    return DEFAULT_NORMALIZER.with_aliases(settings.sport_aliases)
