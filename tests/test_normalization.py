"""Sport normalization tests."""

from __future__ import annotations

import pytest

from slipstats.analytics import normalization as norm
from slipstats.config import Settings


@pytest.mark.parametrize(
    ("raw", "key", "label", "league"),
    [
        ("nfl", "football", "Football", "NFL"),
        ("NBA", "basketball", "Basketball", "NBA"),
        ("cbb", "basketball", "Basketball", "NCAAB"),
        ("  futbol ", "soccer", "Soccer", None),
        ("Hockey", "hockey", "Hockey", None),
    ],
)
def test_known_aliases(raw: str, key: str, label: str, league: str | None) -> None:
    normalized = norm.normalize_sport_key(raw)
    assert normalized == norm.NormalizedSport(key=key, label=label, league=league)


def test_unknown_sport_is_title_cased() -> None:
    normalized = norm.normalize_sport_key("mixed   martial arts")
    assert normalized is not None
    assert normalized.key == "mixed martial arts"
    assert normalized.label == "Mixed Martial Arts"
    assert normalized.league is None


@pytest.mark.parametrize("raw", [None, "", "   ", 42, ["nfl"]])
def test_unusable_values_return_none(raw: object) -> None:
    assert norm.normalize_sport_key(raw) is None


def test_default_alias_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        norm.DEFAULT_SPORT_ALIASES["darts"] = norm.SportAlias("Darts")  # type: ignore[index]
    with pytest.raises(TypeError):
        norm.DEFAULT_NORMALIZER.aliases["darts"] = norm.SportAlias("Darts")  # type: ignore[index]


def test_with_aliases_returns_new_normalizer() -> None:
    base = norm.SportNormalizer()
    extended = base.with_aliases({"PDC": norm.SportAlias("Darts", "PDC"), "ufc": "MMA"})
    assert extended.normalize("pdc") == norm.NormalizedSport("darts", "Darts", "PDC")
    assert extended.normalize("UFC").key == "mma"
    assert base.lookup("pdc") is None
    assert "pdc" not in norm.DEFAULT_SPORT_ALIASES


def test_resolve_league_prefers_explicit_value() -> None:
    normalizer = norm.DEFAULT_NORMALIZER
    sport = normalizer.normalize("nfl")
    assert normalizer.resolve_league(sport) == "NFL"
    assert normalizer.resolve_league(sport, "ncaaf") == "NCAAF"
    assert normalizer.resolve_league(sport, "XFL") == "XFL"
    assert normalizer.resolve_league(sport, "football") == "football"
    assert normalizer.resolve_league(sport, "  ") == "NFL"


def test_capitalize_words() -> None:
    assert norm.capitalize_words("rUGBY union") == "Rugby Union"


def test_normalizer_from_settings_merges_aliases() -> None:
    settings = Settings(sport_aliases={"epl": "Soccer"})
    normalizer = norm.normalizer_from_settings(settings)
    assert normalizer.normalize("epl").key == "soccer"
    assert normalizer.normalize("nfl").key == "football"
    assert norm.normalizer_from_settings(Settings()) is norm.DEFAULT_NORMALIZER
