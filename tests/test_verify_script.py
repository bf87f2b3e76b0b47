"""Reference verification script tests."""

from __future__ import annotations

import runpy
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "verify_sport_breakdown.py"


def _load() -> dict:
    return runpy.run_path(str(SCRIPT), run_name="verify_sport_breakdown")


def test_verify_passes_on_reference_scenario() -> None:
    script = _load()
    assert script["verify"]() is True


def test_main_exits_zero(monkeypatch) -> None:
    script = _load()
    monkeypatch.setattr("sys.argv", ["verify_sport_breakdown.py", "--log-level", "warning"])
    with pytest.raises(SystemExit) as excinfo:
        script["main"]()
    assert excinfo.value.code == 0
