"""Regression coverage ensuring calculator outputs stay stable."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from tenanttools.backend.services.calculation_service import calculate

_DATA_PATH = Path(__file__).resolve().parents[1] / "data" / "regression_scenarios.json"


@pytest.mark.parametrize(
    "scenario",
    json.loads(_DATA_PATH.read_text("utf-8")),
    ids=lambda item: f"{item['payload']['calculator']}_{item['name']}",
)
def test_calculate_matches_regression_scenario(scenario: dict[str, object]) -> None:
    """The calculation service returns the expected results for known payloads."""

    today = date.fromisoformat(scenario["today"])

    response = calculate(scenario["payload"], today=today)

    result = response["result"]
    for key, value in scenario["expectations"].items():
        assert result[key] == value, key
