"""Unit coverage for the Section 82 deposit estimate."""

from __future__ import annotations

import math

from tenanttools.backend.config.calendar_config import RegulatoryConfiguration
from tenanttools.backend.services.calculators import (
    estimate_deposit,
    get_deposit_percentage,
    get_regulatory_status,
    is_confirmed,
)


def test_deposit_is_half_of_arrears() -> None:
    result = estimate_deposit(150000)

    assert result.deposit_required == 75000
    assert result.deposit_percentage == 0.5
    assert result.regulatory_status == "draft"
    assert len(result.warnings) == 4
    assert "NOT YET CONFIRMED" in result.warnings[0]
    assert "implies 50%" in result.warnings[0]
    assert "$750.00 into trust" in result.warnings[1]
    assert result.warnings[-1].startswith("Section 82 requires ADVANCE WRITTEN NOTICE")


def test_zero_arrears_only_carries_status_warnings() -> None:
    result = estimate_deposit(0)

    assert result.deposit_required == 0
    assert len(result.warnings) == 2


def test_half_cent_rounds_up() -> None:
    assert estimate_deposit(12345).deposit_required == 6173
    assert estimate_deposit(-101).deposit_required == -50


def test_non_finite_input_propagates() -> None:
    assert math.isnan(estimate_deposit(float("nan")).deposit_required)
    assert estimate_deposit(float("inf")).deposit_required == float("inf")


def test_minimum_deposit_floor(regulations: RegulatoryConfiguration) -> None:
    section_82 = regulations.section_82.model_copy(update={"minimum_deposit": 10000})
    floored = regulations.model_copy(update={"section_82": section_82})

    result = estimate_deposit(5000, floored)

    assert result.deposit_required == 10000
    assert result.warnings[1] == (
        "A minimum deposit of $100.00 may apply regardless of arrears amount."
    )


def test_status_helpers(regulations: RegulatoryConfiguration) -> None:
    assert get_regulatory_status() == "draft"
    assert get_deposit_percentage() == 0.5
    assert is_confirmed() is False

    section_82 = regulations.section_82.model_copy(update={"status": "confirmed"})
    confirmed = regulations.model_copy(update={"section_82": section_82})
    assert is_confirmed(confirmed) is True
