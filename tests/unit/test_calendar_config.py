"""Unit coverage for loading the calendar and regulation configuration."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from shutil import copy2

import pytest
import yaml

from tenanttools.backend.config import calendar_config
from tenanttools.backend.config.calendar_config import ConfigurationError
from tenanttools.backend.services.calculators import available_years


@pytest.fixture()
def isolated_config_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return a temporary configuration directory patched into ``calendar_config``."""

    calendar_path = tmp_path / "calendar.yaml"
    regulations_path = tmp_path / "regulations.yaml"
    copy2(calendar_config.CALENDAR_FILE, calendar_path)
    copy2(calendar_config.REGULATIONS_FILE, regulations_path)

    monkeypatch.setattr(calendar_config, "CONFIG_DIRECTORY", tmp_path)
    monkeypatch.setattr(calendar_config, "CALENDAR_FILE", calendar_path)
    monkeypatch.setattr(calendar_config, "REGULATIONS_FILE", regulations_path)
    calendar_config.load_calendar.cache_clear()
    calendar_config.load_regulations.cache_clear()

    yield tmp_path

    calendar_config.load_calendar.cache_clear()
    calendar_config.load_regulations.cache_clear()


def _rewrite(path: Path, mutate) -> None:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    mutate(data)
    path.write_text(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), encoding="utf-8")


def test_packaged_calendar_loads() -> None:
    calendar = calendar_config.load_calendar()

    assert calendar.supported_years == (2024, 2025, 2026)
    assert calendar.calculation_rules.n4_notice.days == 7
    assert calendar.calculation_rules.n4_notice.type == "business_days"
    assert calendar.calculation_rules.review_period.days == 15
    assert calendar.holidays_for(2025)[0].date == date(2025, 1, 1)


def test_packaged_regulations_load() -> None:
    regulations = calendar_config.load_regulations()

    assert regulations.arrears.late_fee_threshold == 5000
    assert regulations.review.urgent_threshold_days == 5
    assert regulations.rent_increase.exemption_date == date(2018, 11, 15)
    assert regulations.section_82.status == "draft"
    assert regulations.section_82.minimum_deposit is None


def test_loaders_are_cached() -> None:
    assert calendar_config.load_calendar() is calendar_config.load_calendar()
    assert calendar_config.load_regulations() is calendar_config.load_regulations()


def test_new_holiday_year_is_picked_up(isolated_config_directory: Path) -> None:
    def add_2027(data: dict) -> None:
        data["statutory_holidays"]["2027"] = [
            {"date": date(2027, 1, 1), "name": "New Year's Day"}
        ]

    _rewrite(isolated_config_directory / "calendar.yaml", add_2027)

    assert calendar_config.load_calendar().supported_years == (2024, 2025, 2026, 2027)
    assert available_years() == (2024, 2025, 2026, 2027)


def test_missing_calendar_raises(isolated_config_directory: Path) -> None:
    (isolated_config_directory / "calendar.yaml").unlink()

    with pytest.raises(FileNotFoundError):
        calendar_config.load_calendar()


def test_non_mapping_document_is_rejected(isolated_config_directory: Path) -> None:
    (isolated_config_directory / "regulations.yaml").write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="mapping at the top level"):
        calendar_config.load_regulations()


def test_invalid_rule_type_raises_configuration_error(
    isolated_config_directory: Path,
) -> None:
    def break_rule(data: dict) -> None:
        data["calculation_rules"]["n4_notice"]["type"] = "fortnights"

    _rewrite(isolated_config_directory / "calendar.yaml", break_rule)

    with pytest.raises(ConfigurationError, match="Calendar validation failed"):
        calendar_config.load_calendar()


def test_extended_notice_must_exceed_standard(isolated_config_directory: Path) -> None:
    def swap_periods(data: dict) -> None:
        data["calculation_rules"]["n12_notice_extended"]["days"] = 30

    _rewrite(isolated_config_directory / "calendar.yaml", swap_periods)

    with pytest.raises(ConfigurationError):
        calendar_config.load_calendar()


def test_deposit_percentage_is_bounded(isolated_config_directory: Path) -> None:
    def inflate(data: dict) -> None:
        data["section_82"]["deposit_percentage"] = 1.5

    _rewrite(isolated_config_directory / "regulations.yaml", inflate)

    with pytest.raises(ConfigurationError, match="Regulation validation failed"):
        calendar_config.load_regulations()
