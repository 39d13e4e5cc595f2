"""Configuration loader wrapping the shared schema models."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import (
    ArrearsRules,
    CalculationRule,
    CalculationRules,
    CalendarMetadata,
    ConfigurationError,
    Holiday,
    JudicialCalendar,
    RegulatoryConfiguration,
    RentGuidelineConfig,
    ReviewRules,
    Section82Config,
    TribunalClosure,
    TribunalClosures,
)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
CALENDAR_FILE = CONFIG_DIRECTORY / "calendar.yaml"
REGULATIONS_FILE = CONFIG_DIRECTORY / "regulations.yaml"

_LOGGER = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


@lru_cache(maxsize=1)
def load_calendar() -> JudicialCalendar:
    """Load and cache the judicial calendar."""

    if not CALENDAR_FILE.exists():
        raise FileNotFoundError(f"Calendar configuration not found: {CALENDAR_FILE.name}")

    raw_calendar = _load_yaml(CALENDAR_FILE)

    try:
        calendar = JudicialCalendar.model_validate(raw_calendar)
    except ValidationError as error:
        raise ConfigurationError(f"Calendar validation failed: {error}") from error

    _LOGGER.debug(
        "Loaded judicial calendar covering years %s", calendar.supported_years
    )
    return calendar


@lru_cache(maxsize=1)
def load_regulations() -> RegulatoryConfiguration:
    """Load and cache the regulatory constants."""

    if not REGULATIONS_FILE.exists():
        raise FileNotFoundError(
            f"Regulation configuration not found: {REGULATIONS_FILE.name}"
        )

    raw_regulations = _load_yaml(REGULATIONS_FILE)

    try:
        return RegulatoryConfiguration.model_validate(raw_regulations)
    except ValidationError as error:
        raise ConfigurationError(f"Regulation validation failed: {error}") from error


__all__ = [
    "ArrearsRules",
    "CALENDAR_FILE",
    "CONFIG_DIRECTORY",
    "CalculationRule",
    "CalculationRules",
    "CalendarMetadata",
    "ConfigurationError",
    "Holiday",
    "JudicialCalendar",
    "REGULATIONS_FILE",
    "RegulatoryConfiguration",
    "RentGuidelineConfig",
    "ReviewRules",
    "Section82Config",
    "TribunalClosure",
    "TribunalClosures",
    "load_calendar",
    "load_regulations",
]
