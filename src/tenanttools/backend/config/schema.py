"""Pydantic models describing the judicial calendar and regulation schema."""

from __future__ import annotations

import datetime
from typing import Any, Iterable, Literal, Mapping, Sequence

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    computed_field,
    field_validator,
    model_validator,
)
from typing_extensions import Self


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class Holiday(ImmutableModel):
    """A statutory holiday observed by the tribunal."""

    date: datetime.date
    name: str
    rule: str | None = None
    note: str | None = None

    @model_validator(mode="after")
    def _validate_name(self) -> Holiday:
        if not self.name.strip():
            raise ConfigurationError("Holidays require a non-empty name")
        return self


class CalculationRule(ImmutableModel):
    """Counting rule for a notice or review period."""

    days: int
    type: Literal["business_days", "calendar_days"]
    excludes: Sequence[Literal["weekends", "statutory_holidays"]] = Field(
        default_factory=tuple
    )
    note: str | None = None

    @field_validator("excludes", mode="before")
    @classmethod
    def _coerce_excludes(cls, value: Any) -> Sequence[str]:
        if value is None:
            return ()
        if isinstance(value, Iterable) and not isinstance(value, str):
            return tuple(str(entry) for entry in value)
        raise ConfigurationError("'excludes' must be a list of exclusion names")

    @model_validator(mode="after")
    def _validate_days(self) -> CalculationRule:
        if self.days <= 0:
            raise ConfigurationError("Calculation rule periods must be positive")
        return self


class CalculationRules(ImmutableModel):
    """Periods used by the deadline calculators."""

    n4_notice: CalculationRule
    n12_notice_standard: CalculationRule
    n12_notice_extended: CalculationRule
    review_period: CalculationRule

    @model_validator(mode="after")
    def _validate_n12_periods(self) -> CalculationRules:
        if self.n12_notice_extended.days <= self.n12_notice_standard.days:
            raise ConfigurationError(
                "Extended N12 notice period must be longer than the standard period"
            )
        return self


class CalendarMetadata(ImmutableModel):
    """Provenance information for the calendar data."""

    description: str
    source: str
    last_updated: datetime.date
    notes: str | None = None


class TribunalClosure(ImmutableModel):
    """Recurring closure period that is informational only."""

    period: str
    name: str
    note: str | None = None


class TribunalClosures(ImmutableModel):
    note: str
    annual_closures: Sequence[TribunalClosure] = Field(default_factory=tuple)


class JudicialCalendar(ImmutableModel):
    """Year-indexed statutory holidays plus the deadline counting rules."""

    metadata: CalendarMetadata
    statutory_holidays: Mapping[int, Sequence[Holiday]] = Field(default_factory=dict)
    ltb_closures: TribunalClosures
    calculation_rules: CalculationRules

    @field_validator("statutory_holidays", mode="before")
    @classmethod
    def _coerce_year_keys(cls, value: Any) -> Mapping[int, Any]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ConfigurationError("Statutory holidays must be keyed by year")
        coerced: dict[int, Any] = {}
        for key, entries in value.items():
            try:
                year = int(key)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(
                    f"Holiday table key '{key}' is not a year"
                ) from exc
            coerced[year] = tuple(entries or ())
        return coerced

    def holidays_for(self, year: int) -> tuple[Holiday, ...]:
        return tuple(self.statutory_holidays.get(year, ()))

    @computed_field
    @property
    def supported_years(self) -> tuple[int, ...]:
        return tuple(sorted(self.statutory_holidays))


class ArrearsRules(ImmutableModel):
    """Thresholds applied while reducing an arrears ledger."""

    late_fee_threshold: int
    previous_cure_days: int = 14

    @model_validator(mode="after")
    def _validate_threshold(self) -> ArrearsRules:
        if self.late_fee_threshold < 0:
            raise ConfigurationError("Late fee threshold must be non-negative")
        return self


class ReviewRules(ImmutableModel):
    """Warning thresholds for Request for Review deadlines."""

    urgent_threshold_days: int
    previous_days: int = 30

    @model_validator(mode="after")
    def _validate_threshold(self) -> ReviewRules:
        if self.urgent_threshold_days < 0:
            raise ConfigurationError("Urgent threshold must be non-negative")
        return self


class RentGuidelineConfig(ImmutableModel):
    """Annual guideline rates and the rent control exemption cutoff."""

    rates: Mapping[int, float]
    default_rate: float
    exemption_date: datetime.date
    notice_days: int = 90
    documentation_url: str | None = None

    @field_validator("rates", mode="before")
    @classmethod
    def _coerce_rates(cls, value: Any) -> Mapping[int, float]:
        if isinstance(value, Mapping):
            return {int(key): float(rate) for key, rate in value.items()}
        raise ConfigurationError("Guideline rates must be provided as a mapping")

    @model_validator(mode="after")
    def _validate_rates(self) -> RentGuidelineConfig:
        if self.default_rate < 0:
            raise ConfigurationError("Default guideline rate must be non-negative")
        for year, rate in self.rates.items():
            if rate < 0:
                raise ConfigurationError(f"Guideline rate for {year} must be non-negative")
        return self

    def rate_for(self, year: int) -> float | None:
        return self.rates.get(year)


class Section82Config(ImmutableModel):
    """Deposit rules for raising maintenance issues at a hearing."""

    status: Literal["confirmed", "draft", "pending"]
    deposit_percentage: float
    minimum_deposit: int | None = None

    @model_validator(mode="after")
    def _validate_deposit(self) -> Self:
        if not 0 <= self.deposit_percentage <= 1:
            raise ConfigurationError("Deposit percentage must be between 0 and 1")
        if self.minimum_deposit is not None and self.minimum_deposit < 0:
            raise ConfigurationError("Minimum deposit must be non-negative when provided")
        return self


class RegulatoryConfiguration(ImmutableModel):
    """Legal constants that are not part of the holiday calendar."""

    arrears: ArrearsRules
    review: ReviewRules
    rent_increase: RentGuidelineConfig
    section_82: Section82Config
    meta: Mapping[str, Any] = Field(default_factory=dict)


__all__ = [
    "ArrearsRules",
    "CalculationRule",
    "CalculationRules",
    "CalendarMetadata",
    "ConfigurationError",
    "Holiday",
    "ImmutableModel",
    "JudicialCalendar",
    "RegulatoryConfiguration",
    "RentGuidelineConfig",
    "ReviewRules",
    "Section82Config",
    "TribunalClosure",
    "TribunalClosures",
    "ValidationError",
]
