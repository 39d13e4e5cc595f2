"""Utilities for validating calendar and regulation data and surfacing issues."""

from __future__ import annotations

import argparse
from collections import Counter
from typing import Sequence

from .calendar_config import (
    CalculationRules,
    Holiday,
    JudicialCalendar,
    RegulatoryConfiguration,
    RentGuidelineConfig,
    load_calendar,
    load_regulations,
)

from ..version import get_project_version

TARGETS = ("calendar", "regulations")


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_holiday_year(year: int, holidays: Sequence[Holiday]) -> list[str]:
    scope = f"statutory_holidays.{year}"
    errors: list[str] = []

    if not holidays:
        errors.append(_format_scope(scope, "no holidays defined"))
        return errors

    for holiday in holidays:
        if holiday.date.year != year:
            errors.append(
                _format_scope(
                    scope,
                    f"'{holiday.name}' is dated {holiday.date.isoformat()} outside its year",
                )
            )

    dates = [holiday.date for holiday in holidays]
    duplicates = [value for value, count in Counter(dates).items() if count > 1]
    if duplicates:
        errors.append(
            _format_scope(
                scope,
                "duplicate holiday dates detected: "
                f"{sorted(value.isoformat() for value in duplicates)}",
            )
        )

    if dates != sorted(dates):
        errors.append(_format_scope(scope, "holidays should be sorted by date"))

    return errors


def _validate_calculation_rules(rules: CalculationRules) -> list[str]:
    errors: list[str] = []

    if rules.n4_notice.type != "business_days":
        errors.append(
            _format_scope(
                "calculation_rules.n4_notice",
                "the cure period must be counted in business days",
            )
        )

    for label, rule in {
        "n12_notice_standard": rules.n12_notice_standard,
        "n12_notice_extended": rules.n12_notice_extended,
        "review_period": rules.review_period,
    }.items():
        if rule.type != "calendar_days":
            errors.append(
                _format_scope(
                    f"calculation_rules.{label}",
                    "period must be counted in calendar days",
                )
            )
        if rule.excludes:
            errors.append(
                _format_scope(
                    f"calculation_rules.{label}",
                    "calendar-day periods cannot exclude days",
                )
            )

    return errors


def validate_calendar(calendar: JudicialCalendar) -> list[str]:
    """Return a list of validation issues for the provided calendar."""

    errors: list[str] = []

    for year in calendar.supported_years:
        errors.extend(_validate_holiday_year(year, calendar.holidays_for(year)))

    errors.extend(_validate_calculation_rules(calendar.calculation_rules))

    return errors


def _validate_rent_increase(config: RentGuidelineConfig) -> list[str]:
    errors: list[str] = []

    for year, rate in {**config.rates, "default": config.default_rate}.items():
        if rate < 0 or rate > 1:
            errors.append(
                _format_scope(
                    "rent_increase.rates",
                    f"rate for '{year}' must be between 0 and 1",
                )
            )

    if config.notice_days <= 0:
        errors.append(
            _format_scope("rent_increase", "notice period must be a positive number of days")
        )

    if config.documentation_url and not config.documentation_url.startswith(
        ("http://", "https://")
    ):
        errors.append(
            _format_scope("rent_increase", "documentation URL must be absolute")
        )

    return errors


def validate_regulations(regulations: RegulatoryConfiguration) -> list[str]:
    """Return a list of validation issues for the regulatory constants."""

    errors: list[str] = []

    errors.extend(_validate_rent_increase(regulations.rent_increase))

    if regulations.review.urgent_threshold_days >= regulations.review.previous_days:
        errors.append(
            _format_scope(
                "review",
                "urgent threshold should be shorter than the review period",
            )
        )

    return errors


def validate_all() -> dict[str, list[str]]:
    """Validate every configuration file and return issues keyed by file."""

    return {
        "calendar": validate_calendar(load_calendar()),
        "regulations": validate_regulations(load_regulations()),
    }


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Validate the holiday calendar and regulation constants and report "
            "issues helpful to contributors."
        )
    )
    parser.add_argument(
        "targets",
        nargs="*",
        metavar="target",
        help=f"Specific files to validate: {', '.join(TARGETS)} (defaults to all)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {get_project_version()}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    unknown = [target for target in args.targets if target not in TARGETS]
    if unknown:
        parser.error(
            f"unknown target(s): {', '.join(unknown)} (choose from {', '.join(TARGETS)})"
        )

    targets = args.targets or list(TARGETS)

    exit_code = 0

    for target in targets:
        try:
            if target == "calendar":
                issues = validate_calendar(load_calendar())
            else:
                issues = validate_regulations(load_regulations())
        except FileNotFoundError as error:
            print(f"[{target}] failed to load configuration: {error}")
            exit_code = 1
            continue

        if issues:
            exit_code = 1
            print(f"[{target}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{target}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
