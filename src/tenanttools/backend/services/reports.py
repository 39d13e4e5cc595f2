"""Plain-text summaries that tenants can paste into a clinic file or defence.

Each renderer takes the calculation result plus the date to stamp on the
report and returns a newline-joined string; nothing here reads the clock.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from tenanttools.backend.models import (
    ArrearsCalculation,
    N4Calculation,
    RentIncreaseCalculation,
    Section82Calculation,
)

from .calculators.utils import format_currency, format_percentage

_TOOL_LINE = "Tool: Ontario Tenant Tools (NOT LEGAL ADVICE)"
_RULE = "-" * 60
_BLANK = "         "


def _header(title: str, generated_on: date) -> list[str]:
    return [
        f"--- {title} ---",
        f"Generated: {generated_on.isoformat()}",
        _TOOL_LINE,
        "",
    ]


def _warning_block(heading: str, warnings: Iterable[str]) -> list[str]:
    messages = list(warnings)
    if not messages:
        return []
    return [heading, *(f"• {message}" for message in messages), ""]


def _footer(first_line: str, second_line: str) -> list[str]:
    return [first_line, second_line, "", "--- END OF SUMMARY ---"]


def _amount_column(cents: int) -> str:
    return format_currency(cents).rjust(9) if cents > 0 else _BLANK


def generate_ledger_text(calculation: ArrearsCalculation, *, generated_on: date) -> str:
    """Render the arrears ledger, totals, and warnings as plain text."""

    lines = _header("RENT CALCULATION SUMMARY", generated_on)
    lines.extend(
        [
            "LEDGER:",
            _RULE,
            "Date       | Description                | Charge    | Payment   | Balance",
            _RULE,
        ]
    )

    for entry in calculation.entries:
        lines.append(
            " | ".join(
                (
                    entry.date.ljust(10),
                    entry.description[:26].ljust(26),
                    _amount_column(entry.charge),
                    _amount_column(entry.payment),
                    format_currency(entry.balance).rjust(9),
                )
            )
        )

    lines.extend(
        [
            _RULE,
            "",
            "SUMMARY:",
            f"Total Charges:     {format_currency(calculation.total_charges)}",
            f"Total Payments:    {format_currency(calculation.total_payments)}",
            f"Current Balance:   {format_currency(calculation.current_balance)}",
            "",
        ]
    )

    if calculation.late_fee_total > 0:
        lines.extend(
            [
                "BREAKDOWN:",
                f"Late Fees Charged: {format_currency(calculation.late_fee_total)}",
                f"Rent Only Owed:    {format_currency(calculation.rent_only)}",
                "",
                "NOTE: N4 notices should only claim RENT, not late fees.",
                "",
            ]
        )

    lines.extend(
        _warning_block("WARNINGS:", (warning.message for warning in calculation.warnings))
    )
    lines.extend(
        _footer(
            "DISCLAIMER: This calculation is for information only.",
            "Verify all figures. Get legal advice for your situation.",
        )
    )
    return "\n".join(lines)


def generate_n4_summary(calculation: N4Calculation, *, generated_on: date) -> str:
    """Render the cure deadline and every skipped day as plain text."""

    lines = _header("N4 CURE DEADLINE", generated_on)
    lines.extend(
        [
            "DATES:",
            f"Notice Served:    {calculation.served_date}",
            f"Cure Deadline:    {calculation.cure_deadline}",
            f"Landlord Can File: {calculation.can_file_l1_date}",
            f"Cure Period:      {calculation.cure_days} business days",
            "",
        ]
    )

    if calculation.is_expired:
        lines.append("Status:           CURE PERIOD HAS ENDED")
    else:
        lines.append(f"Days Remaining:   {calculation.days_remaining}")
    lines.append("")

    if calculation.workdays_skipped:
        lines.append("DAYS NOT COUNTED:")
        lines.extend(
            f"{skipped.date}  {skipped.reason}" for skipped in calculation.workdays_skipped
        )
        lines.append("")

    lines.extend(
        _footer(
            "DISCLAIMER: This calculation is for information only.",
            "Verify all dates. Get legal advice for your situation.",
        )
    )
    return "\n".join(lines)


def generate_rent_increase_summary(
    calculation: RentIncreaseCalculation, *, generated_on: date
) -> str:
    lines = _header("RENT INCREASE CALCULATION", generated_on)
    lines.extend(
        [
            "AMOUNTS:",
            f"Current Rent:     {format_currency(calculation.current_rent)}",
            f"Proposed Rent:    {format_currency(calculation.proposed_rent)}",
            f"Maximum Allowed:  {format_currency(calculation.maximum_allowed)}",
            "",
            "GUIDELINE:",
            f"Year:             {calculation.guideline_year}",
            f"Rate:             {format_percentage(calculation.guideline_rate)}",
            "",
            "RESULT:",
        ]
    )

    if calculation.exempt_from_guideline:
        lines.append("Status:           EXEMPT FROM RENT CONTROL")
        lines.append("Note:             Unit first occupied after Nov 15, 2018")
    elif calculation.is_legal:
        lines.append("Status:           LEGAL (within guideline)")
    else:
        lines.append("Status:           POTENTIALLY ILLEGAL")
        lines.append(f"Overage:          {format_currency(calculation.overage_amount)}")
    lines.append("")

    lines.extend(_warning_block("WARNINGS:", calculation.warnings))
    lines.extend(
        _footer(
            "DISCLAIMER: This calculation is for information only.",
            "Verify all figures. Get legal advice for your situation.",
        )
    )
    return "\n".join(lines)


def generate_section82_summary(
    calculation: Section82Calculation, *, generated_on: date
) -> str:
    lines = _header("SECTION 82 DEPOSIT ESTIMATE", generated_on)
    lines.extend(
        [
            f"REGULATORY STATUS: {calculation.regulatory_status.upper()}",
            "    This estimate may change when regulations are finalized.",
            "",
            "CALCULATION:",
            f"Arrears Amount:     {format_currency(calculation.arrears_amount)}",
            "Deposit Percentage: "
            f"{format_percentage(calculation.deposit_percentage, 0)} "
            "(implied, not confirmed)",
            f"Estimated Deposit:  {format_currency(calculation.deposit_required)}",
            "",
            "WHAT IS SECTION 82?",
            "Section 82 of the RTA lets you raise maintenance/repair issues",
            "as a defense or set-off at an eviction hearing for unpaid rent.",
            "Bill 60 added a deposit requirement to use this defense.",
            "",
        ]
    )

    lines.extend(_warning_block("IMPORTANT WARNINGS:", calculation.warnings))
    lines.extend(
        [
            "NEXT STEPS:",
            "1. Confirm deposit amount with LTB or legal clinic",
            "2. Send advance written notice to landlord (timeline TBD)",
            "3. Document all maintenance issues with photos/records",
            "4. Gather evidence: repair requests, landlord responses",
            "",
            "RESOURCES:",
            "• Community Legal Clinic: Find your local clinic at clcj.ca",
            "• LTB: tribunalsontario.ca/ltb",
            "• Steps to Justice: stepstojustice.ca",
            "",
        ]
    )
    lines.extend(
        _footer(
            "DISCLAIMER: This estimate is for information only.",
            "Rules may change. Get legal advice for your situation.",
        )
    )
    return "\n".join(lines)


__all__ = [
    "generate_ledger_text",
    "generate_n4_summary",
    "generate_rent_increase_summary",
    "generate_section82_summary",
]
