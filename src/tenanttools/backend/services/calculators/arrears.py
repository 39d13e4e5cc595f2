"""Rent arrears ledger using FIFO accounting.

Charges and payments are merged into one date-ordered ledger and reduced with
a single running balance, which is equivalent to applying every payment to the
oldest outstanding charge. Late fees are tracked separately because only rent
may be claimed on a non-payment notice.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any

from tenanttools.backend.config.calendar_config import (
    JudicialCalendar,
    RegulatoryConfiguration,
    load_calendar,
    load_regulations,
)
from tenanttools.backend.models import (
    CHARGE_CATEGORIES,
    ArrearsCalculation,
    ArrearsWarning,
    Charge,
    LedgerEntry,
    Payment,
)

from .utils import dollars_to_cents, format_currency, is_valid_date_string

_DATE_ERROR = "Invalid date format. Use YYYY-MM-DD."
_AMOUNT_ERROR = "Amount must be a positive number."
_CATEGORY_ERROR = "Type must be: rent, late_fee, utility, or other."


def _charge_description(charge: Charge) -> str:
    if charge.description:
        return charge.description
    return f"{charge.category}: {charge.period or ''}".strip()


def calculate_arrears(
    charges: Sequence[Charge],
    payments: Sequence[Payment],
    regulations: RegulatoryConfiguration | None = None,
    calendar: JudicialCalendar | None = None,
) -> ArrearsCalculation:
    """Build the arrears ledger for ``charges`` and ``payments``.

    Transactions are ordered by date with a stable sort over the charges
    followed by the payments, so same-day entries keep that input order.
    Warnings are returned in the order they are detected: late fee warnings
    at their ledger position, then the misapplied payment and cure period notes.
    """

    if regulations is None:
        regulations = load_regulations()
    if calendar is None:
        calendar = load_calendar()
    late_fee_threshold = regulations.arrears.late_fee_threshold

    transactions: list[Charge | Payment] = sorted(
        [*charges, *payments], key=lambda transaction: transaction.date
    )

    entries: list[LedgerEntry] = []
    warnings: list[ArrearsWarning] = []

    running_balance = 0
    total_charges = 0
    total_payments = 0
    late_fee_total = 0
    rent_charges_total = 0

    for transaction in transactions:
        if isinstance(transaction, Charge):
            total_charges += transaction.amount
            running_balance += transaction.amount

            if transaction.category == "late_fee":
                late_fee_total += transaction.amount
                if transaction.amount > late_fee_threshold:
                    warnings.append(
                        ArrearsWarning(
                            type="illegal_late_fee",
                            message=(
                                f"Late fee on {transaction.date} "
                                f"({format_currency(transaction.amount)}) may exceed "
                                "legal limits. Ontario courts often find fees over "
                                f"{format_currency(late_fee_threshold)} unreasonable."
                            ),
                        )
                    )
            elif transaction.category == "rent":
                rent_charges_total += transaction.amount

            entries.append(
                LedgerEntry(
                    date=transaction.date,
                    description=_charge_description(transaction),
                    charge=transaction.amount,
                    payment=0,
                    balance=running_balance,
                )
            )
        else:
            total_payments += transaction.amount
            running_balance -= transaction.amount

            entries.append(
                LedgerEntry(
                    date=transaction.date,
                    description=transaction.description or "Payment received",
                    charge=0,
                    payment=transaction.amount,
                    balance=running_balance,
                )
            )

    rent_only = max(0, running_balance - late_fee_total)

    if late_fee_total > 0 and running_balance > 0:
        warnings.append(
            ArrearsWarning(
                type="misapplied_payment",
                message=(
                    "Your payments should be applied to RENT first, not late fees. "
                    f"The landlord may only claim {format_currency(rent_only)} in rent "
                    "arrears on an N4 notice."
                ),
            )
        )

    if running_balance > 0:
        cure_days = calendar.calculation_rules.n4_notice.days
        warnings.append(
            ArrearsWarning(
                type="calculation_note",
                message=(
                    f"Bill 60 (2025): You have only {cure_days} BUSINESS DAYS to pay "
                    "arrears after receiving an N4 notice. This is shorter than the "
                    f"previous {regulations.arrears.previous_cure_days}-day period."
                ),
            )
        )

    return ArrearsCalculation(
        entries=tuple(entries),
        total_charges=total_charges,
        total_payments=total_payments,
        current_balance=running_balance,
        late_fee_total=late_fee_total,
        rent_only=rent_only,
        rent_charges_total=rent_charges_total,
        warnings=tuple(warnings),
    )


def _is_amount(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_charge(charge: Mapping[str, Any]) -> list[str]:
    """Return problems with a user-entered charge; an empty list means valid.

    Only the date syntax is checked, not whether the day exists, and zero
    amounts are accepted.
    """

    errors: list[str] = []

    if not is_valid_date_string(charge.get("date")):
        errors.append(_DATE_ERROR)

    amount = charge.get("amount")
    if not _is_amount(amount) or amount < 0:
        errors.append(_AMOUNT_ERROR)

    category = charge.get("category", charge.get("type"))
    if category not in CHARGE_CATEGORIES:
        errors.append(_CATEGORY_ERROR)

    return errors


def validate_payment(payment: Mapping[str, Any]) -> list[str]:
    """Return problems with a user-entered payment; an empty list means valid."""

    errors: list[str] = []

    if not is_valid_date_string(payment.get("date")):
        errors.append(_DATE_ERROR)

    amount = payment.get("amount")
    if not _is_amount(amount) or amount < 0:
        errors.append(_AMOUNT_ERROR)

    return errors


def create_charge_from_dollars(
    date: str,
    amount_dollars: float,
    category: str,
    description: str | None = None,
    period: str | None = None,
) -> Charge:
    return Charge(
        date=date,
        amount=dollars_to_cents(amount_dollars),
        category=category,
        description=description,
        period=period,
    )


def create_payment_from_dollars(
    date: str, amount_dollars: float, description: str | None = None
) -> Payment:
    return Payment(
        date=date,
        amount=dollars_to_cents(amount_dollars),
        description=description,
    )


__all__ = [
    "calculate_arrears",
    "create_charge_from_dollars",
    "create_payment_from_dollars",
    "validate_charge",
    "validate_payment",
]
