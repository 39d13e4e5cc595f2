"""Typed records shared by the calculators.

Charges and payments are plain frozen dataclasses so the engines accept
whatever the caller hands them: checking inputs is the job of the validation
helpers and the boundary request models in :mod:`.api`, never of the
arithmetic. Results are frozen dataclasses as well; ``to_dict`` produces the
primitive form (ISO dates, integer cents) handed back to collaborators.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

from .api import (
    ArrearsRequest,
    CalculationRequest,
    ChargeInput,
    CureDeadlineRequest,
    DepositRequest,
    NoticeTerminationRequest,
    PaymentInput,
    RentIncreaseRequest,
    ReviewDeadlineRequest,
    format_validation_error,
)

__all__ = [
    "CHARGE_CATEGORIES",
    "ArrearsCalculation",
    "ArrearsRequest",
    "ArrearsWarning",
    "ArrearsWarningType",
    "CalculationRequest",
    "Charge",
    "ChargeCategory",
    "ChargeInput",
    "CureDeadlineRequest",
    "DepositRequest",
    "LedgerEntry",
    "N4Calculation",
    "N12Calculation",
    "NoticeTerminationRequest",
    "Payment",
    "PaymentInput",
    "RegulatoryStatus",
    "RentIncreaseCalculation",
    "RentIncreaseRequest",
    "ReviewDeadline",
    "ReviewDeadlineRequest",
    "Section82Calculation",
    "SkippedDay",
    "format_validation_error",
]


ChargeCategory = Literal["rent", "late_fee", "utility", "other"]
ArrearsWarningType = Literal["illegal_late_fee", "misapplied_payment", "calculation_note"]
RegulatoryStatus = Literal["confirmed", "draft", "pending"]

CHARGE_CATEGORIES: tuple[str, ...] = ("rent", "late_fee", "utility", "other")


class _Serialisable:
    def to_dict(self) -> dict[str, Any]:
        return asdict(self)  # type: ignore[call-overload]


@dataclass(frozen=True)
class Charge:
    """An amount the landlord says is owed, in cents."""

    date: str
    amount: int
    category: str
    description: str | None = None
    period: str | None = None


@dataclass(frozen=True)
class Payment:
    """An amount the tenant paid, in cents."""

    date: str
    amount: int
    description: str | None = None


@dataclass(frozen=True)
class LedgerEntry(_Serialisable):
    date: str
    description: str
    charge: int
    payment: int
    balance: int


@dataclass(frozen=True)
class ArrearsWarning(_Serialisable):
    type: ArrearsWarningType
    message: str


@dataclass(frozen=True)
class ArrearsCalculation(_Serialisable):
    """FIFO ledger together with its legally relevant sub-totals."""

    entries: tuple[LedgerEntry, ...]
    total_charges: int
    total_payments: int
    current_balance: int
    late_fee_total: int
    rent_only: int
    rent_charges_total: int
    warnings: tuple[ArrearsWarning, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SkippedDay(_Serialisable):
    date: str
    reason: str


@dataclass(frozen=True)
class N4Calculation(_Serialisable):
    """Cure deadline for a non-payment notice."""

    served_date: str
    cure_deadline: str
    can_file_l1_date: str
    days_remaining: int
    is_expired: bool
    workdays_skipped: tuple[SkippedDay, ...]
    cure_days: int


@dataclass(frozen=True)
class N12Calculation(_Serialisable):
    """Termination date and compensation for a landlord's own use notice."""

    served_date: str
    termination_date: str
    notice_days: int
    compensation_required: bool
    compensation_amount: int
    warnings: tuple[str, ...]


@dataclass(frozen=True)
class ReviewDeadline(_Serialisable):
    order_date: str
    deadline: str
    days_remaining: int
    is_expired: bool
    warnings: tuple[str, ...]


@dataclass(frozen=True)
class RentIncreaseCalculation(_Serialisable):
    current_rent: int
    proposed_rent: int
    guideline_year: int
    guideline_rate: float
    maximum_allowed: int
    is_legal: bool
    overage_amount: int
    exempt_from_guideline: bool
    warnings: tuple[str, ...]


@dataclass(frozen=True)
class Section82Calculation(_Serialisable):
    """Estimated trust deposit needed to raise maintenance issues."""

    arrears_amount: int | float
    deposit_required: int | float
    deposit_percentage: float
    regulatory_status: RegulatoryStatus
    warnings: tuple[str, ...]
