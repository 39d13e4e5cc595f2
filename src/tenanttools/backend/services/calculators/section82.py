"""Section 82 deposit estimate.

Section 82 lets a tenant raise maintenance and repair issues as a defence at a
non-payment hearing. Bill 60 attached a deposit requirement whose amount is
still in draft regulation, so every estimate carries that caveat.
"""

from __future__ import annotations

from numbers import Real

from tenanttools.backend.config.calendar_config import (
    RegulatoryConfiguration,
    load_regulations,
)
from tenanttools.backend.models import RegulatoryStatus, Section82Calculation

from .utils import apply_rate, format_currency, format_percentage


def _section82(regulations: RegulatoryConfiguration | None):
    if regulations is None:
        regulations = load_regulations()
    return regulations.section_82


def estimate_deposit(
    arrears_amount: Real, regulations: RegulatoryConfiguration | None = None
) -> Section82Calculation:
    """Estimate the trust deposit for ``arrears_amount`` cents.

    The amount is not validated; negative or non-finite input flows through the
    arithmetic unchanged.
    """

    config = _section82(regulations)
    percentage = config.deposit_percentage
    warnings: list[str] = [
        "IMPORTANT: The deposit requirement is NOT YET CONFIRMED. Bill 60 implies "
        f"{format_percentage(percentage, 0)} but regulations have not been "
        "finalized. Check with the LTB or a legal clinic before relying on this "
        "estimate."
    ]

    deposit_required = apply_rate(arrears_amount, percentage)

    minimum = config.minimum_deposit
    if minimum is not None and deposit_required < minimum:
        deposit_required = minimum
        warnings.append(
            f"A minimum deposit of {format_currency(minimum)} may apply regardless "
            "of arrears amount."
        )

    if arrears_amount > 0:
        warnings.append(
            "To raise maintenance issues at your hearing, you may need to pay "
            f"{format_currency(deposit_required)} into trust with the LTB."
        )
        warnings.append(
            "If you cannot afford the deposit, contact a community legal clinic "
            "immediately. Some exceptions may apply."
        )

    warnings.append(
        "Section 82 requires ADVANCE WRITTEN NOTICE to the landlord. The timeline "
        "for this notice is also not yet defined. Monitor the LTB Rules of Practice."
    )

    return Section82Calculation(
        arrears_amount=arrears_amount,
        deposit_required=deposit_required,
        deposit_percentage=percentage,
        regulatory_status=config.status,
        warnings=tuple(warnings),
    )


def get_regulatory_status(
    regulations: RegulatoryConfiguration | None = None,
) -> RegulatoryStatus:
    return _section82(regulations).status


def get_deposit_percentage(regulations: RegulatoryConfiguration | None = None) -> float:
    return _section82(regulations).deposit_percentage


def is_confirmed(regulations: RegulatoryConfiguration | None = None) -> bool:
    return get_regulatory_status(regulations) == "confirmed"


__all__ = [
    "estimate_deposit",
    "get_deposit_percentage",
    "get_regulatory_status",
    "is_confirmed",
]
