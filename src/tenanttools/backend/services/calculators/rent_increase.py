"""Rent increase guideline checks."""

from __future__ import annotations

import logging
from datetime import date

from tenanttools.backend.config.calendar_config import (
    RegulatoryConfiguration,
    load_regulations,
)
from tenanttools.backend.models import RentIncreaseCalculation

from .utils import apply_rate, format_currency, format_percentage, parse_date

_LOGGER = logging.getLogger(__name__)


def get_guideline_rate(
    year: int, regulations: RegulatoryConfiguration | None = None
) -> float | None:
    """Return the published guideline rate for ``year`` if one is known."""

    if regulations is None:
        regulations = load_regulations()
    return regulations.rent_increase.rate_for(year)


def get_all_guideline_rates(
    regulations: RegulatoryConfiguration | None = None,
) -> dict[int, float]:
    if regulations is None:
        regulations = load_regulations()
    return dict(regulations.rent_increase.rates)


def is_exempt_from_rent_control(
    first_occupied_date: date | str | None,
    regulations: RegulatoryConfiguration | None = None,
) -> bool:
    """Return ``True`` when the unit was first occupied after the exemption cutoff.

    An unknown occupancy date is treated as subject to rent control.
    """

    if not first_occupied_date:
        return False
    if regulations is None:
        regulations = load_regulations()
    return parse_date(first_occupied_date) > regulations.rent_increase.exemption_date


def check_rent_increase(
    current_rent: int,
    proposed_rent: int,
    guideline_year: int,
    first_occupied_date: date | str | None = None,
    regulations: RegulatoryConfiguration | None = None,
) -> RentIncreaseCalculation:
    """Check ``proposed_rent`` against the guideline for ``guideline_year``."""

    if regulations is None:
        regulations = load_regulations()
    config = regulations.rent_increase
    warnings: list[str] = []

    rate = config.rate_for(guideline_year)
    if rate is None:
        _LOGGER.debug(
            "No guideline rate for %s; falling back to %s",
            guideline_year,
            config.default_rate,
        )
        warnings.append(
            f"Guideline rate for {guideline_year} not yet confirmed. "
            "Using most recent known rate."
        )
        rate = config.default_rate

    exempt = is_exempt_from_rent_control(first_occupied_date, regulations)
    if exempt:
        cutoff = config.exemption_date
        warnings.append(
            "This unit may be EXEMPT from rent control. Units first occupied after "
            f"{cutoff:%B} {cutoff.day}, {cutoff.year} are not subject to the annual "
            "guideline. Verify your unit's first occupancy date."
        )

    maximum_allowed = apply_rate(current_rent, 1 + rate)
    is_legal = exempt or proposed_rent <= maximum_allowed
    overage_amount = 0 if is_legal else proposed_rent - maximum_allowed

    if not is_legal:
        warnings.append(
            f"The proposed increase exceeds the {guideline_year} guideline of "
            f"{format_percentage(rate)}. Maximum allowed: "
            f"{format_currency(maximum_allowed)}. Overage: "
            f"{format_currency(overage_amount)}."
        )
        warnings.append(
            "You can refuse to pay the illegal portion. The landlord must apply to "
            "the LTB for an Above Guideline Increase (AGI) if they want to charge more."
        )

    if is_legal and not exempt and proposed_rent > current_rent:
        warnings.append(
            f"The increase is within the {guideline_year} guideline. Ensure you "
            "received proper written notice at least "
            f"{config.notice_days} days before the increase takes effect."
        )

    return RentIncreaseCalculation(
        current_rent=current_rent,
        proposed_rent=proposed_rent,
        guideline_year=guideline_year,
        guideline_rate=rate,
        maximum_allowed=maximum_allowed,
        is_legal=is_legal,
        overage_amount=overage_amount,
        exempt_from_guideline=exempt,
        warnings=tuple(warnings),
    )


__all__ = [
    "check_rent_increase",
    "get_all_guideline_rates",
    "get_guideline_rate",
    "is_exempt_from_rent_control",
]
