"""Deadline, ledger, guideline, and deposit engines."""

from .arrears import (
    calculate_arrears,
    create_charge_from_dollars,
    create_payment_from_dollars,
    validate_charge,
    validate_payment,
)
from .dates import (
    add_days,
    business_days_between,
    calendar_days_between,
    compute_cure_deadline,
    compute_notice_termination,
    compute_review_deadline,
    days_until,
    is_business_day,
    is_weekend,
    non_business_day_reason,
)
from .holidays import available_years, holiday_on, list_holidays
from .rent_increase import (
    check_rent_increase,
    get_all_guideline_rates,
    get_guideline_rate,
    is_exempt_from_rent_control,
)
from .section82 import (
    estimate_deposit,
    get_deposit_percentage,
    get_regulatory_status,
    is_confirmed,
)
from .utils import (
    cents_to_dollars,
    dollars_to_cents,
    format_currency,
    format_date,
    format_percentage,
    is_valid_date_string,
    parse_date,
    round_cents,
)

__all__ = [
    "add_days",
    "available_years",
    "business_days_between",
    "calculate_arrears",
    "calendar_days_between",
    "cents_to_dollars",
    "check_rent_increase",
    "compute_cure_deadline",
    "compute_notice_termination",
    "compute_review_deadline",
    "create_charge_from_dollars",
    "create_payment_from_dollars",
    "days_until",
    "dollars_to_cents",
    "estimate_deposit",
    "format_currency",
    "format_date",
    "format_percentage",
    "get_all_guideline_rates",
    "get_deposit_percentage",
    "get_guideline_rate",
    "get_regulatory_status",
    "holiday_on",
    "is_business_day",
    "is_confirmed",
    "is_exempt_from_rent_control",
    "is_valid_date_string",
    "is_weekend",
    "list_holidays",
    "non_business_day_reason",
    "parse_date",
    "round_cents",
    "validate_charge",
    "validate_payment",
]
