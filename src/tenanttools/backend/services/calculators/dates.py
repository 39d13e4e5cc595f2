"""Business-day and calendar-day deadline arithmetic.

Every function here is pure: "today" is always passed in by the caller and the
holiday calendar is either injected or read from the cached configuration.
Dates may be given as :class:`~datetime.date` objects or ``YYYY-MM-DD``
strings; results are returned as ISO strings inside the result records.
"""

from __future__ import annotations

from datetime import date, timedelta

from tenanttools.backend.config.calendar_config import (
    JudicialCalendar,
    RegulatoryConfiguration,
    load_calendar,
    load_regulations,
)
from tenanttools.backend.models import (
    N4Calculation,
    N12Calculation,
    ReviewDeadline,
    SkippedDay,
)

from .holidays import holiday_on
from .utils import format_date, parse_date

DateLike = date | str

_SATURDAY = 5
_SUNDAY = 6


def add_days(day: DateLike, days: int) -> date:
    """Return the date ``days`` calendar days after ``day`` (negative allowed)."""

    return parse_date(day) + timedelta(days=days)


def is_weekend(day: DateLike) -> bool:
    return parse_date(day).weekday() in (_SATURDAY, _SUNDAY)


def is_business_day(day: DateLike, calendar: JudicialCalendar | None = None) -> bool:
    """Return ``True`` when ``day`` is neither a weekend nor a statutory holiday."""

    parsed = parse_date(day)
    if is_weekend(parsed):
        return False
    return holiday_on(parsed, calendar) is None


def non_business_day_reason(
    day: DateLike, calendar: JudicialCalendar | None = None
) -> str | None:
    """Explain why ``day`` is skipped, or return ``None`` for business days."""

    parsed = parse_date(day)
    if is_weekend(parsed):
        return "Sunday" if parsed.weekday() == _SUNDAY else "Saturday"
    holiday = holiday_on(parsed, calendar)
    if holiday is not None:
        return holiday.name
    return None


def business_days_between(
    start: DateLike, end: DateLike, calendar: JudicialCalendar | None = None
) -> int:
    """Count business days strictly after ``start`` up to and including ``end``."""

    current = add_days(start, 1)
    boundary = parse_date(end)

    count = 0
    while current <= boundary:
        if is_business_day(current, calendar):
            count += 1
        current += timedelta(days=1)
    return count


def calendar_days_between(start: DateLike, end: DateLike) -> int:
    """Return ``end - start`` in whole days; negative when ``end`` is earlier."""

    return (parse_date(end) - parse_date(start)).days


def days_until(deadline: DateLike, today: DateLike) -> int:
    return calendar_days_between(today, deadline)


def _remaining(deadline: date, today: DateLike) -> tuple[int, bool]:
    reference = parse_date(today)
    remaining = days_until(deadline, reference)
    return max(0, remaining), reference > deadline


def compute_cure_deadline(
    served_date: DateLike,
    cure_days_required: int | None = None,
    *,
    today: DateLike,
    calendar: JudicialCalendar | None = None,
) -> N4Calculation:
    """Project the N4 cure deadline from the date the notice was served.

    Counting starts the day after service. Weekends and statutory holidays do
    not count and are reported in ``workdays_skipped`` with their reason. The
    deadline is the day the required number of business days is reached; the
    landlord may file from the following day.
    """

    if calendar is None:
        calendar = load_calendar()
    if cure_days_required is None:
        cure_days_required = calendar.calculation_rules.n4_notice.days

    served = parse_date(served_date)
    current = add_days(served, 1)
    counted = 0
    skipped: list[SkippedDay] = []

    while counted < cure_days_required:
        if is_business_day(current, calendar):
            counted += 1
        else:
            reason = non_business_day_reason(current, calendar)
            if reason:
                skipped.append(SkippedDay(date=format_date(current), reason=reason))

        if counted < cure_days_required:
            current += timedelta(days=1)

    cure_deadline = current
    days_remaining, is_expired = _remaining(cure_deadline, today)

    return N4Calculation(
        served_date=format_date(served),
        cure_deadline=format_date(cure_deadline),
        can_file_l1_date=format_date(add_days(cure_deadline, 1)),
        days_remaining=days_remaining,
        is_expired=is_expired,
        workdays_skipped=tuple(skipped),
        cure_days=cure_days_required,
    )


def compute_notice_termination(
    served_date: DateLike,
    notice_days: int,
    monthly_amount: int,
    calendar: JudicialCalendar | None = None,
) -> N12Calculation:
    """Termination date and compensation for a landlord's own use notice.

    The termination date is counted in calendar days. Compensation of one
    month's rent is owed only for the standard notice period; the extended
    period waives it.
    """

    if calendar is None:
        calendar = load_calendar()
    rules = calendar.calculation_rules

    termination = add_days(served_date, notice_days)
    compensation_required = notice_days == rules.n12_notice_standard.days
    compensation_amount = monthly_amount if compensation_required else 0

    warnings: list[str] = []
    if notice_days == rules.n12_notice_extended.days:
        warnings.append(
            "Bill 60 (2025): No compensation required when landlord provides "
            f"{rules.n12_notice_extended.days} days notice."
        )

    return N12Calculation(
        served_date=format_date(parse_date(served_date)),
        termination_date=format_date(termination),
        notice_days=notice_days,
        compensation_required=compensation_required,
        compensation_amount=compensation_amount,
        warnings=tuple(warnings),
    )


def compute_review_deadline(
    order_date: DateLike,
    review_days: int | None = None,
    *,
    today: DateLike,
    calendar: JudicialCalendar | None = None,
    regulations: RegulatoryConfiguration | None = None,
) -> ReviewDeadline:
    """Deadline for a Request for Review, counted in calendar days."""

    if calendar is None:
        calendar = load_calendar()
    if regulations is None:
        regulations = load_regulations()
    if review_days is None:
        review_days = calendar.calculation_rules.review_period.days

    deadline = add_days(order_date, review_days)
    remaining = days_until(deadline, today)
    urgent_threshold = regulations.review.urgent_threshold_days

    warnings: list[str] = []
    if 0 < remaining <= urgent_threshold:
        warnings.append(
            f"URGENT: Only {remaining} days left to file Request for Review."
        )
    if remaining <= 0:
        warnings.append("The deadline to file a Request for Review has passed.")

    warnings.append(
        "Bill 60 (2025): Review period reduced from "
        f"{regulations.review.previous_days} to {review_days} days. Act quickly."
    )

    days_remaining, is_expired = _remaining(deadline, today)

    return ReviewDeadline(
        order_date=format_date(parse_date(order_date)),
        deadline=format_date(deadline),
        days_remaining=days_remaining,
        is_expired=is_expired,
        warnings=tuple(warnings),
    )


__all__ = [
    "add_days",
    "business_days_between",
    "calendar_days_between",
    "compute_cure_deadline",
    "compute_notice_termination",
    "compute_review_deadline",
    "days_until",
    "is_business_day",
    "is_weekend",
    "non_business_day_reason",
]
