"""Validate boundary payloads and dispatch them to the deadline and money engines.

The service is the one place where dollars become cents, where "today" is read
from the system clock, and where bad input raises. Each engine stays pure and
receives already-normalised values; the result comes back as primitives ready
for JSON encoding, optionally with a plain-text report attached.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from contextlib import contextmanager
from datetime import date
from time import perf_counter
from typing import Any

from pydantic import ValidationError

from tenanttools.backend.models import (
    ArrearsRequest,
    CalculationRequest,
    Charge,
    CureDeadlineRequest,
    DepositRequest,
    NoticeTerminationRequest,
    Payment,
    RentIncreaseRequest,
    ReviewDeadlineRequest,
    format_validation_error,
)

from .calculators import (
    calculate_arrears,
    check_rent_increase,
    compute_cure_deadline,
    compute_notice_termination,
    compute_review_deadline,
    dollars_to_cents,
    estimate_deposit,
    validate_charge,
    validate_payment,
)
from .reports import (
    generate_ledger_text,
    generate_n4_summary,
    generate_rent_increase_summary,
    generate_section82_summary,
)

_LOGGER = logging.getLogger(__name__)


def _profiling_enabled() -> bool:
    """Return ``True`` when calculation profiling should be captured."""

    flag = os.getenv("TENANTTOOLS_PROFILE_CALCULATIONS", "")
    return flag.strip().lower() in {"1", "true", "yes", "on"}


@contextmanager
def _profile_section(name: str, store: dict[str, float] | None):
    """Capture the duration of a named section when profiling is enabled."""

    if store is None:
        yield
        return

    start = perf_counter()
    try:
        yield
    finally:
        store[name] = perf_counter() - start


def _parse_request(payload: Mapping[str, Any] | CalculationRequest) -> Any:
    if isinstance(payload, CalculationRequest):
        return payload.root
    if not isinstance(payload, Mapping):
        raise ValueError("Payload must be a mapping")
    if "calculator" not in payload:
        raise ValueError("Payload must name a calculator")
    try:
        return CalculationRequest.model_validate(payload).root
    except ValidationError as exc:
        raise ValueError(format_validation_error(exc)) from exc


def _arrears_inputs(
    request: ArrearsRequest,
) -> tuple[list[Charge], list[Payment]]:
    problems: list[str] = []
    charges: list[Charge] = []
    payments: list[Payment] = []

    for index, entry in enumerate(request.charges):
        raw = entry.model_dump()
        problems.extend(f"charges.{index}: {issue}" for issue in validate_charge(raw))
        charges.append(
            Charge(
                date=entry.date,
                amount=dollars_to_cents(entry.amount),
                category=entry.category,
                description=entry.description,
                period=entry.period,
            )
        )

    for index, entry in enumerate(request.payments):
        raw = entry.model_dump()
        problems.extend(f"payments.{index}: {issue}" for issue in validate_payment(raw))
        payments.append(
            Payment(
                date=entry.date,
                amount=dollars_to_cents(entry.amount),
                description=entry.description,
            )
        )

    if problems:
        raise ValueError("Invalid arrears entries: " + "; ".join(problems))
    return charges, payments


def _run_n4(request: CureDeadlineRequest, today: date) -> tuple[Any, Callable | None]:
    result = compute_cure_deadline(request.served_date, request.cure_days, today=today)
    return result, generate_n4_summary


def _run_n12(request: NoticeTerminationRequest, today: date) -> tuple[Any, Callable | None]:
    result = compute_notice_termination(
        request.served_date,
        request.notice_days,
        dollars_to_cents(request.monthly_rent),
    )
    return result, None


def _run_review(request: ReviewDeadlineRequest, today: date) -> tuple[Any, Callable | None]:
    result = compute_review_deadline(request.order_date, request.review_days, today=today)
    return result, None


def _run_arrears(request: ArrearsRequest, today: date) -> tuple[Any, Callable | None]:
    charges, payments = _arrears_inputs(request)
    return calculate_arrears(charges, payments), generate_ledger_text


def _run_rent_increase(
    request: RentIncreaseRequest, today: date
) -> tuple[Any, Callable | None]:
    guideline_year = request.guideline_year or today.year
    result = check_rent_increase(
        dollars_to_cents(request.current_rent),
        dollars_to_cents(request.proposed_rent),
        guideline_year,
        request.first_occupied_date,
    )
    return result, generate_rent_increase_summary


def _run_section82(request: DepositRequest, today: date) -> tuple[Any, Callable | None]:
    result = estimate_deposit(dollars_to_cents(request.arrears_amount))
    return result, generate_section82_summary


_DISPATCH: dict[str, Callable[[Any, date], tuple[Any, Callable | None]]] = {
    "n4": _run_n4,
    "n12": _run_n12,
    "review": _run_review,
    "arrears": _run_arrears,
    "rent_increase": _run_rent_increase,
    "section82": _run_section82,
}


def calculate(
    payload: Mapping[str, Any] | CalculationRequest,
    *,
    today: date | None = None,
) -> dict[str, Any]:
    """Run the calculator named in ``payload`` and return a serialisable result.

    ``today`` defaults to the system date. The response always carries the
    ``calculator`` name and a ``result`` mapping; ``report`` is added when the
    payload sets ``include_report`` and the calculator has a text summary.
    """

    request = _parse_request(payload)
    if today is None:
        today = date.today()

    timings: dict[str, float] | None = {} if _profiling_enabled() else None
    overall_start = perf_counter() if timings is not None else None

    runner = _DISPATCH[request.calculator]
    with _profile_section(request.calculator, timings):
        result, renderer = runner(request, today)

    response: dict[str, Any] = {
        "calculator": request.calculator,
        "result": result.to_dict(),
    }

    if request.include_report and renderer is not None:
        with _profile_section("report", timings):
            response["report"] = renderer(result, generated_on=today)

    if timings is not None and overall_start is not None:
        timings["total"] = perf_counter() - overall_start
        _LOGGER.debug(
            "calculate timings (ms): %s",
            {name: round(duration * 1000, 3) for name, duration in timings.items()},
        )

    return response


__all__ = ["calculate"]
