"""Money and date helpers shared by the calculator modules.

Amounts are carried as integer cents. Anything that multiplies by a rate goes
through :class:`~decimal.Decimal` so that values such as ``1.025`` are not
distorted by binary floating point, then rounds half-up toward positive
infinity (``2.5 -> 3``, ``-2.5 -> -2``).
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta
from decimal import ROUND_FLOOR, Decimal
from numbers import Real

_HALF = Decimal("0.5")
_CENTS_PER_DOLLAR = 100

ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def _to_decimal(value: Real) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(int(value)) if isinstance(value, int) else Decimal(str(value))


def _is_non_finite(value: Real) -> bool:
    return isinstance(value, float) and not math.isfinite(value)


def round_cents(value: Real) -> int | float:
    """Round ``value`` to a whole number of cents.

    NaN and infinite floats are returned unchanged so that degenerate inputs
    propagate instead of raising.
    """

    if _is_non_finite(value):
        return float(value)
    return int((_to_decimal(value) + _HALF).to_integral_value(rounding=ROUND_FLOOR))


def apply_rate(amount: Real, rate: Real) -> int | float:
    """Return ``amount * rate`` rounded to whole cents."""

    if _is_non_finite(amount) or _is_non_finite(rate):
        return amount * rate
    return round_cents(_to_decimal(amount) * _to_decimal(rate))


def dollars_to_cents(dollars: Real) -> int | float:
    """Convert a decimal dollar amount to integer cents."""

    if _is_non_finite(dollars):
        return dollars * _CENTS_PER_DOLLAR
    return round_cents(_to_decimal(dollars) * _CENTS_PER_DOLLAR)


def cents_to_dollars(cents: Real) -> float:
    return cents / _CENTS_PER_DOLLAR


def format_currency(cents: Real) -> str:
    """Format cents as Canadian dollars, e.g. ``$1,500.00`` or ``-$5.00``."""

    if _is_non_finite(cents):
        return f"${cents}"
    amount = _to_decimal(cents) / _CENTS_PER_DOLLAR
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_percentage(value: float, places: int = 1) -> str:
    """Return a percentage label for ``value`` such as ``2.5%``."""

    return f"{value * 100:.{places}f}%"


def parse_date(value: date | str) -> date:
    """Return ``value`` as a :class:`~datetime.date`.

    ISO strings whose month or day overflow roll forward into the following
    period (``2025-02-30`` is read as ``2025-03-02``), which keeps syntactically
    valid input usable instead of raising. ``datetime`` values are truncated to
    their calendar date.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    parts = [int(part) for part in value.strip().split("-")]
    year = parts[0] if parts else 0
    month = parts[1] if len(parts) > 1 else 1
    day = parts[2] if len(parts) > 2 else 1

    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, 1) + timedelta(days=day - 1)


def format_date(value: date) -> str:
    return value.isoformat()


def is_valid_date_string(value: object) -> bool:
    """Return ``True`` when ``value`` has strict ``YYYY-MM-DD`` syntax.

    The calendar validity of the date is not checked.
    """

    return isinstance(value, str) and ISO_DATE_RE.fullmatch(value) is not None


__all__ = [
    "ISO_DATE_RE",
    "apply_rate",
    "cents_to_dollars",
    "dollars_to_cents",
    "format_currency",
    "format_date",
    "format_percentage",
    "is_valid_date_string",
    "parse_date",
    "round_cents",
]
