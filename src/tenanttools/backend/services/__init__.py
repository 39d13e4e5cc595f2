"""Service layer: the calculation entry point and its text reports."""

from .calculation_service import calculate
from .reports import (
    generate_ledger_text,
    generate_n4_summary,
    generate_rent_increase_summary,
    generate_section82_summary,
)

__all__ = [
    "calculate",
    "generate_ledger_text",
    "generate_n4_summary",
    "generate_rent_increase_summary",
    "generate_section82_summary",
]
