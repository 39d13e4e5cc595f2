"""Unit coverage for the FIFO arrears ledger and input validation."""

from __future__ import annotations

import pytest

from tenanttools.backend.config.calendar_config import RegulatoryConfiguration
from tenanttools.backend.models import Charge, Payment
from tenanttools.backend.services.calculators import (
    calculate_arrears,
    create_charge_from_dollars,
    create_payment_from_dollars,
    validate_charge,
    validate_payment,
)


@pytest.fixture()
def sample_charges() -> list[Charge]:
    return [
        Charge(date="2025-11-01", amount=150000, category="rent", period="November 2025"),
        Charge(date="2025-10-01", amount=150000, category="rent", description="October rent"),
        Charge(date="2025-11-05", amount=7500, category="late_fee"),
    ]


@pytest.fixture()
def sample_payments() -> list[Payment]:
    return [Payment(date="2025-10-15", amount=100000)]


def test_ledger_is_ordered_by_date_with_running_balance(
    sample_charges: list[Charge], sample_payments: list[Payment]
) -> None:
    result = calculate_arrears(sample_charges, sample_payments)

    assert [entry.date for entry in result.entries] == [
        "2025-10-01",
        "2025-10-15",
        "2025-11-01",
        "2025-11-05",
    ]
    assert [entry.balance for entry in result.entries] == [150000, 50000, 200000, 207500]
    assert [entry.description for entry in result.entries] == [
        "October rent",
        "Payment received",
        "rent: November 2025",
        "late_fee:",
    ]
    assert result.entries[1].charge == 0
    assert result.entries[1].payment == 100000


def test_totals_separate_late_fees_from_rent(
    sample_charges: list[Charge], sample_payments: list[Payment]
) -> None:
    result = calculate_arrears(sample_charges, sample_payments)

    assert result.total_charges == 307500
    assert result.total_payments == 100000
    assert result.current_balance == 207500
    assert result.late_fee_total == 7500
    assert result.rent_only == 200000
    assert result.rent_charges_total == 300000


def test_warnings_are_reported_in_detection_order(
    sample_charges: list[Charge], sample_payments: list[Payment]
) -> None:
    result = calculate_arrears(sample_charges, sample_payments)

    assert [warning.type for warning in result.warnings] == [
        "illegal_late_fee",
        "misapplied_payment",
        "calculation_note",
    ]
    assert result.warnings[0].message == (
        "Late fee on 2025-11-05 ($75.00) may exceed legal limits. Ontario courts "
        "often find fees over $50.00 unreasonable."
    )
    assert "$2,000.00" in result.warnings[1].message
    assert "7 BUSINESS DAYS" in result.warnings[2].message
    assert "previous 14-day period" in result.warnings[2].message


def test_late_fee_at_threshold_is_not_flagged() -> None:
    result = calculate_arrears(
        [Charge(date="2025-11-05", amount=5000, category="late_fee")], []
    )

    assert [warning.type for warning in result.warnings] == [
        "misapplied_payment",
        "calculation_note",
    ]
    assert result.rent_only == 0


def test_same_day_charges_precede_payments() -> None:
    result = calculate_arrears(
        [Charge(date="2025-11-01", amount=150000, category="rent")],
        [Payment(date="2025-11-01", amount=150000, description="e-transfer")],
    )

    assert [entry.description for entry in result.entries] == ["rent:", "e-transfer"]
    assert [entry.balance for entry in result.entries] == [150000, 0]
    assert result.warnings == ()


def test_overpayment_produces_credit_without_warnings() -> None:
    result = calculate_arrears(
        [Charge(date="2025-11-01", amount=100000, category="rent")],
        [Payment(date="2025-11-02", amount=120000)],
    )

    assert result.current_balance == -20000
    assert result.rent_only == 0
    assert result.warnings == ()


def test_empty_ledger() -> None:
    result = calculate_arrears([], [])

    assert result.entries == ()
    assert result.current_balance == 0
    assert result.warnings == ()


def test_late_fee_threshold_comes_from_regulations(
    regulations: RegulatoryConfiguration,
) -> None:
    arrears = regulations.arrears.model_copy(update={"late_fee_threshold": 10000})
    relaxed = regulations.model_copy(update={"arrears": arrears})

    result = calculate_arrears(
        [Charge(date="2025-11-05", amount=7500, category="late_fee")],
        [],
        regulations=relaxed,
    )

    assert "illegal_late_fee" not in {warning.type for warning in result.warnings}


def test_result_serialises_to_primitives(
    sample_charges: list[Charge], sample_payments: list[Payment]
) -> None:
    payload = calculate_arrears(sample_charges, sample_payments).to_dict()

    assert payload["entries"][0] == {
        "date": "2025-10-01",
        "description": "October rent",
        "charge": 150000,
        "payment": 0,
        "balance": 150000,
    }
    assert payload["warnings"][0]["type"] == "illegal_late_fee"


def test_validate_charge_accepts_well_formed_entries() -> None:
    assert validate_charge({"date": "2025-11-01", "amount": 1500, "category": "rent"}) == []
    assert validate_charge({"date": "2025-11-01", "amount": 0, "type": "utility"}) == []


def test_validate_charge_checks_syntax_only() -> None:
    assert validate_charge({"date": "2025-02-30", "amount": 10.5, "category": "other"}) == []


def test_validate_charge_reports_every_problem() -> None:
    errors = validate_charge({"date": "2025-1-01", "amount": -5, "category": "fee"})

    assert errors == [
        "Invalid date format. Use YYYY-MM-DD.",
        "Amount must be a positive number.",
        "Type must be: rent, late_fee, utility, or other.",
    ]


@pytest.mark.parametrize("amount", ["100", None, True])
def test_validate_charge_rejects_non_numeric_amounts(amount: object) -> None:
    errors = validate_charge({"date": "2025-11-01", "amount": amount, "category": "rent"})

    assert errors == ["Amount must be a positive number."]


def test_validate_payment() -> None:
    assert validate_payment({"date": "2025-11-01", "amount": 500}) == []
    assert validate_payment({"date": "11/01/2025", "amount": -1}) == [
        "Invalid date format. Use YYYY-MM-DD.",
        "Amount must be a positive number.",
    ]


def test_dollar_constructors_convert_to_cents() -> None:
    charge = create_charge_from_dollars("2025-11-01", 1500.5, "rent", period="November")
    payment = create_payment_from_dollars("2025-11-02", 19.99, "cash")

    assert charge == Charge(
        date="2025-11-01", amount=150050, category="rent", period="November"
    )
    assert payment == Payment(date="2025-11-02", amount=1999, description="cash")


@pytest.mark.parametrize(
    ("fee_cents", "flagged"),
    [(5000, False), (10000, True)],
)
def test_late_fee_threshold_is_strict(fee_cents: int, flagged: bool) -> None:
    result = calculate_arrears(
        [
            Charge(date="2025-01-01", amount=150000, category="rent"),
            Charge(date="2025-01-05", amount=fee_cents, category="late_fee"),
        ],
        [],
    )

    types = [warning.type for warning in result.warnings]
    assert result.late_fee_total == fee_cents
    assert result.rent_only == 150000
    assert result.current_balance == 150000 + fee_cents
    assert "calculation_note" in types
    assert ("illegal_late_fee" in types) is flagged
    if flagged:
        assert "2025-01-05" in result.warnings[0].message
        assert "$100.00" in result.warnings[0].message


def test_same_day_entries_keep_charges_then_payments_in_input_order() -> None:
    result = calculate_arrears(
        [
            Charge(date="2025-11-01", amount=100, category="rent", description="a"),
            Charge(date="2025-10-01", amount=100, category="rent", description="early"),
            Charge(date="2025-11-01", amount=200, category="utility", description="b"),
        ],
        [
            Payment(date="2025-11-01", amount=50, description="p0"),
            Payment(date="2025-10-15", amount=50, description="mid"),
            Payment(date="2025-11-01", amount=25, description="p1"),
        ],
    )

    assert [entry.description for entry in result.entries] == [
        "early",
        "mid",
        "a",
        "b",
        "p0",
        "p1",
    ]
    assert len(result.entries) == 6
