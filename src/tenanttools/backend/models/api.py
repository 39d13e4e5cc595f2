"""Pydantic models describing the payloads accepted at the boundary.

Amounts arrive here as decimal dollars, the way a person types them, and are
converted to integer cents by the calculation service before any engine sees
them.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    ValidationError,
    field_validator,
)

__all__ = [
    "ArrearsRequest",
    "CalculationRequest",
    "ChargeInput",
    "CureDeadlineRequest",
    "DepositRequest",
    "ISO_DATE_PATTERN",
    "NoticeTerminationRequest",
    "PaymentInput",
    "RentIncreaseRequest",
    "ReviewDeadlineRequest",
    "format_validation_error",
]


ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

IsoDate = Annotated[str, Field(pattern=ISO_DATE_PATTERN)]


class _RequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    include_report: bool = False


class ChargeInput(BaseModel):
    """A charge entered by the user; checked by ``validate_charge`` later."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    date: str
    amount: float
    category: str = Field(validation_alias=AliasChoices("category", "type"))
    description: str | None = None
    period: str | None = None


class PaymentInput(BaseModel):
    """A payment entered by the user; checked by ``validate_payment`` later."""

    model_config = ConfigDict(extra="forbid")

    date: str
    amount: float
    description: str | None = None


class CureDeadlineRequest(_RequestModel):
    calculator: Literal["n4"]
    served_date: IsoDate
    cure_days: int | None = Field(default=None, gt=0)


class NoticeTerminationRequest(_RequestModel):
    calculator: Literal["n12"]
    served_date: IsoDate
    notice_days: int = Field(..., gt=0)
    monthly_rent: float = Field(default=0.0, ge=0)


class ReviewDeadlineRequest(_RequestModel):
    calculator: Literal["review"]
    order_date: IsoDate
    review_days: int | None = Field(default=None, gt=0)


class ArrearsRequest(_RequestModel):
    calculator: Literal["arrears"]
    charges: list[ChargeInput] = Field(default_factory=list)
    payments: list[PaymentInput] = Field(default_factory=list)

    @field_validator("charges", "payments", mode="before")
    @classmethod
    def _coerce_missing_lists(cls, value: Any) -> Any:
        if value is None:
            return []
        return value


class RentIncreaseRequest(_RequestModel):
    calculator: Literal["rent_increase"]
    current_rent: float = Field(..., ge=0)
    proposed_rent: float = Field(..., ge=0)
    guideline_year: int | None = Field(default=None, ge=1900, le=2100)
    first_occupied_date: IsoDate | None = None

    @field_validator("first_occupied_date", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class DepositRequest(_RequestModel):
    calculator: Literal["section82"]
    arrears_amount: float = Field(..., ge=0)


class CalculationRequest(
    RootModel[
        Annotated[
            Union[
                CureDeadlineRequest,
                NoticeTerminationRequest,
                ReviewDeadlineRequest,
                ArrearsRequest,
                RentIncreaseRequest,
                DepositRequest,
            ],
            Field(discriminator="calculator"),
        ]
    ]
):
    """Any payload accepted by :func:`calculate`, keyed on ``calculator``."""


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        if "greater than or equal to 0" in message.lower():
            message = "value cannot be negative"
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)

    details = "; ".join(messages) if messages else str(error)
    return f"Invalid calculation payload: {details}"
