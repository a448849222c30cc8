"""Staffing option models returned by the reverse calculator."""

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, Field, PlainSerializer

from core.models.service import Money

Hours = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class StaffingOption(BaseModel):
    """One way to staff an event for a target appointment count."""

    professional_count: int = Field(..., ge=1)
    total_hours: Hours
    actual_appointments: int
    estimated_cost: Money
    exact_match: bool
    note: str | None = None


class FixedPriceOption(BaseModel):
    """A fixed-price class offered instead of a staffing plan."""

    service_type: str
    variant: str | None = None
    class_length_minutes: int | None = None
    fixed_price: Money
    participants: Literal["unlimited"] = "unlimited"
    professional_count: int = 1


class EventOptions(BaseModel):
    """Reverse calculator result for one service type."""

    service_type: str
    target_appointments: int | Literal["unlimited"]
    appointment_minutes: int | None = None
    appointments_per_pro_per_hour: Hours | None = None
    options: list[StaffingOption] | list[FixedPriceOption] = Field(default_factory=list)
    max_hours_per_day: Hours | None = None
    hour_increment: Hours | None = None
    note: str | None = None
