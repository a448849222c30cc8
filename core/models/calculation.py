"""Aggregated calculation results.

Every model here is derived from a ClientSession and can be rebuilt at
any time; none of them is the source of truth.
"""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

from core.models.service import Money, ServiceConfiguration, ServiceResult


class Gratuity(BaseModel):
    """Optional gratuity added on top of the service subtotal."""

    kind: Literal["percentage", "dollar"]
    value: Decimal = Field(..., ge=0)


class ServiceLine(BaseModel):
    """One priced service inside a date bucket."""

    service: ServiceConfiguration
    result: ServiceResult


class DateBreakdown(BaseModel):
    """Totals for all services at one location on one date."""

    total_appointments: int = 0
    total_cost: Money = Decimal("0")
    total_professional_revenue: Money = Decimal("0")
    services: list[ServiceLine] = Field(default_factory=list)


class LocationBreakdown(BaseModel):
    """Totals for one location across all of its dates."""

    total_appointments: int = 0
    total_cost: Money = Decimal("0")
    total_professional_revenue: Money = Decimal("0")
    date_breakdown: dict[str, DateBreakdown] = Field(default_factory=dict)


class CalculationResult(BaseModel):
    """Grand totals plus the location → date → service breakdown."""

    total_appointments: int = 0
    total_cost: Money = Decimal("0")
    total_professional_revenue: Money = Decimal("0")
    net_profit: Money = Decimal("0")
    profit_margin: Money = Field(Decimal("0"), description="Percent of total_cost")
    location_breakdown: dict[str, LocationBreakdown] = Field(default_factory=dict)
    event_dates: list[str] = Field(default_factory=list)
    gratuity: Gratuity | None = None
    gratuity_amount: Money = Decimal("0")
    total_with_gratuity: Money = Decimal("0")
