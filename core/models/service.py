"""Service configuration domain models.

Currency is held as Decimal dollars so totals add up exactly; JSON output
renders it as a plain number for display.

Each pricing category is its own model, selected by ``service_type``.
Unknown fields are rejected so a service can never carry settings left
over from a different service type.
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, PlainSerializer, field_validator, model_validator

from utils.dates import TBD, normalize_event_date

Money = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ServiceType(str, Enum):
    """Bookable service kinds."""

    MASSAGE = "massage"
    FACIAL = "facial"
    HAIR = "hair"
    NAILS = "nails"
    MAKEUP = "makeup"
    HAIR_MAKEUP = "hair-makeup"
    HEADSHOT_HAIR_MAKEUP = "headshot-hair-makeup"
    HEADSHOT = "headshot"
    MINDFULNESS = "mindfulness"
    MINDFULNESS_SOLES = "mindfulness-soles"
    MINDFULNESS_MOVEMENT = "mindfulness-movement"
    MINDFULNESS_PRO = "mindfulness-pro"
    MINDFULNESS_CLE = "mindfulness-cle"
    MINDFULNESS_PRO_REACTIVITY = "mindfulness-pro-reactivity"


class PricingCategory(str, Enum):
    """Which pricing formula applies to a service."""

    HOURLY = "hourly"            # Client billed per professional hour
    HEADSHOT = "headshot"        # Photographer time plus retouching per photo
    FIXED_PRICE = "fixed_price"  # Flat workshop fee


HourlyServiceType = Literal[
    "massage", "facial", "hair", "nails", "makeup",
    "hair-makeup", "headshot-hair-makeup",
]

FixedPriceServiceType = Literal[
    "mindfulness", "mindfulness-soles", "mindfulness-movement",
    "mindfulness-pro", "mindfulness-cle", "mindfulness-pro-reactivity",
]


class RecurringFrequency(BaseModel):
    """How often a recurring booking repeats."""

    type: Literal["quarterly", "monthly", "custom"] = "custom"
    occurrences: int = Field(..., ge=1)


class _ServiceBase(BaseModel):
    """Fields shared by every service variant."""

    model_config = {"extra": "forbid"}

    total_hours: Decimal = Field(..., ge=0)
    appointment_minutes: int = Field(..., description="Minutes per appointment")
    professional_count: int = Field(1, ge=1)
    discount_percent: Decimal = Field(
        Decimal("0"),
        description="Client-facing discount out of 100; not clamped",
    )
    date: str = TBD
    location: str = ""
    is_recurring: bool = False
    recurring_frequency: RecurringFrequency | None = None

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, value):
        return normalize_event_date(value)


class HourlyService(_ServiceBase):
    """Massage, beauty and grooming services billed per professional hour."""

    service_type: HourlyServiceType
    professional_hourly_rate: Money = Field(..., ge=0)
    client_hourly_rate: Money = Field(..., ge=0)
    early_arrival_fee: Money = Field(Decimal("0"), ge=0)
    massage_type: Literal["chair", "table", "massage"] | None = None

    @model_validator(mode="after")
    def validate_massage_type(self) -> "HourlyService":
        """Only massage services carry a massage type."""
        if self.massage_type is not None and self.service_type != ServiceType.MASSAGE:
            raise ValueError("massage_type is only valid for massage services")
        return self

    @property
    def category(self) -> PricingCategory:
        return PricingCategory.HOURLY


class HeadshotService(_ServiceBase):
    """Headshot photography: photographer hours plus retouching per photo."""

    service_type: Literal["headshot"]
    professional_hourly_rate: Money = Field(..., ge=0)
    retouching_cost_per_photo: Money = Field(Decimal("0"), ge=0)
    tier: Literal["basic", "premium", "executive"] | None = None

    @property
    def category(self) -> PricingCategory:
        return PricingCategory.HEADSHOT


class FixedPriceService(_ServiceBase):
    """Mindfulness workshops billed as a flat fee."""

    service_type: FixedPriceServiceType
    fixed_price: Money | None = Field(None, ge=0)
    class_length_minutes: int | None = Field(None, ge=1)
    participants: int | Literal["unlimited"] = "unlimited"
    variant: Literal["intro", "drop-in", "mindful-movement"] | None = None

    @model_validator(mode="after")
    def validate_fixed_price(self) -> "FixedPriceService":
        """Only plain mindfulness may fall back to the default price."""
        if self.fixed_price is None and self.service_type != ServiceType.MINDFULNESS:
            raise ValueError(f"{self.service_type} requires fixed_price")
        if self.variant is not None and self.service_type != ServiceType.MINDFULNESS:
            raise ValueError("variant is only valid for plain mindfulness services")
        return self

    @property
    def category(self) -> PricingCategory:
        return PricingCategory.FIXED_PRICE


ServiceConfiguration = Annotated[
    Union[HourlyService, HeadshotService, FixedPriceService],
    Field(discriminator="service_type"),
]


class ServiceResult(BaseModel):
    """Computed outcome of pricing one service. Never stored on its own."""

    appointment_count: int = Field(..., ge=0)
    service_cost: Money
    professional_revenue: Money
    original_price: Money = Field(..., description="Cost before any discount")
    recurring_discount_percent: Decimal = Decimal("0")
    recurring_savings: Money = Decimal("0")
