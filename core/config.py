"""Pricing and application configuration."""

import os
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class RecurringTier(BaseModel):
    """Discount granted once a recurring booking reaches a number of occurrences."""

    min_occurrences: int = Field(..., ge=1)
    discount_percent: Decimal = Field(..., ge=0, le=100)


class PricingConfig(BaseModel):
    """
    Pricing constants.

    Currency values are Decimal dollars. Percentages are expressed
    out of 100 to match what staff type into the calculator.
    """

    default_mindfulness_price: Decimal = Field(
        default=Decimal("1350"),
        description="Fixed price used when a plain mindfulness session has none",
        ge=0,
    )
    fixed_price_revenue_share: Decimal = Field(
        default=Decimal("0.30"),
        description="Share of a fixed-price service paid to the professional",
        ge=0,
        le=1,
    )
    recurring_tiers: list[RecurringTier] = Field(
        default_factory=lambda: [
            RecurringTier(min_occurrences=9, discount_percent=Decimal("20")),
            RecurringTier(min_occurrences=4, discount_percent=Decimal("15")),
        ],
        description="Recurring discounts, highest threshold first",
    )
    currency_quantum: Decimal = Field(
        default=Decimal("0.01"),
        description="Rounding step for displayed currency",
        gt=0,
    )
    margin_quantum: Decimal = Field(
        default=Decimal("0.01"),
        description="Rounding step for displayed profit margin",
        gt=0,
    )


class AppConfig(BaseModel):
    """Application settings, usually loaded from the environment."""

    database_url: str | None = Field(
        default=None,
        description="Postgres DSN for proposal storage",
    )
    app_name: str = Field(
        default="Proposal Calculator",
        description="Application name for the API title",
    )
    app_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL used when building shareable proposal links",
    )
    pricing: PricingConfig = Field(default_factory=PricingConfig)

    @classmethod
    def from_env(cls, env_file: Path | None = None) -> "AppConfig":
        """
        Build config from environment variables.

        Values from a .env file (if present) are loaded first without
        overriding variables already set in the shell.
        """
        load_dotenv(env_file)

        values = {}
        if os.getenv("DATABASE_URL"):
            values["database_url"] = os.environ["DATABASE_URL"]
        if os.getenv("APP_NAME"):
            values["app_name"] = os.environ["APP_NAME"]
        if os.getenv("APP_BASE_URL"):
            values["app_base_url"] = os.environ["APP_BASE_URL"]

        pricing = {}
        if os.getenv("DEFAULT_MINDFULNESS_PRICE"):
            pricing["default_mindfulness_price"] = os.environ["DEFAULT_MINDFULNESS_PRICE"]
        if os.getenv("FIXED_PRICE_REVENUE_SHARE"):
            pricing["fixed_price_revenue_share"] = os.environ["FIXED_PRICE_REVENUE_SHARE"]
        if pricing:
            values["pricing"] = PricingConfig(**pricing)

        return cls(**values)
