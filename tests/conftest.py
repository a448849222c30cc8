"""Shared test fixtures for the proposal calculator test suite."""

from decimal import Decimal

import pytest

from core.config import PricingConfig
from core.models import (
    ClientSession,
    EventRecord,
    FixedPriceService,
    HeadshotService,
    HourlyService,
)


# =============================================================================
# CONFIG FIXTURES
# =============================================================================


@pytest.fixture
def pricing_config() -> PricingConfig:
    """Default pricing constants."""
    return PricingConfig()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def massage_service() -> HourlyService:
    """Two massage therapists for four hours, 20-minute appointments."""
    return HourlyService(
        service_type="massage",
        total_hours=Decimal("4"),
        appointment_minutes=20,
        professional_count=2,
        professional_hourly_rate=Decimal("50"),
        client_hourly_rate=Decimal("135"),
        early_arrival_fee=Decimal("25"),
        date="2025-03-10",
        location="HQ",
    )


@pytest.fixture
def headshot_service() -> HeadshotService:
    """One photographer for five hours, 12-minute sessions."""
    return HeadshotService(
        service_type="headshot",
        total_hours=Decimal("5"),
        appointment_minutes=12,
        professional_count=1,
        professional_hourly_rate=Decimal("400"),
        retouching_cost_per_photo=Decimal("40"),
        date="2025-03-10",
        location="HQ",
    )


@pytest.fixture
def mindfulness_service() -> FixedPriceService:
    """Plain mindfulness session with no fixed price set."""
    return FixedPriceService(
        service_type="mindfulness",
        total_hours=Decimal("0.75"),
        appointment_minutes=45,
        date="2025-03-11",
        location="HQ",
    )


@pytest.fixture
def session(massage_service, headshot_service, mindfulness_service) -> ClientSession:
    """Two locations; HQ has events on two dates, Annex has none."""
    return ClientSession(
        name="Acme Corp",
        locations=["HQ", "Annex"],
        events={
            "HQ": [
                EventRecord(
                    client_name="Acme Corp",
                    date="2025-03-10",
                    services=[massage_service, headshot_service],
                ),
                EventRecord(
                    client_name="Acme Corp",
                    date="2025-03-11",
                    services=[mindfulness_service],
                ),
            ],
        },
    )
