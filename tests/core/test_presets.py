"""Tests for core/presets.py - service defaults and type switching."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from core.exceptions import InvalidServiceConfiguration
from core.models import FixedPriceService, HeadshotService, HourlyService, ServiceType
from core.presets import build_service, switch_service_type
from core.pricing import compute_service_result


class TestBuildService:
    """Tests for build_service()."""

    @pytest.mark.parametrize("service_type", [t.value for t in ServiceType])
    def test_every_type_has_a_preset(self, service_type):
        service = build_service(service_type, location="HQ")

        assert service.service_type == service_type
        assert service.location == "HQ"
        assert service.date == "TBD"

    def test_variant_model_selected(self):
        assert isinstance(build_service("facial"), HourlyService)
        assert isinstance(build_service("headshot"), HeadshotService)
        assert isinstance(build_service("mindfulness-cle"), FixedPriceService)

    def test_massage_preset_prices_like_calculator_default(self):
        result = compute_service_result(build_service("massage"))

        assert result.appointment_count == 24
        assert result.service_cost == Decimal("1080")

    def test_overrides_applied(self):
        service = build_service("hair", total_hours=Decimal("3"), professional_count=1)

        assert service.total_hours == Decimal("3")
        assert service.professional_count == 1
        assert service.appointment_minutes == 30

    def test_unknown_override_rejected(self):
        """Fields from another variant can't ride along."""
        with pytest.raises(ValidationError):
            build_service("massage", retouching_cost_per_photo=Decimal("40"))

    def test_unknown_type_rejected(self):
        with pytest.raises(InvalidServiceConfiguration):
            build_service("reiki")


class TestHeadshotTiers:
    """Headshot tier presets."""

    @pytest.mark.parametrize("tier,rate,retouch", [
        ("basic", "400", "40"),
        ("premium", "500", "50"),
        ("executive", "600", "60"),
    ])
    def test_tier_rates(self, tier, rate, retouch):
        service = build_service("headshot", tier=tier)

        assert service.tier == tier
        assert service.professional_hourly_rate == Decimal(rate)
        assert service.retouching_cost_per_photo == Decimal(retouch)

    def test_tier_on_non_headshot_rejected(self):
        with pytest.raises(InvalidServiceConfiguration, match="Tier"):
            build_service("nails", tier="premium")

    def test_unknown_tier_rejected(self):
        with pytest.raises(InvalidServiceConfiguration, match="Unknown headshot tier"):
            build_service("headshot", tier="platinum")


class TestMindfulnessVariants:
    """Plain mindfulness variant presets."""

    @pytest.mark.parametrize("variant,length,price", [
        ("intro", 45, "1375"),
        ("drop-in", 30, "1250"),
        ("mindful-movement", 60, "1500"),
    ])
    def test_variant_presets(self, variant, length, price):
        service = build_service("mindfulness", variant=variant)

        assert service.variant == variant
        assert service.class_length_minutes == length
        assert service.fixed_price == Decimal(price)

    def test_variant_on_other_type_rejected(self):
        with pytest.raises(InvalidServiceConfiguration, match="Variant"):
            build_service("mindfulness-pro", variant="drop-in")


class TestSwitchServiceType:
    """Switching a service's type never carries stale fields."""

    def test_massage_type_dropped(self):
        massage = build_service("massage", location="HQ", date="2025-03-10", massage_type="chair")

        facial = switch_service_type(massage, "facial")

        assert isinstance(facial, HourlyService)
        assert facial.massage_type is None

    def test_keeps_location_date_and_discount(self):
        massage = build_service(
            "massage", location="HQ", date="2025-03-10", discount_percent=Decimal("10")
        )

        headshot = switch_service_type(massage, "headshot", tier="premium")

        assert isinstance(headshot, HeadshotService)
        assert headshot.location == "HQ"
        assert headshot.date == "2025-03-10"
        assert headshot.discount_percent == Decimal("10")
        assert headshot.professional_hourly_rate == Decimal("500")

    def test_resets_pricing_fields(self):
        custom = build_service("massage", client_hourly_rate=Decimal("200"), professional_count=5)

        switched = switch_service_type(custom, "nails")

        assert switched.client_hourly_rate == Decimal("135")
        assert switched.professional_count == 2
