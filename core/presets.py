"""
Default service configurations.

Switching a service to another type builds a fresh model from that type's
preset instead of merging fields into the old one, so nothing from the
previous type survives the switch.
"""

from decimal import Decimal
from typing import Any

from core.exceptions import InvalidServiceConfiguration
from core.models import (
    FixedPriceService,
    HeadshotService,
    HourlyService,
    PricingCategory,
    ServiceConfiguration,
    ServiceType,
    TBD,
)
from core.pricing import pricing_category

_STANDARD_HOURLY = {
    "professional_hourly_rate": Decimal("50"),
    "client_hourly_rate": Decimal("135"),
    "early_arrival_fee": Decimal("25"),
    "professional_count": 2,
}

SERVICE_DEFAULTS: dict[ServiceType, dict[str, Any]] = {
    ServiceType.MASSAGE: {**_STANDARD_HOURLY, "appointment_minutes": 20, "total_hours": Decimal("4")},
    ServiceType.FACIAL: {**_STANDARD_HOURLY, "appointment_minutes": 20, "total_hours": Decimal("4")},
    ServiceType.HAIR: {**_STANDARD_HOURLY, "appointment_minutes": 30, "total_hours": Decimal("6")},
    ServiceType.NAILS: {**_STANDARD_HOURLY, "appointment_minutes": 30, "total_hours": Decimal("6")},
    ServiceType.MAKEUP: {**_STANDARD_HOURLY, "appointment_minutes": 30, "total_hours": Decimal("4")},
    ServiceType.HAIR_MAKEUP: {**_STANDARD_HOURLY, "appointment_minutes": 20, "total_hours": Decimal("4")},
    ServiceType.HEADSHOT_HAIR_MAKEUP: {**_STANDARD_HOURLY, "appointment_minutes": 20, "total_hours": Decimal("4")},
    ServiceType.HEADSHOT: {
        "appointment_minutes": 12,
        "total_hours": Decimal("5"),
        "professional_count": 1,
        "professional_hourly_rate": Decimal("400"),
        "retouching_cost_per_photo": Decimal("40"),
    },
    ServiceType.MINDFULNESS: {
        "appointment_minutes": 45, "total_hours": Decimal("0.75"),
        "class_length_minutes": 45, "fixed_price": Decimal("1375"),
    },
    ServiceType.MINDFULNESS_SOLES: {
        "appointment_minutes": 30, "total_hours": Decimal("0.5"),
        "class_length_minutes": 30, "fixed_price": Decimal("1250"),
    },
    ServiceType.MINDFULNESS_MOVEMENT: {
        "appointment_minutes": 30, "total_hours": Decimal("0.5"),
        "class_length_minutes": 30, "fixed_price": Decimal("1250"),
    },
    ServiceType.MINDFULNESS_PRO: {
        "appointment_minutes": 45, "total_hours": Decimal("0.75"),
        "class_length_minutes": 45, "fixed_price": Decimal("1375"),
    },
    ServiceType.MINDFULNESS_CLE: {
        "appointment_minutes": 60, "total_hours": Decimal("1"),
        "class_length_minutes": 60, "fixed_price": Decimal("1875"),
    },
    ServiceType.MINDFULNESS_PRO_REACTIVITY: {
        "appointment_minutes": 45, "total_hours": Decimal("0.75"),
        "class_length_minutes": 45, "fixed_price": Decimal("1375"),
    },
}

HEADSHOT_TIERS: dict[str, dict[str, Decimal]] = {
    "basic": {"professional_hourly_rate": Decimal("400"), "retouching_cost_per_photo": Decimal("40")},
    "premium": {"professional_hourly_rate": Decimal("500"), "retouching_cost_per_photo": Decimal("50")},
    "executive": {"professional_hourly_rate": Decimal("600"), "retouching_cost_per_photo": Decimal("60")},
}

MINDFULNESS_VARIANTS: dict[str, dict[str, Any]] = {
    "intro": {
        "class_length_minutes": 45, "appointment_minutes": 45,
        "total_hours": Decimal("0.75"), "fixed_price": Decimal("1375"),
    },
    "drop-in": {
        "class_length_minutes": 30, "appointment_minutes": 30,
        "total_hours": Decimal("0.5"), "fixed_price": Decimal("1250"),
    },
    "mindful-movement": {
        "class_length_minutes": 60, "appointment_minutes": 60,
        "total_hours": Decimal("1"), "fixed_price": Decimal("1500"),
    },
}

_MODEL_BY_CATEGORY = {
    PricingCategory.HOURLY: HourlyService,
    PricingCategory.HEADSHOT: HeadshotService,
    PricingCategory.FIXED_PRICE: FixedPriceService,
}


def preset_fields(
    service_type: str,
    tier: str | None = None,
    variant: str | None = None,
) -> dict[str, Any]:
    """
    Default field values for a service type.

    Raises:
        InvalidServiceConfiguration: If the type, tier or variant is unknown
            or doesn't apply to the service type
    """
    category = pricing_category(service_type)
    fields = dict(SERVICE_DEFAULTS[ServiceType(service_type)])

    if tier is not None:
        if category != PricingCategory.HEADSHOT:
            raise InvalidServiceConfiguration(
                f"Tier only applies to headshots, not {service_type}", field="tier"
            )
        if tier not in HEADSHOT_TIERS:
            raise InvalidServiceConfiguration(f"Unknown headshot tier '{tier}'", field="tier")
        fields.update(HEADSHOT_TIERS[tier])
        fields["tier"] = tier

    if variant is not None:
        if service_type != ServiceType.MINDFULNESS:
            raise InvalidServiceConfiguration(
                f"Variant only applies to mindfulness, not {service_type}", field="variant"
            )
        if variant not in MINDFULNESS_VARIANTS:
            raise InvalidServiceConfiguration(
                f"Unknown mindfulness variant '{variant}'", field="variant"
            )
        fields.update(MINDFULNESS_VARIANTS[variant])
        fields["variant"] = variant

    return fields


def build_service(
    service_type: str,
    *,
    location: str = "",
    date: str = TBD,
    tier: str | None = None,
    variant: str | None = None,
    **overrides: Any,
) -> ServiceConfiguration:
    """
    Build a service of the right variant from its preset.

    Overrides are applied on top of the preset; a field the variant doesn't
    have fails validation rather than being carried along silently.
    """
    category = pricing_category(service_type)
    fields = preset_fields(service_type, tier=tier, variant=variant)
    fields.update(overrides)

    model = _MODEL_BY_CATEGORY[category]
    return model(service_type=ServiceType(service_type).value, location=location, date=date, **fields)


def switch_service_type(
    service: ServiceConfiguration,
    new_type: str,
    tier: str | None = None,
    variant: str | None = None,
) -> ServiceConfiguration:
    """
    Rebuild a service as a different type.

    Only where and when it happens and the client discount carry over;
    every pricing field comes from the new type's preset.
    """
    return build_service(
        new_type,
        location=service.location,
        date=service.date,
        tier=tier,
        variant=variant,
        discount_percent=service.discount_percent,
    )
