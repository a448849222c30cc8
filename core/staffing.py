"""
Reverse calculator.

Given a target number of appointments, lists the (hours, professionals)
combinations that reach it within a working day. Costs use the same
formulas as the pricing rule so an option priced here matches the service
it becomes.
"""

import logging
from decimal import ROUND_CEILING, Decimal

from core.exceptions import InvalidServiceConfiguration
from core.models import (
    EventOptions,
    FixedPriceOption,
    PricingCategory,
    ServiceType,
    StaffingOption,
)
from core.presets import MINDFULNESS_VARIANTS, SERVICE_DEFAULTS, preset_fields
from core.pricing import pricing_category

logger = logging.getLogger(__name__)

MAX_HOURS_PER_DAY = Decimal("8")
HOUR_INCREMENT = Decimal("0.5")
MAX_PROS = 10
MAX_OPTIONS = 5

_CENT = Decimal("0.01")


def round_up_to_increment(hours: Decimal) -> Decimal:
    """Round hours up to the next bookable increment (3.33 -> 3.5)."""
    steps = (hours / HOUR_INCREMENT).to_integral_value(rounding=ROUND_CEILING)
    return steps * HOUR_INCREMENT


def calculate_event_options(
    service_type: str,
    target_appointments: int | None = None,
    *,
    tier: str | None = None,
    appointment_minutes: int | None = None,
    client_hourly_rate: Decimal | None = None,
    professional_hourly_rate: Decimal | None = None,
    retouching_cost_per_photo: Decimal | None = None,
) -> EventOptions:
    """
    Staffing options for a target appointment count.

    Options that hit the target exactly come first, then fewer
    professionals before more. Options with the same appointments and cost
    are collapsed to the one with fewest professionals, and at most
    MAX_OPTIONS are returned. Fixed-price services have no appointment
    count, so their classes are listed instead.

    Raises:
        InvalidServiceConfiguration: If the service type is unknown, the
            target is missing or not positive, or the appointment length
            is not positive
    """
    category = pricing_category(service_type)
    if category == PricingCategory.FIXED_PRICE:
        return _fixed_price_options(service_type)

    if target_appointments is None or target_appointments < 1:
        raise InvalidServiceConfiguration(
            "target_appointments must be a positive number", field="target_appointments"
        )

    defaults = preset_fields(service_type, tier=tier)
    minutes = appointment_minutes or defaults["appointment_minutes"]
    if minutes <= 0:
        raise InvalidServiceConfiguration(
            f"appointment_minutes must be positive, got {minutes}", field="appointment_minutes"
        )
    pro_rate = professional_hourly_rate or defaults["professional_hourly_rate"]
    client_rate = client_hourly_rate or defaults.get("client_hourly_rate", Decimal("0"))
    retouching = retouching_cost_per_photo or defaults.get("retouching_cost_per_photo", Decimal("0"))

    options = []
    for pros in range(1, MAX_PROS + 1):
        exact_hours = Decimal(target_appointments * minutes) / (pros * 60)
        if exact_hours > MAX_HOURS_PER_DAY or exact_hours < HOUR_INCREMENT:
            continue

        hours = round_up_to_increment(exact_hours)
        if hours > MAX_HOURS_PER_DAY:
            continue

        actual = int(hours * 60 * pros // minutes)
        if category == PricingCategory.HEADSHOT:
            cost = hours * pros * pro_rate + actual * retouching
        else:
            cost = hours * client_rate * pros

        options.append(StaffingOption(
            professional_count=pros,
            total_hours=hours,
            actual_appointments=actual,
            estimated_cost=cost.quantize(_CENT),
            exact_match=actual == target_appointments,
            note=_difference_note(actual - target_appointments),
        ))

    options.sort(key=lambda o: (not o.exact_match, o.professional_count))

    seen = set()
    unique = []
    for option in options:
        key = (option.actual_appointments, option.estimated_cost)
        if key in seen:
            continue
        seen.add(key)
        unique.append(option)

    logger.debug(
        f"{service_type}: {len(unique)} staffing options for {target_appointments} appointments"
    )

    return EventOptions(
        service_type=ServiceType(service_type).value,
        target_appointments=target_appointments,
        appointment_minutes=minutes,
        appointments_per_pro_per_hour=(Decimal(60) / minutes).quantize(_CENT),
        options=unique[:MAX_OPTIONS],
        max_hours_per_day=MAX_HOURS_PER_DAY,
        hour_increment=HOUR_INCREMENT,
    )


def _difference_note(diff: int) -> str | None:
    if diff == 0:
        return None
    plural = "s" if abs(diff) != 1 else ""
    if diff > 0:
        return f"{diff} extra appointment{plural} (buffer)"
    return f"{-diff} fewer appointment{plural} than target"


def _fixed_price_options(service_type: str) -> EventOptions:
    """Classes have unlimited participants, so there is nothing to solve for."""
    kind = ServiceType(service_type)

    if kind != ServiceType.MINDFULNESS:
        defaults = SERVICE_DEFAULTS[kind]
        options = [FixedPriceOption(
            service_type=kind.value,
            class_length_minutes=defaults["class_length_minutes"],
            fixed_price=defaults["fixed_price"],
        )]
        note = "Mindfulness services have unlimited participants and fixed pricing."
    else:
        options = [
            FixedPriceOption(
                service_type=kind.value,
                variant=name,
                class_length_minutes=variant["class_length_minutes"],
                fixed_price=variant["fixed_price"],
            )
            for name, variant in MINDFULNESS_VARIANTS.items()
        ]
        note = "Mindfulness services have unlimited participants and fixed pricing. Choose a type."

    return EventOptions(
        service_type=kind.value,
        target_appointments="unlimited",
        options=options,
        note=note,
    )
