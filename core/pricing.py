"""
Service pricing rule.

Turns one service configuration into its appointment count, client-facing
cost and professional revenue. Pure and synchronous: no I/O, no shared
state, safe to call from anywhere.
"""

import logging
from decimal import Decimal

from core.config import PricingConfig
from core.exceptions import InvalidServiceConfiguration
from core.models import (
    FixedPriceService,
    HeadshotService,
    HourlyService,
    PricingCategory,
    RecurringFrequency,
    ServiceConfiguration,
    ServiceResult,
    ServiceType,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = PricingConfig()

_HUNDRED = Decimal("100")

FIXED_PRICE_TYPES = frozenset({
    ServiceType.MINDFULNESS,
    ServiceType.MINDFULNESS_SOLES,
    ServiceType.MINDFULNESS_MOVEMENT,
    ServiceType.MINDFULNESS_PRO,
    ServiceType.MINDFULNESS_CLE,
    ServiceType.MINDFULNESS_PRO_REACTIVITY,
})


def is_fixed_price_service(service_type: str) -> bool:
    """True for the mindfulness family, which is billed as a flat fee."""
    return service_type in FIXED_PRICE_TYPES


def pricing_category(service_type: str) -> PricingCategory:
    """
    Map a service type to the formula that prices it.

    Raises:
        InvalidServiceConfiguration: If the service type is unknown
    """
    try:
        kind = ServiceType(service_type)
    except ValueError:
        raise InvalidServiceConfiguration(
            f"Unknown service type '{service_type}'", field="service_type"
        )

    if kind == ServiceType.HEADSHOT:
        return PricingCategory.HEADSHOT
    if kind in FIXED_PRICE_TYPES:
        return PricingCategory.FIXED_PRICE
    return PricingCategory.HOURLY


def recurring_discount_percent(
    frequency: RecurringFrequency | None,
    config: PricingConfig = _DEFAULT_CONFIG,
) -> Decimal:
    """Discount earned by a recurring booking, out of 100."""
    if frequency is None:
        return Decimal("0")

    for tier in sorted(config.recurring_tiers, key=lambda t: t.min_occurrences, reverse=True):
        if frequency.occurrences >= tier.min_occurrences:
            return tier.discount_percent
    return Decimal("0")


def count_appointments(service: ServiceConfiguration) -> int:
    """
    Number of whole appointments that fit in the booked time.

    floor(total_hours × 60 / appointment_minutes × professional_count),
    computed with the division last so rational inputs stay exact.

    Raises:
        InvalidServiceConfiguration: If appointment_minutes is not positive
    """
    if service.appointment_minutes <= 0:
        raise InvalidServiceConfiguration(
            f"appointment_minutes must be positive, got {service.appointment_minutes}",
            field="appointment_minutes",
        )

    bookable_minutes = service.total_hours * 60 * service.professional_count
    return int(bookable_minutes // service.appointment_minutes)


def compute_service_result(
    service: ServiceConfiguration,
    config: PricingConfig = _DEFAULT_CONFIG,
) -> ServiceResult:
    """
    Price a single service.

    Args:
        service: Service configuration (any variant)
        config: Pricing constants

    Returns:
        Appointment count, discounted service cost and professional revenue.
        Discounts only ever reduce the client cost, never the professional's pay.

    Raises:
        InvalidServiceConfiguration: If appointment_minutes is not positive
    """
    appointments = count_appointments(service)
    hours = service.total_hours
    pros = service.professional_count

    if isinstance(service, HeadshotService):
        revenue = hours * pros * service.professional_hourly_rate
        cost = revenue + appointments * service.retouching_cost_per_photo
    elif isinstance(service, FixedPriceService):
        cost = service.fixed_price
        if cost is None:
            cost = config.default_mindfulness_price
        revenue = cost * config.fixed_price_revenue_share
    elif isinstance(service, HourlyService):
        revenue = hours * pros * service.professional_hourly_rate + service.early_arrival_fee * pros
        cost = hours * service.client_hourly_rate * pros
    else:
        raise InvalidServiceConfiguration(f"Unsupported service {type(service).__name__}")

    original_price = cost

    if service.discount_percent > 0:
        cost = cost * (1 - service.discount_percent / _HUNDRED)

    recurring_percent = Decimal("0")
    recurring_savings = Decimal("0")
    if service.is_recurring:
        recurring_percent = recurring_discount_percent(service.recurring_frequency, config)
        if recurring_percent > 0:
            recurring_savings = cost * recurring_percent / _HUNDRED
            cost = cost - recurring_savings

    logger.debug(
        f"Priced {service.service_type}: {appointments} appts, "
        f"cost={cost}, pro_revenue={revenue}"
    )

    return ServiceResult(
        appointment_count=appointments,
        service_cost=cost,
        professional_revenue=revenue,
        original_price=original_price,
        recurring_discount_percent=recurring_percent,
        recurring_savings=recurring_savings,
    )
