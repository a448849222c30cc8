"""
Event/location aggregator.

Folds locations → dated events → services into per-date, per-location and
grand totals. Every total is derived by summing its children, both when a
result is first built and after a preview removal, so totals can't drift
no matter how many edits are applied.
"""

import logging
from decimal import Decimal

from core.config import PricingConfig
from core.exceptions import PreviewEditError
from core.models import (
    CalculationResult,
    ClientSession,
    DateBreakdown,
    EventRecord,
    Gratuity,
    LocationBreakdown,
    ServiceLine,
    TBD,
)
from core.pricing import compute_service_result
from utils.dates import normalize_event_date, sort_event_dates

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = PricingConfig()


def aggregate(
    locations: list[str],
    events: dict[str, list[EventRecord]],
    gratuity: Gratuity | None = None,
    config: PricingConfig = _DEFAULT_CONFIG,
) -> CalculationResult:
    """
    Price every service and roll the results up.

    Args:
        locations: Client locations in display order
        events: Events booked at each location
        gratuity: Optional gratuity added on top of the subtotal
        config: Pricing constants

    Returns:
        Calculation result. Locations without events are included with zero
        totals; events at locations not listed are appended after them.
    """
    ordered = list(locations) + [loc for loc in events if loc not in locations]

    grouped: dict[str, dict[str, list[ServiceLine]]] = {}
    for location in ordered:
        by_date = grouped.setdefault(location, {})
        for event in events.get(location, []):
            for service in event.services:
                date_key = _bucket_date(service.date, event.date)
                result = compute_service_result(service, config)
                by_date.setdefault(date_key, []).append(
                    ServiceLine(service=service, result=result)
                )

    calculation = _build_result(grouped, gratuity, config)
    logger.info(
        f"Aggregated {len(ordered)} locations: {calculation.total_appointments} appts, "
        f"cost={calculation.total_cost}"
    )
    return calculation


def aggregate_session(
    session: ClientSession,
    gratuity: Gratuity | None = None,
    config: PricingConfig = _DEFAULT_CONFIG,
) -> CalculationResult:
    """Aggregate a validated client session."""
    return aggregate(session.locations, session.events, gratuity, config)


def remove_service(
    result: CalculationResult,
    location: str,
    date: str,
    index: int,
    config: PricingConfig = _DEFAULT_CONFIG,
) -> CalculationResult:
    """
    Return a new result without one service.

    A date left with no services is dropped. The input result is not modified.

    Raises:
        PreviewEditError: If the location, date or index doesn't exist
    """
    grouped = _ungroup(result)
    lines = _lookup_date(grouped, location, date)

    if index < 0 or index >= len(lines):
        raise PreviewEditError(
            f"Service {index} not found on {date} at '{location}' "
            f"({len(lines)} services)"
        )

    del lines[index]
    if not lines:
        del grouped[location][date]

    return _build_result(grouped, result.gratuity, config)


def remove_date(
    result: CalculationResult,
    location: str,
    date: str,
    config: PricingConfig = _DEFAULT_CONFIG,
) -> CalculationResult:
    """
    Return a new result without one date's event at a location.

    Raises:
        PreviewEditError: If the location or date doesn't exist
    """
    grouped = _ungroup(result)
    _lookup_date(grouped, location, date)
    del grouped[location][date]
    return _build_result(grouped, result.gratuity, config)


def _bucket_date(service_date: str | None, event_date: str | None) -> str:
    """
    Date bucket for a service.

    A service with its own date keeps it; an undated (TBD) service goes
    under its event's date. Unparseable dates are filed under TBD.
    """
    own = _safe_date(service_date)
    if own != TBD:
        return own
    return _safe_date(event_date)


def _safe_date(value: str | None) -> str:
    try:
        return normalize_event_date(value)
    except ValueError:
        logger.warning(f"Unparseable event date {value!r}, filing under {TBD}")
        return TBD


def _ungroup(result: CalculationResult) -> dict[str, dict[str, list[ServiceLine]]]:
    """Copy the service lines out of a result, keeping their order."""
    return {
        location: {
            date: list(breakdown.services)
            for date, breakdown in loc.date_breakdown.items()
        }
        for location, loc in result.location_breakdown.items()
    }


def _lookup_date(grouped, location: str, date: str) -> list[ServiceLine]:
    if location not in grouped:
        raise PreviewEditError(f"Location '{location}' not found in calculation")
    if date not in grouped[location]:
        raise PreviewEditError(f"Date {date} not found at '{location}'")
    return grouped[location][date]


def _rollup_date(lines: list[ServiceLine]) -> DateBreakdown:
    return DateBreakdown(
        total_appointments=sum(line.result.appointment_count for line in lines),
        total_cost=sum((line.result.service_cost for line in lines), Decimal("0")),
        total_professional_revenue=sum(
            (line.result.professional_revenue for line in lines), Decimal("0")
        ),
        services=lines,
    )


def _rollup_location(by_date: dict[str, list[ServiceLine]]) -> LocationBreakdown:
    dates = {date: _rollup_date(lines) for date, lines in by_date.items()}
    return LocationBreakdown(
        total_appointments=sum(d.total_appointments for d in dates.values()),
        total_cost=sum((d.total_cost for d in dates.values()), Decimal("0")),
        total_professional_revenue=sum(
            (d.total_professional_revenue for d in dates.values()), Decimal("0")
        ),
        date_breakdown=dates,
    )


def _build_result(
    grouped: dict[str, dict[str, list[ServiceLine]]],
    gratuity: Gratuity | None,
    config: PricingConfig,
) -> CalculationResult:
    breakdown = {location: _rollup_location(by_date) for location, by_date in grouped.items()}

    total_appointments = sum(loc.total_appointments for loc in breakdown.values())
    total_cost = sum((loc.total_cost for loc in breakdown.values()), Decimal("0"))
    total_revenue = sum(
        (loc.total_professional_revenue for loc in breakdown.values()), Decimal("0")
    )

    net_profit = total_cost - total_revenue
    if total_cost == 0:
        profit_margin = Decimal("0")
    else:
        profit_margin = (net_profit / total_cost * 100).quantize(config.margin_quantum)

    gratuity_amount = _gratuity_amount(gratuity, total_cost, config)

    return CalculationResult(
        total_appointments=total_appointments,
        total_cost=total_cost,
        total_professional_revenue=total_revenue,
        net_profit=net_profit,
        profit_margin=profit_margin,
        location_breakdown=breakdown,
        event_dates=sort_event_dates(
            date for loc in breakdown.values() for date in loc.date_breakdown
        ),
        gratuity=gratuity,
        gratuity_amount=gratuity_amount,
        total_with_gratuity=total_cost + gratuity_amount,
    )


def _gratuity_amount(
    gratuity: Gratuity | None,
    subtotal: Decimal,
    config: PricingConfig,
) -> Decimal:
    """Gratuity is added to what the client pays; it never changes profit."""
    if gratuity is None or gratuity.value == 0:
        return Decimal("0")
    if gratuity.kind == "percentage":
        return (subtotal * gratuity.value / 100).quantize(config.currency_quantum)
    return gratuity.value
