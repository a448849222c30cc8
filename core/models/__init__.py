"""Core domain models."""

from core.models.service import (
    ServiceType, PricingCategory, RecurringFrequency,
    HourlyService, HeadshotService, FixedPriceService,
    ServiceConfiguration, ServiceResult, TBD,
)
from core.models.event import EventRecord, ClientSession
from core.models.calculation import (
    Gratuity, ServiceLine, DateBreakdown, LocationBreakdown, CalculationResult,
)
from core.models.staffing import StaffingOption, FixedPriceOption, EventOptions
from core.models.proposal import (
    Proposal, ProposalCreate, ProposalDuplicate, ProposalUpdate,
    ProposalCustomization, ProposalStatus,
)

__all__ = [
    # Service
    "ServiceType", "PricingCategory", "RecurringFrequency",
    "HourlyService", "HeadshotService", "FixedPriceService",
    "ServiceConfiguration", "ServiceResult", "TBD",
    # Event
    "EventRecord", "ClientSession",
    # Calculation
    "Gratuity", "ServiceLine", "DateBreakdown", "LocationBreakdown", "CalculationResult",
    # Staffing
    "StaffingOption", "FixedPriceOption", "EventOptions",
    # Proposal
    "Proposal", "ProposalCreate", "ProposalDuplicate", "ProposalUpdate",
    "ProposalCustomization", "ProposalStatus",
]
