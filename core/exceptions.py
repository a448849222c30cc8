"""Typed exceptions for pricing and aggregation failures."""


class PricingError(ValueError):
    """Base class for pricing and aggregation errors."""


class InvalidServiceConfiguration(PricingError):
    """
    Service configuration cannot be priced.

    Raised for inputs the pricing rule cannot interpret, such as a
    non-positive appointment length.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class PreviewEditError(PricingError):
    """A preview removal referenced a location, date or service that doesn't exist."""
