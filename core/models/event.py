"""Event and client session models."""

from pydantic import BaseModel, Field, field_validator, model_validator

from core.models.service import ServiceConfiguration
from utils.dates import TBD, normalize_event_date


class EventRecord(BaseModel):
    """A set of services delivered at one location on one date."""

    client_name: str
    date: str = TBD
    services: list[ServiceConfiguration] = Field(default_factory=list)

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, value):
        return normalize_event_date(value)


class ClientSession(BaseModel):
    """
    Everything entered while building one proposal.

    Validation here is what the calculator checks before pricing:
    a client name and at least one named location.
    """

    name: str = Field(..., min_length=1, max_length=255)
    locations: list[str] = Field(..., min_length=1)
    events: dict[str, list[EventRecord]] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Client name is required")
        return value

    @field_validator("locations")
    @classmethod
    def drop_blank_locations(cls, value: list[str]) -> list[str]:
        locations = [loc.strip() for loc in value if loc.strip()]
        if not locations:
            raise ValueError("At least one location is required")
        return locations

    @field_validator("events")
    @classmethod
    def strip_event_locations(cls, value: dict[str, list[EventRecord]]) -> dict[str, list[EventRecord]]:
        """Event keys are matched against locations the same way locations are cleaned."""
        events: dict[str, list[EventRecord]] = {}
        for location, records in value.items():
            events.setdefault(location.strip(), []).extend(records)
        return events

    @model_validator(mode="after")
    def validate_event_locations(self) -> "ClientSession":
        """Events may only be booked at the session's locations."""
        unknown = set(self.events) - set(self.locations)
        if unknown:
            raise ValueError(f"Events reference unknown locations: {', '.join(sorted(unknown))}")
        return self
