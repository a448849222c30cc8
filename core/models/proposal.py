"""Proposal domain models.

A proposal stores a snapshot of a calculation. ``data`` is the current
snapshot; ``original_data`` keeps the snapshot as first generated so staff
edits can be reviewed against it.
"""

from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from core.models.calculation import Gratuity
from core.models.event import ClientSession


class ProposalStatus(str, Enum):
    """Proposal review status."""

    DRAFT = "draft"
    APPROVED = "approved"
    REJECTED = "rejected"


class ProposalCustomization(BaseModel):
    """Presentation options chosen when a proposal is generated."""

    contact_first_name: str | None = Field(None, max_length=100)
    contact_last_name: str | None = Field(None, max_length=100)
    custom_note: str | None = Field(None, max_length=5000)
    include_summary: bool = True
    include_calculations: bool = True
    include_calculator: bool = False


class ProposalCreate(BaseModel):
    """Data required to generate a proposal."""

    session: ClientSession
    customization: ProposalCustomization = Field(default_factory=ProposalCustomization)
    client_email: str | None = Field(None, max_length=255)
    client_logo_url: str | None = Field(None, max_length=2000)
    gratuity: Gratuity | None = None
    user_id: UUID | None = None


class ProposalUpdate(BaseModel):
    """Staff edits to an existing proposal. All fields optional."""

    session: ClientSession | None = None
    gratuity: Gratuity | None = None
    clear_gratuity: bool = Field(False, description="Remove the current gratuity")
    notes: str | None = Field(None, max_length=5000)

    @model_validator(mode="after")
    def validate_gratuity_change(self) -> "ProposalUpdate":
        if self.clear_gratuity and self.gratuity is not None:
            raise ValueError("Cannot set and clear gratuity in the same update")
        return self


class ProposalDuplicate(BaseModel):
    """Options for copying a proposal into a new draft."""

    new_title: str | None = Field(None, max_length=255)
    notes: str | None = Field(None, max_length=5000)
    recalculate: bool = False
    user_id: UUID | None = None


class Proposal(BaseModel):
    """Full proposal entity as stored."""

    id: UUID
    user_id: UUID | None
    client_name: str
    client_email: str | None = None
    data: dict[str, Any]
    original_data: dict[str, Any] | None = None
    customization: dict[str, Any]
    status: ProposalStatus = ProposalStatus.DRAFT
    is_editable: bool = True
    has_changes: bool = False
    pending_review: bool = False
    change_source: str | None = None
    notes: str = ""
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @property
    def total_cost(self) -> float:
        """Snapshot total cost for display."""
        return float(self.data.get("summary", {}).get("total_cost", 0))
