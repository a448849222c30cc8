"""
Proposal service for generated client proposals.

A proposal is a stored snapshot of a calculation. Totals are recomputed
from the client session whenever the snapshot is generated or edited; the
stored numbers are never adjusted in place.
"""

import copy
import logging
from typing import Any
from uuid import UUID, uuid4

from clients.postgres_client import PostgresClient
from core.aggregation import aggregate_session
from core.changes import compute_changes
from core.config import PricingConfig
from core.models import (
    CalculationResult,
    ClientSession,
    Gratuity,
    Proposal,
    ProposalCreate,
    ProposalDuplicate,
    ProposalStatus,
    ProposalUpdate,
)
from utils.dates import now_utc

logger = logging.getLogger(__name__)

DEFAULT_NOTE = (
    "We are so excited to service the incredible staff at {client}! "
    "Our team is looking forward to providing an exceptional experience for "
    "everyone involved. Please review the details above and let us know if "
    "you need any adjustments."
)


def build_snapshot(
    session: ClientSession,
    calculation: CalculationResult,
    client_logo_url: str | None = None,
) -> dict[str, Any]:
    """JSON snapshot stored as a proposal's data."""
    summary = calculation.model_dump(
        mode="json",
        include={
            "total_appointments", "total_cost", "total_professional_revenue",
            "net_profit", "profit_margin", "gratuity_amount", "total_with_gratuity",
        },
    )
    return {
        "client_name": session.name,
        "client_logo_url": client_logo_url,
        "locations": session.locations,
        "event_dates": calculation.event_dates,
        "session": session.model_dump(mode="json"),
        "calculation": calculation.model_dump(mode="json"),
        "summary": summary,
    }


class ProposalService:
    """Service for proposal operations."""

    def __init__(
        self,
        postgres: PostgresClient,
        config: PricingConfig | None = None,
        base_url: str = "http://localhost:8000",
    ):
        self.postgres = postgres
        self.config = config or PricingConfig()
        self.base_url = base_url.rstrip("/")

    def calculate(self, session: ClientSession, gratuity: Gratuity | None = None) -> CalculationResult:
        """Compute a session's totals without storing anything."""
        return aggregate_session(session, gratuity, self.config)

    def share_url(self, proposal_id: UUID) -> str:
        """Client-facing link to a proposal."""
        return f"{self.base_url}/proposal/{proposal_id}?shared=true"

    def create(self, data: ProposalCreate) -> Proposal:
        """
        Generate and store a proposal from a client session.

        Args:
            data: Session, customization and client contact details

        Returns:
            Created proposal in DRAFT status
        """
        calculation = self.calculate(data.session, data.gratuity)
        snapshot = build_snapshot(data.session, calculation, data.client_logo_url)

        customization = data.customization.model_copy()
        if not (customization.custom_note or "").strip():
            customization.custom_note = DEFAULT_NOTE.format(client=data.session.name)

        proposal = self._insert(
            user_id=data.user_id,
            client_name=data.session.name,
            client_email=data.client_email,
            snapshot=snapshot,
            customization=customization.model_dump(mode="json"),
            notes="",
        )
        logger.info(
            f"Created proposal {proposal.id} for '{proposal.client_name}' "
            f"(total {snapshot['summary']['total_cost']})"
        )
        return proposal

    def duplicate(self, proposal_id: UUID, options: ProposalDuplicate | None = None) -> Proposal:
        """
        Copy a proposal into a new standalone draft.

        Services, dates, locations, customization and logo carry over. The
        copy starts without review flags or a client email, so nobody is
        contacted about it by accident.

        Raises:
            ValueError: If proposal not found
        """
        options = options or ProposalDuplicate()
        source = self.get_by_id(proposal_id)
        if source is None:
            raise ValueError(f"Proposal {proposal_id} not found")

        title = (options.new_title or "").strip() or f"{source.client_name} (Copy)"
        snapshot = copy.deepcopy(source.data)

        if options.recalculate:
            session = ClientSession.model_validate(snapshot["session"])
            calculation = self.calculate(session, self._current_gratuity(source))
            snapshot = build_snapshot(session, calculation, snapshot.get("client_logo_url"))

        snapshot["client_name"] = title
        snapshot["session"]["name"] = title

        proposal = self._insert(
            user_id=options.user_id,
            client_name=title,
            client_email=None,
            snapshot=snapshot,
            customization=copy.deepcopy(source.customization),
            notes=options.notes or "",
        )
        logger.info(f"Duplicated proposal {proposal_id} as {proposal.id}")
        return proposal

    def get_by_id(self, proposal_id: UUID) -> Proposal | None:
        """
        Get proposal by ID.

        Returns:
            Proposal if found, None otherwise.
        """
        row = self.postgres.execute_single(
            "SELECT * FROM proposals WHERE id = %s",
            (proposal_id,)
        )

        if row is None:
            return None

        return Proposal.model_validate(row)

    def list_all(self, limit: int = 50, offset: int = 0) -> list[Proposal]:
        """List proposals, newest first."""
        rows = self.postgres.execute(
            """
            SELECT * FROM proposals
            ORDER BY created_at DESC
            LIMIT %s OFFSET %s
            """,
            (limit, offset)
        )

        return [Proposal.model_validate(row) for row in rows]

    def update(self, proposal_id: UUID, data: ProposalUpdate) -> Proposal:
        """
        Apply staff edits to a proposal.

        A new session or a gratuity change triggers a full recalculation.
        The snapshot from before the first edit is kept as original_data,
        and the proposal is flagged for review.

        Raises:
            ValueError: If proposal not found or no longer editable
        """
        current = self.get_by_id(proposal_id)
        if current is None:
            raise ValueError(f"Proposal {proposal_id} not found")
        if not current.is_editable:
            raise ValueError(f"Proposal {proposal_id} is not editable")

        new_data = current.data
        if data.session is not None or data.gratuity is not None or data.clear_gratuity:
            session = data.session or ClientSession.model_validate(current.data["session"])
            if data.clear_gratuity:
                gratuity = None
            else:
                gratuity = data.gratuity or self._current_gratuity(current)

            calculation = self.calculate(session, gratuity)
            new_data = build_snapshot(session, calculation, current.data.get("client_logo_url"))

        changes = compute_changes(current.data, new_data)
        notes = data.notes if data.notes is not None else current.notes
        if not changes and notes == current.notes:
            return current

        original_data = current.original_data if current.has_changes else current.data

        row = self.postgres.execute_returning(
            """
            UPDATE proposals
            SET data = %s, original_data = %s, client_name = %s, notes = %s,
                has_changes = %s, pending_review = %s, change_source = %s,
                updated_at = %s
            WHERE id = %s
            RETURNING *
            """,
            (
                new_data, original_data, new_data["client_name"], notes,
                True, True, "staff",
                now_utc(), proposal_id
            )
        )[0]

        updated = Proposal.model_validate(row)
        logger.info(f"Updated proposal {proposal_id}: {len(changes)} changed fields")
        return updated

    def delete(self, proposal_id: UUID) -> bool:
        """
        Delete a proposal.

        Returns:
            True if deleted, False if not found
        """
        rows = self.postgres.execute_returning(
            "DELETE FROM proposals WHERE id = %s RETURNING id",
            (proposal_id,)
        )

        if not rows:
            return False

        logger.info(f"Deleted proposal {proposal_id}")
        return True

    def _current_gratuity(self, proposal: Proposal) -> Gratuity | None:
        stored = proposal.data.get("calculation", {}).get("gratuity")
        return Gratuity.model_validate(stored) if stored else None

    def _insert(
        self,
        user_id: UUID | None,
        client_name: str,
        client_email: str | None,
        snapshot: dict[str, Any],
        customization: dict[str, Any],
        notes: str,
    ) -> Proposal:
        """Store a new draft whose original_data is its initial snapshot."""
        now = now_utc()
        row = self.postgres.execute_returning(
            """
            INSERT INTO proposals (
                id, user_id, client_name, client_email,
                data, original_data, customization,
                status, is_editable, has_changes, pending_review,
                notes, created_at, updated_at
            ) VALUES (
                %s, %s, %s, %s,
                %s, %s, %s,
                %s, %s, %s, %s,
                %s, %s, %s
            )
            RETURNING *
            """,
            (
                uuid4(), user_id, client_name, client_email,
                snapshot, snapshot, customization,
                ProposalStatus.DRAFT.value, True, False, False,
                notes, now, now
            )
        )[0]

        return Proposal.model_validate(row)
