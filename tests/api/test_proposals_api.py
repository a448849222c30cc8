"""Tests for api/proposals.py - proposal endpoints over a stubbed service."""

from uuid import uuid4

import pytest

from core.models import Proposal, ProposalCreate, ProposalDuplicate, ProposalUpdate
from utils.dates import now_utc


@pytest.fixture
def proposal():
    now = now_utc()
    return Proposal(
        id=uuid4(),
        user_id=None,
        client_name="Acme Corp",
        data={"summary": {"total_cost": 2430.0}},
        original_data={"summary": {"total_cost": 2430.0}},
        customization={"include_summary": True},
        created_at=now,
        updated_at=now,
    )


class TestCreateProposal:
    """POST /api/proposals"""

    def test_creates(self, client, proposal_service, proposal, session_payload):
        proposal_service.create.return_value = proposal

        resp = client.post("/api/proposals", json={
            "session": session_payload,
            "client_email": "hr@acme.test",
        })

        assert resp.status_code == 200
        assert resp.json()["data"]["id"] == str(proposal.id)
        body = proposal_service.create.call_args[0][0]
        assert isinstance(body, ProposalCreate)
        assert body.client_email == "hr@acme.test"
        assert body.session.name == "Acme Corp"

    def test_missing_session_rejected(self, client, proposal_service):
        resp = client.post("/api/proposals", json={"client_email": "hr@acme.test"})

        assert resp.status_code == 422
        proposal_service.create.assert_not_called()


class TestReadProposals:
    """GET /api/proposals and /api/proposals/{id}"""

    def test_list(self, client, proposal_service, proposal):
        proposal_service.list_all.return_value = [proposal]

        resp = client.get("/api/proposals", params={"limit": 5, "offset": 10})

        assert resp.status_code == 200
        assert len(resp.json()["data"]) == 1
        proposal_service.list_all.assert_called_once_with(5, 10)

    def test_list_limit_bounds(self, client):
        resp = client.get("/api/proposals", params={"limit": 0})
        assert resp.status_code == 422

    def test_get(self, client, proposal_service, proposal):
        proposal_service.get_by_id.return_value = proposal

        resp = client.get(f"/api/proposals/{proposal.id}")

        assert resp.json()["data"]["client_name"] == "Acme Corp"

    def test_get_missing_is_404(self, client, proposal_service):
        proposal_service.get_by_id.return_value = None

        resp = client.get(f"/api/proposals/{uuid4()}")

        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "NOT_FOUND"

    def test_bad_id_rejected(self, client):
        resp = client.get("/api/proposals/not-a-uuid")
        assert resp.status_code == 422


class TestUpdateProposal:
    """PUT /api/proposals/{id}"""

    def test_updates(self, client, proposal_service, proposal):
        proposal_service.update.return_value = proposal

        resp = client.put(f"/api/proposals/{proposal.id}", json={"notes": "Moved to March"})

        assert resp.status_code == 200
        proposal_id, body = proposal_service.update.call_args[0]
        assert proposal_id == proposal.id
        assert isinstance(body, ProposalUpdate)
        assert body.notes == "Moved to March"

    def test_locked_is_409(self, client, proposal_service, proposal):
        proposal_service.update.side_effect = ValueError(
            f"Proposal {proposal.id} is not editable"
        )

        resp = client.put(f"/api/proposals/{proposal.id}", json={"notes": "x"})

        assert resp.status_code == 409
        assert resp.json()["error"]["code"] == "PROPOSAL_NOT_EDITABLE"


class TestDuplicateProposal:
    """POST /api/proposals/{id}/duplicate"""

    def test_duplicates_with_share_url(self, client, proposal_service, proposal):
        proposal_service.duplicate.return_value = proposal
        proposal_service.share_url.return_value = f"https://proposals.example.com/proposal/{proposal.id}?shared=true"
        source_id = uuid4()

        resp = client.post(f"/api/proposals/{source_id}/duplicate", json={"new_title": "Acme West"})

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["proposal"]["id"] == str(proposal.id)
        assert data["url"].endswith(f"{proposal.id}?shared=true")
        called_id, options = proposal_service.duplicate.call_args[0]
        assert called_id == source_id
        assert isinstance(options, ProposalDuplicate)
        assert options.new_title == "Acme West"

    def test_body_optional(self, client, proposal_service, proposal):
        proposal_service.duplicate.return_value = proposal
        proposal_service.share_url.return_value = "https://proposals.example.com/proposal/x"

        resp = client.post(f"/api/proposals/{uuid4()}/duplicate")

        assert resp.status_code == 200
        options = proposal_service.duplicate.call_args[0][1]
        assert options.recalculate is False

    def test_missing_is_404(self, client, proposal_service):
        proposal_service.duplicate.side_effect = ValueError("Proposal 1 not found")

        resp = client.post(f"/api/proposals/{uuid4()}/duplicate")

        assert resp.status_code == 404


class TestDeleteProposal:
    """DELETE /api/proposals/{id}"""

    def test_deletes(self, client, proposal_service):
        proposal_service.delete.return_value = True

        resp = client.delete(f"/api/proposals/{uuid4()}")

        assert resp.json()["data"] == {"deleted": True}

    def test_missing_is_404(self, client, proposal_service):
        proposal_service.delete.return_value = False

        resp = client.delete(f"/api/proposals/{uuid4()}")

        assert resp.status_code == 404
