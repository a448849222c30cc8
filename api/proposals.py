"""/api/proposals - generate and manage stored proposals."""

from uuid import UUID

from fastapi import APIRouter, Query, Request

from api.base import success_response
from core.models import ProposalCreate, ProposalDuplicate, ProposalUpdate


def create_proposals_router(services: dict) -> APIRouter:
    router = APIRouter()

    proposal_svc = services["proposal"]

    @router.post("/proposals")
    async def create_proposal(request: Request, body: ProposalCreate):
        proposal = proposal_svc.create(body)
        return success_response(proposal.model_dump(mode="json"), request)

    @router.get("/proposals")
    async def list_proposals(
        request: Request,
        limit: int = Query(50, ge=1, le=500),
        offset: int = Query(0, ge=0),
    ):
        proposals = proposal_svc.list_all(limit, offset)
        return success_response([p.model_dump(mode="json") for p in proposals], request)

    @router.get("/proposals/{proposal_id}")
    async def get_proposal(request: Request, proposal_id: UUID):
        proposal = proposal_svc.get_by_id(proposal_id)
        if proposal is None:
            raise ValueError(f"Proposal {proposal_id} not found")
        return success_response(proposal.model_dump(mode="json"), request)

    @router.put("/proposals/{proposal_id}")
    async def update_proposal(request: Request, proposal_id: UUID, body: ProposalUpdate):
        proposal = proposal_svc.update(proposal_id, body)
        return success_response(proposal.model_dump(mode="json"), request)

    @router.post("/proposals/{proposal_id}/duplicate")
    async def duplicate_proposal(
        request: Request,
        proposal_id: UUID,
        body: ProposalDuplicate | None = None,
    ):
        proposal = proposal_svc.duplicate(proposal_id, body or ProposalDuplicate())
        return success_response(
            {
                "proposal": proposal.model_dump(mode="json"),
                "url": proposal_svc.share_url(proposal.id),
            },
            request,
        )

    @router.delete("/proposals/{proposal_id}")
    async def delete_proposal(request: Request, proposal_id: UUID):
        if not proposal_svc.delete(proposal_id):
            raise ValueError(f"Proposal {proposal_id} not found")
        return success_response({"deleted": True}, request)

    return router
