"""Pricing, preview, preset and staffing endpoints."""

from fastapi import APIRouter, Query, Request
from pydantic import BaseModel, Field

from api.base import success_response
from core.aggregation import aggregate_session, remove_date, remove_service
from core.config import PricingConfig
from core.models import (
    CalculationResult,
    ClientSession,
    Gratuity,
    ServiceConfiguration,
    ServiceType,
)
from core.presets import build_service
from core.pricing import compute_service_result
from core.staffing import calculate_event_options


class ServiceRequest(BaseModel):
    service: ServiceConfiguration


class CalculateRequest(BaseModel):
    session: ClientSession
    gratuity: Gratuity | None = None


class RemoveServiceRequest(BaseModel):
    result: CalculationResult
    location: str
    date: str
    index: int = Field(..., ge=0)


class RemoveDateRequest(BaseModel):
    result: CalculationResult
    location: str
    date: str


def create_calculator_router(config: PricingConfig) -> APIRouter:
    router = APIRouter()

    @router.post("/calculate/service")
    async def calculate_service(request: Request, body: ServiceRequest):
        result = compute_service_result(body.service, config)
        return success_response(result.model_dump(mode="json"), request)

    @router.post("/calculate")
    async def calculate(request: Request, body: CalculateRequest):
        result = aggregate_session(body.session, body.gratuity, config)
        return success_response(result.model_dump(mode="json"), request)

    @router.post("/calculate/remove-service")
    async def preview_remove_service(request: Request, body: RemoveServiceRequest):
        result = remove_service(body.result, body.location, body.date, body.index, config)
        return success_response(result.model_dump(mode="json"), request)

    @router.post("/calculate/remove-date")
    async def preview_remove_date(request: Request, body: RemoveDateRequest):
        result = remove_date(body.result, body.location, body.date, config)
        return success_response(result.model_dump(mode="json"), request)

    @router.get("/presets")
    async def list_presets(request: Request):
        presets = {
            kind.value: build_service(kind.value).model_dump(mode="json")
            for kind in ServiceType
        }
        return success_response(presets, request)

    @router.get("/presets/{service_type}")
    async def get_preset(
        request: Request,
        service_type: str,
        tier: str | None = Query(None),
        variant: str | None = Query(None),
        location: str = Query(""),
    ):
        service = build_service(service_type, location=location, tier=tier, variant=variant)
        return success_response(service.model_dump(mode="json"), request)

    @router.get("/event-options/{service_type}")
    async def event_options(
        request: Request,
        service_type: str,
        target_appointments: int | None = Query(None, ge=1),
        tier: str | None = Query(None),
        appointment_minutes: int | None = Query(None, ge=1),
    ):
        options = calculate_event_options(
            service_type,
            target_appointments,
            tier=tier,
            appointment_minutes=appointment_minutes,
        )
        return success_response(options.model_dump(mode="json"), request)

    return router
