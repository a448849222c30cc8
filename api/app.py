"""Application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.calculator import create_calculator_router
from api.errors import register_error_handlers
from api.middleware import RequestIDMiddleware
from api.proposals import create_proposals_router
from clients.postgres_client import PostgresClient
from core.config import AppConfig
from core.services.proposal_service import ProposalService

logger = logging.getLogger(__name__)


def build_services(config: AppConfig) -> dict:
    """Create the services the routers depend on."""
    if not config.database_url:
        raise RuntimeError("DATABASE_URL is not configured")

    postgres = PostgresClient(config.database_url)
    return {
        "proposal": ProposalService(postgres, config.pricing, base_url=config.app_base_url),
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    PostgresClient.close_all_pools()
    logger.info("Connection pools closed")


def create_app(config: AppConfig | None = None, services: dict | None = None) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        config: Application config (read from the environment if omitted)
        services: Prebuilt services, mainly for tests
    """
    config = config or AppConfig.from_env()
    services = services if services is not None else build_services(config)

    app = FastAPI(title=config.app_name, lifespan=lifespan)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

    app.include_router(create_calculator_router(config.pricing), prefix="/api")
    app.include_router(create_proposals_router(services), prefix="/api")

    logger.info(f"{config.app_name} ready")
    return app
