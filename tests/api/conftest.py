"""API test fixtures - TestClient over the full app with a stubbed proposal service."""

from unittest.mock import Mock

import pytest
from starlette.testclient import TestClient

from api.app import create_app
from core.config import AppConfig
from core.services.proposal_service import ProposalService


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def proposal_service():
    return Mock(spec=ProposalService)


@pytest.fixture
def services(proposal_service):
    return {"proposal": proposal_service}


# =============================================================================
# APP & CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def app(services):
    """App with middleware, error handlers, calculator and proposal routes."""
    return create_app(AppConfig(), services)


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def massage_payload():
    return {
        "service_type": "massage",
        "total_hours": 4,
        "appointment_minutes": 20,
        "professional_count": 2,
        "professional_hourly_rate": 50,
        "client_hourly_rate": 135,
        "early_arrival_fee": 25,
        "date": "2025-03-10",
        "location": "HQ",
    }


@pytest.fixture
def session_payload(massage_payload):
    return {
        "name": "Acme Corp",
        "locations": ["HQ", "Annex"],
        "events": {
            "HQ": [{
                "client_name": "Acme Corp",
                "date": "2025-03-10",
                "services": [
                    massage_payload,
                    {
                        "service_type": "mindfulness",
                        "total_hours": 0.75,
                        "appointment_minutes": 45,
                        "date": "2025-03-10",
                        "location": "HQ",
                    },
                ],
            }],
        },
    }
