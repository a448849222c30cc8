"""Tests for api/app.py - application wiring and lifecycle."""

from unittest.mock import patch

import pytest
from starlette.testclient import TestClient

from api.app import build_services, create_app
from core.config import AppConfig


class TestCreateApp:
    """create_app() wiring."""

    def test_title_from_config(self, services):
        app = create_app(AppConfig(app_name="Staff Calculator"), services)
        assert app.title == "Staff Calculator"

    def test_pools_closed_on_shutdown(self, services):
        app = create_app(AppConfig(), services)

        with patch("api.app.PostgresClient.close_all_pools") as close_all:
            with TestClient(app):
                close_all.assert_not_called()
            close_all.assert_called_once()


class TestBuildServices:
    """build_services() needs a database."""

    def test_requires_database_url(self):
        with pytest.raises(RuntimeError, match="DATABASE_URL"):
            build_services(AppConfig())

    def test_passes_base_url(self):
        config = AppConfig(
            database_url="postgresql://localhost/proposals",
            app_base_url="https://proposals.example.com",
        )

        with patch("api.app.PostgresClient"):
            services = build_services(config)

        assert services["proposal"].base_url == "https://proposals.example.com"
