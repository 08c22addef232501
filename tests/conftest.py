"""Shared fixtures."""

from pathlib import Path

import arrow
import pytest
from fastapi.testclient import TestClient

from sample_api.app import app
from sample_api.services.ping_service import PingService, get_ping_service
from sample_api.services.registry import get_service_registry
from sample_api.settings import Settings

REPO_ROOT = Path(__file__).resolve().parents[1]
FIXED_NOW = arrow.get("2025-03-23T21:41:10+00:00")


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only, ignoring any project .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fixed_ping_service(client, settings):
    """Swap in a PingService whose clock always reads FIXED_NOW."""
    service = PingService(settings, clock=lambda: FIXED_NOW)
    registry = get_service_registry()
    registry.register_singleton(PingService, service)
    yield service
    registry.register_factory(PingService, get_ping_service)


@pytest.fixture
def repo_workflow_path() -> Path:
    return REPO_ROOT / ".github" / "workflows" / "ci.yml"
