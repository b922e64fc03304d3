from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ai_gateway.core.settings import get_settings
from ai_gateway.dependencies import get_ai_service
from ai_gateway.main import create_app
from ai_gateway.services.ai_service import AIService

from fakes import FakeAIClient


@pytest.fixture
def fake_client() -> FakeAIClient:
    return FakeAIClient()


@pytest.fixture
def make_api_client():
    """Build a TestClient whose AI service wraps the given fake client."""
    app = create_app()

    def _make(ai_client: FakeAIClient, **settings_update) -> TestClient:
        service = AIService(client=ai_client, model_label="test-model")
        app.dependency_overrides[get_ai_service] = lambda: service
        if settings_update:
            settings = get_settings().model_copy(update=settings_update)
            app.dependency_overrides[get_settings] = lambda: settings
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
