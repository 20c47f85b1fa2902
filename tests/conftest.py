# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from leerstand.api.http import app, get_copy_draft_client  # ensures imports resolve; run tests from repo root
from leerstand.adapters.copy_draft_gemini import GeminiCopyDraftClient
from fixtures.generators import StubGenerator


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture
def stub_generator():
    return StubGenerator(text="**Google Search Headline**\nWohnen über Oerlikon")


@pytest.fixture
def draft_client_override(stub_generator):
    """Route /campaign/draft through a stubbed generator instead of the network."""
    app.dependency_overrides[get_copy_draft_client] = lambda: GeminiCopyDraftClient(
        generator=stub_generator, model="test-model"
    )
    yield stub_generator
    app.dependency_overrides.pop(get_copy_draft_client, None)
