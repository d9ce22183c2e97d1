"""Pytest fixtures for the relay gateway tests."""

import io

import pytest
from fastapi.testclient import TestClient
from starlette.datastructures import Headers, UploadFile

from src.api.main import create_app
from src.gateway.credentials import CredentialStore
from src.integrations.clients.mocks.providers import MockProviderTransport
from src.integrations.contracts.interfaces import ProviderName
from src.utils.config_loader import GatewayConfig

# Arbitrary binary "processed image" served by the fake provider; every byte value appears.
PROVIDER_IMAGE_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 8


@pytest.fixture
def config():
    return GatewayConfig()


@pytest.fixture
def credentials():
    return CredentialStore({
        ProviderName.BACKGROUND_REMOVAL: "bg-test-key",
        ProviderName.VIDEO_LOOKUP: "video-test-key",
    })


@pytest.fixture
def transport():
    """Offline provider; inspect .calls / .call_count in tests."""
    return MockProviderTransport()


@pytest.fixture
def client(config, credentials, transport):
    app = create_app(config=config, credentials=credentials, transport=transport)
    return TestClient(app)


@pytest.fixture
def provider_image():
    return PROVIDER_IMAGE_BYTES


@pytest.fixture
def make_upload():
    def _make(content: bytes, filename: str = "photo.png", content_type: str = "image/png") -> UploadFile:
        return UploadFile(file=io.BytesIO(content), filename=filename, headers=Headers({"content-type": content_type}))

    return _make
