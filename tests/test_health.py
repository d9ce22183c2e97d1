from fastapi.testclient import TestClient

from src.api.main import create_app
from src.gateway.credentials import CredentialStore
from src.integrations.contracts.interfaces import ProviderName


def test_root_reports_service(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_health_reports_provider_configuration_without_keys(config, transport):
    creds = CredentialStore({ProviderName.BACKGROUND_REMOVAL: "super-secret"})
    client = TestClient(create_app(config=config, credentials=creds, transport=transport))

    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["mode"] == "real"
    assert body["providers"] == {"background_removal": True, "video_lookup": False}
    assert "super-secret" not in response.text


def test_cors_preflight_is_answered(client):
    response = client.options(
        "/remove-bg",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert "access-control-allow-origin" in response.headers


def test_mock_mode_serves_offline_answers():
    from src.integrations.clients.mocks.providers import MockProviderTransport
    from src.utils.config_loader import GatewayConfig

    cfg = GatewayConfig(integrations_mode="mock")
    app = create_app(config=cfg, credentials=CredentialStore.from_config(cfg, environ={}))
    client = TestClient(app)

    response = client.get("/download", params={"url": "https://example.com/video/123"})

    assert isinstance(app.state.video_lookup_gateway.transport, MockProviderTransport)
    assert response.status_code == 200
    assert response.json()["links"]


def test_real_mode_uses_httpx_transport_with_configured_timeout():
    from src.integrations.clients.real_http.transport import HttpxProviderTransport
    from src.utils.config_loader import GatewayConfig, HttpConfig

    cfg = GatewayConfig(http=HttpConfig(timeout_seconds=7))
    app = create_app(config=cfg, credentials=CredentialStore({}))

    transport = app.state.background_removal_gateway.transport
    assert isinstance(transport, HttpxProviderTransport)
    assert transport.timeout_seconds == 7
