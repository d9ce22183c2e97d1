import pytest
from pydantic import ValidationError

from src.utils.config_loader import DEFAULT_CONFIG_PATH, GatewayConfig, load_gateway_config


def _write(tmp_path, text):
    path = tmp_path / "gateway_config.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_shipped_config_matches_defaults():
    cfg = load_gateway_config(DEFAULT_CONFIG_PATH, environ={})

    assert cfg == GatewayConfig()
    assert cfg.upload.max_bytes == 10 * 1024 * 1024
    assert cfg.video_lookup.host_header == "social-media-video-downloader.p.rapidapi.com"
    assert cfg.background_removal.api_key_env == "REMOVE_BG_API_KEY"


def test_empty_file_gives_defaults(tmp_path):
    assert load_gateway_config(_write(tmp_path, ""), environ={}) == GatewayConfig()


def test_yaml_values_are_applied(tmp_path):
    path = _write(tmp_path, "upload:\n  max_bytes: 2048\nhttp:\n  timeout_seconds: 5\nserver:\n  port: 8080\n")

    cfg = load_gateway_config(path, environ={})

    assert cfg.upload.max_bytes == 2048
    assert cfg.http.timeout_seconds == 5.0
    assert cfg.server.port == 8080


def test_environment_overrides_yaml(tmp_path):
    path = _write(tmp_path, "server:\n  port: 8080\n")
    environ = {"PORT": "9000", "INTEGRATIONS_MODE": "Mock", "MAX_UPLOAD_MB": "5", "PROVIDER_TIMEOUT_SECONDS": "12.5"}

    cfg = load_gateway_config(path, environ=environ)

    assert cfg.server.port == 9000
    assert cfg.integrations_mode == "mock"
    assert cfg.upload.max_bytes == 5 * 1024 * 1024
    assert cfg.http.timeout_seconds == 12.5


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_gateway_config(tmp_path / "nope.yml", environ={})


def test_invalid_values_raise_validation_error(tmp_path):
    with pytest.raises(ValidationError):
        load_gateway_config(_write(tmp_path, "server:\n  port: 70000\n"), environ={})


def test_unparsable_env_override_raises(tmp_path):
    with pytest.raises(ValueError):
        load_gateway_config(_write(tmp_path, ""), environ={"PORT": "eighty"})


def test_absent_bundled_file_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.setattr("src.utils.config_loader.DEFAULT_CONFIG_PATH", tmp_path / "absent.yml")

    cfg = load_gateway_config(environ={"PORT": "9000"})

    assert cfg.server.port == 9000
    assert cfg.upload == GatewayConfig().upload
    assert cfg.background_removal == GatewayConfig().background_removal
