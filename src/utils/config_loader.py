"""
Configuration loader for the relay gateway
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Literal, Mapping, Optional
from urllib.parse import urlparse

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "gateway_config.yml"


class ProviderConfig(BaseModel):
    """Outbound provider endpoint"""

    url: str
    api_key_env: str
    host: Optional[str] = None

    @property
    def host_header(self) -> str:
        return self.host or (urlparse(self.url).hostname or "")


class UploadConfig(BaseModel):
    """Multipart upload limits"""

    max_bytes: int = Field(default=10 * 1024 * 1024, ge=1)
    allowed_content_types: List[str] = Field(
        default_factory=lambda: ["image/png", "image/jpeg", "image/jpg", "image/webp"]
    )


class HttpConfig(BaseModel):
    """Outbound HTTP client settings"""

    timeout_seconds: float = Field(default=30.0, gt=0.0, le=600.0)


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=5000, ge=1, le=65535)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])


class GatewayConfig(BaseModel):
    """Complete gateway configuration"""

    integrations_mode: Literal["real", "mock"] = "real"
    background_removal: ProviderConfig = Field(
        default_factory=lambda: ProviderConfig(
            url="https://api.remove.bg/v1.0/removebg",
            api_key_env="REMOVE_BG_API_KEY",
        )
    )
    video_lookup: ProviderConfig = Field(
        default_factory=lambda: ProviderConfig(
            url="https://social-media-video-downloader.p.rapidapi.com/smvd/get/all",
            api_key_env="DOWNLOADER_API_KEY",
            host="social-media-video-downloader.p.rapidapi.com",
        )
    )
    upload: UploadConfig = Field(default_factory=UploadConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


def _apply_env_overrides(data: dict, environ: Mapping[str, str]) -> dict:
    if environ.get("INTEGRATIONS_MODE"):
        mode = environ["INTEGRATIONS_MODE"].strip().lower()
        data["integrations_mode"] = "mock" if mode in {"mock", "test"} else "real"
    if environ.get("PORT"):
        data.setdefault("server", {})["port"] = int(environ["PORT"])
    if environ.get("MAX_UPLOAD_MB"):
        data.setdefault("upload", {})["max_bytes"] = int(float(environ["MAX_UPLOAD_MB"]) * 1024 * 1024)
    if environ.get("PROVIDER_TIMEOUT_SECONDS"):
        data.setdefault("http", {})["timeout_seconds"] = float(environ["PROVIDER_TIMEOUT_SECONDS"])
    return data


def load_gateway_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> GatewayConfig:
    """
    Load and validate gateway configuration from YAML file

    Falls back to GatewayConfig defaults (plus overrides) when no path is
    given and the bundled file is absent, as in a non-editable install.

    Args:
        config_path: Path to config file. Defaults to config/gateway_config.yml
        environ: Environment used for overrides (PORT, INTEGRATIONS_MODE,
            MAX_UPLOAD_MB, PROVIDER_TIMEOUT_SECONDS). Defaults to os.environ

    Returns:
        Validated GatewayConfig object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if environ is None:
        environ = os.environ

    if config_path is None and not DEFAULT_CONFIG_PATH.exists():
        logger.warning("Gateway config file %s not found; using built-in defaults", DEFAULT_CONFIG_PATH)
        data = {}
    else:
        config_path = config_path or DEFAULT_CONFIG_PATH
        if not config_path.exists():
            raise FileNotFoundError(f"Gateway config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    try:
        cfg = GatewayConfig(**_apply_env_overrides(data, environ))
        logger.info("Successfully loaded gateway config from %s", config_path or "built-in defaults")
        return cfg
    except (ValidationError, ValueError) as e:
        logger.error("Gateway config validation failed: %s", e)
        raise
