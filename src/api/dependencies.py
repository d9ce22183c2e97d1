import logging

from fastapi import Request

from src.gateway.endpoint import GatewayEndpoint
from src.utils.config_loader import GatewayConfig

logger = logging.getLogger(__name__)


def get_config(request: Request) -> GatewayConfig:
    return request.app.state.config


def get_background_removal_gateway(request: Request) -> GatewayEndpoint:
    return request.app.state.background_removal_gateway


def get_video_lookup_gateway(request: Request) -> GatewayEndpoint:
    return request.app.state.video_lookup_gateway


def request_content_length(request: Request):
    """Declared body size, or None when absent or unparsable."""
    raw = request.headers.get("content-length")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.debug("Ignoring malformed Content-Length header: %r", raw)
        return None
