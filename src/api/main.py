"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from src.api.endpoints.background_removal import REMOVE_BG_PATH, background_removal_api
from src.api.endpoints.video_lookup import video_lookup_api
from src.api.middleware import UploadLimitMiddleware
from src.gateway.credentials import CredentialStore
from src.gateway.endpoint import GatewayEndpoint
from src.gateway.providers import background_removal_descriptor, video_lookup_descriptor
from src.integrations.contracts.interfaces import ProviderName, ProviderTransport
from src.utils.config_loader import GatewayConfig, load_gateway_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVICE_NAME = "Pixel Relay Gateway"
SERVICE_VERSION = "1.0.0"


def _select_transport(config: GatewayConfig) -> ProviderTransport:
    if config.integrations_mode == "mock":
        from src.integrations.clients.mocks.providers import MockProviderTransport

        return MockProviderTransport()

    from src.integrations.clients.real_http.transport import HttpxProviderTransport

    return HttpxProviderTransport(timeout_seconds=config.http.timeout_seconds)


def create_app(
    config: Optional[GatewayConfig] = None,
    credentials: Optional[CredentialStore] = None,
    transport: Optional[ProviderTransport] = None,
) -> FastAPI:
    # ============================================================================
    # DEPENDENCY INJECTION
    # ============================================================================
    config = config or load_gateway_config()
    credentials = credentials or CredentialStore.from_config(config)
    transport = transport or _select_transport(config)

    app = FastAPI(
        title=f"{SERVICE_NAME} API",
        description="Credential-hiding relay for background removal and social media video lookup",
        version=SERVICE_VERSION,
    )

    # Upload body cap, inside CORS
    app.add_middleware(UploadLimitMiddleware, paths=[REMOVE_BG_PATH], max_bytes=config.upload.max_bytes)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=config.server.cors_origins != ["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.credentials = credentials
    app.state.background_removal_gateway = GatewayEndpoint(background_removal_descriptor(config), credentials, transport)
    app.state.video_lookup_gateway = GatewayEndpoint(video_lookup_descriptor(config), credentials, transport)

    app.include_router(background_removal_api)
    app.include_router(video_lookup_api)

    @app.get("/", tags=["Health"])
    async def root():
        return {"service": SERVICE_NAME, "status": "healthy", "version": SERVICE_VERSION, "timestamp": datetime.now().isoformat()}

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        """Provider configuration status (never the keys themselves)."""
        creds: CredentialStore = request.app.state.credentials
        return {
            "status": "healthy",
            "mode": request.app.state.config.integrations_mode,
            "providers": {provider.value: creds.is_configured(provider) for provider in ProviderName},
            "timestamp": datetime.now().isoformat(),
        }

    # ============================================================================
    # STARTUP/SHUTDOWN EVENTS
    # ============================================================================
    @app.on_event("startup")
    async def startup_event():
        """Log effective configuration on startup"""
        logger.info("Starting %s (mode=%s)...", SERVICE_NAME, config.integrations_mode)
        logger.info(
            "Upload limit=%s bytes, provider timeout=%ss, CORS origins=%s",
            config.upload.max_bytes,
            config.http.timeout_seconds,
            config.server.cors_origins,
        )
        for provider in credentials.missing():
            logger.warning("Provider %s has no API key; its endpoint will answer 503", provider.value)

    @app.on_event("shutdown")
    async def shutdown_event():
        """Cleanup on shutdown"""
        logger.info("Shutting down %s...", SERVICE_NAME)

    return app


app = create_app()
