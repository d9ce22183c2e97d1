"""
Contracts (data models).

This folder defines the request/response shapes exchanged with external providers:
- UploadedFile, ProviderRequest, ProviderResponse (one outbound call)
- GatewaySuccess / GatewayFailure (the only shapes returned to callers)
- Video lookup payload validation

Both mock and real HTTP transports use these contracts, so the gateway never
guesses payload formats in multiple places.
"""

from .interfaces import (
    GatewayFailure,
    GatewayResult,
    GatewayState,
    GatewaySuccess,
    ProviderName,
    ProviderRequest,
    ProviderResponse,
    ProviderTransport,
    TranslationMode,
    UploadedFile,
)
from .video import VideoLookupPayload

__all__ = [
    "GatewayFailure", "GatewayResult", "GatewayState", "GatewaySuccess",
    "ProviderName", "ProviderRequest", "ProviderResponse", "ProviderTransport",
    "TranslationMode", "UploadedFile", "VideoLookupPayload",
]
