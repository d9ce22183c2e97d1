"""
Gateway error taxonomy.

Every failure raised while relaying a request derives from GatewayError and
carries the HTTP status the gateway answers with. The message of a
ClientInputError is safe to show verbatim; upstream and configuration errors
are translated by src.error_handler.ErrorHandler before they reach a caller.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

INVALID_API_KEY_MESSAGE = "Invalid API key. Please check the provider API key."
QUOTA_EXCEEDED_MESSAGE = "API key usage limit exceeded. Please check your provider account."
NOT_CONFIGURED_MESSAGE = "This service is not configured. Please contact the administrator."


class GatewayError(Exception):
    http_status: int = 500

    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload or {}


# ---------------------------------------------------------------------------
# Client input (400)
# ---------------------------------------------------------------------------

class ClientInputError(GatewayError):
    http_status = 400


class MissingFile(ClientInputError):
    def __init__(self, message: str = "No image file provided.") -> None:
        super().__init__(message)


class PayloadTooLarge(ClientInputError):
    def __init__(self, max_bytes: int, received_bytes: Optional[int] = None) -> None:
        limit_mb = max_bytes / (1024 * 1024)
        super().__init__(
            f"Image size must be less than {limit_mb:g}MB",
            payload={"max_bytes": max_bytes, "received_bytes": received_bytes},
        )
        self.max_bytes = max_bytes
        self.received_bytes = received_bytes


class UnsupportedMediaType(ClientInputError):
    def __init__(self, mime_type: str, allowed: Optional[list] = None) -> None:
        super().__init__(
            f"Unsupported image type '{mime_type}'. Supported types: PNG, JPG, WEBP.",
            payload={"mime_type": mime_type, "allowed": list(allowed or [])},
        )
        self.mime_type = mime_type


class MissingUrl(ClientInputError):
    def __init__(self, message: str = "Video URL is required.") -> None:
        super().__init__(message)


class InvalidUrl(ClientInputError):
    def __init__(self, url: str) -> None:
        super().__init__("Invalid url please check the url", payload={"url": url})
        self.url = url


# ---------------------------------------------------------------------------
# Upstream credential rejection
# ---------------------------------------------------------------------------

class UpstreamAuthError(GatewayError):
    status_code: int = 0


class InvalidCredential(UpstreamAuthError):
    status_code = 401

    def __init__(self, detail: str = "") -> None:
        super().__init__(INVALID_API_KEY_MESSAGE, payload={"detail": detail})


class QuotaExceeded(UpstreamAuthError):
    status_code = 402

    def __init__(self, detail: str = "") -> None:
        super().__init__(QUOTA_EXCEEDED_MESSAGE, payload={"detail": detail})


# ---------------------------------------------------------------------------
# Upstream transport (500)
# ---------------------------------------------------------------------------

class UpstreamTransportError(GatewayError):
    http_status = 500


class UpstreamError(UpstreamTransportError):
    def __init__(self, status_code: int, message: str, *, detail: str = "") -> None:
        super().__init__(message, payload={"status_code": status_code, "detail": detail})
        self.status_code = status_code


class UpstreamUnavailable(UpstreamTransportError):
    pass


class MalformedProviderResponse(UpstreamTransportError):
    pass


# ---------------------------------------------------------------------------
# Configuration (503)
# ---------------------------------------------------------------------------

class ConfigurationError(GatewayError):
    http_status = 503


class Unconfigured(ConfigurationError):
    def __init__(self, provider: str) -> None:
        super().__init__(f"No API key configured for provider '{provider}'.", payload={"provider": provider})
        self.provider = provider
