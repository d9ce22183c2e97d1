"""Error handling helpers for the relay gateway."""
from typing import Any, Dict, Optional
import logging

from src.gateway.errors import (
    NOT_CONFIGURED_MESSAGE,
    ClientInputError,
    ConfigurationError,
    UpstreamAuthError,
    UpstreamTransportError,
)
from src.integrations.contracts.interfaces import GatewayFailure

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "An internal error occurred while processing your request. Please try again later."


class ErrorHandler:
    """Maps any exception raised while relaying a request to a GatewayFailure.

    Full detail is logged here and only here. What reaches the caller is:
    - client input errors: their own message, HTTP 400
    - credential rejections (401/402 upstream): the distinguished message, HTTP 500
    - transport/upstream errors: the descriptor's generic message, HTTP 500,
      or the error text itself when the descriptor exposes error detail
    - configuration errors: a fixed "not configured" message, HTTP 503
    """

    def to_failure(self, exc: Exception, descriptor=None, context: Optional[Dict[str, Any]] = None) -> GatewayFailure:
        context = context or {}
        provider = getattr(getattr(descriptor, "name", None), "value", None)
        fallback_message = getattr(descriptor, "failure_message", None) or GENERIC_FAILURE_MESSAGE

        if isinstance(exc, ClientInputError):
            logger.info("Rejected request input: %s context=%s", exc.message, context)
            return GatewayFailure(http_status=exc.http_status, message=exc.message, metadata={"error_type": type(exc).__name__})

        if isinstance(exc, UpstreamAuthError):
            logger.warning(
                "Provider %s rejected credential: status=%s detail=%s context=%s",
                provider, exc.status_code, exc.payload.get("detail"), context,
            )
            return GatewayFailure(http_status=500, message=exc.message, metadata={"error_type": type(exc).__name__})

        if isinstance(exc, UpstreamTransportError):
            logger.error("Provider %s call failed: %s payload=%s context=%s", provider, exc.message, exc.payload, context)
            message = exc.message if getattr(descriptor, "expose_error_detail", False) else fallback_message
            return GatewayFailure(http_status=exc.http_status, message=message, metadata={"error_type": type(exc).__name__})

        if isinstance(exc, ConfigurationError):
            logger.error("Gateway misconfigured: %s context=%s", exc.message, context)
            return GatewayFailure(http_status=exc.http_status, message=NOT_CONFIGURED_MESSAGE, metadata={"error_type": type(exc).__name__})

        logger.error("Unhandled exception in relay gateway: %s", exc, exc_info=True)
        return GatewayFailure(http_status=500, message=fallback_message, metadata={"error_type": "InternalError"})
