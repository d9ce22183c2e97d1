"""
Generic relay endpoint.

One GatewayEndpoint instance per provider descriptor. handle() drives a
single request through

    IDLE -> VALIDATING -> DISPATCHING -> TRANSLATING -> RESPONDED

and always returns a GatewayResult; exceptions never escape it. There are
no retries: one upstream failure ends the request.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Awaitable, Callable, Optional

from src.error_handler import ErrorHandler
from src.gateway.credentials import CredentialStore
from src.gateway.providers import ProviderDescriptor
from src.integrations.contracts.interfaces import (
    GatewayResult,
    GatewayState,
    GatewaySuccess,
    ProviderTransport,
)
from src.integrations.policy.response_translator import translate

logger = logging.getLogger(__name__)

Ingest = Callable[[], Awaitable[Any]]


class GatewayEndpoint:
    def __init__(
        self,
        descriptor: ProviderDescriptor,
        credentials: CredentialStore,
        transport: ProviderTransport,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        self.descriptor = descriptor
        self.credentials = credentials
        self.transport = transport
        self.error_handler = error_handler or ErrorHandler()

    async def handle(self, ingest: Ingest) -> GatewayResult:
        request_id = uuid.uuid4().hex[:12]
        state = GatewayState.IDLE
        context = {"request_id": request_id, "provider": self.descriptor.name.value}

        def advance(new_state: GatewayState) -> GatewayState:
            logger.debug("[%s] %s: %s -> %s", request_id, self.descriptor.name.value, state.value, new_state.value)
            return new_state

        state = advance(GatewayState.VALIDATING)
        try:
            subject = await ingest()
        except Exception as exc:
            advance(GatewayState.RESPONDED)
            return self.error_handler.to_failure(exc, self.descriptor, context)

        state = advance(GatewayState.DISPATCHING)
        try:
            api_key = self.credentials.lookup(self.descriptor.name)
            request = self.descriptor.build(subject, api_key)
            response = await self.transport.send(request)

            state = advance(GatewayState.TRANSLATING)
            payload = translate(response, self.descriptor.translation_mode)
        except Exception as exc:
            context["state"] = state.value
            advance(GatewayState.RESPONDED)
            return self.error_handler.to_failure(exc, self.descriptor, context)

        advance(GatewayState.RESPONDED)
        return GatewaySuccess(payload=payload)
