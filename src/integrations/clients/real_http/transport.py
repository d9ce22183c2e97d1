"""
Real provider HTTP transport.

Used when provider API keys are configured and INTEGRATIONS_MODE is not "mock".

Implementation notes:
- One httpx.AsyncClient per outbound call; nothing is pooled between requests
- Redirects are followed; other non-2xx answers are returned as ProviderResponse for the translator to classify
- Network failures and timeouts surface as UpstreamUnavailable
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from src.gateway.errors import UpstreamUnavailable
from src.integrations.contracts.interfaces import ProviderRequest, ProviderResponse, ProviderTransport

logger = logging.getLogger(__name__)


class HttpxProviderTransport(ProviderTransport):
    def __init__(
        self,
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def send(self, request: ProviderRequest) -> ProviderResponse:
        logger.info("Calling %s provider: %s %s", request.provider.value, request.method, request.target_url)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self._transport, follow_redirects=True
            ) as client:
                response = await client.request(
                    request.method,
                    request.target_url,
                    headers=request.headers,
                    params=request.params or None,
                    data=request.data or None,
                    files=request.files or None,
                )
        except httpx.TimeoutException as e:
            logger.error("Timed out calling %s provider after %ss: %s", request.provider.value, self.timeout_seconds, e)
            raise UpstreamUnavailable(f"Provider did not answer within {self.timeout_seconds:g}s") from e
        except httpx.RequestError as e:
            logger.error("Request error connecting to %s provider: %s", request.provider.value, e)
            raise UpstreamUnavailable(f"Could not reach provider: {e.__class__.__name__}") from e

        logger.info("Received %s provider response: status=%s", request.provider.value, response.status_code)
        return ProviderResponse(
            status_code=response.status_code,
            content_type=response.headers.get("content-type", ""),
            raw_body=response.content,
        )
