"""
Mock provider transport.

Purpose:
- Provides fake provider answers for local development (INTEGRATIONS_MODE=mock)
- Does NOT make any network calls
- Records every ProviderRequest it receives, so tests can assert on what
  would have been sent (and on how many calls were made)

Behavior:
- background_removal -> 200 with a fixed 1x1 transparent PNG
- video_lookup -> 200 with a JSON media description echoing the requested URL
- a canned ProviderResponse or exception can be supplied per provider
"""

from __future__ import annotations

import base64
import json
from typing import Dict, List, Optional

from src.integrations.contracts.interfaces import ProviderName, ProviderRequest, ProviderResponse, ProviderTransport

MOCK_PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


def _mock_video_payload(video_url: str) -> Dict[str, object]:
    return {
        "success": True,
        "src_url": video_url,
        "title": "Mock video",
        "picture": "https://example.com/mock/thumbnail.jpg",
        "links": [
            {"quality": "video_hd_720p", "link": "https://example.com/mock/video-720p.mp4"},
            {"quality": "video_sd_360p", "link": "https://example.com/mock/video-360p.mp4"},
            {"quality": "audio", "link": "https://example.com/mock/audio.m4a"},
        ],
    }


class MockProviderTransport(ProviderTransport):
    def __init__(
        self,
        responses: Optional[Dict[ProviderName, ProviderResponse]] = None,
        errors: Optional[Dict[ProviderName, Exception]] = None,
    ) -> None:
        self.responses = dict(responses or {})
        self.errors = dict(errors or {})
        self.calls: List[ProviderRequest] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def send(self, request: ProviderRequest) -> ProviderResponse:
        self.calls.append(request)
        if request.provider in self.errors:
            raise self.errors[request.provider]
        if request.provider in self.responses:
            return self.responses[request.provider]
        if request.provider is ProviderName.BACKGROUND_REMOVAL:
            return ProviderResponse(status_code=200, content_type="image/png", raw_body=MOCK_PNG_BYTES)
        body = json.dumps(_mock_video_payload(request.params.get("url", ""))).encode("utf-8")
        return ProviderResponse(status_code=200, content_type="application/json", raw_body=body)
