"""
Provider descriptors.

A descriptor holds everything that differs between the relays: where the
outbound call goes, how it is built, how the answer is translated and what a
caller is told when it fails. GatewayEndpoint itself is provider-agnostic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from src.integrations.clients.request_builder import (
    build_background_removal_request,
    build_video_lookup_request,
)
from src.integrations.contracts.interfaces import ProviderName, ProviderRequest, TranslationMode
from src.utils.config_loader import GatewayConfig


@dataclass(frozen=True)
class ProviderDescriptor:
    name: ProviderName
    target_url: str
    build_request: Callable[["ProviderDescriptor", Any, str], ProviderRequest]
    translation_mode: TranslationMode
    failure_message: str
    expose_error_detail: bool = False   # video path answers "Error occurred: <detail>"
    host_header: str = ""

    def build(self, subject: Any, api_key: str) -> ProviderRequest:
        return self.build_request(self, subject, api_key)


def background_removal_descriptor(config: GatewayConfig) -> ProviderDescriptor:
    return ProviderDescriptor(
        name=ProviderName.BACKGROUND_REMOVAL,
        target_url=config.background_removal.url,
        build_request=build_background_removal_request,
        translation_mode=TranslationMode.DATA_URI,
        failure_message="Failed to remove background. Please try again.",
        host_header=config.background_removal.host_header,
    )


def video_lookup_descriptor(config: GatewayConfig) -> ProviderDescriptor:
    return ProviderDescriptor(
        name=ProviderName.VIDEO_LOOKUP,
        target_url=config.video_lookup.url,
        build_request=build_video_lookup_request,
        translation_mode=TranslationMode.JSON_PASSTHROUGH,
        failure_message="Failed to fetch video information.",
        expose_error_detail=True,
        host_header=config.video_lookup.host_header,
    )
