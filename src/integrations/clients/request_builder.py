"""
Outbound request construction.

Builders are pure: the same descriptor, subject and key always produce an
equal ProviderRequest. Multipart encoding (and its random boundary) happens
in the transport, not here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.integrations.contracts.interfaces import ProviderRequest, UploadedFile

if TYPE_CHECKING:  # pragma: no cover
    from src.gateway.providers import ProviderDescriptor

IMAGE_FILE_FIELD = "image_file"


def build_background_removal_request(
    descriptor: "ProviderDescriptor",
    upload: UploadedFile,
    api_key: str,
) -> ProviderRequest:
    return ProviderRequest(
        provider=descriptor.name,
        method="POST",
        target_url=descriptor.target_url,
        headers={"X-Api-Key": api_key},
        data={"size": "auto"},
        files={IMAGE_FILE_FIELD: (upload.original_name, upload.content, upload.mime_type)},
    )


def build_video_lookup_request(
    descriptor: "ProviderDescriptor",
    video_url: str,
    api_key: str,
) -> ProviderRequest:
    return ProviderRequest(
        provider=descriptor.name,
        method="GET",
        target_url=descriptor.target_url,
        headers={
            "X-RapidAPI-Key": api_key,
            "X-RapidAPI-Host": descriptor.host_header,
        },
        params={"url": video_url},
    )
