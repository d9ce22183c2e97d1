from __future__ import annotations

import base64
import json
from typing import Any, Dict

from pydantic import ValidationError

from src.gateway.errors import (
    InvalidCredential,
    MalformedProviderResponse,
    QuotaExceeded,
    UpstreamError,
)
from src.integrations.contracts.interfaces import ProviderResponse, TranslationMode
from src.integrations.contracts.video import VideoLookupPayload

DATA_URI_PREFIX = "data:image/png;base64,"


def raise_for_provider_status(response: ProviderResponse) -> None:
    if response.is_success:
        return
    detail = _provider_error_detail(response)
    if response.status_code == 401:
        raise InvalidCredential(detail)
    if response.status_code == 402:
        raise QuotaExceeded(detail)
    raise UpstreamError(
        response.status_code,
        f"Request failed with status code {response.status_code}",
        detail=detail,
    )


def to_data_uri_envelope(response: ProviderResponse) -> Dict[str, str]:
    if not response.raw_body:
        raise MalformedProviderResponse("Provider returned an empty image body.")
    content_type = response.content_type.split(";", 1)[0].strip().lower()
    if content_type and not content_type.startswith("image/") and content_type != "application/octet-stream":
        raise MalformedProviderResponse(
            f"Provider returned '{content_type}' where an image was expected.",
            payload={"body": response.text()},
        )
    encoded = base64.b64encode(response.raw_body).decode("ascii")
    return {"processedImage": f"{DATA_URI_PREFIX}{encoded}"}


def passthrough_json(response: ProviderResponse) -> Dict[str, Any]:
    try:
        data = json.loads(response.raw_body)
    except (UnicodeDecodeError, ValueError) as exc:
        raise MalformedProviderResponse(
            "Provider returned a body that is not valid JSON.",
            payload={"body": response.text()},
        ) from exc
    if not isinstance(data, dict):
        raise MalformedProviderResponse(
            f"Provider returned JSON {type(data).__name__} where an object was expected."
        )
    try:
        VideoLookupPayload.model_validate(data)
    except ValidationError as exc:
        raise MalformedProviderResponse(f"Response validation failed: {exc}", payload=data) from exc
    return data


def translate(response: ProviderResponse, mode: TranslationMode) -> Dict[str, Any]:
    raise_for_provider_status(response)
    if mode is TranslationMode.DATA_URI:
        return to_data_uri_envelope(response)
    if mode is TranslationMode.JSON_PASSTHROUGH:
        return passthrough_json(response)
    raise ValueError(f"Unsupported translation mode: {mode!r}")


def _provider_error_detail(response: ProviderResponse) -> str:
    """Best-effort extraction of a provider error, for server-side logs."""
    try:
        body = json.loads(response.raw_body)
    except (UnicodeDecodeError, ValueError):
        return response.text()
    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            titles = [str(e.get("title", e)) if isinstance(e, dict) else str(e) for e in errors]
            return "; ".join(titles)
        for key in ("message", "error", "detail"):
            if body.get(key):
                return str(body[key])
    return response.text()
