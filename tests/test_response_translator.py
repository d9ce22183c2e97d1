import base64
import json

import pytest

from src.gateway.errors import (
    INVALID_API_KEY_MESSAGE,
    QUOTA_EXCEEDED_MESSAGE,
    InvalidCredential,
    MalformedProviderResponse,
    QuotaExceeded,
    UpstreamAuthError,
    UpstreamError,
    UpstreamTransportError,
)
from src.integrations.contracts.interfaces import ProviderResponse, TranslationMode
from src.integrations.policy.response_translator import (
    passthrough_json,
    raise_for_provider_status,
    to_data_uri_envelope,
    translate,
)


def _json_response(status, body, content_type="application/json"):
    return ProviderResponse(status, content_type, json.dumps(body).encode("utf-8"))


def test_data_uri_preserves_bytes(provider_image):
    envelope = translate(ProviderResponse(200, "image/png", provider_image), TranslationMode.DATA_URI)

    prefix, encoded = envelope["processedImage"].split(",", 1)
    assert prefix == "data:image/png;base64"
    assert base64.b64decode(encoded) == provider_image


def test_data_uri_label_is_png_even_for_other_image_types():
    envelope = to_data_uri_envelope(ProviderResponse(200, "image/jpeg", b"\xff\xd8\xff"))

    assert envelope == {"processedImage": "data:image/png;base64,/9j/"}


def test_data_uri_rejects_empty_body():
    with pytest.raises(MalformedProviderResponse):
        to_data_uri_envelope(ProviderResponse(200, "image/png", b""))


def test_data_uri_rejects_non_image_success_body():
    with pytest.raises(MalformedProviderResponse):
        to_data_uri_envelope(ProviderResponse(200, "text/html; charset=utf-8", b"<html>maintenance</html>"))


def test_json_passthrough_returns_object_unchanged():
    body = {"mediaUrls": ["https://cdn.example.com/a.mp4"], "links": [{"link": "x", "quality": "hd", "extra": 1}]}

    assert translate(_json_response(200, body), TranslationMode.JSON_PASSTHROUGH) == body


@pytest.mark.parametrize("raw", [b"not json", b"[1, 2]", b'"text"', b"\xff\xfe"])
def test_json_passthrough_fails_closed_on_shape_mismatch(raw):
    with pytest.raises(MalformedProviderResponse):
        passthrough_json(ProviderResponse(200, "application/json", raw))


def test_json_passthrough_rejects_links_that_are_not_objects():
    with pytest.raises(MalformedProviderResponse):
        passthrough_json(_json_response(200, {"links": "https://cdn.example.com/a.mp4"}))


def test_401_is_invalid_credential():
    with pytest.raises(InvalidCredential) as exc_info:
        raise_for_provider_status(_json_response(401, {"errors": [{"title": "API Key invalid"}]}))

    assert isinstance(exc_info.value, UpstreamAuthError)
    assert exc_info.value.message == INVALID_API_KEY_MESSAGE
    assert exc_info.value.payload["detail"] == "API Key invalid"


def test_402_is_quota_exceeded():
    with pytest.raises(QuotaExceeded) as exc_info:
        raise_for_provider_status(_json_response(402, {"errors": [{"title": "Insufficient credits"}]}))

    assert exc_info.value.message == QUOTA_EXCEEDED_MESSAGE


@pytest.mark.parametrize("status", [400, 403, 404, 429, 500, 503])
def test_other_non_2xx_is_generic_upstream_error(status):
    with pytest.raises(UpstreamError) as exc_info:
        translate(_json_response(status, {"message": "nope"}), TranslationMode.JSON_PASSTHROUGH)

    assert isinstance(exc_info.value, UpstreamTransportError)
    assert exc_info.value.status_code == status
    assert exc_info.value.message == f"Request failed with status code {status}"
    assert exc_info.value.payload["detail"] == "nope"


def test_success_status_does_not_raise():
    raise_for_provider_status(ProviderResponse(204, "", b""))
