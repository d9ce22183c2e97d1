"""
Request ingestion for the relay endpoints.

ingest_upload() turns the single multipart file part of a request into an
UploadedFile, reading it in chunks so that an oversized part is rejected
before more than ``max_bytes + 1`` bytes are held in memory.
require_video_url() is the equivalent presence check for the video path.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional
from urllib.parse import urlparse

from starlette.datastructures import UploadFile

from src.gateway.errors import InvalidUrl, MissingFile, MissingUrl, PayloadTooLarge, UnsupportedMediaType
from src.integrations.contracts.interfaces import UploadedFile

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
# Room for part headers and boundaries on top of the file itself.
MULTIPART_OVERHEAD_BYTES = 16 * 1024


def _normalize_mime(value: Optional[str]) -> str:
    return (value or "").split(";", 1)[0].strip().lower()


async def ingest_upload(
    upload: Optional[UploadFile],
    *,
    max_bytes: int,
    allowed_content_types: Optional[Iterable[str]] = None,
    content_length: Optional[int] = None,
) -> UploadedFile:
    if upload is None or not getattr(upload, "filename", None):
        raise MissingFile()

    if content_length is not None and content_length > max_bytes + MULTIPART_OVERHEAD_BYTES:
        logger.info("Rejecting upload from Content-Length=%s (limit %s)", content_length, max_bytes)
        raise PayloadTooLarge(max_bytes, content_length)

    mime_type = _normalize_mime(upload.content_type) or "application/octet-stream"
    if allowed_content_types is not None:
        allowed = [_normalize_mime(t) for t in allowed_content_types]
        if mime_type not in allowed:
            raise UnsupportedMediaType(mime_type, allowed)

    chunks: List[bytes] = []
    received = 0
    while True:
        chunk = await upload.read(min(CHUNK_SIZE, max_bytes + 1 - received))
        if not chunk:
            break
        received += len(chunk)
        if received > max_bytes:
            logger.info("Rejecting upload %r after %s bytes (limit %s)", upload.filename, received, max_bytes)
            raise PayloadTooLarge(max_bytes, received)
        chunks.append(chunk)

    if received == 0:
        raise MissingFile("The uploaded image file is empty.")

    content = b"".join(chunks)
    return UploadedFile(
        content=content,
        original_name=upload.filename,
        mime_type=mime_type,
        size_bytes=len(content),
    )


def require_video_url(url: Optional[str]) -> str:
    candidate = (url or "").strip()
    if not candidate:
        raise MissingUrl()
    parsed = urlparse(candidate)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise InvalidUrl(candidate)
    return candidate
