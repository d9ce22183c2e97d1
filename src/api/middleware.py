"""
Upload size cap applied before FastAPI parses the multipart body.

The route-level check in ingest_upload() only runs once the form has been
parsed, and Starlette spools every file part to disk while parsing. This
middleware answers 400 as soon as the declared Content-Length, or the running
count of received body bytes, passes ``max_bytes + MULTIPART_OVERHEAD_BYTES``.
"""

import logging
from typing import Iterable, Optional

from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from src.gateway.errors import PayloadTooLarge
from src.gateway.ingest import MULTIPART_OVERHEAD_BYTES

logger = logging.getLogger(__name__)


class _BodyLimitExceeded(Exception):
    def __init__(self, received_bytes: int) -> None:
        super().__init__(received_bytes)
        self.received_bytes = received_bytes


def _declared_length(scope: Scope) -> Optional[int]:
    for name, value in scope.get("headers", []):
        if name.lower() == b"content-length":
            try:
                return int(value)
            except ValueError:
                return None
    return None


class UploadLimitMiddleware:
    """Pure ASGI body cap for the upload routes listed in ``paths``."""

    def __init__(self, app: ASGIApp, *, paths: Iterable[str], max_bytes: int) -> None:
        self.app = app
        self.paths = frozenset(paths)
        self.max_bytes = max_bytes
        self.limit = max_bytes + MULTIPART_OVERHEAD_BYTES

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "POST" or scope["path"] not in self.paths:
            await self.app(scope, receive, send)
            return

        declared = _declared_length(scope)
        if declared is not None and declared > self.limit:
            logger.info("Rejecting %s from Content-Length=%s (limit %s)", scope["path"], declared, self.max_bytes)
            await self._reject(scope, receive, send, declared)
            return

        received = 0
        response_started = False

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.limit:
                    raise _BodyLimitExceeded(received)
            return message

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, tracking_send)
        except _BodyLimitExceeded as exc:
            if response_started:
                raise
            logger.info("Rejecting %s after %s body bytes (limit %s)", scope["path"], exc.received_bytes, self.max_bytes)
            await self._reject(scope, receive, send, exc.received_bytes)

    async def _reject(self, scope: Scope, receive: Receive, send: Send, received_bytes: int) -> None:
        error = PayloadTooLarge(self.max_bytes, received_bytes)
        response = JSONResponse(status_code=error.http_status, content={"error": error.message})
        await response(scope, receive, send)
