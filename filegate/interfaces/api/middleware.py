"""Middleware enforcing the upload size ceiling on the bytes actually received."""

from __future__ import annotations

from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from filegate.application.use_cases.ingestion import too_large_message
from filegate.config import get_settings
from filegate.domain.exceptions import FileTooLargeError

# Room for multipart boundaries and the non-file form fields.
MULTIPART_OVERHEAD_BYTES = 64 * 1024


class UploadSizeLimitMiddleware:
    """Answer 400 once an upload body grows past the configured ceiling.

    A declared ``Content-Length`` above the ceiling is refused before anything
    is read. Bodies without one, such as chunked requests, are counted while
    they arrive and cut off at the ceiling.
    """

    def __init__(self, app: ASGIApp, upload_path: str, max_bytes: int | None = None) -> None:
        self.app = app
        self.upload_path = upload_path
        self.max_bytes = max_bytes or get_settings().max_upload_bytes

    @property
    def ceiling(self) -> int:
        return self.max_bytes + MULTIPART_OVERHEAD_BYTES

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if (
            scope["type"] != "http"
            or scope["method"] != "POST"
            or scope["path"].rstrip("/") != self.upload_path
        ):
            await self.app(scope, receive, send)
            return

        message = too_large_message(self.max_bytes)
        declared = _content_length(scope)
        if declared is not None and declared > self.ceiling:
            await self._reject(scope, receive, send, message)
            return

        received = 0
        response_started = False

        async def counting_receive() -> Message:
            nonlocal received
            incoming = await receive()
            if incoming["type"] == "http.request":
                received += len(incoming.get("body", b""))
                if received > self.ceiling:
                    raise FileTooLargeError(message)
            return incoming

        async def tracking_send(outgoing: Message) -> None:
            nonlocal response_started
            if outgoing["type"] == "http.response.start":
                response_started = True
            await send(outgoing)

        try:
            await self.app(scope, counting_receive, tracking_send)
        except FileTooLargeError:
            if response_started:
                raise
            await self._reject(scope, receive, send, message)

    @staticmethod
    async def _reject(scope: Scope, receive: Receive, send: Send, message: str) -> None:
        response = JSONResponse(status_code=400, content={"success": False, "message": message})
        await response(scope, receive, send)


def _content_length(scope: Scope) -> int | None:
    for name, value in scope.get("headers", []):
        if name == b"content-length":
            try:
                return int(value)
            except ValueError:
                return None
    return None


__all__ = ["MULTIPART_OVERHEAD_BYTES", "UploadSizeLimitMiddleware"]
