"""Request body size limit.

A raw ASGI middleware: the declared Content-Length is checked up front, and
the bytes actually received are counted too, so chunked uploads are capped
as well.
"""

from fastapi import HTTPException
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from api.response import failure

PAYLOAD_TOO_LARGE = ("PAYLOAD_TOO_LARGE", "Request payload is too large", 413)


class BodyLimitMiddleware:
    def __init__(self, app: ASGIApp, max_bytes: int):
        self.app = app
        self.max_bytes = max_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        length = Headers(scope=scope).get("content-length")
        if length is not None:
            try:
                too_large = int(length) > self.max_bytes
            except ValueError:
                await failure("VALIDATION_ERROR", "Invalid Content-Length header", 400)(scope, receive, send)
                return
            if too_large:
                await failure(*PAYLOAD_TOO_LARGE)(scope, receive, send)
                return

        received = 0
        started = False

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_bytes:
                    # FastAPI re-raises HTTPException from body parsing, the app's handler renders it
                    raise HTTPException(status_code=413)
            return message

        async def tracking_send(message: Message):
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, tracking_send)
        except HTTPException as e:
            if e.status_code != 413 or started:
                raise
            await failure(*PAYLOAD_TOO_LARGE)(scope, receive, send)
