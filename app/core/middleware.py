"""HTTP middleware: CORS headers and cancellation on client disconnect."""
import logging
import math

import anyio
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

ALLOW_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Stamp the CORS headers on every response.

    Preflight (OPTIONS) requests are answered here with 204 and never
    reach a route. Errors escaping a route (a connection that cannot be
    checked out, say) become a bare 500 that still carries the headers.
    """

    def __init__(self, app, allow_origin: str):
        super().__init__(app)
        self.cors_headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": ALLOW_METHODS,
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
        }

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(f"Unhandled error on {request.method} {request.url.path}: {e}")
                response = Response(status_code=500)

        response.headers.update(self.cors_headers)
        return response


class CancelOnDisconnectMiddleware:
    """
    Cancel a request's handler, and any database call it is awaiting,
    when the client goes away before the response is complete.

    Nothing further is sent for a cancelled request.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_complete = False
        send_stream, receive_stream = anyio.create_memory_object_stream(math.inf)

        async def tracked_send(message: Message):
            nonlocal response_complete
            if message["type"] == "http.response.body" and not message.get("more_body", False):
                response_complete = True
            await send(message)

        async def forwarded_receive() -> Message:
            try:
                return await receive_stream.receive()
            except anyio.EndOfStream:
                return {"type": "http.disconnect"}

        async with anyio.create_task_group() as tg:

            async def watch_disconnect():
                async with send_stream:
                    while True:
                        message = await receive()
                        if message["type"] == "http.disconnect" and not response_complete:
                            logger.info(f"Client disconnected, cancelling {scope['method']} {scope['path']}")
                            tg.cancel_scope.cancel()
                            return

                        send_stream.send_nowait(message)
                        if message["type"] == "http.disconnect":
                            return

            tg.start_soon(watch_disconnect)
            await self.app(scope, forwarded_receive, tracked_send)
            tg.cancel_scope.cancel()
