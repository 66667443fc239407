import logging
import time

from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger("app.requests")


# ---------------------------------------------------------------------------
# Middleware (pure ASGI, no BaseHTTPMiddleware child task)
# ---------------------------------------------------------------------------

class RequestTimingMiddleware:
    """
    Pure ASGI middleware that times every HTTP request.

    - Adds an ``X-Response-Time-Ms`` header measured when the response
      starts.
    - Logs ``METHOD path -> status Nms`` once the request has finished,
      including requests that raised before a response was started
      (logged with status ``-``).
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        status: int | str = "-"

        async def send_wrapper(message: Message) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                headers = list(message.get("headers", []))
                headers.append((b"x-response-time-ms", str(duration_ms).encode()))
                message["headers"] = headers
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            ms = int((time.perf_counter() - start) * 1000)
            logger.info("%s %s -> %s %dms", scope["method"], scope["path"], status, ms)
