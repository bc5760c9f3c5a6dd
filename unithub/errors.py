from __future__ import annotations

from typing import Any, Dict

import structlog

logger = structlog.get_logger(__name__)


async def _send_text(send: Any, status_code: int, message: str) -> None:
    await send(
        {
            "type": "http.response.start",
            "status": status_code,
            "headers": [(b"content-type", b"text/plain; charset=utf-8")],
        }
    )
    await send({"type": "http.response.body", "body": message.encode("utf-8")})


class InternalErrorMiddleware:
    """Turn any exception escaping a handler into a plain 500 response."""

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: Dict[str, Any], receive: Any, send: Any) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Dict[str, Any]) -> None:
            nonlocal response_started
            if message.get("type") == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            logger.exception(
                "request.failed",
                method=scope.get("method"),
                path=scope.get("path"),
            )
            if response_started:
                raise
            await _send_text(send, 500, "Internal Server Error")
