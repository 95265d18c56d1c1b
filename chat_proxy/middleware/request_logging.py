"""
Access logging for the chat proxy.

One JSON line per proxied request: vendor, turn count, requested model,
the status returned to the client and the upstream status behind it.
Chat content is never logged.
"""
import json
import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from chat_proxy.config.settings import Settings
from chat_proxy.utils.body import parse_body

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs a summary of each proxied request."""

    def __init__(self, app, settings: Settings):
        super().__init__(app)
        self.vendor = settings.chat_vendor
        self.ignore_paths = (
            f"{settings.api_prefix}/health",
            "/docs",
            "/openapi.json",
            "/redoc",
            "/favicon.ico",
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.ignore_paths:
            return await call_next(request)

        start_time = time.time()
        entry = {
            "vendor": self.vendor,
            "method": request.method,
            "path": request.url.path,
            "client_ip": self._get_client_ip(request),
        }
        if request.method == "POST":
            entry.update(self._summarize_body(await request.body()))

        response = await call_next(request)

        process_time = time.time() - start_time
        entry["status_code"] = response.status_code
        entry["upstream_status"] = getattr(request.state, "upstream_status", None)
        entry["process_time_ms"] = round(process_time * 1000, 2)

        # Log level based on status code
        if response.status_code >= 500:
            logger.error(json.dumps(entry))
        elif response.status_code >= 400:
            logger.warning(json.dumps(entry))
        else:
            logger.info(json.dumps(entry))

        response.headers["X-Process-Time"] = str(process_time)
        return response

    def _summarize_body(self, raw: bytes) -> dict:
        body = parse_body(raw)
        messages = body.get("messages")
        return {
            "message_count": len(messages) if isinstance(messages, list) else None,
            "has_system": bool(body.get("system")),
            "model": body.get("model") if isinstance(body.get("model"), str) else None,
        }

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address from request."""
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()

        if request.client:
            return request.client.host

        return "unknown"
