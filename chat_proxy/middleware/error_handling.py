"""
Error handling middleware.
Turns any exception that escapes a route into the uniform error envelope.
"""
import json
import logging
import traceback
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from chat_proxy.config.settings import get_settings

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling and logging."""

    async def _get_request_body(self, request: Request):
        """
        Safely extract request body for error logging.
        """
        try:
            body_bytes = await request.body()
            if not body_bytes:
                return None
            return json.loads(body_bytes.decode("utf-8"))
        except Exception:
            return None

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except Exception as e:
            body = await self._get_request_body(request)

            try:
                is_production = get_settings().is_production
            except Exception:
                is_production = True  # Default to production mode for safety

            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "request_body": body if not is_production else None,
                    "traceback": traceback.format_exc() if not is_production else None,
                },
                exc_info=True,
            )

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Server error", "details": str(e)},
            )
