"""
Chat proxy controller.

Runs one request through the pipeline: method handling, credential check,
body parsing and validation, vendor adaptation, the upstream call, and
normalization of the upstream response.
"""
import logging
from typing import Any, Dict, Optional

import httpx
from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from chat_proxy.api.models import ChatRequest, ChatResponse, ErrorResponse
from chat_proxy.config.settings import Settings
from chat_proxy.services.adapters import ChatAdapter, build_adapter
from chat_proxy.services.upstream import UpstreamInvoker
from chat_proxy.utils.body import RawBody, parse_body

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "POST, OPTIONS"


class ChatRequestError(Exception):
    """Raised when the request body is missing or has invalid fields."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details


def error_response(status_code: int, error: str, details: Optional[str] = None, **kwargs) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, details=details).model_dump(exclude_none=True),
        **kwargs,
    )


class ChatController:
    """Controller for proxied chat completions."""

    def __init__(
        self,
        settings: Settings,
        *,
        adapter: Optional[ChatAdapter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            settings: Application settings (vendor, key, defaults)
            adapter: Vendor adapter; built from settings when omitted
            transport: Optional httpx transport for the upstream call
        """
        self.adapter = adapter or build_adapter(settings)
        self.invoker = UpstreamInvoker(
            api_key=settings.chat_api_key,
            timeout=settings.upstream_timeout,
            transport=transport,
        )
        self.upstream_status: Optional[int] = None

    def _validate_request(self, body: Dict[str, Any]) -> ChatRequest:
        """
        Validate a parsed chat body.

        Raises:
            ChatRequestError: If messages is missing, not a list, empty where
                the vendor requires turns, or another field has a bad type
        """
        messages = body.get("messages")
        if not isinstance(messages, list):
            raise ChatRequestError(self.adapter.missing_messages_error)
        if not messages and not self.adapter.allow_empty_messages:
            raise ChatRequestError(self.adapter.missing_messages_error)

        try:
            return ChatRequest.model_validate(body)
        except ValidationError as e:
            raise ChatRequestError("Invalid request body", details=str(e)) from e

    async def handle(self, request: Request) -> Response:
        """Answer a /chat request of any method."""
        if request.method == "OPTIONS":
            return Response(status_code=status.HTTP_200_OK)

        if request.method != "POST":
            return error_response(
                status.HTTP_405_METHOD_NOT_ALLOWED,
                "Method Not Allowed",
                headers={"Allow": ALLOWED_METHODS},
            )

        response = await self.chat(await request.body())
        request.state.upstream_status = self.upstream_status
        return response

    async def chat(self, raw_body: RawBody) -> Response:
        """Proxy one POSTed chat body upstream and normalize the reply."""
        try:
            if not self.invoker.has_key:
                return error_response(
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    f"Missing {self.adapter.api_key_env} on the server",
                )

            chat_request = self._validate_request(parse_body(raw_body))
            upstream = self.adapter.build_upstream_request(chat_request, self.invoker.api_key)
            response = await self.invoker.send(upstream)
            self.upstream_status = response.status_code

            if not response.is_success:
                return error_response(response.status_code, "Upstream error", details=response.text)

            content = self.adapter.extract_content(response.json())
            return JSONResponse(
                status_code=status.HTTP_200_OK,
                content=ChatResponse(content=content).model_dump(),
            )

        except ChatRequestError as e:
            return error_response(status.HTTP_400_BAD_REQUEST, e.message, details=e.details)

        except Exception as e:
            logger.exception("Chat proxy failed: %s", e)
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Server error",
                details=str(e),
            )
