"""
Chat proxy endpoint.

Forwards a vendor-neutral chat payload to the configured upstream LLM API
and returns {content}.
"""
from fastapi import APIRouter, Depends, Request, Response

from chat_proxy.api.models import ChatResponse, ErrorResponse
from chat_proxy.config.settings import Settings, get_settings
from chat_proxy.controllers.chat_controller import ChatController

# ============================================================================
# Dependency Injection
# ============================================================================


def get_chat_controller(settings: Settings = Depends(get_settings)) -> ChatController:
    """Dependency injection for ChatController."""
    return ChatController(settings)


# ============================================================================
# Router
# ============================================================================

router = APIRouter()


# ============================================================================
# Endpoints
# ============================================================================


@router.api_route(
    "/chat",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    responses={
        200: {"model": ChatResponse, "description": "Generated text"},
        400: {"model": ErrorResponse, "description": "Invalid request"},
        405: {"model": ErrorResponse, "description": "Method not allowed"},
        500: {"model": ErrorResponse, "description": "Missing credential or internal server error"},
    },
)
async def chat(
    request: Request,
    controller: ChatController = Depends(get_chat_controller),
) -> Response:
    """
    Proxy a chat completion.

    Body: {messages: [{role, content}], system?, model?, temperature?}.
    Upstream failures are returned with the upstream status code and the
    raw upstream body in `details`.
    """
    return await controller.handle(request)
