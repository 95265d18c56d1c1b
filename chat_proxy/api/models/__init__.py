from .chat import ChatRequest, ChatResponse
from .error import ErrorResponse
from .health import HealthResponse

__all__ = [
    "ErrorResponse",
    "ChatRequest",
    "ChatResponse",
    "HealthResponse",
]
