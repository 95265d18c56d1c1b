"""
Vendor adapter interface.

An adapter maps the vendor-neutral ChatRequest onto one upstream API and
pulls the generated text back out of that API's response.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from chat_proxy.api.models.chat import ChatRequest


@dataclass(frozen=True)
class UpstreamRequest:
    """Everything needed for the single outbound POST."""

    url: str
    payload: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)


class ChatAdapter(ABC):
    """Base class for vendor adapters."""

    #: Environment variable the API key is read from
    api_key_env: str
    #: Whether an empty messages list is forwarded instead of rejected
    allow_empty_messages: bool
    #: 400 message when messages is missing (or empty, where disallowed)
    missing_messages_error: str

    def __init__(
        self,
        *,
        base_url: str,
        default_model: str,
        default_temperature: float = 0.7,
        default_system: Optional[str] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.default_model = default_model
        self.default_temperature = default_temperature
        self.default_system = default_system

    def resolve_model(self, request: ChatRequest) -> str:
        return request.model or self.default_model

    def resolve_temperature(self, request: ChatRequest) -> float:
        if request.temperature is None:
            return self.default_temperature
        return request.temperature

    def resolve_system(self, request: ChatRequest) -> Optional[str]:
        if request.system is None:
            return self.default_system
        return request.system

    @abstractmethod
    def build_upstream_payload(self, request: ChatRequest) -> Dict[str, Any]:
        """Return the vendor JSON body for this request."""

    @abstractmethod
    def build_upstream_request(self, request: ChatRequest, api_key: str) -> UpstreamRequest:
        """Return URL, body and auth for the outbound call."""

    @abstractmethod
    def extract_content(self, data: Any) -> str:
        """Return the generated text from a decoded success response."""
