"""
Adapter for the Google Gemini generateContent API.

Gemini has no "assistant" role and takes a flat list of `contents`, each
{role: "user" | "model", parts: [{text}]}. The system prompt is sent as a
leading user turn prefixed with "(system) "; `systemInstruction` is not used.
"""
from typing import Any, Dict, List

from chat_proxy.api.models.chat import ChatRequest

from .base import ChatAdapter, UpstreamRequest

DEFAULT_MODEL = "gemini-1.5-flash"


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class GeminiAdapter(ChatAdapter):
    api_key_env = "GEMINI_API_KEY"
    allow_empty_messages = False
    missing_messages_error = "Request must include a non-empty messages array"

    def __init__(
        self,
        *,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        default_model: str = DEFAULT_MODEL,
        **kwargs,
    ) -> None:
        super().__init__(base_url=base_url, default_model=default_model, **kwargs)

    def build_contents(self, request: ChatRequest) -> List[Dict[str, Any]]:
        contents = []
        system = self.resolve_system(request)
        if system:
            contents.append({"role": "user", "parts": [{"text": f"(system) {system}"}]})
        for turn in request.messages:
            if not isinstance(turn, dict):
                turn = {}
            role = "model" if turn.get("role") == "assistant" else "user"
            contents.append({"role": role, "parts": [{"text": _text(turn.get("content"))}]})
        return contents

    def build_upstream_payload(self, request: ChatRequest) -> Dict[str, Any]:
        return {
            "contents": self.build_contents(request),
            "generationConfig": {"temperature": self.resolve_temperature(request)},
        }

    def build_upstream_request(self, request: ChatRequest, api_key: str) -> UpstreamRequest:
        model = self.resolve_model(request)
        return UpstreamRequest(
            url=f"{self.base_url}/models/{model}:generateContent",
            payload=self.build_upstream_payload(request),
            headers={"Content-Type": "application/json"},
            params={"key": api_key},
        )

    def extract_content(self, data: Any) -> str:
        try:
            parts = data["candidates"][0]["content"]["parts"]
            return "".join(_text(part.get("text")) for part in parts)
        except (KeyError, IndexError, TypeError, AttributeError):
            pass
        try:
            return _text(data["candidates"][0]["content"]["parts"][0]["text"])
        except (KeyError, IndexError, TypeError):
            return ""
