"""
Adapter for OpenAI-compatible ChatCompletions APIs.
Works with OpenAI or any compatible gateway if you point base_url accordingly.
"""
from typing import Any, Dict

from chat_proxy.api.models.chat import ChatRequest

from .base import ChatAdapter, UpstreamRequest

DEFAULT_MODEL = "gpt-4o-mini"


class OpenAICompatAdapter(ChatAdapter):
    api_key_env = "OPENAI_API_KEY"
    allow_empty_messages = True
    missing_messages_error = "Request must include a messages array"

    def __init__(
        self,
        *,
        base_url: str = "https://api.openai.com/v1",
        default_model: str = DEFAULT_MODEL,
        **kwargs,
    ) -> None:
        super().__init__(base_url=base_url, default_model=default_model, **kwargs)

    def build_upstream_payload(self, request: ChatRequest) -> Dict[str, Any]:
        messages = list(request.messages)
        system = self.resolve_system(request)
        if system:
            messages.insert(0, {"role": "system", "content": system})
        return {
            "model": self.resolve_model(request),
            "messages": messages,
            "temperature": self.resolve_temperature(request),
        }

    def build_upstream_request(self, request: ChatRequest, api_key: str) -> UpstreamRequest:
        return UpstreamRequest(
            url=f"{self.base_url}/chat/completions",
            payload=self.build_upstream_payload(request),
            headers={"Authorization": f"Bearer {api_key}"},
        )

    def extract_content(self, data: Any) -> str:
        # OpenAI returns: choices[0].message.content
        if not isinstance(data, dict):
            return ""
        choices = data.get("choices") or []
        if not isinstance(choices, list) or not choices:
            return ""
        choice = choices[0] if isinstance(choices[0], dict) else {}
        msg = choice.get("message") or {}
        if not isinstance(msg, dict):
            return ""
        content = msg.get("content")
        if isinstance(content, str):
            return content
        # Some gateways return a list of content parts: [{type: "text", text: "..."}]
        if isinstance(content, list):
            return "".join(
                part["text"] for part in content
                if isinstance(part, dict) and isinstance(part.get("text"), str)
            )
        return ""
