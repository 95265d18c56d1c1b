"""
Vendor adapters: one per upstream LLM API.
"""
from chat_proxy.config.settings import Settings

from .base import ChatAdapter, UpstreamRequest
from .gemini import GeminiAdapter
from .openai_compat import OpenAICompatAdapter


def build_adapter(settings: Settings) -> ChatAdapter:
    """Build the adapter for the vendor this deployment targets."""
    vendor = settings.chat_vendor
    if vendor == "openai":
        return OpenAICompatAdapter(
            base_url=settings.openai_base_url,
            default_model=settings.openai_model,
            default_temperature=settings.default_temperature,
            default_system=settings.default_system_prompt,
        )
    if vendor == "gemini":
        return GeminiAdapter(
            base_url=settings.gemini_base_url,
            default_model=settings.gemini_model,
            default_temperature=settings.default_temperature,
            default_system=settings.default_system_prompt,
        )
    raise ValueError(f"Unknown CHAT_VENDOR={vendor!r}, expected openai|gemini")


__all__ = [
    "ChatAdapter",
    "GeminiAdapter",
    "OpenAICompatAdapter",
    "UpstreamRequest",
    "build_adapter",
]
