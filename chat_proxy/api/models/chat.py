"""
Request and response models for the chat proxy endpoint.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class ChatRequest(BaseModel):
    """Vendor-neutral chat payload.

    - messages: ordered turns, each {role: "user" | "assistant", content: str}
    - system: optional system instruction
    - model: optional upstream model name (vendor default when absent)
    - temperature: optional sampling temperature (configured default when absent)
    """
    model_config = ConfigDict(extra="ignore")

    messages: List[Any]
    system: Optional[str] = None
    model: Optional[str] = None
    temperature: Optional[float] = None


class ChatResponse(BaseModel):
    """Uniform success envelope."""

    content: str
