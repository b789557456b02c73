"""Chat request models."""

from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    # Entries are forwarded exactly as received (multimodal content, extra
    # roles, missing keys), so only the list itself is checked.
    messages: List[Any] = Field(default_factory=list)
