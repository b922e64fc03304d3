from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str  # "user", "assistant" or "model"
    content: str

    @classmethod
    def user(cls, content: str) -> ChatMessage:
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> ChatMessage:
        return cls(role="model", content=content)


# Ordered conversation turns supplied by the caller for one request.
ChatHistory = list[ChatMessage]


class ChatRequest(BaseModel):
    message: str
    history: ChatHistory = Field(default_factory=list)


class GenerateRequest(BaseModel):
    prompt: str
    # Accepted for API compatibility; not forwarded to Gemini.
    max_tokens: int | None = None


class ChatResponse(BaseModel):
    response: str
    model: str


class GenerateResponse(BaseModel):
    text: str
    model: str
