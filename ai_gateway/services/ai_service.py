from __future__ import annotations

import logging

from ai_gateway.core.errors import ValidationError
from ai_gateway.models.chat import (
    ChatRequest,
    ChatResponse,
    GenerateRequest,
    GenerateResponse,
)
from ai_gateway.services.gemini_client import AIClient

logger = logging.getLogger(__name__)

DEFAULT_MODEL_LABEL = "gemini-2.0-flash-exp"


class AIService:
    """Validates requests, calls the AI client and shapes the public response.

    Holds no per-call state, so one instance serves every request.
    """

    def __init__(self, client: AIClient, model_label: str = DEFAULT_MODEL_LABEL):
        self._client = client
        self._model_label = model_label

    async def chat(self, request: ChatRequest) -> ChatResponse:
        if not request.message:
            raise ValidationError("message: Message cannot be empty")

        logger.debug("chat: %d history messages", len(request.history))
        response_text = await self._client.chat(
            message=request.message,
            history=request.history,
        )
        return ChatResponse(response=response_text, model=self._model_label)

    async def generate(self, request: GenerateRequest) -> GenerateResponse:
        if not request.prompt:
            raise ValidationError("prompt: Prompt cannot be empty")

        text = await self._client.generate(prompt=request.prompt)
        return GenerateResponse(text=text, model=self._model_label)
