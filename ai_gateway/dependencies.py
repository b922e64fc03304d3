from __future__ import annotations

from functools import lru_cache

from ai_gateway.core.settings import get_settings
from ai_gateway.services.ai_service import AIService
from ai_gateway.services.gemini_client import GeminiClient


@lru_cache
def get_gemini_client() -> GeminiClient:
    return GeminiClient(settings=get_settings())


@lru_cache
def get_ai_service() -> AIService:
    client = get_gemini_client()
    return AIService(client=client, model_label=client.model)
