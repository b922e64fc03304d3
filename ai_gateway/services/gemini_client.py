from __future__ import annotations

import logging
from typing import Iterable, Protocol

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ai_gateway.core.errors import ExternalServiceError
from ai_gateway.core.settings import Settings, get_settings
from ai_gateway.models.chat import ChatHistory, ChatMessage

logger = logging.getLogger(__name__)

USER_ROLE = "user"
MODEL_ROLE = "model"


class AIClient(Protocol):
    async def chat(self, message: str, history: Iterable[ChatMessage]) -> str: ...

    async def generate(self, prompt: str) -> str: ...


def to_wire_role(role: str) -> str:
    # Gemini only knows "user" and "model"; "assistant" and anything else
    # the caller invents is treated as a model turn.
    return USER_ROLE if role == USER_ROLE else MODEL_ROLE


def build_contents(
    history: Iterable[ChatMessage], message: str | None = None
) -> list[types.Content]:
    contents = [
        types.Content(
            role=to_wire_role(msg.role),
            parts=[types.Part.from_text(text=msg.content)],
        )
        for msg in history
    ]

    if message is not None:
        contents.append(
            types.Content(role=USER_ROLE, parts=[types.Part.from_text(text=message)])
        )
    return contents


def contents_to_history(contents: Iterable[types.Content]) -> ChatHistory:
    history: ChatHistory = []
    for content in contents:
        text = "".join(part.text or "" for part in content.parts or [])
        history.append(ChatMessage(role=content.role or USER_ROLE, content=text))
    return history


def extract_text(response: types.GenerateContentResponse) -> str:
    """Return the text of the first part of the first candidate."""
    candidates = response.candidates or []
    if not candidates:
        raise ExternalServiceError("No response from Gemini")

    content = candidates[0].content
    if content is None or not content.parts:
        raise ExternalServiceError("No response from Gemini")

    text = content.parts[0].text
    if text is None:
        raise ExternalServiceError("No response text from Gemini")
    return text


class GeminiClient:
    def __init__(
        self,
        settings: Settings | None = None,
        client: genai.Client | None = None,
    ):
        self._settings = settings or get_settings()

        if client is None:
            if not self._settings.gemini_api_key:
                raise RuntimeError("GEMINI_API_KEY is not configured")
            client = genai.Client(
                api_key=self._settings.gemini_api_key,
                http_options=types.HttpOptions(
                    timeout=self._settings.gemini_timeout_ms
                ),
            )
        self._client = client

    @property
    def model(self) -> str:
        return self._settings.gemini_model

    async def chat(self, message: str, history: Iterable[ChatMessage]) -> str:
        return await self._generate(build_contents(history, message))

    async def generate(self, prompt: str) -> str:
        return await self._generate(build_contents([], prompt))

    async def _generate(self, contents: list[types.Content]) -> str:
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=contents,
            )
        except genai_errors.APIError as e:
            body = e.details if e.details else e.message
            raise self._fail(f"Gemini API error ({e.code} {e.status}): {body}") from e
        except httpx.TimeoutException as e:
            # httpx timeouts usually carry an empty message
            raise self._fail(
                "Failed to call Gemini API: timed out after "
                f"{self._settings.gemini_timeout_seconds:g}s ({type(e).__name__})"
            ) from e
        except httpx.HTTPError as e:
            raise self._fail(
                f"Failed to call Gemini API: {type(e).__name__}: {e}"
            ) from e
        except ValueError as e:
            # pydantic.ValidationError and json.JSONDecodeError both land here
            raise self._fail(f"Failed to parse Gemini response: {e}") from e

        try:
            return extract_text(response)
        except ExternalServiceError as e:
            logger.warning("Gemini request failed: %s", e.detail)
            raise

    def _fail(self, detail: str) -> ExternalServiceError:
        logger.warning("Gemini request failed: %s", detail)
        return ExternalServiceError(detail)
