import logging

from fastapi import APIRouter, Depends, Request
from sse_starlette.sse import EventSourceResponse

from ai_gateway.core.settings import Settings, get_settings
from ai_gateway.dependencies import get_ai_service
from ai_gateway.models.chat import (
    ChatRequest,
    ChatResponse,
    GenerateRequest,
    GenerateResponse,
)
from ai_gateway.models.error import ErrorResponse
from ai_gateway.services.ai_service import AIService
from ai_gateway.services.streaming import stream_tokens

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["AI"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Bad request"},
    502: {"model": ErrorResponse, "description": "External service error"},
}


@router.post("/chat", response_model=ChatResponse, responses=_ERROR_RESPONSES)
async def chat_endpoint(
    request: ChatRequest,
    ai_service: AIService = Depends(get_ai_service),
) -> ChatResponse:
    return await ai_service.chat(request)


@router.post(
    "/generate", response_model=GenerateResponse, responses=_ERROR_RESPONSES
)
async def generate_endpoint(
    request: GenerateRequest,
    ai_service: AIService = Depends(get_ai_service),
) -> GenerateResponse:
    return await ai_service.generate(request)


@router.post("/chat/stream", responses=_ERROR_RESPONSES)
async def chat_stream_endpoint(
    request: ChatRequest,
    http_request: Request,
    ai_service: AIService = Depends(get_ai_service),
    settings: Settings = Depends(get_settings),
) -> EventSourceResponse:
    """
    Chat with Server-Sent Events.

    The full reply is fetched first, so validation and Gemini errors come
    back as ordinary JSON error responses. Only then is the event stream
    opened and the reply replayed word by word (one ``data`` event per
    word); see ``ai_gateway.services.streaming``.
    """
    chat_response = await ai_service.chat(request)

    async def event_generator():
        async for token in stream_tokens(
            chat_response.response,
            delay_seconds=settings.stream_chunk_delay_seconds,
            is_disconnected=http_request.is_disconnected,
        ):
            yield {"data": token}

    return EventSourceResponse(event_generator())
