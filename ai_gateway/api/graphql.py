import strawberry
from fastapi import Depends
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from ai_gateway.core.errors import AppError
from ai_gateway.dependencies import get_ai_service
from ai_gateway.models.chat import ChatMessage, ChatRequest, GenerateRequest
from ai_gateway.services.ai_service import AIService


@strawberry.input
class ChatMessageInput:
    role: str
    content: str


@strawberry.input
class ChatInput:
    message: str
    history: list[ChatMessageInput] = strawberry.field(default_factory=list)


@strawberry.input
class GenerateInput:
    prompt: str
    max_tokens: int | None = None


@strawberry.type
class ChatResult:
    response: str
    model: str


@strawberry.type
class GenerateResult:
    text: str
    model: str


def _to_graphql_error(exc: AppError) -> GraphQLError:
    return GraphQLError(
        exc.detail,
        original_error=exc,
        extensions={"status": exc.status_code, "type": type(exc).__name__},
    )


@strawberry.type
class Query:
    @strawberry.field
    def health(self) -> str:
        return "ok"


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Chat with AI")
    async def chat(self, info: Info, input: ChatInput) -> ChatResult:
        ai_service: AIService = info.context["ai_service"]
        request = ChatRequest(
            message=input.message,
            history=[ChatMessage(role=m.role, content=m.content) for m in input.history],
        )
        try:
            result = await ai_service.chat(request)
        except AppError as e:
            raise _to_graphql_error(e) from e
        return ChatResult(response=result.response, model=result.model)

    @strawberry.mutation(description="Generate text from prompt")
    async def generate(self, info: Info, input: GenerateInput) -> GenerateResult:
        ai_service: AIService = info.context["ai_service"]
        request = GenerateRequest(prompt=input.prompt, max_tokens=input.max_tokens)
        try:
            result = await ai_service.generate(request)
        except AppError as e:
            raise _to_graphql_error(e) from e
        return GenerateResult(text=result.text, model=result.model)


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_context(ai_service: AIService = Depends(get_ai_service)) -> dict:
    return {"ai_service": ai_service}


router = GraphQLRouter(schema, context_getter=get_context)
