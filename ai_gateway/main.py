import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ai_gateway.api import ai, graphql, health
from ai_gateway.core.errors import AppError, ExternalServiceError
from ai_gateway.core.logging import configure_logging
from ai_gateway.core.settings import get_settings

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, ExternalServiceError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.app_name)

    app.add_exception_handler(AppError, app_error_handler)

    app.include_router(ai.router)

    app.include_router(graphql.router, prefix="/graphql")

    app.include_router(health.router)

    return app


app = create_app()
