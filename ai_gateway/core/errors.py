from __future__ import annotations


class AppError(Exception):
    """Base class for errors the API layer turns into JSON error bodies."""

    status_code: int = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(AppError):
    """The caller sent a request that fails structural validation."""

    status_code = 400


class ExternalServiceError(AppError):
    """Gemini could not be reached or returned something unusable."""

    status_code = 502
