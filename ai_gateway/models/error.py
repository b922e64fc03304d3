from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned for 400 and 502 responses."""

    error: str
