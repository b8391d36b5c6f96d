"""API schemas for requests and responses."""

from src.api.schemas.requests import ChatRequest
from src.api.schemas.responses import ChatResponse, ErrorResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ErrorResponse",
]
