"""Chat routes, buffered and streaming."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from src.api.dependencies import ChatServiceFactory, get_chat_service_factory
from src.api.schemas import ChatRequest, ChatResponse
from src.stream_relay.service import StreamRelay

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    make_service: ChatServiceFactory = Depends(get_chat_service_factory),
) -> ChatResponse:
    """Reply to the latest message in one response."""
    service = make_service()
    content = await service.reply(request.messages)
    logger.info("[chat] Replied with %d chars", len(content))
    return ChatResponse(content=content)


@router.post("/chat/stream")
async def chat_stream(
    request: ChatRequest,
    make_service: ChatServiceFactory = Depends(get_chat_service_factory),
) -> StreamingResponse:
    """Reply to the latest message as a chunked plain-text stream.

    A failure before the first fragment is still a JSON 500. After that the
    headers are gone, and a failure aborts the body instead.
    """
    service = make_service()
    relay = StreamRelay(service.stream_reply(request.messages))
    await relay.prime()

    return StreamingResponse(
        relay.iter_bytes(),
        media_type="text/plain; charset=utf-8",
    )
