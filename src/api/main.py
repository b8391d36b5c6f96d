"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.errors import register_exception_handlers
from src.api.routes import chat
from src.common.config import CopilotConfig, get_copilot_config

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Report configuration state on startup."""
    config: CopilotConfig = app.state.config
    if config.has_api_key:
        logger.info(
            "Backend configured: chat_model=%s, tool_model=%s",
            config.chat_model,
            config.tool_model,
        )
    else:
        # Requests fail individually; the server keeps running
        logger.warning("GEMINI_API_KEY is not set; chat requests will return 500")

    yield


def create_app(config: CopilotConfig | None = None) -> FastAPI:
    """Create the API app.

    Args:
        config: Configuration to serve with. Read from the environment if
            not given.
    """
    app = FastAPI(
        title="Video Editing Copilot API",
        description="Conversational assistant for video editing",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config if config is not None else get_copilot_config()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(chat.router, prefix="/api/ai", tags=["chat"])
    register_exception_handlers(app)

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=app.state.config.host, port=app.state.config.port)
