"""ModelInvoker service wrapping the generative backend."""

import logging
from collections.abc import AsyncIterator

from openai.types.responses import ResponseTextDeltaEvent

from agents import RunConfig, RunResultStreaming, Runner
from src.agents.agent_factory import create_agent
from src.common.config import CopilotConfig
from src.common.errors import BackendError
from src.common.model_identifier import ModelIdentifier
from src.model_invoker.fragment_stream import FragmentStream

logger = logging.getLogger(__name__)


class ModelInvoker:
    """Buffered and streaming access to one backend model.

    Constructing an invoker without a credential fails immediately with
    ConfigError; callers decide whether that is fatal or per-request.
    """

    def __init__(
        self,
        config: CopilotConfig,
        model_identifier: ModelIdentifier | None = None,
    ) -> None:
        """Initialize the invoker.

        Args:
            config: Startup configuration holding the credential.
            model_identifier: Model to call. Defaults to the chat model.
        """
        api_key = config.require_api_key()
        self.model_identifier = model_identifier or config.chat_model
        self._agent = create_agent(
            name="VideoEditingCopilot",
            model_identifier=self.model_identifier,
            api_key=api_key,
        )
        self._run_config = RunConfig(tracing_disabled=True)

    async def generate(self, prompt: str) -> str:
        """Run the prompt once and return the complete response text.

        Raises:
            BackendError: If the backend call fails for any reason.
        """
        logger.info(
            "[model=%s] Buffered generation, prompt=%d chars",
            self.model_identifier,
            len(prompt),
        )
        try:
            result = await Runner.run(self._agent, prompt, run_config=self._run_config)
        except Exception as e:
            logger.warning("[model=%s] Backend call failed: %s", self.model_identifier, e)
            raise BackendError(str(e) or type(e).__name__) from e

        return str(result.final_output or "")

    def generate_stream(self, prompt: str) -> FragmentStream:
        """Stream the response as text fragments in emission order.

        The backend run starts on the first pull. Closing the returned stream
        before it is exhausted cancels the run.
        """
        run: RunResultStreaming | None = None

        async def text_deltas() -> AsyncIterator[str]:
            nonlocal run
            logger.info(
                "[model=%s] Streaming generation, prompt=%d chars",
                self.model_identifier,
                len(prompt),
            )
            run = Runner.run_streamed(self._agent, prompt, run_config=self._run_config)
            async for event in run.stream_events():
                if event.type == "raw_response_event" and isinstance(
                    event.data, ResponseTextDeltaEvent
                ):
                    yield event.data.delta

        def cancel_run() -> None:
            if run is not None and not run.is_complete:
                logger.info("[model=%s] Cancelling unfinished generation", self.model_identifier)
                run.cancel()

        return FragmentStream(text_deltas, on_close=cancel_run)
