"""Lazy, single-pass sequence of text fragments from one generation."""

import logging
from collections.abc import AsyncIterator, Callable

from src.common.errors import BackendError

logger = logging.getLogger(__name__)


class FragmentStream:
    """Async iterator over the text fragments of one streamed generation.

    The source is opened on the first pull, so nothing reaches the backend
    until a consumer asks for output. Empty fragments are skipped. Once the
    stream is exhausted, closed or has failed it stays finished; it cannot be
    restarted.
    """

    def __init__(
        self,
        open_source: Callable[[], AsyncIterator[str]],
        on_close: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the fragment stream.

        Args:
            open_source: Called once, on first pull, to start the generation.
            on_close: Called once when the stream finishes for any reason.
                Used to cancel a generation nobody is reading any more.
        """
        self._open_source = open_source
        self._on_close = on_close
        self._source: AsyncIterator[str] | None = None
        self._closed = False
        self.fragment_count = 0

    @property
    def closed(self) -> bool:
        """Whether the stream has finished, normally or not."""
        return self._closed

    def __aiter__(self) -> "FragmentStream":
        return self

    async def __anext__(self) -> str:
        if self._closed:
            raise StopAsyncIteration
        if self._source is None:
            self._source = self._open_source()

        while True:
            try:
                fragment = await anext(self._source)
            except StopAsyncIteration:
                await self.aclose()
                raise
            except BackendError:
                await self.aclose()
                raise
            except Exception as e:
                await self.aclose()
                raise BackendError(str(e) or type(e).__name__) from e

            if fragment:
                self.fragment_count += 1
                return fragment

    async def aclose(self) -> None:
        """Stop the stream and release the underlying generation."""
        if self._closed:
            return
        self._closed = True

        source_aclose = getattr(self._source, "aclose", None)
        if source_aclose is not None:
            try:
                await source_aclose()
            except Exception:
                logger.warning("[stream] Error while closing fragment source", exc_info=True)

        if self._on_close is not None:
            self._on_close()
