"""StreamRelay: turns a fragment stream into an outbound byte stream."""

import asyncio
import logging
from collections.abc import AsyncIterator
from enum import StrEnum, auto

from src.common.errors import BackendError
from src.model_invoker import FragmentStream

logger = logging.getLogger(__name__)


class RelayOutcome(StrEnum):
    """How a relay ended."""

    PENDING = auto()
    COMPLETED = auto()
    FAILED = auto()
    CANCELLED = auto()


class StreamRelay:
    """Relays fragments to a byte sink, one fragment per chunk.

    Flow control is pull-based: the next fragment is requested only after
    the consumer has taken the previous chunk, so a slow sink pauses the
    generation. A backend fault is re-raised rather than ending the byte
    stream, so the transport aborts instead of closing cleanly.
    """

    def __init__(self, fragments: FragmentStream, encoding: str = "utf-8") -> None:
        """Initialize the relay.

        Args:
            fragments: The fragment stream to relay. Owned by the relay from
                here on; it is closed when relaying ends.
            encoding: Text encoding for outbound chunks.
        """
        self._fragments = fragments
        self._encoding = encoding
        self._primed: str | None = None
        self.outcome = RelayOutcome.PENDING
        self.bytes_sent = 0

    async def prime(self) -> None:
        """Pull the first fragment before anything is sent.

        Lets a caller report a backend failure that happens before any output
        as a normal error response. The fragment is kept and sent first.

        Raises:
            BackendError: If the backend fails before the first fragment.
        """
        try:
            self._primed = await anext(self._fragments, None)
        except BackendError:
            self.outcome = RelayOutcome.FAILED
            raise

    async def iter_bytes(self) -> AsyncIterator[bytes]:
        """Yield each fragment as encoded bytes, in order."""
        try:
            if self._primed is not None:
                primed, self._primed = self._primed, None
                yield self._encode(primed)

            async for fragment in self._fragments:
                yield self._encode(fragment)
        except BackendError as e:
            self.outcome = RelayOutcome.FAILED
            logger.warning(
                "[relay] Stream failed after %d bytes: %s", self.bytes_sent, e
            )
            raise
        except (asyncio.CancelledError, GeneratorExit):
            self.outcome = RelayOutcome.CANCELLED
            logger.info("[relay] Consumer went away after %d bytes", self.bytes_sent)
            raise
        else:
            self.outcome = RelayOutcome.COMPLETED
            logger.info("[relay] Stream completed, %d bytes", self.bytes_sent)
        finally:
            await self._fragments.aclose()

    def _encode(self, fragment: str) -> bytes:
        # Whole fragments are encoded at once so no character is split
        chunk = fragment.encode(self._encoding)
        self.bytes_sent += len(chunk)
        return chunk


def relay(fragments: FragmentStream, encoding: str = "utf-8") -> AsyncIterator[bytes]:
    """Relay a fragment stream as an outbound byte stream."""
    return StreamRelay(fragments, encoding).iter_bytes()
