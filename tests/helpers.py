"""Shared test helpers and stub classes.

Import from here instead of duplicating these classes in individual test files.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence

from src.common.errors import BackendError
from src.model_invoker import FragmentStream


class FakeInvoker:
    """Stands in for ModelInvoker without touching the network."""

    def __init__(
        self,
        text: str = "",
        fragments: Sequence[str] | None = None,
        fail_with: Exception | None = None,
        fail_after: int | None = None,
    ) -> None:
        self.text = text
        self.fragments = list(fragments) if fragments is not None else [text]
        self.fail_with = fail_with
        self.fail_after = fail_after
        self.prompts: list[str] = []
        self.pulled = 0
        self.closed = False

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.fail_with is not None:
            raise self.fail_with
        return self.text

    def generate_stream(self, prompt: str) -> FragmentStream:
        self.prompts.append(prompt)

        async def source() -> AsyncIterator[str]:
            for index, fragment in enumerate(self.fragments):
                if self.fail_after is not None and index >= self.fail_after:
                    raise self.fail_with or BackendError("stream broke")
                self.pulled += 1
                yield fragment
            if self.fail_after is not None and self.fail_after >= len(self.fragments):
                raise self.fail_with or BackendError("stream broke")

        def close() -> None:
            self.closed = True

        return FragmentStream(source, on_close=close)
