"""Tests for StreamRelay."""

from __future__ import annotations

import pytest

from src.common.errors import BackendError
from src.stream_relay.service import RelayOutcome, StreamRelay, relay
from tests.helpers import FakeInvoker


@pytest.mark.asyncio
async def test_concatenated_chunks_equal_the_buffered_reply() -> None:
    fragments = ["Cut the ", "intro at ", "0:05", " and keep the rest."]
    fake = FakeInvoker(fragments=fragments)
    stream_relay = StreamRelay(fake.generate_stream("prompt"))

    chunks = [chunk async for chunk in stream_relay.iter_bytes()]

    assert chunks == [fragment.encode() for fragment in fragments]
    assert b"".join(chunks).decode() == "".join(fragments)
    assert stream_relay.outcome == RelayOutcome.COMPLETED
    assert stream_relay.bytes_sent == len("".join(fragments).encode())
    assert fake.closed


@pytest.mark.asyncio
async def test_pulls_one_fragment_per_chunk() -> None:
    fake = FakeInvoker(fragments=["a", "b", "c"])
    chunks = relay(fake.generate_stream("prompt"))

    assert fake.pulled == 0
    assert await anext(chunks) == b"a"
    assert fake.pulled == 1
    assert await anext(chunks) == b"b"
    assert fake.pulled == 2

    await chunks.aclose()


@pytest.mark.asyncio
async def test_multibyte_characters_are_never_split() -> None:
    fragments = ["カット", "を提案", "します 🎬"]
    fake = FakeInvoker(fragments=fragments)

    chunks = [chunk async for chunk in relay(fake.generate_stream("prompt"))]

    assert [chunk.decode("utf-8") for chunk in chunks] == fragments


@pytest.mark.asyncio
async def test_mid_stream_failure_is_raised_not_swallowed() -> None:
    fake = FakeInvoker(fragments=["partial ", "reply"], fail_after=1)
    stream_relay = StreamRelay(fake.generate_stream("prompt"))
    received: list[bytes] = []

    with pytest.raises(BackendError, match="stream broke"):
        async for chunk in stream_relay.iter_bytes():
            received.append(chunk)

    assert received == [b"partial "]
    assert stream_relay.outcome == RelayOutcome.FAILED
    assert fake.closed


@pytest.mark.asyncio
async def test_prime_surfaces_failure_before_any_output() -> None:
    fake = FakeInvoker(fragments=["never sent"], fail_after=0)
    stream_relay = StreamRelay(fake.generate_stream("prompt"))

    with pytest.raises(BackendError):
        await stream_relay.prime()

    assert stream_relay.outcome == RelayOutcome.FAILED
    assert stream_relay.bytes_sent == 0


@pytest.mark.asyncio
async def test_primed_fragment_is_sent_first() -> None:
    fake = FakeInvoker(fragments=["first", "second"])
    stream_relay = StreamRelay(fake.generate_stream("prompt"))

    await stream_relay.prime()
    assert fake.pulled == 1

    chunks = [chunk async for chunk in stream_relay.iter_bytes()]
    assert chunks == [b"first", b"second"]


@pytest.mark.asyncio
async def test_consumer_leaving_early_closes_the_generation() -> None:
    fake = FakeInvoker(fragments=["a", "b", "c", "d"])
    stream_relay = StreamRelay(fake.generate_stream("prompt"))
    chunks = stream_relay.iter_bytes()

    await anext(chunks)
    await chunks.aclose()

    assert stream_relay.outcome == RelayOutcome.CANCELLED
    assert fake.closed
    assert fake.pulled == 1


@pytest.mark.asyncio
async def test_empty_reply_completes_with_no_chunks() -> None:
    fake = FakeInvoker(fragments=[])
    stream_relay = StreamRelay(fake.generate_stream("prompt"))

    await stream_relay.prime()
    chunks = [chunk async for chunk in stream_relay.iter_bytes()]

    assert chunks == []
    assert stream_relay.outcome == RelayOutcome.COMPLETED
