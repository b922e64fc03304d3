from __future__ import annotations

from types import SimpleNamespace

import pytest

from ai_gateway.services import streaming
from ai_gateway.services.streaming import split_tokens, stream_tokens


@pytest.fixture
def recorded_sleeps(monkeypatch) -> list[float]:
    sleeps: list[float] = []

    async def _fake_sleep(delay, result=None):
        sleeps.append(delay)
        return result

    monkeypatch.setattr(streaming, "asyncio", SimpleNamespace(sleep=_fake_sleep))
    return sleeps


def test_split_tokens_keeps_order_and_drops_whitespace():
    assert split_tokens("  hello \n world\tfoo ") == ["hello", "world", "foo"]
    assert split_tokens("") == []


@pytest.mark.asyncio
async def test_stream_yields_each_word_after_a_delay(recorded_sleeps):
    emitted: list[str] = []
    async for token in stream_tokens("hello world foo", delay_seconds=0.05):
        # the delay for this token has already happened
        assert len(recorded_sleeps) == len(emitted) + 1
        emitted.append(token)

    assert emitted == ["hello", "world", "foo"]
    assert recorded_sleeps == [0.05, 0.05, 0.05]
    assert " ".join(emitted) == "hello world foo"


@pytest.mark.asyncio
async def test_empty_reply_emits_nothing(recorded_sleeps):
    emitted = [token async for token in stream_tokens("   ")]

    assert emitted == []
    assert recorded_sleeps == []


@pytest.mark.asyncio
async def test_stream_stops_once_receiver_disconnects(recorded_sleeps):
    connected = True

    async def _is_disconnected() -> bool:
        return not connected

    emitted: list[str] = []
    async for token in stream_tokens(
        "one two three four", delay_seconds=0.01, is_disconnected=_is_disconnected
    ):
        emitted.append(token)
        if len(emitted) == 2:
            connected = False

    assert emitted == ["one", "two"]
    assert len(recorded_sleeps) == 2
