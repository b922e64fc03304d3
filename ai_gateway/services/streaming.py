"""Simulated streaming of an already complete model reply.

Gemini is called once through the regular (non-streaming) generateContent
endpoint. The finished text is then cut into whitespace-delimited tokens
which are emitted one at a time with a fixed pause in front of each, so a
client listening on an event stream sees the reply "typed out". No
incremental generation happens and time-to-first-token is no better than
the plain chat endpoint.
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_DELAY_SECONDS = 0.05


def split_tokens(text: str) -> list[str]:
    return text.split()


async def stream_tokens(
    text: str,
    delay_seconds: float = DEFAULT_CHUNK_DELAY_SECONDS,
    is_disconnected: Callable[[], Awaitable[bool]] | None = None,
) -> AsyncIterator[str]:
    """Yield the tokens of ``text`` in order, sleeping before each one.

    ``is_disconnected`` is polled before every token; once it reports True
    the generator returns without sleeping again. Cancelling the consuming
    task interrupts the pending sleep.
    """
    tokens = split_tokens(text)
    for index, token in enumerate(tokens):
        if is_disconnected is not None and await is_disconnected():
            logger.info("Stream receiver gone after %d/%d tokens", index, len(tokens))
            return
        await asyncio.sleep(delay_seconds)
        yield token
