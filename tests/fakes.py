from __future__ import annotations


class FakeAIClient:
    """AIClient double that records calls and echoes or raises."""

    def __init__(self, reply: str | None = None, error: Exception | None = None):
        self._reply = reply
        self._error = error
        self.chat_calls: list[tuple[str, list]] = []
        self.generate_calls: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.chat_calls) + len(self.generate_calls)

    async def chat(self, message: str, history) -> str:
        self.chat_calls.append((message, list(history)))
        if self._error is not None:
            raise self._error
        return self._reply if self._reply is not None else f"echo:{message}"

    async def generate(self, prompt: str) -> str:
        self.generate_calls.append(prompt)
        if self._error is not None:
            raise self._error
        return self._reply if self._reply is not None else f"echo:{prompt}"
