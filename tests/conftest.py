"""Shared test fixtures for puter-provider tests."""

from typing import Optional

import pytest

from puter_provider.adapters.client import ChatStream


# ─────────────────────────────────────────────────────────────────────
# MOCK DATA
# ─────────────────────────────────────────────────────────────────────

MOCK_TOKEN = "puter-test-token"
MOCK_API_URL = "https://api.puter.test"

KNOWN_MODEL = "gpt-4o"
UNKNOWN_MODEL = "acme/unlisted-model-9000"

PNG_DATA_URL = "data:image/png;base64,QUJD"


# ─────────────────────────────────────────────────────────────────────
# MOCK HELPERS
# ─────────────────────────────────────────────────────────────────────

async def async_iter(items):
    """Convert list to async iterator."""
    for item in items:
        yield item


class FakeGatewayClient:
    """
    Deterministic stand-in for the Puter client.

    Replays the same chunks on every chat() call and records each request.
    An error, if given, is raised after the chunks (mid-stream failure).
    """

    def __init__(
        self,
        texts: list[str],
        usage: Optional[dict] = None,
        error: Optional[Exception] = None,
    ):
        self.texts = texts
        self.usage = usage
        self.error = error
        self.calls: list[tuple[dict, dict]] = []

    async def chat(self, prompt: dict, options: dict) -> ChatStream:
        self.calls.append((prompt, options))
        return ChatStream(self._chunks())

    async def _chunks(self):
        for text in self.texts:
            yield {"type": "text", "text": text}
        if self.error is not None:
            raise self.error
        if self.usage is not None:
            yield {"type": "usage", "usage": self.usage}


class FailingChatClient:
    """Client whose chat() call itself raises."""

    def __init__(self, error: Exception):
        self.error = error

    async def chat(self, prompt: dict, options: dict) -> ChatStream:
        raise self.error


# ─────────────────────────────────────────────────────────────────────
# FIXTURES
# ─────────────────────────────────────────────────────────────────────

@pytest.fixture
def fake_client():
    """Client streaming "a", "b", "c" then usage 10/5."""
    return FakeGatewayClient(
        texts=["a", "b", "c"],
        usage={"prompt_tokens": 10, "completion_tokens": 5},
    )


@pytest.fixture
def sample_messages():
    """Return a short conversation with one image attachment."""
    return [
        {"role": "user", "content": "hello"},
        {"role": "assistant", "content": "Hi! How can I help?"},
        {
            "role": "user",
            "content": [
                {"type": "text", "text": "What is in this picture?"},
                {"type": "image_url", "image_url": {"url": PNG_DATA_URL}},
            ],
        },
    ]


@pytest.fixture(autouse=True)
def reset_picker_state():
    """Isolate tests from picker writes to the global configuration."""
    from puter_provider import state
    from puter_provider.config import ApiHandlerOptions

    state.set_configuration(ApiHandlerOptions())
    yield
    state.set_configuration(ApiHandlerOptions())
