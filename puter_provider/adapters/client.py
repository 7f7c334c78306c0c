"""
Puter gateway client and the providers that hand it to PuterHandler.

PuterHandler never builds its own client: it receives a provider coroutine
and awaits it in the background. Two providers exist:
- static_client_provider: a client handle that already exists
- puter_http_provider: builds a PuterClient against the well-known Puter API
  origin and resolves only once the gateway has confirmed the session
"""

import json
import logging
from typing import AsyncIterable, AsyncIterator, Awaitable, Callable, Optional, Protocol

import httpx

from puter_provider.adapters.errors import ClientAcquisitionFailed
from puter_provider.config import (
    PROBE_TIMEOUT_SECONDS,
    REQUEST_TIMEOUT_SECONDS,
    ApiHandlerOptions,
    get_puter_auth_token,
)

logger = logging.getLogger(__name__)

CHAT_INTERFACE = "puter-chat-completion"
CHAT_DRIVER = "ai-chat"


class PuterClientError(Exception):
    """Puter API transport or protocol error."""
    pass


class ChatStream:
    """
    Async iterable over gateway chunks.

    Chunks are dicts that may carry "text" and/or "usage". The most recent
    usage seen is kept on .usage so callers can read it after iterating.
    """

    def __init__(self, chunks: AsyncIterable[dict], usage: Optional[dict] = None):
        self._chunks = chunks
        self.usage = usage

    async def __aiter__(self) -> AsyncIterator[dict]:
        try:
            async for chunk in self._chunks:
                if chunk.get("usage"):
                    self.usage = chunk["usage"]
                yield chunk
        finally:
            aclose = getattr(self._chunks, "aclose", None)
            if aclose is not None:
                await aclose()


class GatewayClient(Protocol):
    """Anything exposing the gateway's streaming chat call."""

    async def chat(self, prompt: dict, options: dict) -> ChatStream:
        ...


ClientProvider = Callable[[], Awaitable[GatewayClient]]


def _error_message(body: bytes) -> str:
    """Pull a readable message out of a Puter error body."""
    try:
        data = json.loads(body)
    except ValueError:
        return body.decode(errors="replace")[:500]
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    if isinstance(data, dict) and data.get("message"):
        return data["message"]
    return str(body[:500])


def build_chat_payload(prompt: dict, options: dict) -> dict:
    """
    Build the /drivers/call body for a chat completion.

    The system prompt travels as a leading system message.
    """
    messages = list(prompt.get("messages", []))
    system = prompt.get("system")
    if system:
        messages.insert(0, {"role": "system", "content": system})

    args = {"messages": messages}
    args.update(options)

    return {
        "interface": CHAT_INTERFACE,
        "driver": CHAT_DRIVER,
        "method": "complete",
        "args": args,
    }


class PuterClient:
    """
    HTTP client for the Puter AI gateway.

    Streaming responses are newline-delimited JSON objects such as
    {"type": "text", "text": "..."}; usage arrives on its own line.
    """

    def __init__(
        self,
        auth_token: str,
        api_url: str,
        timeout_seconds: float = REQUEST_TIMEOUT_SECONDS,
    ):
        self._auth_token = auth_token
        self.api_url = api_url.rstrip("/")
        self._timeout = timeout_seconds

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self._auth_token}",
            "Content-Type": "application/json",
        }

    async def whoami(self) -> dict:
        """Fetch the account behind the auth token (used as a readiness probe)."""
        try:
            async with httpx.AsyncClient(timeout=PROBE_TIMEOUT_SECONDS) as client:
                response = await client.get(f"{self.api_url}/whoami", headers=self._headers())
        except httpx.HTTPError as e:
            raise PuterClientError(f"Puter unreachable at {self.api_url}: {e}") from e

        if response.status_code >= 400:
            raise PuterClientError(
                f"Puter rejected session ({response.status_code}): "
                f"{_error_message(response.content)}"
            )
        return response.json()

    async def chat(self, prompt: dict, options: dict) -> ChatStream:
        """
        Start a chat completion.

        Args:
            prompt: {"system": str, "messages": [...]}
            options: model, stream, max_tokens, temperature

        Returns:
            ChatStream; the HTTP request is made when iteration starts
        """
        payload = build_chat_payload(prompt, options)
        return ChatStream(self._stream_chunks(payload, options.get("model", "")))

    async def _stream_chunks(self, payload: dict, model_id: str) -> AsyncIterator[dict]:
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                async with client.stream(
                    "POST",
                    f"{self.api_url}/drivers/call",
                    json=payload,
                    headers=self._headers(),
                ) as response:
                    if response.status_code >= 400:
                        error_body = await response.aread()
                        raise PuterClientError(
                            f"Puter API error for {model_id}: {_error_message(error_body)}"
                        )

                    async for line in response.aiter_lines():
                        line = line.strip()
                        if not line:
                            continue
                        try:
                            chunk = json.loads(line)
                        except json.JSONDecodeError:
                            logger.debug(f"Skipping non-JSON line from Puter: {line[:80]}")
                            continue
                        if not isinstance(chunk, dict):
                            continue
                        if chunk.get("success") is False:
                            raise PuterClientError(
                                f"Puter API error for {model_id}: "
                                f"{_error_message(line.encode())}"
                            )
                        yield chunk

        except httpx.TimeoutException as e:
            raise PuterClientError(f"Puter timeout for {model_id}: {e}") from e
        except httpx.HTTPError as e:
            raise PuterClientError(f"Puter HTTP error for {model_id}: {e}") from e


# ─────────────────────────────────────────────────────────────────────
# PROVIDERS
# ─────────────────────────────────────────────────────────────────────

def static_client_provider(client: GatewayClient) -> ClientProvider:
    """Provider for a client handle the host already holds."""
    async def provide() -> GatewayClient:
        return client
    return provide


def puter_http_provider(options: ApiHandlerOptions) -> ClientProvider:
    """
    Provider that initializes a PuterClient from the Puter API origin.

    Resolves only after GET /whoami succeeds with the configured token.

    Raises (when awaited):
        ClientAcquisitionFailed: No token, gateway unreachable, or session rejected
    """
    async def provide() -> PuterClient:
        token = options.puter_auth_token or get_puter_auth_token()
        if not token:
            raise ClientAcquisitionFailed(
                "Puter auth token required. "
                "Provide puter_auth_token option or set PUTER_AUTH_TOKEN environment variable."
            )

        client = PuterClient(auth_token=token, api_url=options.puter_api_url)
        try:
            user = await client.whoami()
        except PuterClientError as e:
            raise ClientAcquisitionFailed(f"Failed to initialize Puter client: {e}") from e

        logger.info(f"Puter session ready for {user.get('username', 'unknown user')}")
        return client

    return provide
