"""
PuterHandler - streams chat replies through the Puter AI gateway.

Puter multiplexes many upstream providers behind one chat call, so this
handler is pure translation:
- Host messages (text / image_url parts) -> Puter prompt object
- Puter chunks -> TextEvent, trailing usage -> UsageEvent

The gateway client is acquired in the background. create_message() waits
for it on a one-shot readiness event with a bounded timeout.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, AsyncGenerator, Optional, Sequence, Union

from puter_provider.adapters.client import (
    ClientProvider,
    GatewayClient,
    puter_http_provider,
)
from puter_provider.adapters.errors import (
    ClientAcquisitionFailed,
    ClientNotInitialized,
    GatewayError,
)
from puter_provider.adapters.schema import ResolvedModel, StreamEvent, TextEvent, UsageEvent
from puter_provider.config import (
    DEFAULT_TEMPERATURE,
    FALLBACK_MAX_TOKENS,
    FALLBACK_MODEL_ID,
    READINESS_POLL_ATTEMPTS,
    READINESS_POLL_INTERVAL_SECONDS,
    ApiHandlerOptions,
    Message,
)
from puter_provider.models import ModelInfo, resolve_model_info

logger = logging.getLogger(__name__)


class ClientState(str, Enum):
    """Lifecycle of the gateway client handle."""
    UNINITIALIZED = "uninitialized"
    ACQUIRING = "acquiring"
    READY = "ready"
    FAILED = "failed"


# ─────────────────────────────────────────────────────────────────────
# MESSAGE TRANSLATION
# ─────────────────────────────────────────────────────────────────────

def parse_data_url(url: str) -> tuple[str, str]:
    """
    Split a data URL into (media_type, base64_data).

    "data:image/png;base64,QUJD" -> ("image/png", "QUJD")

    The media type is the text between the first ":" and the next ":" or ";".

    Raises:
        ValueError: If url has no ":" before its first ";" or no ","
    """
    header, comma, data = url.partition(",")
    fields = header.split(";")[0].split(":")
    if not comma or len(fields) < 2:
        raise ValueError(f"Not a base64 data URL: {url[:40]!r}")
    return fields[1], data


def _convert_part(part: dict) -> dict:
    kind = part.get("type")
    if kind == "text":
        return {"type": "text", "text": part.get("text", "")}
    if kind == "image_url":
        image_url = part.get("image_url")
        url = image_url.get("url", "") if isinstance(image_url, dict) else str(image_url or "")
        media_type, data = parse_data_url(url)
        return {
            "type": "image",
            "source": {"type": "base64", "media_type": media_type, "data": data},
        }
    # Unknown part kinds go through untouched
    return part


def convert_messages_to_prompt(
    system_prompt: str,
    messages: Sequence[Union[Message, dict]],
) -> dict:
    """Convert host messages into Puter's {"system", "messages"} prompt object."""
    converted = []
    for raw in messages:
        message = raw if isinstance(raw, Message) else Message.model_validate(raw)
        if isinstance(message.content, str):
            content = [{"type": "text", "text": message.content}]
        else:
            content = [_convert_part(part) for part in message.content]
        converted.append({"role": message.role, "content": content})

    return {"system": system_prompt, "messages": converted}


def _field(obj: Any, name: str) -> Any:
    """Read name from a dict chunk or an attribute-style chunk."""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


# ─────────────────────────────────────────────────────────────────────
# HANDLER
# ─────────────────────────────────────────────────────────────────────

class PuterHandler:
    """
    Puter implementation of the ApiHandler protocol.

    Design decisions:
    - Client injected: pass a ready client, or a provider coroutine that
      builds one (defaults to puter_http_provider)
    - Non-blocking construction: acquisition runs as a background task;
      failures are recorded and surfaced by create_message() once the
      readiness budget has run out
    - One event loop at a time: acquisition is bound to the loop it started
      on; a handler that is not READY restarts acquisition on a new loop
    - No retries: gateway errors surface as GatewayError

    Usage:
        handler = PuterHandler(ApiHandlerOptions(plan_mode_api_model_id="gpt-4o"))
        async for event in handler.create_message("Be brief.", messages):
            ...
    """

    def __init__(
        self,
        options: ApiHandlerOptions,
        client: Optional[GatewayClient] = None,
        client_provider: Optional[ClientProvider] = None,
        poll_interval_seconds: float = READINESS_POLL_INTERVAL_SECONDS,
        poll_attempts: int = READINESS_POLL_ATTEMPTS,
    ):
        """
        Initialize handler and start acquiring the gateway client.

        Args:
            options: Host configuration (per-mode model ids, gateway settings)
            client: Ready-made gateway client; skips acquisition entirely
            client_provider: Coroutine factory producing the client
            poll_interval_seconds: Readiness granularity
            poll_attempts: Readiness budget; total wait is interval × attempts
        """
        self._options = options
        self._readiness_timeout = poll_interval_seconds * poll_attempts
        self._ready = asyncio.Event()
        self._client: Optional[GatewayClient] = None
        self._acquisition_error: Optional[BaseException] = None
        self._acquisition_task: Optional[asyncio.Task] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._provider = client_provider or puter_http_provider(options)

        if client is not None:
            self._client = client
            self._state = ClientState.READY
            self._ready.set()
        else:
            self._state = ClientState.UNINITIALIZED
            self._start_acquisition()

    @property
    def client_state(self) -> ClientState:
        return self._state

    # ─────────────────────────────────────────────────────────────────
    # Client acquisition
    # ─────────────────────────────────────────────────────────────────

    def _start_acquisition(self) -> None:
        if self._state is not ClientState.UNINITIALIZED:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Constructed outside an event loop: first create_message() starts it
            return
        self._state = ClientState.ACQUIRING
        self._loop = loop
        self._acquisition_task = loop.create_task(self._acquire())

    def _reset_acquisition(self) -> None:
        """Forget a pending or failed acquisition so the next gate starts over."""
        self._ready = asyncio.Event()
        self._state = ClientState.UNINITIALIZED
        self._acquisition_error = None
        self._acquisition_task = None
        self._loop = None

    async def _acquire(self) -> None:
        logger.info("Acquiring Puter client...")
        try:
            client = await self._provider()
        except asyncio.CancelledError as e:
            self._acquisition_error = e
            self._state = ClientState.FAILED
            logger.warning("Puter client acquisition cancelled")
            raise
        except Exception as e:
            self._acquisition_error = e
            self._state = ClientState.FAILED
            logger.warning(f"Puter client acquisition failed: {e}")
        else:
            self._client = client
            self._state = ClientState.READY
            logger.info("Puter client ready")
        finally:
            self._ready.set()

    async def _ensure_client_ready(self) -> GatewayClient:
        """
        Readiness gate: wait (without blocking the loop) for the client.

        Only a READY handle passes. Any other outcome is raised after the
        full budget has elapsed.

        Raises:
            ClientAcquisitionFailed: Acquisition finished with an error
            ClientNotInitialized: Budget exhausted while still acquiring
        """
        loop = asyncio.get_running_loop()
        if (
            self._state is not ClientState.READY
            and self._loop is not None
            and self._loop is not loop
        ):
            logger.info("Event loop changed; restarting Puter client acquisition")
            self._reset_acquisition()
        self._start_acquisition()

        deadline = loop.time() + self._readiness_timeout
        if not self._ready.is_set():
            try:
                await asyncio.wait_for(self._ready.wait(), timeout=self._readiness_timeout)
            except asyncio.TimeoutError as e:
                raise ClientNotInitialized(
                    f"Puter client not initialized after {self._readiness_timeout:.1f}s"
                ) from e

        if self._state is ClientState.READY:
            return self._client

        remaining = deadline - loop.time()
        if remaining > 0:
            await asyncio.sleep(remaining)

        if self._state is ClientState.FAILED:
            cause = self._acquisition_error
            reason = str(cause) or type(cause).__name__
            raise ClientAcquisitionFailed(
                f"Failed to initialize Puter client: {reason}"
            ) from cause

        raise ClientNotInitialized(
            f"Puter client not initialized after {self._readiness_timeout:.1f}s"
        )

    # ─────────────────────────────────────────────────────────────────
    # Model resolution
    # ─────────────────────────────────────────────────────────────────

    def resolve_model_id(self) -> str:
        """Plan-mode id, else act-mode id, else the fixed fallback."""
        return (
            self._options.plan_mode_api_model_id
            or self._options.act_mode_api_model_id
            or FALLBACK_MODEL_ID
        )

    def resolve_model_info(self) -> ModelInfo:
        """Catalog entry for the resolved id, or synthesized defaults."""
        return resolve_model_info(self.resolve_model_id())

    def get_model(self) -> ResolvedModel:
        return ResolvedModel(id=self.resolve_model_id(), info=self.resolve_model_info())

    # ─────────────────────────────────────────────────────────────────
    # Streaming
    # ─────────────────────────────────────────────────────────────────

    async def create_message(
        self,
        system_prompt: str,
        messages: Sequence[Union[Message, dict]],
    ) -> AsyncGenerator[StreamEvent, None]:
        """
        Stream a reply from Puter.

        Yields:
            TextEvent per non-empty chunk, then one UsageEvent if Puter
            reported usage

        Raises:
            ClientNotInitialized / ClientAcquisitionFailed: Before any request
            GatewayError: Dispatch or mid-stream failure
        """
        client = await self._ensure_client_ready()

        prompt = convert_messages_to_prompt(system_prompt, messages)
        model = self.get_model()
        options = {
            "model": model.id,
            "stream": True,
            "max_tokens": model.info.max_tokens or FALLBACK_MAX_TOKENS,
            "temperature": DEFAULT_TEMPERATURE,
        }
        logger.debug(f"Puter chat: model={model.id} messages={len(prompt['messages'])}")

        chunks = None
        try:
            response = await client.chat(prompt, options)
            chunks = response.__aiter__()
            async for chunk in chunks:
                text = _field(chunk, "text")
                if text:
                    yield TextEvent(text=text)
            usage = _field(response, "usage")
        except Exception as e:
            logger.error(f"Puter API error for {model.id}: {e}")
            raise GatewayError(f"Puter API error: {e}") from e
        finally:
            # Releases the HTTP stream when the consumer stops early
            aclose = getattr(chunks, "aclose", None)
            if aclose is not None:
                await aclose()

        if usage:
            yield UsageEvent(
                input_tokens=_field(usage, "prompt_tokens") or 0,
                output_tokens=_field(usage, "completion_tokens") or 0,
                total_cost=0,
            )
