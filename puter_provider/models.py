"""
Static catalog of models reachable through the Puter gateway.

The catalog is built once at import time and exposed read-only through
lookup() / default_model_id(). Puter bills the end user directly, so every
entry carries zero prices.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from puter_provider.config import FALLBACK_MAX_TOKENS


class ModelInfo(BaseModel):
    """Capability metadata for one model identifier."""
    model_config = ConfigDict(frozen=True)

    max_tokens: int = Field(ge=0)
    context_window: int = Field(ge=0)
    supports_images: bool = False
    supports_prompt_cache: bool = False
    input_price: float = Field(default=0.0, ge=0)
    output_price: float = Field(default=0.0, ge=0)
    description: str = ""


def _info(
    max_tokens: int,
    context_window: int,
    images: bool,
    cache: bool,
    description: str,
) -> ModelInfo:
    return ModelInfo(
        max_tokens=max_tokens,
        context_window=context_window,
        supports_images=images,
        supports_prompt_cache=cache,
        description=description,
    )


# ─────────────────────────────────────────────────────────────────────
# CATALOG
# ─────────────────────────────────────────────────────────────────────

DEFAULT_MODEL_ID: str = "gpt-5-2025-08-07"

PUTER_MODELS: Mapping[str, ModelInfo] = MappingProxyType({
    # GPT-5 family
    "gpt-5-2025-08-07": _info(8192, 272000, True, True,
        "GPT-5 - Advanced reasoning model from OpenAI with 272K context window"),
    "gpt-5-mini-2025-08-07": _info(8192, 272000, True, True,
        "GPT-5 Mini - Efficient version of GPT-5 for faster responses"),
    "gpt-5-nano-2025-08-07": _info(8192, 272000, True, True,
        "GPT-5 Nano - Lightweight version of GPT-5 optimized for speed"),

    # Claude
    "claude": _info(4096, 100000, False, False,
        "Anthropic's Claude - Advanced conversational AI"),
    "claude-sonnet-4": _info(8192, 200000, True, True,
        "Claude Sonnet 4 - Latest Sonnet model with advanced reasoning"),
    "claude-opus-4": _info(8192, 200000, True, True,
        "Claude Opus 4 - Most powerful Claude model for complex tasks"),
    "claude-3-7-sonnet": _info(8192, 200000, True, True,
        "Claude 3.7 Sonnet - Latest Claude model with extended thought"),
    "claude-3-5-sonnet": _info(8192, 200000, True, True,
        "Claude 3.5 Sonnet - Balanced high-performance model"),

    # OpenAI
    "gpt-4o-mini": _info(16384, 128000, True, True,
        "GPT-4o Mini - Fast and efficient GPT-4 variant"),
    "gpt-4o": _info(4096, 128000, True, True,
        "GPT-4o - Multimodal GPT-4 model with vision capabilities"),
    "o1": _info(100000, 200000, True, False,
        "OpenAI o1 - Reasoning-optimized model"),
    "o1-mini": _info(65536, 128000, True, True,
        "OpenAI o1 Mini - Faster version of o1 for reasoning tasks"),
    "o1-pro": _info(100000, 200000, True, True,
        "OpenAI o1 Pro - Enhanced reasoning capabilities"),
    "o3": _info(100000, 200000, True, True,
        "OpenAI o3 - Latest reasoning model with advanced capabilities"),
    "o3-mini": _info(100000, 200000, False, True,
        "OpenAI o3 Mini - Efficient version of o3 for faster responses"),
    "o4-mini": _info(100000, 200000, True, True,
        "OpenAI o4 Mini - Advanced mini model with reasoning capabilities"),
    "gpt-4.1": _info(32768, 1048576, True, True,
        "GPT-4.1 - Large context window model for complex tasks"),
    "gpt-4.1-mini": _info(32768, 1048576, True, True,
        "GPT-4.1 Mini - Efficient version with large context"),
    "gpt-4.1-nano": _info(32768, 1048576, True, True,
        "GPT-4.1 Nano - Lightweight version with large context"),
    "gpt-4.5-preview": _info(32768, 128000, True, False,
        "GPT-4.5 Preview - Preview of next-gen GPT model"),

    # DeepSeek
    "deepseek-chat": _info(8000, 128000, False, True,
        "DeepSeek Chat - Advanced conversational AI"),
    "deepseek-reasoner": _info(8000, 128000, False, True,
        "DeepSeek Reasoner - Specialized for reasoning tasks"),

    # Google Gemini
    "google/gemini-2.5-flash-preview": _info(8192, 1048576, True, False,
        "Gemini 2.5 Flash Preview - Fast multimodal model"),
    "google/gemini-2.5-flash-preview:thinking": _info(65536, 1048576, False, False,
        "Gemini 2.5 Flash Preview with thinking - Advanced reasoning"),
    "google/gemini-2.0-flash-lite-001": _info(8192, 1048576, True, False,
        "Gemini 2.0 Flash Lite - Lightweight flash model"),
    "google/gemini-2.0-flash-001": _info(8192, 1048576, True, True,
        "Gemini 2.0 Flash - Balanced performance model"),
    "google/gemini-pro-1.5": _info(8192, 2097152, True, False,
        "Gemini Pro 1.5 - Large context window model"),

    # Meta Llama
    "meta-llama/llama-4-maverick": _info(8192, 131072, True, False,
        "Llama 4 Maverick - Meta's multimodal model"),
    "meta-llama/llama-4-scout": _info(8192, 131072, True, False,
        "Llama 4 Scout - Efficient multimodal model"),
    "meta-llama/llama-3.3-70b-instruct": _info(4096, 131072, False, False,
        "Llama 3.3 70B - Large parameter instruction-tuned model"),
    "meta-llama/llama-3.2-3b-instruct": _info(4096, 131072, False, False,
        "Llama 3.2 3B - Efficient instruction-tuned model"),
    "meta-llama/llama-3.2-1b-instruct": _info(4096, 32768, False, False,
        "Llama 3.2 1B - Lightweight instruction-tuned model"),
    "meta-llama/llama-3.1-8b-instruct": _info(8192, 128000, False, False,
        "Llama 3.1 8B - Mid-range instruction-tuned model"),
    "meta-llama/llama-3.1-405b-instruct": _info(4096, 131072, False, False,
        "Llama 3.1 405B - Very large parameter model"),
    "meta-llama/llama-3.1-70b-instruct": _info(8192, 128000, False, False,
        "Llama 3.1 70B - Large instruction-tuned model"),
    "meta-llama/llama-3-70b-instruct": _info(8192, 8192, False, False,
        "Llama 3 70B - Original Llama 3 large model"),

    # Mistral
    "mistral-large-latest": _info(131000, 131000, False, False,
        "Mistral Large - Latest large model"),
    "codestral-latest": _info(256000, 256000, False, False,
        "Codestral - Latest coding assistant model"),
    "google/gemma-2-27b-it": _info(4096, 8192, False, False,
        "Gemma 2 27B - Google's instruction-tuned model"),

    # xAI
    "grok-beta": _info(8192, 131072, False, False,
        "Grok Beta - xAI's helpful and maximally truthful AI"),
    "grok4": _info(8192, 262144, True, True,
        "Grok-4 - xAI's latest model with enhanced reasoning"),
})

# Identifiers offered by the picker dropdown, in display order
PICKER_MODEL_IDS: tuple[str, ...] = (
    "gpt-4o-mini",
    "gpt-4o",
    "o1",
    "o1-mini",
    "o1-pro",
    "o3",
    "o3-mini",
    "o4-mini",
    "gpt-4.1",
    "gpt-4.1-mini",
    "gpt-4.1-nano",
    "gpt-4.5-preview",
    "claude-sonnet-4",
    "claude-opus-4",
    "claude-3-7-sonnet",
    "claude-3-5-sonnet",
    "deepseek-chat",
    "deepseek-reasoner",
    "google/gemini-2.5-flash-preview",
    "google/gemini-2.5-flash-preview:thinking",
    "google/gemini-2.0-flash-lite-001",
    "google/gemini-2.0-flash-001",
    "google/gemini-pro-1.5",
    "meta-llama/llama-4-maverick",
    "meta-llama/llama-4-scout",
    "meta-llama/llama-3.3-70b-instruct",
    "meta-llama/llama-3.2-3b-instruct",
    "meta-llama/llama-3.2-1b-instruct",
    "meta-llama/llama-3.1-8b-instruct",
    "meta-llama/llama-3.1-405b-instruct",
    "meta-llama/llama-3.1-70b-instruct",
    "meta-llama/llama-3-70b-instruct",
    "mistral-large-latest",
    "codestral-latest",
    "google/gemma-2-27b-it",
    "grok-beta",
)


# ─────────────────────────────────────────────────────────────────────
# LOOKUP
# ─────────────────────────────────────────────────────────────────────

def lookup(model_id: str) -> Optional[ModelInfo]:
    """Return catalog metadata for model_id, or None if it is not listed."""
    return PUTER_MODELS.get(model_id)


def default_model_id() -> str:
    """Identifier used when no caller-supplied identifier is available."""
    return DEFAULT_MODEL_ID


def picker_model_ids() -> list[str]:
    """Model identifiers offered by the picker, in display order."""
    return list(PICKER_MODEL_IDS)


def fallback_model_info(model_id: str) -> ModelInfo:
    """
    Synthesize conservative metadata for an identifier missing from the catalog.

    The gateway accepts identifiers we don't list, so an unknown id is
    never an error on our side.
    """
    return ModelInfo(
        max_tokens=FALLBACK_MAX_TOKENS,
        context_window=128000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=0,
        output_price=0,
        description=f"Puter AI model: {model_id}",
    )


def resolve_model_info(model_id: str) -> ModelInfo:
    """Catalog metadata for model_id, falling back to a synthesized entry."""
    return lookup(model_id) or fallback_model_info(model_id)
