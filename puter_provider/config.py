"""
Configuration constants and Pydantic models for puter-provider.
"""

import os
from typing import Literal, Optional, Union

from pydantic import BaseModel


# ─────────────────────────────────────────────────────────────────────
# DEFAULTS
# ─────────────────────────────────────────────────────────────────────

DEFAULT_TEMPERATURE: float = 0.7
FALLBACK_MAX_TOKENS: int = 8192

# Used when neither operating mode has a model selected
FALLBACK_MODEL_ID: str = "gpt-5-nano"

PUTER_API_URL: str = "https://api.puter.com"


# ─────────────────────────────────────────────────────────────────────
# INTERNAL CONSTANTS
# ─────────────────────────────────────────────────────────────────────

# Readiness gate: total wait is interval × attempts (5 seconds)
READINESS_POLL_INTERVAL_SECONDS: float = 0.1
READINESS_POLL_ATTEMPTS: int = 50

PROBE_TIMEOUT_SECONDS: float = 10.0
REQUEST_TIMEOUT_SECONDS: float = 300.0


Mode = Literal["plan", "act"]

MODE_FIELDS: dict[str, str] = {
    "plan": "plan_mode_api_model_id",
    "act": "act_mode_api_model_id",
}


# ─────────────────────────────────────────────────────────────────────
# ENVIRONMENT LOADING
# ─────────────────────────────────────────────────────────────────────

def get_puter_api_url() -> str:
    """
    Get the Puter API origin from environment or default.

    Set PUTER_API_URL in .env to point at a self-hosted Puter instance.
    """
    return os.environ.get("PUTER_API_URL", PUTER_API_URL).rstrip("/")


def get_puter_auth_token() -> str | None:
    """Get the Puter auth token from environment."""
    return os.environ.get("PUTER_AUTH_TOKEN")


def get_gradio_port() -> int:
    """
    Get Gradio server port from environment or default.

    Returns port from GRADIO_PORT env var, or 7860 as default.
    """
    port_str = os.environ.get("GRADIO_PORT", "7860")
    try:
        return int(port_str)
    except ValueError:
        return 7860


# ─────────────────────────────────────────────────────────────────────
# DATA MODELS
# ─────────────────────────────────────────────────────────────────────

class ApiHandlerOptions(BaseModel):
    """Host configuration consumed by the Puter handler and written by the picker.

    Each operating mode carries its own preferred model identifier.
    An empty string means "no selection" (the picker's placeholder option).
    """
    plan_mode_api_model_id: Optional[str] = None
    act_mode_api_model_id: Optional[str] = None
    puter_api_url: str = PUTER_API_URL
    puter_auth_token: Optional[str] = None

    def model_id_for_mode(self, mode: Mode) -> str:
        """Return the model id stored for the given mode ("" if unset)."""
        return getattr(self, MODE_FIELDS[mode]) or ""


def load_api_options_from_env() -> ApiHandlerOptions:
    """
    Build ApiHandlerOptions from environment variables.

    Reads PUTER_PLAN_MODE_MODEL_ID, PUTER_ACT_MODE_MODEL_ID,
    PUTER_API_URL and PUTER_AUTH_TOKEN.
    """
    return ApiHandlerOptions(
        plan_mode_api_model_id=os.environ.get("PUTER_PLAN_MODE_MODEL_ID") or None,
        act_mode_api_model_id=os.environ.get("PUTER_ACT_MODE_MODEL_ID") or None,
        puter_api_url=get_puter_api_url(),
        puter_auth_token=get_puter_auth_token(),
    )


class Message(BaseModel):
    """A single message in a conversation.

    Content can be:
    - str: Plain text message
    - list: Content parts, e.g. {"type": "text", ...} or {"type": "image_url", ...}
    """
    role: Literal["user", "assistant"]
    content: Union[str, list[dict]]

    def get_text(self) -> str:
        """Extract text content from message (for display)."""
        if isinstance(self.content, str):
            return self.content
        for part in self.content:
            if part.get("type") == "text":
                return part.get("text", "")
        return ""

    def has_image(self) -> bool:
        """Check if message contains an image."""
        if isinstance(self.content, str):
            return False
        return any(p.get("type") == "image_url" for p in self.content)
