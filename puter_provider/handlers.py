"""
Model picker event handlers.

Reads identifiers and metadata from the catalog and writes the selection
into host configuration. Never talks to the gateway.
"""

import logging

from puter_provider import state
from puter_provider.config import MODE_FIELDS, ApiHandlerOptions, Mode
from puter_provider.models import ModelInfo, default_model_id, resolve_model_info
from puter_provider.ui_helpers import format_model_info

logger = logging.getLogger(__name__)


def handle_mode_field_change(
    config: ApiHandlerOptions,
    mode: Mode,
    value: str,
) -> ApiHandlerOptions:
    """
    Return a copy of config with the model id for mode set to value.

    An empty value clears the selection for that mode.
    """
    if mode not in MODE_FIELDS:
        raise ValueError(f"Unknown mode: {mode!r} (expected 'plan' or 'act')")
    return config.model_copy(update={MODE_FIELDS[mode]: value or None})


def normalize_api_configuration(
    config: ApiHandlerOptions,
    mode: Mode,
) -> tuple[str, ModelInfo]:
    """
    Resolve what the picker should display for mode.

    Returns:
        (selected_model_id, selected_model_info). The id is "" when nothing
        is selected; the info then describes the catalog default.
    """
    selected_id = config.model_id_for_mode(mode)
    return selected_id, resolve_model_info(selected_id or default_model_id())


def render_selection(mode: Mode) -> str:
    """Markdown for the model currently selected in mode."""
    selected_id, info = normalize_api_configuration(state.api_configuration, mode)
    return format_model_info(selected_id or default_model_id(), info)


def on_model_change(mode: Mode, model_id: str) -> str:
    """Persist the dropdown selection for mode and return its info view."""
    state.set_configuration(
        handle_mode_field_change(state.api_configuration, mode, model_id)
    )
    logger.info(f"Selected {model_id or '(none)'} for {mode} mode")
    return render_selection(mode)


def on_mode_change(mode: Mode) -> tuple[str, str]:
    """Switch modes: return (dropdown value, info view) for the new mode."""
    selected_id, _ = normalize_api_configuration(state.api_configuration, mode)
    return selected_id, render_selection(mode)
