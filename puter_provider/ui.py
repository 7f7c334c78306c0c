"""
Gradio UI definition for the Puter model picker.

Presentation only: lists catalog identifiers, shows the selected model's
metadata, and writes the selection into host configuration per mode.
Handlers are in puter_provider.handlers.
"""

from types import SimpleNamespace

import gradio as gr

from puter_provider import handlers, state
from puter_provider.models import picker_model_ids
from puter_provider.ui_helpers import (
    CREDITS,
    CUSTOM_CSS,
    PROVIDER_DESCRIPTION,
    SELECT_PLACEHOLDER,
)


def model_choices() -> list[tuple[str, str]]:
    """Dropdown choices: placeholder first, then picker models in order."""
    return [(SELECT_PLACEHOLDER, "")] + [(m, m) for m in picker_model_ids()]


def render_picker(show_model_options: bool = True) -> SimpleNamespace:
    """Render the picker and return its components."""
    initial_mode = "plan"

    with gr.Column(elem_id="puter-provider"):
        mode = gr.Radio(
            label="Mode",
            choices=[("Plan", "plan"), ("Act", "act")],
            value=initial_mode,
            elem_id="puter-mode",
        )
        model = gr.Dropdown(
            label="AI Model",
            choices=model_choices(),
            value=state.api_configuration.model_id_for_mode(initial_mode),
            elem_id="puter-model",
        )

        gr.Markdown(PROVIDER_DESCRIPTION, elem_id="puter-description")
        gr.Markdown(CREDITS, elem_id="puter-credits")

        model_info = gr.Markdown(
            value=handlers.render_selection(initial_mode),
            visible=show_model_options,
            elem_id="puter-model-info",
        )

    return SimpleNamespace(mode=mode, model=model, model_info=model_info)


def create_app(show_model_options: bool = True) -> gr.Blocks:
    """Create the Gradio application."""

    # Gradio 5.x: theme/css on Blocks(); Gradio 6.x: on launch()
    import inspect
    blocks_params = inspect.signature(gr.Blocks).parameters
    blocks_kwargs = {"title": "Puter model picker"}

    if "theme" in blocks_params:
        blocks_kwargs["theme"] = gr.themes.Soft()
        blocks_kwargs["css"] = CUSTOM_CSS

    with gr.Blocks(**blocks_kwargs) as app:

        gr.Markdown("# Puter")

        picker = render_picker(show_model_options)

        # ─────────────────────────────────────────────────────────────
        # EVENT BINDINGS
        # ─────────────────────────────────────────────────────────────

        picker.model.change(
            fn=handlers.on_model_change,
            inputs=[picker.mode, picker.model],
            outputs=[picker.model_info]
        )

        picker.mode.change(
            fn=handlers.on_mode_change,
            inputs=[picker.mode],
            outputs=[picker.model, picker.model_info]
        )

    return app
