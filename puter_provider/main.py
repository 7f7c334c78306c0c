"""
Gradio application entry point for puter-provider.

CLI commands:
    puter-picker    - Launch the model picker UI
"""

import logging
import sys

import gradio as gr
from dotenv import load_dotenv

from puter_provider import state
from puter_provider.config import get_gradio_port
from puter_provider.ui import create_app
from puter_provider.ui_helpers import CUSTOM_CSS

logger = logging.getLogger(__name__)


def run():
    """Entry point for the application."""
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(name)s %(message)s", stream=sys.stderr)

    config = state.load_configuration()
    logger.info(
        f"Loaded configuration (plan={config.plan_mode_api_model_id}, "
        f"act={config.act_mode_api_model_id})"
    )

    app = create_app()
    port = get_gradio_port()

    # Gradio 6.x moved theme/css from Blocks() to launch()
    import inspect
    launch_params = inspect.signature(gr.Blocks.launch).parameters

    launch_kwargs = {
        "server_name": "0.0.0.0",  # Allow external connections
        "server_port": port,
        "share": False,
    }

    if "theme" in launch_params:
        launch_kwargs["theme"] = gr.themes.Soft()
        launch_kwargs["css"] = CUSTOM_CSS

    app.launch(**launch_kwargs)


if __name__ == "__main__":
    run()
