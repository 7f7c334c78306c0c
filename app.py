"""HuggingFace Spaces entry point for the Puter model picker."""

import os
print(f"[startup] PUTER_AUTH_TOKEN set: {bool(os.environ.get('PUTER_AUTH_TOKEN'))}")
print(f"[startup] PUTER_API_URL: {os.environ.get('PUTER_API_URL', 'not set')}")

from puter_provider import state
from puter_provider.ui import create_app

# Selections start from env (PUTER_PLAN_MODE_MODEL_ID / PUTER_ACT_MODE_MODEL_ID)
state.load_configuration()

demo = create_app()

if __name__ == "__main__":
    demo.launch()
