"""
UI helper constants and functions for puter-provider.

Separates CSS, static copy, and formatting from ui.py for cleaner organization.
"""

from puter_provider.models import ModelInfo

# ─────────────────────────────────────────────────────────────────────
# CSS
# ─────────────────────────────────────────────────────────────────────

CUSTOM_CSS = """
/* Provider description copy */
#puter-description p {
    font-size: 12px;
    margin-top: 3px;
    opacity: 0.85;
}
#puter-description .no-subscription {
    color: #10b981;
    font-weight: 500;
}

/* Powered-by footer */
#puter-credits {
    font-size: 10px;
    text-align: center;
}

/* Model info table */
#puter-model-info table {
    font-size: 13px;
}
"""

# ─────────────────────────────────────────────────────────────────────
# STATIC COPY
# ─────────────────────────────────────────────────────────────────────

DOCS_URL = "https://docs.puter.com"
DEVELOPER_URL = "https://developer.puter.com"

SELECT_PLACEHOLDER = "Select a model..."

PROVIDER_DESCRIPTION = (
    "Puter.js provides access to multiple AI models without requiring API keys. "
    "Users pay only for their own AI usage through their Puter account. "
    '<span class="no-subscription">No subscription required!</span>\n\n'
    f"[Learn more about Puter.js →]({DOCS_URL})"
)

CREDITS = f"Powered by [Puter]({DEVELOPER_URL})"


# ─────────────────────────────────────────────────────────────────────
# FORMATTING
# ─────────────────────────────────────────────────────────────────────

def format_tokens(count: int) -> str:
    """Token count with thousands separators: 272000 -> "272,000"."""
    return f"{count:,}"


def format_price(price: float) -> str:
    """Price per million tokens; zero reads as free."""
    if price == 0:
        return "Free"
    return f"${price:.2f}/million tokens"


def _flag(supported: bool) -> str:
    return "✅" if supported else "❌"


def format_model_info(model_id: str, info: ModelInfo) -> str:
    """Render model metadata as markdown for the picker."""
    lines = [
        f"### {model_id}",
        "",
        info.description,
        "",
        "| | |",
        "|---|---|",
        f"| Supports images | {_flag(info.supports_images)} |",
        f"| Supports prompt cache | {_flag(info.supports_prompt_cache)} |",
        f"| Context window | {format_tokens(info.context_window)} tokens |",
        f"| Max output | {format_tokens(info.max_tokens)} tokens |",
        f"| Input price | {format_price(info.input_price)} |",
        f"| Output price | {format_price(info.output_price)} |",
    ]
    return "\n".join(lines)
