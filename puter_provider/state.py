"""
Global state for the puter-provider application.

Holds the host configuration the model picker writes into.
Keeping it separate avoids circular import issues.
"""

from puter_provider.config import ApiHandlerOptions, load_api_options_from_env


# Initialized from environment when the app starts; picker writes here
api_configuration: ApiHandlerOptions = ApiHandlerOptions()


def load_configuration() -> ApiHandlerOptions:
    """(Re)load host configuration from environment variables."""
    global api_configuration
    api_configuration = load_api_options_from_env()
    return api_configuration


def set_configuration(config: ApiHandlerOptions) -> None:
    """Replace the stored host configuration."""
    global api_configuration
    api_configuration = config
